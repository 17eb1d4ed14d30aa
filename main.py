"""
main.py
-------
Entry point: python main.py
"""

import sys

from src.core.runtime.game_loop import GameLoop


def main():
    GameLoop().run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
