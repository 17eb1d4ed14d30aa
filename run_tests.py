#!/usr/bin/env python3
"""
run_tests.py
------------
Watch-mode test runner for the brick breaker.
Reruns pytest whenever a Python file under src/ or tests/ changes.

Usage:
    python run_tests.py                    # Watch and rerun on changes
    python run_tests.py --run-once         # Run tests once and exit
    python run_tests.py -k collision       # Only tests matching an expression
    python run_tests.py --coverage         # Add a coverage report
"""

import argparse
import subprocess
import sys
import time
from pathlib import Path

from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

PROJECT_ROOT = Path(__file__).parent
WATCHED_DIRS = ("src", "tests")


class TestRunner(FileSystemEventHandler):
    """File system event handler that runs pytest on file changes."""

    def __init__(self, args, debounce=1.0):
        self.args = args
        self.debounce = debounce
        self.last_run = 0.0

    def on_modified(self, event):
        if event.is_directory:
            return

        path = Path(event.src_path)
        if path.suffix != ".py":
            return
        try:
            relative = path.resolve().relative_to(PROJECT_ROOT.resolve()).parts
        except ValueError:
            return
        if not relative or relative[0] not in WATCHED_DIRS:
            return

        now = time.time()
        if now - self.last_run < self.debounce:
            return
        self.last_run = now
        self.run_tests()

    def build_command(self):
        cmd = [sys.executable, "-m", "pytest", "-v"]
        if self.args.k:
            cmd.extend(["-k", self.args.k])
        if self.args.coverage:
            cmd.extend([
                "--cov=src",
                "--cov-report=term-missing",
                "--cov-fail-under=80",
            ])
        return cmd

    def run_tests(self) -> bool:
        """Run the suite once. Returns True if every test passed."""
        print("\n" + "=" * 60)
        print("Running tests...")
        print("=" * 60)

        try:
            result = subprocess.run(self.build_command(), cwd=PROJECT_ROOT)
        except KeyboardInterrupt:
            print("\nTest execution interrupted")
            return False

        print("All tests passed!" if result.returncode == 0 else "Some tests failed!")
        return result.returncode == 0


def main():
    parser = argparse.ArgumentParser(description="Watch-mode test runner for the brick breaker")
    parser.add_argument("--run-once", action="store_true", help="Run tests once and exit")
    parser.add_argument("-k", default=None, help="Only run tests matching this expression")
    parser.add_argument("--coverage", action="store_true", help="Generate coverage report")
    args = parser.parse_args()

    runner = TestRunner(args)

    if args.run_once:
        return 0 if runner.run_tests() else 1

    print("Watching src/ and tests/ for changes (Ctrl+C to stop)")
    runner.run_tests()

    observer = Observer()
    for directory in WATCHED_DIRS:
        if (PROJECT_ROOT / directory).is_dir():
            observer.schedule(runner, str(PROJECT_ROOT / directory), recursive=True)
    observer.start()

    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        observer.stop()
        print("\nFile watcher stopped")

    observer.join()
    return 0


if __name__ == "__main__":
    sys.exit(main())
