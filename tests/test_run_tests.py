"""
test_run_tests.py
-----------------
Tests for the watch-mode runner's change filter.
"""

from argparse import Namespace
from unittest.mock import MagicMock, patch

import pytest

import run_tests


@pytest.fixture
def runner():
    handler = run_tests.TestRunner(Namespace(k=None, coverage=False), debounce=0.0)
    with patch.object(handler, "run_tests") as run:
        yield handler, run


def modified(path, is_directory=False):
    return MagicMock(src_path=str(path), is_directory=is_directory)


def test_change_under_src_reruns(runner):
    handler, run = runner
    handler.on_modified(modified(run_tests.PROJECT_ROOT / "src" / "entities" / "ball.py"))
    run.assert_called_once_with()


def test_path_outside_project_is_ignored(runner, tmp_path):
    handler, run = runner
    handler.on_modified(modified(tmp_path / "swap.py"))
    run.assert_not_called()


def test_non_python_and_unwatched_changes_are_ignored(runner):
    handler, run = runner
    handler.on_modified(modified(run_tests.PROJECT_ROOT / "src" / "config" / "audio.json"))
    handler.on_modified(modified(run_tests.PROJECT_ROOT / "main.py"))
    handler.on_modified(modified(run_tests.PROJECT_ROOT / "src", is_directory=True))
    run.assert_not_called()
