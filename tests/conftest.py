# File: tests/conftest.py

import pytest
import os
import sys
import logging

# 1. Add project root to path
sys.path.append(os.getcwd())

from flattener.core.logging_config import LOGGER_NAME


@pytest.fixture(scope="function", autouse=True)
def reset_logging():
    """
    Runs after EVERY test.
    The CLI binds handlers to the streams of the test that called it,
    so strip them before the next test (and let caplog see records again).
    """
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def nested_tree(tmp_path):
    """
    Creates a chain of nested directories:
    root/
      file0.txt              (already in root, never moved)
      level1/
        file1.txt            (depth 1)
        level2/
          file2.txt          (depth 2)
          level3/
            file3.txt        (depth 3)
            level4/
              file4.txt      (depth 4)
    """
    root = tmp_path / "root"
    root.mkdir()
    (root / "file0.txt").write_text("root level")

    current = root
    for depth in range(1, 5):
        current = current / f"level{depth}"
        current.mkdir()
        (current / f"file{depth}.txt").write_text(f"depth {depth}")

    return root


@pytest.fixture
def multi_dir_tree(tmp_path):
    """
    Creates several top-level directories for filter tests:
    root/
      docs/readme.txt
      src/main.py
      tests/test1.py
      documentation/guide.txt
    """
    root = tmp_path / "root"
    root.mkdir()

    layout = {
        "docs": ("readme.txt", "docs"),
        "src": ("main.py", "src"),
        "tests": ("test1.py", "tests"),
        "documentation": ("guide.txt", "documentation"),
    }
    for dir_name, (file_name, content) in layout.items():
        folder = root / dir_name
        folder.mkdir()
        (folder / file_name).write_text(content)

    return root


@pytest.fixture
def listing_order(monkeypatch):
    """
    Forces os.scandir to list entries in a given name order.
    Names not mentioned keep their relative order and come last.
    """
    real_scandir = os.scandir

    class _Listing:
        def __init__(self, entries):
            self._entries = entries

        def __enter__(self):
            return iter(self._entries)

        def __exit__(self, *exc):
            return False

    def _force(order):
        rank = {name: i for i, name in enumerate(order)}

        def ordered_scandir(path):
            with real_scandir(path) as it:
                entries = sorted(it, key=lambda e: rank.get(e.name, len(rank)))
            return _Listing(entries)

        monkeypatch.setattr(os, "scandir", ordered_scandir)

    return _force
