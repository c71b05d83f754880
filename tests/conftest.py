"""Test configuration.

Ensure the project root is on sys.path so tests can import `simulift.*`
when executed from different working directories.
"""

import logging
import os
import sys

import pytest


ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


@pytest.fixture(autouse=True)
def _restore_root_logger():
    # The CLI and logging tests reconfigure the root logger.
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    logging.captureWarnings(False)
