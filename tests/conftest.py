import logging
import os

import pytest


@pytest.fixture(autouse=True)
def clean_isoenc_env(monkeypatch):
    """Keep ISOENC_* variables from the outer environment out of the tests."""
    for key in list(os.environ):
        if key.startswith("ISOENC_"):
            monkeypatch.delenv(key)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
