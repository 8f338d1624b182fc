import logging
from collections.abc import Generator

import pytest


@pytest.fixture(autouse=True)
def restore_root_logging() -> Generator[None]:
    """The CLI callback reconfigures the root logger; put it back after each test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
