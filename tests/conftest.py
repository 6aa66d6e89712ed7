"""
Shared pytest fixtures for tests.
"""

from typing import Generator

import pytest

from hstatus import set_config


@pytest.fixture(autouse=True)
def reset_config() -> Generator[None, None, None]:
    yield
    set_config()


@pytest.fixture
def missing_code() -> int:
    return 999
