"""Shared pytest fixtures for action tests."""

from __future__ import annotations

import io
from collections.abc import Iterator

import httpx
import pytest

from evaldsl.config import ActionConfig
from evaldsl.reporting import ActionReporter

BASE_URL = "https://cdro.example.com"


@pytest.fixture
def config() -> ActionConfig:
    """Return connection settings pointing at the mocked server."""
    return ActionConfig(url=BASE_URL, token="0a92acf1-token")


@pytest.fixture
def stream() -> io.StringIO:
    """Return a buffer capturing workflow commands."""
    return io.StringIO()


@pytest.fixture
def reporter(stream: io.StringIO) -> ActionReporter:
    """Return a reporter writing to the captured buffer with no runner environment."""
    return ActionReporter({}, stream=stream)


@pytest.fixture
def client() -> Iterator[httpx.Client]:
    """Return a plain client; requests are intercepted by respx."""
    with httpx.Client() as http_client:
        yield http_client
