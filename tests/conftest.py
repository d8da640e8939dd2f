# tests/conftest.py
from __future__ import annotations

from datetime import date

import pytest

from src.application.parsing.request_parser import RequestParser
from tests.support import TODAY, RecordingChannel


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def parser() -> RequestParser:
    return RequestParser(clock=lambda: TODAY)


@pytest.fixture
def channel() -> RecordingChannel:
    return RecordingChannel()
