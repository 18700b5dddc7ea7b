"""Shared fixtures for burstlog tests."""

import logging
from typing import List

import pytest

from burstlog.core.clock import ManualClock


class RecordingHandler(logging.Handler):
    """Handler that keeps every record it is asked to emit."""

    def __init__(self):
        super().__init__(level=logging.NOTSET)
        self.records: List[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture
def clock():
    """Manual clock starting at t=0."""
    return ManualClock()


@pytest.fixture
def recording_handler():
    return RecordingHandler()


@pytest.fixture
def isolated_logger(request, recording_handler):
    """Logger that only writes to the recording handler."""
    logger = logging.getLogger(f"burstlog.tests.{request.node.name}")
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    logger.addHandler(recording_handler)
    yield logger
    logger.removeHandler(recording_handler)
    for existing in list(logger.filters):
        logger.removeFilter(existing)
