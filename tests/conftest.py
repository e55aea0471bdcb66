"""Shared fixtures"""

import io

import pytest

from event_logger import LoggingContext, get_default_context


@pytest.fixture(autouse=True)
def reset_default_context():
    """Every test starts and ends with an empty default context."""
    get_default_context().reset()
    yield
    get_default_context().reset()


@pytest.fixture
def context():
    return LoggingContext()


@pytest.fixture
def stream():
    return io.StringIO()


class FakeCell:
    """In-memory single spreadsheet cell."""

    def __init__(self, address="C2", value="", cell_count=1):
        self.address = address
        self.value = value
        self.cell_count = cell_count
        self.font_color = None
        self.clear_calls = 0

    def set_value(self, value):
        self.value = value

    def get_value(self):
        return self.value

    def clear(self):
        self.clear_calls += 1
        self.value = ""

    def set_font_color(self, color):
        self.font_color = color

    def get_cell_count(self):
        return self.cell_count

    def get_address(self):
        return self.address


@pytest.fixture
def cell():
    return FakeCell()
