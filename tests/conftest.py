"""Shared pytest fixtures for mdwriter tests."""

import pytest

from mdwriter import BufferSink, FailingSink, LineSeparator, Markdown


@pytest.fixture
def buffer_sink() -> BufferSink:
    """In-memory sink capturing every write."""
    return BufferSink()


@pytest.fixture
def failing_sink() -> FailingSink:
    """Sink that raises OSError on write."""
    return FailingSink()


@pytest.fixture
def doc(buffer_sink: BufferSink) -> Markdown:
    """Empty LF document writing to the buffer sink."""
    return Markdown(buffer_sink, line_separator=LineSeparator.LF)


@pytest.fixture
def crlf_doc(buffer_sink: BufferSink) -> Markdown:
    """Empty CRLF document writing to the buffer sink."""
    return Markdown(buffer_sink, line_separator=LineSeparator.CRLF)
