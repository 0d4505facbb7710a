"""Programmatic Markdown writer.

This package provides:
- A chainable builder that accumulates Markdown blocks
- Pydantic models for tables and task lists
- Inline syntax helpers for links, emphasis and code spans
- Output sinks for streams, files and in-memory buffers
"""

from mdwriter.builders import Markdown
from mdwriter.config import WriterConfig, load_writer_config
from mdwriter.exceptions import (
    ConfigurationError,
    MarkdownError,
    MarkdownWriteError,
    NoOutputSinkError,
)
from mdwriter.inline import (
    bold,
    bold_italic,
    code,
    emoji,
    highlight,
    image,
    italic,
    link,
    strikethrough,
    subscript,
    superscript,
    url,
)
from mdwriter.linefeed import LineSeparator
from mdwriter.models import TableSet, TaskItem
from mdwriter.sinks import BufferSink, FailingSink, FileSink, OutputSink

__all__ = [
    # Builder
    "Markdown",
    "LineSeparator",
    # Models
    "TableSet",
    "TaskItem",
    # Sinks
    "OutputSink",
    "FileSink",
    "BufferSink",
    "FailingSink",
    # Config
    "WriterConfig",
    "load_writer_config",
    # Errors
    "MarkdownError",
    "MarkdownWriteError",
    "NoOutputSinkError",
    "ConfigurationError",
    # Inline helpers
    "link",
    "url",
    "image",
    "bold",
    "italic",
    "bold_italic",
    "code",
    "highlight",
    "strikethrough",
    "subscript",
    "superscript",
    "emoji",
]
