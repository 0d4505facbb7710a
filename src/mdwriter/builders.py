"""Markdown document builder.

Blocks are appended in call order and joined with one line separator
when the document is rendered. Append methods return the builder so
calls can be chained:

    doc = Markdown(sys.stdout, line_separator=LineSeparator.LF)
    doc.h1("Title").paragraph("Body").rule().build()

Text is written as given: no escaping, and no range check on header
levels or table row lengths.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from mdwriter.config import WriterConfig
from mdwriter.exceptions import MarkdownWriteError, NoOutputSinkError
from mdwriter.linefeed import LineSeparator
from mdwriter.models import TableSet, TaskItem
from mdwriter.sinks import OutputSink

logger = logging.getLogger(__name__)

LINE_BREAK = "  "
RULE = "---"
FENCE = "```"


class Markdown:
    """Builder for Markdown documents.

    Example:
        doc = Markdown()
        doc.h2("Usage")
        doc.bullet_list("install", "configure", "run")
        doc.code_block("make build", "bash")
        print(doc.render())
    """

    def __init__(
        self,
        dest: OutputSink | None = None,
        *,
        line_separator: LineSeparator | str | None = None,
    ) -> None:
        """Initialize an empty document.

        Args:
            dest: Default sink used by build(). The builder never closes it.
            line_separator: Separator for the document's lifetime. Defaults
                to the host platform convention.
        """
        self._blocks: list[str] = []
        self._dest = dest
        self._line_separator = LineSeparator.coerce(line_separator)
        self._error: Exception | None = None

    @classmethod
    def from_config(cls, config: WriterConfig, dest: OutputSink | None = None) -> Markdown:
        """Create a builder using the separator policy of a config."""
        return cls(dest, line_separator=config.resolve_line_separator())

    @property
    def line_separator(self) -> LineSeparator:
        return self._line_separator

    @property
    def blocks(self) -> tuple[str, ...]:
        """Snapshot of the blocks appended so far."""
        return tuple(self._blocks)

    @property
    def error(self) -> Exception | None:
        """Internal error recorded on this document, if any."""
        return self._error

    def record_error(self, error: Exception) -> Markdown:
        """Record an internal error to surface at build time.

        The first recorded error sticks; later ones are ignored and
        nothing clears it.
        """
        if self._error is None:
            self._error = error
        return self

    def __len__(self) -> int:
        return len(self._blocks)

    def __str__(self) -> str:
        return self.render()

    # Blocks

    def paragraph(self, text: str) -> Markdown:
        """Add a paragraph."""
        self._blocks.append(text)
        return self

    def header(self, text: str, level: int) -> Markdown:
        """Add a heading with ``level`` leading ``#`` markers."""
        self._blocks.append("#" * level + " " + text)
        return self

    def h1(self, text: str) -> Markdown:
        return self.header(text, 1)

    def h2(self, text: str) -> Markdown:
        return self.header(text, 2)

    def h3(self, text: str) -> Markdown:
        return self.header(text, 3)

    def h4(self, text: str) -> Markdown:
        return self.header(text, 4)

    def h5(self, text: str) -> Markdown:
        return self.header(text, 5)

    def h6(self, text: str) -> Markdown:
        return self.header(text, 6)

    def bullet_list(self, *items: str) -> Markdown:
        """Add one ``- item`` block per item."""
        for item in items:
            self._blocks.append(f"- {item}")
        return self

    def ordered_list(self, *items: str) -> Markdown:
        """Add one numbered block per item, starting at 1."""
        for i, item in enumerate(items, start=1):
            self._blocks.append(f"{i}. {item}")
        return self

    def blockquote(self, text: str) -> Markdown:
        """Add a blockquote."""
        self._blocks.append(f"> {text}")
        return self

    def code_block(self, text: str, lang: str = "") -> Markdown:
        """Add a fenced code block as a single block."""
        sep = self._line_separator.value
        self._blocks.append(f"{FENCE}{lang}{sep}{text}{sep}{FENCE}")
        return self

    def rule(self) -> Markdown:
        """Add a horizontal rule."""
        self._blocks.append(RULE)
        return self

    def table(self, table: TableSet) -> Markdown:
        """Add a table as a single block."""
        self._blocks.append(table.render(self._line_separator))
        return self

    def task_list(self, items: Iterable[TaskItem]) -> Markdown:
        """Add one checkbox block per task."""
        for item in items:
            self._blocks.append(item.render())
        return self

    def line_break(self) -> Markdown:
        """Add a hard line break (two spaces) as its own block."""
        self._blocks.append(LINE_BREAK)
        return self

    # Output

    def render(self) -> str:
        """Render the document to markdown."""
        return self._line_separator.value.join(self._blocks)

    def build(self, dest: OutputSink | None = None) -> None:
        """Render the document and write it to a sink in a single call.

        Args:
            dest: Sink to write to. Defaults to the sink given at construction.

        Raises:
            NoOutputSinkError: If no sink is available
            MarkdownWriteError: If the sink raises anything; carries any
                recorded internal error as well
            Exception: The recorded internal error, after a successful write
        """
        sink = dest if dest is not None else self._dest
        if sink is None:
            raise NoOutputSinkError()

        text = self.render()
        try:
            sink.write(text)
        except Exception as e:
            raise MarkdownWriteError(e, self._error) from e

        logger.debug("Wrote %d blocks (%d chars) to %r", len(self._blocks), len(text), sink)

        if self._error is not None:
            raise self._error.with_traceback(None)
