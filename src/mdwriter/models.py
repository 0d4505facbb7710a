"""Pydantic models for structured block content."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from mdwriter.linefeed import LineSeparator


class TableSet(BaseModel):
    """Header and data rows for a pipe table.

    Rows are not checked against the header length; cells are written
    as given.

    Example:
        table = TableSet(header=["Command", "Description"])
        table.add_row("init", "Create a project")
        table.add_row("run", "Execute it")
        doc.table(table)
    """

    header: list[str]
    rows: list[list[str]] = Field(default_factory=list)

    def add_row(self, *cells: str) -> TableSet:
        """Add a row to the table."""
        self.rows.append(list(cells))
        return self

    def render(self, separator: LineSeparator | str = LineSeparator.LF) -> str:
        """Render the table to markdown."""
        lines = []

        # Header row
        lines.append("| " + " | ".join(self.header) + " |")

        # Separator row, one delimiter cell per header column
        lines.append("|" + "---|" * len(self.header))

        # Data rows
        for row in self.rows:
            lines.append("| " + " | ".join(row) + " |")

        return str(separator).join(lines)


class TaskItem(BaseModel):
    """Single checkbox entry of a task list."""

    model_config = ConfigDict(frozen=True)

    text: str
    checked: bool = False

    @property
    def marker(self) -> str:
        return "[x]" if self.checked else "[ ]"

    def render(self) -> str:
        return f"- {self.marker} {self.text}"
