"""Output sinks for rendered documents.

A sink receives the complete document text in a single ``write`` call and
reports failure by raising. Any text stream (``sys.stdout``,
``io.StringIO``, an open file) already satisfies the protocol.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from mdwriter.config import WriterConfig


@runtime_checkable
class OutputSink(Protocol):
    """Protocol for document output destinations."""

    def write(self, text: str) -> Any:
        """Write the full document text.

        Raises:
            OSError: If the underlying destination fails
            ValueError: If the destination is closed
        """
        ...


class FileSink:
    """Sink that writes the document to a file on the local filesystem.

    Newline translation is disabled so the document's own line separator
    reaches the file unchanged.
    """

    def __init__(self, path: Path | str, *, encoding: str = "utf-8") -> None:
        self.path = Path(path)
        self.encoding = encoding

    @classmethod
    def from_config(cls, path: Path | str, config: WriterConfig) -> FileSink:
        """Create a file sink using the encoding of a config."""
        return cls(path, encoding=config.encoding)

    def write(self, text: str) -> int:
        """Write ``text`` to the file, replacing any previous content."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding=self.encoding, newline="") as f:
            return f.write(text)


class BufferSink:
    """In-memory sink that keeps every write.

    Useful in tests and for callers that want the written text back.
    """

    def __init__(self) -> None:
        self.writes: list[str] = []

    def write(self, text: str) -> int:
        self.writes.append(text)
        return len(text)

    def getvalue(self) -> str:
        """Return everything written so far."""
        return "".join(self.writes)


class FailingSink:
    """Sink whose every write raises a configured exception.

    Records attempts so error paths can be exercised without real I/O.
    """

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error or OSError("disk full")
        self.attempts = 0

    def write(self, text: str) -> int:
        self.attempts += 1
        raise self.error
