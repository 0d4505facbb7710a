"""Line separator selection for rendered documents."""

from __future__ import annotations

import sys
from enum import Enum


class LineSeparator(str, Enum):
    """Separator used between blocks and inside multi-line blocks."""

    CRLF = "\r\n"
    LF = "\n"

    @classmethod
    def for_platform(cls, platform: str | None = None) -> LineSeparator:
        """Pick the separator for a host platform.

        Args:
            platform: Platform identity as reported by ``sys.platform``.
                Defaults to the current host.

        Returns:
            CRLF on Windows, LF everywhere else
        """
        if platform is None:
            platform = sys.platform
        if platform == "win32":
            return cls.CRLF
        return cls.LF

    @classmethod
    def coerce(cls, value: LineSeparator | str | None) -> LineSeparator:
        """Resolve a caller-supplied separator, falling back to the host default."""
        if value is None:
            return cls.for_platform()
        try:
            return cls(value)
        except ValueError as e:
            raise ValueError(
                f"Unsupported line separator {value!r}, expected '\\n' or '\\r\\n'"
            ) from e

    def __str__(self) -> str:
        return self.value
