"""mdwriter exception hierarchy.

Usage:
    from mdwriter.exceptions import MarkdownError, MarkdownWriteError

    try:
        doc.build(sink)
    except MarkdownWriteError as e:
        print(f"Write failed: {e.cause}")
    except MarkdownError as e:
        print(f"Markdown error: {e}")
"""


class MarkdownError(Exception):
    """Base exception for all mdwriter errors.

    All mdwriter-specific exceptions inherit from this class, allowing
    callers to catch them with a single except clause.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigurationError(MarkdownError):
    """Error in writer configuration.

    Raised when a config file is not valid YAML or does not match
    the expected schema.
    """

    pass


class NoOutputSinkError(MarkdownError):
    """Build requested without anywhere to write to."""

    def __init__(self) -> None:
        super().__init__("No output sink: pass dest to Markdown() or build()")


class MarkdownWriteError(MarkdownError):
    """Writing the rendered document to the sink failed.

    Carries the sink failure as ``cause`` and, when the document had
    already recorded an internal error, that error as ``internal_error``.
    Both appear in the message.
    """

    def __init__(self, cause: Exception, internal_error: Exception | None = None) -> None:
        self.cause = cause
        self.internal_error = internal_error
        message = f"failed to write markdown text: {cause}"
        if internal_error is not None:
            message += f": {internal_error}"
        super().__init__(message)
