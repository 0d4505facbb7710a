"""Inline Markdown syntax helpers.

Each helper wraps its input in the delimiters of one inline construct.
Input is not escaped; callers are responsible for text that already
contains Markdown syntax.
"""


def link(text: str, url: str) -> str:
    """Inline link: ``[text](url)``."""
    return f"[{text}]({url})"


def url(url: str) -> str:
    """Autolink: ``<url>``."""
    return f"<{url}>"


def image(alt: str, url: str) -> str:
    """Inline image: ``![alt](url)``."""
    return f"![{alt}]({url})"


def bold(text: str) -> str:
    return f"**{text}**"


def italic(text: str) -> str:
    return f"*{text}*"


def bold_italic(text: str) -> str:
    return f"***{text}***"


def code(text: str) -> str:
    """Inline code span.

    Backticks inside ``text`` are not handled; a span containing them
    terminates early.
    """
    return f"`{text}`"


def highlight(text: str) -> str:
    return f"=={text}=="


def strikethrough(text: str) -> str:
    return f"~~{text}~~"


def subscript(text: str) -> str:
    return f"~{text}~"


def superscript(text: str) -> str:
    return f"^{text}^"


def emoji(shortcode: str) -> str:
    """Emoji shortcode such as ``:smile:``. The name is not checked."""
    return f":{shortcode}:"
