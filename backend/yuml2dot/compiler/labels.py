"""
Label helpers shared by every graph dialect.

Labels end up inside quoted DOT strings, so the formatter produces
Graphviz escape sequences rather than raw characters.
"""

FIELD_DIVIDER = "|"
DOT_NEWLINE = "\\n"

_ESCAPED_CHARS = {
    "{": "\\{",
    "}": "\\}",
    ";": DOT_NEWLINE,
    " ": "\\ ",
    "<": "\\<",
    ">": "\\>",
}


def record_name(label: str) -> str:
    """Deduplication key of a node: text before the first field divider."""
    return label.split(FIELD_DIVIDER, 1)[0].strip()


def escape_label(label: str) -> str:
    """
    Escape a label for embedding in a record-style DOT label.
    Not idempotent: escaping twice double-escapes.
    """
    return "".join(_ESCAPED_CHARS.get(char, char) for char in label)


def wordwrap(text: str, width: int, newline: str = DOT_NEWLINE) -> str:
    """
    Break ``text`` at the last space at or before ``width``, recursively.
    A long leading word breaks at the last space anywhere; text without
    spaces is left as is.
    """
    if not text or len(text) < width:
        return text

    pos = text.rfind(" ", 1, width + 1)
    if pos <= 0:
        pos = text.rfind(" ")
    if pos <= 0:
        return text

    return text[:pos] + newline + wordwrap(text[pos + 1:], width, newline)


def format_label(label: str, wrap: int, allow_divisors: bool) -> str:
    if allow_divisors and FIELD_DIVIDER in label:
        fields = label.split(FIELD_DIVIDER)
    else:
        fields = [label]

    wrapped = FIELD_DIVIDER.join(wordwrap(f, wrap) for f in fields)
    return escape_label(wrapped)
