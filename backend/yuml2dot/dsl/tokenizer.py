from typing import Iterator, List

ESCAPE_CHAR = "\\"

BRACKET_PAIRS = {
    "[": "]",
    "(": ")",
    "<": ">",
    "|": "|",
}


def iter_yuml_tokens(line: str, separators: str, escape: str = ESCAPE_CHAR) -> Iterator[str]:
    """
    Split one yUML line into bracketed tokens and the text between them.

    ``separators`` lists the opening brackets the dialect understands.
    A bracketed region is yielded whole, delimiters included. Brackets
    do not nest; an escaped character is copied through (backslash kept)
    and never opens or closes a region. An unterminated region runs to
    the end of the line.
    """
    word = ""
    closing = None
    i = 0
    length = len(line)

    while i < length:
        char = line[i]

        if char == escape and i + 1 < length:
            word += char + line[i + 1]
            i += 2
            continue

        if closing is None and char in separators:
            if word:
                yield word.strip()
            closing = BRACKET_PAIRS.get(char)
            word = char
        elif char == closing:
            closing = None
            yield word.strip() + char
            word = ""
        else:
            word += char
        i += 1

    if word:
        yield word.strip()


def split_yuml_expr(line: str, separators: str, escape: str = ESCAPE_CHAR) -> List[str]:
    return list(iter_yuml_tokens(line, separators, escape))
