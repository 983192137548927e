"""
Line normalization for configuration files.

Formatting differences such as repeated whitespace or trailing comments
are removed so that lines can be compared, while quoted strings are kept
exactly as written:

    '  a    b  ; comment'   ->  'a b'
    'value = "a  b ; c"'    ->  'value = "a  b ; c"'
    '# full comment'        ->  ''

A comment marker (; or #) only starts an inline comment when it follows
whitespace. A quote that is never closed extends to the end of the line.
"""

from typing import Iterable, Iterator

COMMENT_MARKERS = (";", "#")
QUOTE_CHARS = ("'", '"')


def normalize_line(line: str) -> str:
    """
    Normalize a single configuration line.

    Args:
        line: The line to normalize

    Returns:
        The normalized line, or "" for a full-line comment
    """
    if not isinstance(line, str):
        return ""

    text = line.lstrip()
    if text.startswith(COMMENT_MARKERS):
        return ""

    result = []
    quote_char = None
    prev_char = ""

    for char in text:
        if quote_char:
            result.append(char)
            if char == quote_char:
                quote_char = None
        elif char in QUOTE_CHARS:
            quote_char = char
            result.append(char)
        elif char.isspace():
            if result[-1:] != [" "]:
                result.append(" ")
        elif char in COMMENT_MARKERS and prev_char.isspace():
            break
        else:
            result.append(char)
        prev_char = char

    return "".join(result).rstrip()


def normalize_lines(lines: Iterable[str], skip_empty: bool = True) -> Iterator[str]:
    """
    Normalize each line of an iterable, e.g. an open file.

    Args:
        lines: Lines to normalize; line endings are ignored
        skip_empty: Drop lines that normalize to "" (blank lines and comments)

    Yields:
        Normalized lines
    """
    for line in lines:
        normalized = normalize_line(line.rstrip("\r\n"))
        if skip_empty and not normalized:
            continue
        yield normalized
