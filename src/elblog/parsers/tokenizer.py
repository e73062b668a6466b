"""
Tokenizer for ELB access log lines.

Lines are split on single spaces. A field that opens with a double quote
(request line, user agent, trace id) runs to the closing quote, spaces
included. Inside quotes `\\"` stands for a literal quote; every other
backslash is kept as is. Each line is tokenized on its own, so an
unterminated quote never reaches into the next line.
"""

from typing import Iterable, Iterator

__all__ = ["DELIMITER", "QUOTE", "ESCAPE", "tokenize_line", "tokenize_lines"]

DELIMITER = " "
QUOTE = '"'
ESCAPE = "\\"


def tokenize_line(line: str) -> list[str]:
    """
    Tokenize a single line.

    Empty fields between adjacent delimiters are kept, and a trailing
    delimiter yields a trailing empty field. A blank line comes out as a
    single empty field so that it can be recognised and skipped downstream.

    Example:
        tokenize_line('a "b \\"c\\" d" e')
        # -> ["a", 'b "c" d', "e"]
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    at_field_start = True
    i = 0
    n = len(line)

    while i < n:
        ch = line[i]
        if in_quotes:
            if ch == ESCAPE and line.startswith(QUOTE, i + 1):
                current.append(QUOTE)
                i += 2
                continue
            if ch == QUOTE:
                in_quotes = False
            else:
                current.append(ch)
        elif ch == DELIMITER:
            fields.append("".join(current))
            current = []
            at_field_start = True
            i += 1
            continue
        elif ch == QUOTE and at_field_start:
            in_quotes = True
        else:
            current.append(ch)
        at_field_start = False
        i += 1

    fields.append("".join(current))
    return fields


def tokenize_lines(lines: Iterable[str]) -> Iterator[list[str]]:
    """
    Lazily tokenize a stream of decoded lines.

    Args:
        lines: Decoded lines without trailing newlines

    Yields:
        Raw field lists, exactly one per line
    """
    for line in lines:
        yield tokenize_line(line)
