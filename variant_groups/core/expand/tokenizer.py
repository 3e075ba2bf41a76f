from __future__ import annotations

from variant_groups.core.model import GroupClose, GroupOpen, Separator, Token, Word


BRACKET_OPEN = "["
BRACKET_CLOSE = "]"
GROUP_OPEN = "("
GROUP_CLOSE = ")"


def tokenize(text: str) -> list[Token]:
    """Split a class string into words, group punctuation and separators.

    Square-bracket regions (arbitrary values such as ``w-[calc(100%_-_1rem)]``)
    nest and are copied verbatim into the current word: parentheses and
    whitespace inside them are not delimiters. An unterminated bracket region
    swallows the rest of the input.
    """

    tokens: list[Token] = []
    buffer: list[str] = []
    depth = 0

    def flush() -> None:
        word = "".join(buffer).strip()
        if word:
            tokens.append(Word(word))
        buffer.clear()

    for char in text:
        if char == BRACKET_OPEN:
            depth += 1
            buffer.append(char)
        elif char == BRACKET_CLOSE and depth > 0:
            depth -= 1
            buffer.append(char)
        elif depth > 0:
            buffer.append(char)
        elif char == GROUP_OPEN:
            flush()
            tokens.append(GroupOpen())
        elif char == GROUP_CLOSE:
            flush()
            tokens.append(GroupClose())
        elif char.isspace():
            flush()
            tokens.append(Separator())
        else:
            buffer.append(char)

    flush()
    return tokens
