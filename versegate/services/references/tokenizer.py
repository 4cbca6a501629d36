# versegate/services/references/tokenizer.py
"""
Tokenizer for scripture reference queries.

Input is expected to be trimmed and lowercased already. Whitespace is
skipped entirely, so "1 john 1:1" and "1john1:1" produce the same tokens.
"""

from dataclasses import dataclass
from enum import Enum

from .errors import InvalidCharacter


class TokenKind(str, Enum):
    NUMBER = "number"
    WORD = "word"
    COLON = "colon"
    DASH = "dash"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: str

    def __repr__(self) -> str:
        return f"Token({self.kind.value}, {self.value!r})"


def _take_run(text: str, start: int, predicate) -> int:
    """Return the index just past the run of characters matching predicate."""
    end = start
    while end < len(text) and predicate(text[end]):
        end += 1
    return end


def tokenize(query: str) -> tuple[Token, ...]:
    """
    Split a normalized query into tokens.

    Digit runs become one NUMBER token, letter runs one WORD token,
    ':' a COLON and '-' a DASH.

    Args:
        query: Trimmed, lowercased reference string

    Returns:
        Tuple of tokens (empty for blank input)

    Raises:
        InvalidCharacter: On any other character
    """
    tokens = []
    i = 0
    while i < len(query):
        ch = query[i]
        if ch.isspace():
            i += 1
        elif ch.isdecimal():
            end = _take_run(query, i, str.isdecimal)
            tokens.append(Token(TokenKind.NUMBER, query[i:end]))
            i = end
        elif ch.isalpha():
            end = _take_run(query, i, str.isalpha)
            tokens.append(Token(TokenKind.WORD, query[i:end]))
            i = end
        elif ch == ":":
            tokens.append(Token(TokenKind.COLON, ch))
            i += 1
        elif ch == "-":
            tokens.append(Token(TokenKind.DASH, ch))
            i += 1
        else:
            raise InvalidCharacter(
                f"Invalid character {ch!r} at position {i}", query=query
            )
    return tuple(tokens)
