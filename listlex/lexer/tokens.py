"""
Token definitions for the list lexer.

The grammar is tiny: square brackets, commas and alphabetic list items.
Everything the lexer can produce is listed in TokenType below.
"""

from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Optional


class TokenType(Enum):
    """
    Enumeration of all token types of the list grammar.
    """
    
    # ========================================================================
    # Special Tokens
    # ========================================================================
    EOF = auto()                    # End of input (always the last token)
    
    # ========================================================================
    # Items
    # ========================================================================
    LIST_ITEM = auto()              # foo, bar
    
    # ========================================================================
    # Punctuation and Delimiters
    # ========================================================================
    COMMA = auto()                  # ,
    BRACKET_OPEN = auto()           # [
    BRACKET_CLOSE = auto()          # ]


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source text.
    
    Used for error reporting.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of input
    
    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"
    
    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token of a list.
    
    Only LIST_ITEM tokens carry a value (the identifier text); the location
    does not take part in comparisons so token lists compare equal
    regardless of the whitespace between tokens.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    value: Optional[str] = None     # Identifier text for LIST_ITEM
    location: Optional[SourceLocation] = field(default=None, compare=False)
    
    def __str__(self) -> str:
        if self.type == TokenType.LIST_ITEM:
            return f"{self.type.name}({self.value!r})"
        return self.type.name
    
    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.value!r}, {self.location!r})")
    
    @property
    def is_list_item(self) -> bool:
        return self.type == TokenType.LIST_ITEM
    
    @property
    def is_eof(self) -> bool:
        return self.type == TokenType.EOF


# Lookup tables used by the lexer

# Characters skipped between tokens
WHITESPACE = frozenset({' ', '\t', '\n', '\r'})

SINGLE_CHARACTER_TOKENS = {
    ",": TokenType.COMMA,
    "[": TokenType.BRACKET_OPEN,
    "]": TokenType.BRACKET_CLOSE,
}


def is_identifier_char(char: str) -> bool:
    """List items are made of ASCII letters only."""
    return char.isascii() and char.isalpha()
