"""
List Lexer Package

Hand-written lexical analyzer for bracketed, comma-separated lists of
alphabetic items such as ``[foo, bar]``.

Key Features:
- Five token types: LIST_ITEM, COMMA, BRACKET_OPEN, BRACKET_CLOSE, EOF
- Whitespace-insensitive token streams
- Fail-fast diagnostics with source locations
"""

from .tokens import Token, TokenType, SourceLocation
from .cursor import CharacterCursor
from .lexer import Lexer, tokenize, tokenize_file
from .errors import LexerError, InvalidCharacterError

__all__ = [
    "Lexer", 
    "CharacterCursor",
    "tokenize",
    "tokenize_file",
    "Token", 
    "TokenType", 
    "SourceLocation",
    "LexerError",
    "InvalidCharacterError",
]
