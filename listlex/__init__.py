"""
listlex

A small, hand-written tokenizer for bracketed lists of alphabetic items.

Architecture:
    listlex/
    ├── lexer/           # Cursor, token model, errors and the lexer itself
    └── cli.py           # Command-line harness

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import (
    Lexer,
    CharacterCursor,
    tokenize,
    tokenize_file,
    Token,
    TokenType,
    SourceLocation,
    LexerError,
    InvalidCharacterError,
)

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
    
    # Version info
    "__version__",
    "__license__",
]
