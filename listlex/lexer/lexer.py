"""
List lexer - turns text like "[foo, bar]" into tokens.

Single pass, left to right, one character of lookahead. Whitespace between
tokens is dropped, identifiers are maximal runs of ASCII letters and the
first character that fits nowhere aborts the whole run.
"""

import logging
from typing import List, Optional

from .cursor import CharacterCursor
from .errors import LexerError, create_invalid_character_error
from .tokens import (
    Token, TokenType, SourceLocation, WHITESPACE, SINGLE_CHARACTER_TOKENS,
    is_identifier_char
)

logger = logging.getLogger(__name__)


class Lexer:
    """
    Lexical analyzer for bracketed lists.
    
    Tokens can be pulled one at a time with next_token() or all at once
    with tokenize(). A lexer consumes its input once; create a new one
    for new input.
    """
    
    def __init__(self, source: str, filename: str = "<string>"):
        """
        Initialize the lexer with source text.
        
        Args:
            source: Text to tokenize
            filename: Name used in error locations
        """
        self.source = source
        self.filename = filename
        self.cursor = CharacterCursor(source, filename)
        
        # Every token handed out so far, whether by next_token() or tokenize()
        self.pulled: List[Token] = []
        # Set once EOF has been produced
        self.tokens: Optional[List[Token]] = None
        # Set once an invalid character has been hit; replayed on every later call
        self.error: Optional[LexerError] = None
    
    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source.
        
        Tokens already pulled with next_token() are included, and calling
        this again returns the same tokens (or raises the same error).
        
        Returns:
            List of tokens ending with exactly one EOF token
            
        Raises:
            InvalidCharacterError: On the first character that is not
                whitespace, a letter, ',', '[' or ']'
        """
        if self.tokens is None:
            logger.debug("Tokenizing %s (%d characters)", self.filename, len(self.source))
            
            while not self.next_token().is_eof:
                pass
            
            logger.debug("Produced %d tokens for %s", len(self.tokens), self.filename)
        
        return list(self.tokens)
    
    def next_token(self) -> Token:
        """Get the next token; EOF once the input is used up."""
        if self.error is not None:
            raise self.error
        if self.tokens is not None:
            return self.tokens[-1]
        
        try:
            token = self._scan_token()
        except LexerError as e:
            self.error = e
            raise
        
        self.pulled.append(token)
        if token.is_eof:
            self.tokens = self.pulled
        return token
    
    def _scan_token(self) -> Token:
        """Read one token from the cursor."""
        self._skip_whitespace()
        
        location = self.cursor.location()
        current_char = self.cursor.advance()
        
        if current_char is None:
            return Token(TokenType.EOF, "", None, location)
        
        token_type = SINGLE_CHARACTER_TOKENS.get(current_char)
        if token_type is not None:
            return Token(token_type, current_char, None, location)
        
        if is_identifier_char(current_char):
            return self._tokenize_list_item(current_char, location)
        
        logger.debug("Invalid character %r at %s", current_char, location)
        raise create_invalid_character_error(current_char, location)
    
    def _tokenize_list_item(self, first_char: str, location: SourceLocation) -> Token:
        """Collect the rest of an identifier that starts with first_char."""
        chars = [first_char]
        
        while True:
            next_char = self.cursor.peek()
            if next_char is None or not is_identifier_char(next_char):
                break
            chars.append(self.cursor.advance())
        
        item = "".join(chars)
        return Token(TokenType.LIST_ITEM, item, item, location)
    
    def _skip_whitespace(self):
        """Skip spaces, tabs, newlines and carriage returns."""
        while True:
            char = self.cursor.peek()
            if char is None or char not in WHITESPACE:
                break
            self.cursor.advance()


def tokenize(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.
    
    Args:
        source: Text to tokenize
        filename: Filename for error reporting
        
    Returns:
        List of tokens
        
    Raises:
        InvalidCharacterError: If lexing fails
    """
    return Lexer(source, filename).tokenize()


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a file.
    
    Args:
        filepath: Path to a UTF-8 text file
        
    Returns:
        List of tokens
        
    Raises:
        InvalidCharacterError: If lexing fails
        OSError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()
        
    return tokenize(source, str(filepath))
