"""
Character cursor over the lexer input.

Forward-only access with a single character of lookahead. Both operations
return None once the input is exhausted; running out of input is how
tokenizing normally ends, not an error.
"""

from typing import Optional

from .tokens import SourceLocation


class CharacterCursor:
    """Peekable, forward-only view of a source string."""
    
    def __init__(self, source: str, filename: str = "<string>"):
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.column = 1
    
    @property
    def exhausted(self) -> bool:
        return self.pos >= len(self.source)
    
    def peek(self) -> Optional[str]:
        """Return the next character without consuming it."""
        if self.exhausted:
            return None
        return self.source[self.pos]
    
    def advance(self) -> Optional[str]:
        """Consume and return the next character, updating line/column."""
        if self.exhausted:
            return None
        
        char = self.source[self.pos]
        if char == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.pos += 1
        return char
    
    def location(self) -> SourceLocation:
        """Location of the character the next advance() will return."""
        return SourceLocation(self.filename, self.line, self.column, self.pos)
