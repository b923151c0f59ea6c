"""
Error handling for the list lexer.

Errors carry a diagnostic with the source location of the failure so callers
can render them however they like.
"""

from typing import Optional
from dataclasses import dataclass
from .tokens import SourceLocation


# Error codes for categorization
ERROR_CODES = {
    "L001": "Invalid character",
}


@dataclass
class Diagnostic:
    """Lexer diagnostic (message plus where it happened)."""
    message: str
    location: SourceLocation
    severity: str  # always "error"
    code: Optional[str] = None
    help_text: Optional[str] = None
    
    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"
        
        if self.help_text:
            result += f"  help: {self.help_text}\n"
        
        return result


class LexerError(Exception):
    """
    Exception raised when the lexer encounters a fatal error.
    
    Contains detailed diagnostic information for error reporting.
    """
    
    def __init__(
        self, 
        message: str, 
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.diagnostic = Diagnostic(
            message=message,
            location=location, 
            severity="error",
            code=code,
            help_text=help_text
        )
    
    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location
    
    def __str__(self) -> str:
        return str(self.diagnostic)


class InvalidCharacterError(LexerError):
    """Raised for the first character that cannot start any token."""
    
    code = "L001"
    
    def __init__(self, character: str, location: SourceLocation, help_text: Optional[str] = None):
        super().__init__(
            message=f"{ERROR_CODES[self.code]}: '{character}'",
            location=location,
            code=self.code,
            help_text=help_text,
        )
        self.character = character


def create_invalid_character_error(char: str, location: SourceLocation) -> InvalidCharacterError:
    """Create an error for an invalid character."""
    if char.isdigit():
        help_text = "List items may only contain letters; numbers are not supported."
    elif char.isalpha():
        help_text = f"Only ASCII letters are allowed in list items, got '{char}'."
    elif char.isprintable() and not char.isspace():
        help_text = "Expected a letter, ',', '[' or ']'."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."
    
    return InvalidCharacterError(char, location, help_text=help_text)
