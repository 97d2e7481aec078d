"""Lexical analysis for the crabby language. The whole grammar is:

```
<print_stmt> ::= "print" <string>     ; prints <string> as is (no escape sequences)
<string>     ::= '"' <char>* '"'      ; <char> is anything except '"'
```

Whitespace (space, tab, newline, carriage return) around tokens is insignificant. There are no comments, no statement
terminators and no other keywords.

The Lexer is pull-based: it produces one Token per call to next_token, and never looks further ahead than one keyword
match. It never fails either. Malformed input degrades to an EndOfInput token:
    - an unterminated string consumes the rest of the source and yields whatever was scanned
    - any character that is neither whitespace, '"' nor the start of "print" yields EndOfInput
"""

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    """Kinds of crabby tokens."""
    PRINT = "Print"
    STRING = "StringLiteral"
    EOF = "EndOfInput"


@dataclass(frozen=True)
class Token:
    """Classified unit of source text. text is always set, even for EndOfInput tokens ("EOF")."""
    kind: TokenKind
    text: str

    def __str__(self):
        return f"Token {{ kind: {self.kind.value}, value: {self.text} }}"


class Lexer:
    """Index-based scanner over an immutable source text.

    self.pos is the current scan position and self.char is source[self.pos] (None once the scan is past the end).
    self.read_pos is the position of the next character to consume, always self.pos + 1.
    """
    WHITESPACE = " \t\n\r"
    QUOTE = "\""
    KEYWORD = "print"
    EOF = "EOF"

    def __init__(self, source):
        self.source = source
        self.pos = 0
        self.read_pos = 1
        self.char = source[0] if source else None

    def advance(self):
        """Moves the cursor forward by one character."""
        if self.read_pos >= len(self.source):
            self.char = None
        else:
            self.char = self.source[self.read_pos]
        self.pos = self.read_pos
        self.read_pos += 1

    def skip_whitespace(self):
        while self.char is not None and self.char in Lexer.WHITESPACE:
            self.advance()

    def scan_string(self):
        """Returns the contents of the string literal starting at self.pos. Stops on the closing quote, which is left
        for next_token to consume, or at the end of the source if the string is unterminated.
        """
        start = self.pos + 1

        self.advance()
        while self.char != Lexer.QUOTE and self.char is not None:
            self.advance()

        return self.source[start:self.pos]

    def next_token(self):
        """Scans and returns the next Token. Always returns a Token, even on malformed input."""
        self.skip_whitespace()

        if self.char == Lexer.QUOTE:
            token = Token(TokenKind.STRING, self.scan_string())

        elif self.char is None:
            token = Token(TokenKind.EOF, Lexer.EOF)

        elif self.source.startswith(Lexer.KEYWORD, self.pos):
            token = Token(TokenKind.PRINT, Lexer.KEYWORD)

            # move onto the keyword's last char, the trailing advance moves past it
            self.pos += len(Lexer.KEYWORD) - 1
            self.read_pos = self.pos + 1

        else:
            token = Token(TokenKind.EOF, Lexer.EOF)  # unrecognized char ends the token stream

        self.advance()
        return token

    def __iter__(self):
        """Yields tokens up to and including the first EndOfInput token."""
        while True:
            token = self.next_token()
            yield token

            if token.kind is TokenKind.EOF:
                return
