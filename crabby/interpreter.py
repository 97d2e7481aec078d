"""Crabby interpreter.

The crabby language has exactly one statement: `print "<string>"`. There is no parser and no AST; program flow is:
    1. Lexer: produces tokens on demand (see crabby/lang/lexical.py for the grammar)
    2. Statement loop: pulls tokens one at a time and executes the statements they form

Execution doesn't touch the console directly. interpret yields an ordered stream of Output and Diagnostic values, and
the caller (see crabby/lang/session.py) decides where they go.
"""

from dataclasses import dataclass

from crabby.lang.lexical import Lexer, TokenKind


EXPECTED_STRING = "Expected string after 'print'"
UNEXPECTED_TOKEN = "Unexpected token"


@dataclass(frozen=True)
class Output:
    """Text of an executed print statement."""
    text: str


@dataclass(frozen=True)
class Diagnostic:
    """Non-fatal statement error. Carries no position information."""
    msg: str


def interpret(source):
    """Interprets source, yielding an Output for every print statement and a Diagnostic for every malformed one, in
    source order. Stops at the first EndOfInput token found where a statement should start.

    A print followed by anything but a string abandons that statement only: the loop resumes with whatever token comes
    next, even if the token after print was an EndOfInput produced by an unrecognized character.
    """
    lexer = Lexer(source)

    while True:
        token = lexer.next_token()

        if token.kind is TokenKind.EOF:
            return

        if token.kind is TokenKind.PRINT:
            token = lexer.next_token()
            if token.kind is TokenKind.STRING:
                yield Output(token.text)
            else:
                yield Diagnostic(EXPECTED_STRING)

        else:
            yield Diagnostic(UNEXPECTED_TOKEN)
