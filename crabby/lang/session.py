"""Session control for the crabby language. Loads .cb files (or takes lines from command-line mode), runs them through
the interpreter loop and routes the results: print statements go to the output primitive, statement diagnostics go
to the ErrorHandler.
"""

from crabby.interpreter import Diagnostic, Output, interpret
from crabby.lang.console import crabby_print
from crabby.lang.error import GenericException
from crabby.lang.lexical import Lexer


class Session:
    """Governs a crabby session: the sources waiting to be run."""
    SH_FILE = "<in>"     # command-line interpreter filename
    EXTENSION = ".cb"    # crabby scripts must end with this

    def __init__(self, error_handler, path, cmd_line=False, output=crabby_print):
        self.error_handler = error_handler
        self.error_handler.register_file(path)

        self.path = path          # used for error messages
        self.cmd_line = cmd_line  # whether or not in command-line mode
        self.output = output      # output primitive, called once per executed print statement

        self.to_exec = []  # sources to run, in order

        if self.cmd_line:
            self.error_handler.fatal = False

        if path != Session.SH_FILE:
            self.add(Session.load(path))

        elif not cmd_line:
            raise GenericException("'{}' is a reserved filename", path)

    @staticmethod
    def load(path):
        """Returns the contents of the crabby script at path."""
        if not path.endswith(Session.EXTENSION):
            raise GenericException("'{}' must have a " + Session.EXTENSION + " extension", path)

        try:
            with open(path, "r", encoding="utf-8", newline="") as file:
                return file.read()
        except (OSError, UnicodeDecodeError):
            raise GenericException("'{}' could not be opened", path)

    @staticmethod
    def preprocess_line(line):
        """Preprocesses a line from command-line mode. Returns line and whether it continues on the next line (i.e.
        whether a string literal is left open).
        """
        return line, line.count(Lexer.QUOTE) % 2 == 1

    def add(self, source):
        """Queues source. Nothing is interpreted until run is called."""
        self.to_exec.append(source)

    def run(self):
        """Runs queued sources in order. Statement diagnostics are reported but never stop the run."""
        while self.to_exec:
            source = self.to_exec.pop(0)

            for result in interpret(source):
                if isinstance(result, Output):
                    self.output(result.text)

                elif isinstance(result, Diagnostic):
                    self.error_handler.report(result)

    def tokens(self):
        """Yields the token stream of every queued source without running it."""
        for source in self.to_exec:
            yield from Lexer(source)
