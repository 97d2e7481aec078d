"""Error handling for the crabby language. Two kinds of problems can come up while running crabby code:

1. Statement diagnostics (e.g. a `print` that is not followed by a string). These are yielded by the interpreter loop
   and reported through ErrorHandler.report. They never abort a run.
2. GenericExceptions (e.g. a script that could not be opened). These are raised and thrown by ErrorHandler, and exit
   the process unless the handler is non-fatal (command-line mode).

If another type of error is raised and makes it all the way to ErrorHandler, it is assumed to be an internal issue.
"""

import sys

from termcolor import colored


class GenericException(Exception):
    """Templates an error message so that it can be used to throw a crabby error."""

    def __init__(self, msg, exprs=None, internal=False):
        """exprs are substituted into msg (bolded) using str.format."""
        if isinstance(exprs, str):
            exprs = [exprs]

        if exprs:  # msg is left untouched otherwise, it may contain braces
            msg = msg.format(*(colored(expr, attrs=["bold"]) for expr in exprs))  # color expr snippets

        self.msg = msg
        self.internal = internal

        super().__init__(self.msg)


class ErrorHandler:
    """Context manager that will silently suppress Python errors and print custom crabby errors."""
    ERROR = "red"

    def __init__(self, fatal=True):
        self.fatal = fatal
        self.path = None  # file currently being run, used as message prefix

    def register_file(self, path):
        """Registers path as the origin of subsequent errors."""
        self.path = path

    def _header(self, internal=False):
        header = colored(f"{self.path}: ", attrs=["bold"]) if self.path else ""
        if internal:
            header += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])
        return header + colored("error: ", ErrorHandler.ERROR, attrs=["bold"])

    def report(self, diagnostic):
        """Prints a statement diagnostic. Never exits: malformed statements don't abort a run."""
        print(self._header() + diagnostic.msg)

    def throw(self, error):
        """Throws error, which must be a GenericException. Exits with status 1 if self.fatal."""
        print(self._header(error.internal) + error.msg)

        if self.fatal:
            sys.exit(1)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(GenericException("keyboard interrupt"))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is GenericException:
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(GenericException(f"unknown error: '{exc_type.__name__}: {exc_val}'", internal=True))
            do_exit = True

        return not do_exit
