"""Uses the crabby interpreter to run .cb files or run in command-line mode. Also uses error handling context manager.
Called from the crabby console script.
"""

import argparse
import sys

from crabby.lang.error import ErrorHandler
from crabby.lang.session import Session
from crabby.lang.shell import Shell


def main(argv=None):
    """Runs crabby interpreter. Called from crabby console script."""
    assert sys.version_info >= (3, 7), "crabby cannot be run with python < 3.7"

    with ErrorHandler() as error_handler:
        parser = argparse.ArgumentParser(prog="crabby", description="Crabby programming language interpreter")
        parser.add_argument("file", help="file to interpret and run (if empty, goes to command-line mode)", nargs="?")
        parser.add_argument("--tokens", help="print the token stream of file instead of running it",
                            action="store_true")
        args = parser.parse_args(argv)

        if args.file is not None:
            sess = Session(error_handler, args.file, cmd_line=False)

            if args.tokens:
                for token in sess.tokens():
                    print(token)
            else:
                sess.run()

        elif args.tokens:
            parser.error("--tokens requires a file")

        else:
            Shell(Session(error_handler, Session.SH_FILE, cmd_line=True)).cmdloop()


if __name__ == "__main__":
    main()
