"""Output primitive of the crabby language: the only way crabby code can talk to the outside world."""


def crabby_print(text):
    """Prints text, unmodified, as one line to stdout."""
    print(text)
