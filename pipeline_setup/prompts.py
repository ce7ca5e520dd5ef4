"""Console input helpers.

All interactive reads go through here so tests can patch a single seam.
"""

import getpass


def ask(question: str) -> str:
    """Read one line from the console, stripped of surrounding whitespace."""
    return input(question).strip()


def ask_secret(question: str) -> str:
    """Read one line without echoing it."""
    return getpass.getpass(question).strip()
