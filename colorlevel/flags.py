# colorlevel/flags.py
"""Command-line flag scanning.

Only answers "is this flag present before any ``--`` terminator". Real
argument parsing is left to the host program.
"""

import sys
from typing import Optional, Sequence

TERMINATOR = "--"


def flag_token(name: str) -> str:
    """Return the CLI token for a flag name ("x" -> "-x", "color" -> "--color")."""
    if name.startswith("-"):
        return name
    if len(name) == 1:
        return "-" + name
    return "--" + name


def has_flag(name: str, argv: Optional[Sequence[str]] = None) -> bool:
    """Check whether a flag is active in the argument vector.

    Args:
        name: Flag name with or without leading dashes.
        argv: Argument vector including the program name at index 0.
            Defaults to ``sys.argv`` read at call time.

    Returns:
        True if the flag appears and no ``--`` terminator precedes it.
    """
    if argv is None:
        argv = sys.argv
    args = list(argv[1:])
    token = flag_token(name)
    if token not in args:
        return False
    position = args.index(token)
    if TERMINATOR not in args:
        return True
    return position < args.index(TERMINATOR)


def has_any_flag(names: Sequence[str], argv: Optional[Sequence[str]] = None) -> bool:
    """Return True if any of ``names`` is an active flag."""
    return any(has_flag(name, argv) for name in names)
