# colorlevel/environment.py
"""Color hints read from environment variables.

Each helper returns a Level when its signal decides the outcome and None when
the caller should keep looking.
"""

import re
from typing import Dict, Optional

from .level import Level
from .snapshot import ProcessSnapshot

# Recognised variables, in the order the resolver consults them.
COLOR_ENV_VARS = (
    "FORCE_COLOR",
    "TERM",
    "TEAMCITY_VERSION",
    "GITHUB_ACTIONS",
    "CI",
    "TRAVIS",
    "CIRCLECI",
    "APPVEYOR",
    "GITLAB_CI",
    "CI_NAME",
    "COLORTERM",
    "TERM_PROGRAM",
    "TERM_PROGRAM_VERSION",
)

CI_VENDOR_VARS = ("TRAVIS", "CIRCLECI", "APPVEYOR", "GITLAB_CI")

# TeamCity 9.1 and later support colored build logs
_TEAMCITY_RE = re.compile(r"^(9\.(0*[1-9]\d*)\.|\d{2,}\.)")
_TERM_256_RE = re.compile(r"-256(color)?$", re.IGNORECASE)
_TERM_BASIC_RE = re.compile(
    r"^screen|^xterm|^vt100|^vt220|^rxvt|color|ansi|cygwin|linux", re.IGNORECASE
)
_LEADING_INT_RE = re.compile(r"\s*[+-]?\d+")


def force_color_level(snapshot: ProcessSnapshot) -> Optional[Level]:
    """Level requested through FORCE_COLOR, or None when it is unset."""
    if not snapshot.isset("FORCE_COLOR"):
        return None
    return Level.from_force_color(snapshot.getenv("FORCE_COLOR"))


def is_dumb_terminal(snapshot: ProcessSnapshot) -> bool:
    return snapshot.getenv("TERM") == "dumb"


def teamcity_level(version: str) -> Level:
    if _TEAMCITY_RE.match(version):
        return Level.BASIC
    return Level.NONE


def ci_level(snapshot: ProcessSnapshot, baseline: Level) -> Optional[Level]:
    """Level for a recognised CI system.

    An unknown CI (``CI`` set without a vendor fingerprint) keeps ``baseline``.
    Returns None outside CI.
    """
    if snapshot.isset("TEAMCITY_VERSION"):
        return teamcity_level(snapshot.getenv("TEAMCITY_VERSION", ""))
    if snapshot.isset("GITHUB_ACTIONS"):
        return Level.BASIC
    if not snapshot.isset("CI"):
        return None
    if any(snapshot.isset(name) for name in CI_VENDOR_VARS):
        return Level.BASIC
    if snapshot.getenv("CI_NAME") == "codeship":
        return Level.BASIC
    return baseline


def leading_int(value: Optional[str]) -> Optional[int]:
    """Parse the integer prefix of ``value`` ("3.0.10" -> 3), or None."""
    match = _LEADING_INT_RE.match(value or "")
    if match is None:
        return None
    return int(match.group())


def term_program_level(snapshot: ProcessSnapshot) -> Optional[Level]:
    """Level for macOS terminal emulators identified by TERM_PROGRAM."""
    program = snapshot.getenv("TERM_PROGRAM")
    if program == "iTerm.app":
        version = snapshot.getenv("TERM_PROGRAM_VERSION", "").split(".")[0]
        major = leading_int(version)
        if major is not None and major >= 3:
            return Level.TRUECOLOR
        return Level.ANSI256
    if program == "Apple_Terminal":
        return Level.ANSI256
    return None


def term_name_level(snapshot: ProcessSnapshot) -> Optional[Level]:
    """Level guessed from the TERM name, or from COLORTERM being set."""
    term = snapshot.getenv("TERM", "")
    if _TERM_256_RE.search(term):
        return Level.ANSI256
    if _TERM_BASIC_RE.search(term) or snapshot.isset("COLORTERM"):
        return Level.BASIC
    return None


def color_signals(snapshot: ProcessSnapshot) -> Dict[str, Optional[str]]:
    """Values of every recognised variable that is set (for diagnostics)."""
    return {name: snapshot.getenv(name) for name in COLOR_ENV_VARS if snapshot.isset(name)}
