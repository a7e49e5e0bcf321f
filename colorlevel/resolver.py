# colorlevel/resolver.py
"""Resolve the color level an output stream supports.

Usage:
    from colorlevel import support_level, supports_256, Level

    if supports_256(sys.stderr):
        ...
    level = support_level()          # sys.stdout, live argv/env
    level >= Level.BASIC

Signals are consulted from strongest to weakest; the first one that decides
wins:

    1. --no-color, --no-colors, --color=false, --color=never   -> none
    2. --color=16m|full|truecolor -> truecolor, --color=256    -> 256
    3. stream is not a TTY and FORCE_COLOR is unset             -> none
    4. baseline: FORCE_COLOR, or --color/--colors/--color=true/--color=always
    5. TERM=dumb                                                -> baseline
    6. native platform query (Windows)
    7. CI systems (TeamCity, GitHub Actions, Travis, ...)
    8. COLORTERM=truecolor                                      -> truecolor
    9. TERM_PROGRAM (iTerm.app, Apple_Terminal)
   10. TERM name patterns, COLORTERM set
   11. baseline

Nothing here raises: malformed values fall back to a conservative level.
"""

import logging
import sys
from typing import Any, NamedTuple, Optional

from .environment import (
    ci_level,
    force_color_level,
    is_dumb_terminal,
    term_name_level,
    term_program_level,
)
from .flags import has_any_flag
from .level import Level
from .platform_query import TerminalQuery, select_terminal_query
from .snapshot import ProcessSnapshot
from .tty import TTYProbe, is_terminal

logger = logging.getLogger(__name__)

DISABLE_FLAGS = ("no-color", "no-colors", "color=false", "color=never")
TRUECOLOR_FLAGS = ("color=16m", "color=full", "color=truecolor")
ANSI256_FLAGS = ("color=256",)
ENABLE_FLAGS = ("color", "colors", "color=true", "color=always")


class Resolution(NamedTuple):
    level: Level
    rule: str


class CapabilityResolver:
    """Stateless color level resolver with injectable collaborators.

    Args:
        tty_probe: Reports whether a stream is an interactive terminal.
        terminal_query: Native platform query; defaults to the variant for
            the running platform.
    """

    def __init__(
        self,
        tty_probe: Optional[TTYProbe] = None,
        terminal_query: Optional[TerminalQuery] = None,
    ):
        self.tty_probe = tty_probe or is_terminal
        self.terminal_query = terminal_query or select_terminal_query()

    def support_level(
        self,
        stream: Any = None,
        snapshot: Optional[ProcessSnapshot] = None,
    ) -> Level:
        """Return the color level supported by ``stream``.

        Args:
            stream: File-like object or descriptor. Defaults to ``sys.stdout``.
            snapshot: Argument vector and environment to read. Defaults to a
                fresh capture of the live process state.
        """
        if stream is None:
            stream = sys.stdout
        if snapshot is None:
            snapshot = ProcessSnapshot.current()
        return self.explain(stream, snapshot).level

    def explain(self, stream: Any, snapshot: ProcessSnapshot) -> Resolution:
        """Resolve ``stream`` and name the rule that decided the level."""
        level, rule = self._resolve(stream, snapshot)
        logger.debug("Color level %s decided by %s", level, rule)
        return Resolution(level, rule)

    def _resolve(self, stream: Any, snapshot: ProcessSnapshot):
        argv = snapshot.argv

        if has_any_flag(DISABLE_FLAGS, argv):
            return Level.NONE, "disable flag"
        if has_any_flag(TRUECOLOR_FLAGS, argv):
            return Level.TRUECOLOR, "truecolor flag"
        if has_any_flag(ANSI256_FLAGS, argv):
            return Level.ANSI256, "256 color flag"

        forced = force_color_level(snapshot)
        if forced is None and not self.tty_probe(stream):
            return Level.NONE, "not a terminal"

        if forced is not None:
            baseline = forced
        elif has_any_flag(ENABLE_FLAGS, argv):
            baseline = Level.BASIC
        else:
            baseline = Level.NONE

        if is_dumb_terminal(snapshot):
            return baseline, "dumb terminal"

        native, applicable = self.terminal_query.query()
        if applicable:
            return native, "platform query"

        level = ci_level(snapshot, baseline)
        if level is not None:
            return level, "CI environment"

        if snapshot.getenv("COLORTERM") == "truecolor":
            return Level.TRUECOLOR, "COLORTERM"

        level = term_program_level(snapshot)
        if level is not None:
            return level, "TERM_PROGRAM"

        level = term_name_level(snapshot)
        if level is not None:
            return level, "TERM"

        return baseline, "baseline"


_default_resolver: Optional[CapabilityResolver] = None


def get_default_resolver() -> CapabilityResolver:
    """Return the process-wide resolver, creating it on first use."""
    global _default_resolver
    if _default_resolver is None:
        _default_resolver = CapabilityResolver()
    return _default_resolver


def set_default_resolver(resolver: Optional[CapabilityResolver]) -> None:
    """Replace the process-wide resolver. Passing None restores the default."""
    global _default_resolver
    _default_resolver = resolver


def support_level(stream: Any = None, snapshot: Optional[ProcessSnapshot] = None) -> Level:
    """Color level supported by ``stream`` (``sys.stdout`` by default)."""
    return get_default_resolver().support_level(stream, snapshot)


def supports_truecolor(stream: Any = None, snapshot: Optional[ProcessSnapshot] = None) -> bool:
    return support_level(stream, snapshot) >= Level.TRUECOLOR


def supports_256(stream: Any = None, snapshot: Optional[ProcessSnapshot] = None) -> bool:
    return support_level(stream, snapshot) >= Level.ANSI256


def supports_basic(stream: Any = None, snapshot: Optional[ProcessSnapshot] = None) -> bool:
    return support_level(stream, snapshot) >= Level.BASIC


def supports_none(stream: Any = None, snapshot: Optional[ProcessSnapshot] = None) -> bool:
    return support_level(stream, snapshot) == Level.NONE


__all__ = [
    "CapabilityResolver",
    "Resolution",
    "get_default_resolver",
    "set_default_resolver",
    "support_level",
    "supports_truecolor",
    "supports_256",
    "supports_basic",
    "supports_none",
]
