# colorlevel/platform_query.py
"""Native terminal color capability query.

Only Windows exposes something worth asking: the console's color support
follows the OS build. Everywhere else the query is not applicable.

Usage:
    from colorlevel.platform_query import select_terminal_query

    level, applicable = select_terminal_query().query()
"""

import logging
import sys
from typing import Callable, Optional, Protocol, Tuple

from .level import Level

logger = logging.getLogger(__name__)

CURRENT_VERSION_KEY = r"SOFTWARE\Microsoft\Windows NT\CurrentVersion"

# Windows 10 build 10586 is the first release with 256-color console support,
# build 14931 the first with true color.
BUILD_256 = 10586
BUILD_TRUECOLOR = 14931

# (major version, build number)
VersionReader = Callable[[], Tuple[int, int]]


class TerminalQuery(Protocol):
    """Reports the host terminal's native color capability."""

    def query(self) -> Tuple[Level, bool]:
        """Return ``(level, applicable)``.

        When ``applicable`` is False the level carries no information and the
        caller must keep evaluating other signals.
        """
        ...


class NoopTerminalQuery:
    """Query used on platforms with no native capability lookup."""

    def query(self) -> Tuple[Level, bool]:
        return Level.NONE, False


def windows_level(major: int, build: int) -> Level:
    """Map a Windows major version and build number onto a color level."""
    if major < 10:
        return Level.BASIC
    if build < BUILD_256:
        return Level.BASIC
    if build < BUILD_TRUECOLOR:
        return Level.ANSI256
    return Level.TRUECOLOR


def read_registry_version() -> Tuple[int, int]:
    """Read the OS major version and build number from the registry.

    Raises:
        OSError: The key or one of its values is missing.
        ValueError: ``CurrentBuild`` is not numeric.
    """
    import winreg

    with winreg.OpenKey(
        winreg.HKEY_LOCAL_MACHINE, CURRENT_VERSION_KEY, 0, winreg.KEY_QUERY_VALUE
    ) as key:
        major, _ = winreg.QueryValueEx(key, "CurrentMajorVersionNumber")
        # CurrentBuild is stored as REG_SZ
        build, _ = winreg.QueryValueEx(key, "CurrentBuild")
    return int(major), int(build)


class WindowsTerminalQuery:
    """Query that derives the console color level from the Windows build."""

    def __init__(self, read_version: Optional[VersionReader] = None):
        self._read_version = read_version or read_registry_version

    def query(self) -> Tuple[Level, bool]:
        try:
            major, build = self._read_version()
        except (ImportError, OSError, TypeError, ValueError) as exc:
            logger.debug("Windows version lookup failed, assuming basic colors: %s", exc)
            return Level.BASIC, True
        level = windows_level(major, build)
        logger.debug("Windows %d build %d supports %s colors", major, build, level)
        return level, True


def select_terminal_query(platform: Optional[str] = None) -> TerminalQuery:
    """Pick the terminal query for ``platform`` (defaults to ``sys.platform``)."""
    if (platform or sys.platform) == "win32":
        return WindowsTerminalQuery()
    return NoopTerminalQuery()
