# colorlevel package
#
# Detects how many colors an output stream can render:
#
#   from colorlevel import Level, support_level, supports_256
#
#   level = support_level(sys.stderr)
#   if level >= Level.ANSI256:
#       ...

from .flags import has_flag
from .level import Level
from .platform_query import (
    NoopTerminalQuery,
    TerminalQuery,
    WindowsTerminalQuery,
    select_terminal_query,
)
from .resolver import (
    CapabilityResolver,
    Resolution,
    get_default_resolver,
    set_default_resolver,
    support_level,
    supports_256,
    supports_basic,
    supports_none,
    supports_truecolor,
)
from .snapshot import ProcessSnapshot
from .tty import is_terminal

__version__ = "0.1.0"

__all__ = [
    "CapabilityResolver",
    "Level",
    "NoopTerminalQuery",
    "ProcessSnapshot",
    "Resolution",
    "TerminalQuery",
    "WindowsTerminalQuery",
    "get_default_resolver",
    "has_flag",
    "is_terminal",
    "select_terminal_query",
    "set_default_resolver",
    "support_level",
    "supports_256",
    "supports_basic",
    "supports_none",
    "supports_truecolor",
]
