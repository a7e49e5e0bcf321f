# colorlevel/cli.py
"""Diagnostic command line: report the color level of stdout or stderr.

    colorlevel                      # resolve stdout, print a table
    colorlevel --stream stderr --json
    colorlevel --color=256          # color flags are honoured, not parsed

Environment Variables:
    COLORLEVEL_STREAM: Stream to inspect when --stream is omitted (default: stdout)
    COLORLEVEL_VERBOSE: Debug logging when set to '1', 'true', or 'yes'
"""

import argparse
import json
import logging
import os
import sys
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from . import __version__
from .environment import color_signals
from .flags import has_flag
from .level import Level
from .resolver import (
    ANSI256_FLAGS,
    DISABLE_FLAGS,
    ENABLE_FLAGS,
    TRUECOLOR_FLAGS,
    CapabilityResolver,
)
from .snapshot import ProcessSnapshot

logger = logging.getLogger(__name__)

STREAMS = ("stdout", "stderr")

# rich.console.Console color_system for each level
RICH_COLOR_SYSTEMS = {
    Level.NONE: None,
    Level.BASIC: "standard",
    Level.ANSI256: "256",
    Level.TRUECOLOR: "truecolor",
}

LEVEL_STYLES = {
    Level.NONE: "dim",
    Level.BASIC: "green",
    Level.ANSI256: "bold cyan",
    Level.TRUECOLOR: "bold magenta",
}


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").lower() in ("1", "true", "yes")


@dataclass
class DiagnosticConfig:
    """Settings for the diagnostic command, seeded from the environment."""
    stream: str = field(default_factory=lambda: os.environ.get("COLORLEVEL_STREAM", "stdout"))
    verbose: bool = field(default_factory=lambda: _env_flag("COLORLEVEL_VERBOSE"))
    as_json: bool = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="colorlevel",
        allow_abbrev=False,
        description="Report how many colors a terminal stream supports",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Color flags such as --no-color, --color=256 or --color=truecolor are not
consumed here; they are passed to the detector exactly as a host program
would see them.
        """,
    )
    parser.add_argument(
        "--stream",
        choices=STREAMS,
        help="Stream to inspect (default: COLORLEVEL_STREAM or stdout)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print a single JSON object instead of a table",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to .env file with signals to stage (default: .env)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def active_flags(argv: Sequence[str]) -> List[str]:
    """Recognised color flags that are active in ``argv``."""
    names = DISABLE_FLAGS + TRUECOLOR_FLAGS + ANSI256_FLAGS + ENABLE_FLAGS
    return ["--" + name for name in names if has_flag(name, argv)]


def build_report(
    resolver: CapabilityResolver,
    stream: Any,
    stream_name: str,
    snapshot: ProcessSnapshot,
) -> Dict[str, Any]:
    """Resolve ``stream`` and collect the signals that fed the decision."""
    resolution = resolver.explain(stream, snapshot)
    native, applicable = resolver.terminal_query.query()
    return {
        "stream": stream_name,
        "level": str(resolution.level),
        "value": int(resolution.level),
        "rule": resolution.rule,
        "signals": {
            "tty": bool(resolver.tty_probe(stream)),
            "flags": active_flags(snapshot.argv),
            "platform": str(native) if applicable else None,
            "env": color_signals(snapshot),
        },
    }


def render_table(console: Console, report: Dict[str, Any]) -> None:
    level = Level(report["value"])
    signals = report["signals"]

    table = Table(title=f"Color support for {report['stream']}", show_header=False)
    table.add_column("signal", style="dim")
    table.add_column("value")

    table.add_row("terminal", "yes" if signals["tty"] else "no")
    table.add_row("flags", " ".join(signals["flags"]) or "-")
    table.add_row("platform query", signals["platform"] or "n/a")
    for name, value in signals["env"].items():
        table.add_row(name, repr(value))
    style = LEVEL_STYLES[level]
    table.add_row("level", f"[{style}]{level!s}[/{style}]")
    table.add_row("decided by", report["rule"])

    console.print(table)


def main(argv: Optional[Sequence[str]] = None, resolver: Optional[CapabilityResolver] = None) -> int:
    parser = build_parser()
    raw_args = list(sys.argv[1:] if argv is None else argv)
    # Unknown arguments stay visible to the flag scanner
    args, _ = parser.parse_known_args(raw_args)

    config = DiagnosticConfig()
    if args.stream:
        config.stream = args.stream
    config.verbose = config.verbose or args.verbose
    config.as_json = args.json

    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if config.stream not in STREAMS:
        logger.warning("Unknown COLORLEVEL_STREAM %r, using stdout", config.stream)
        config.stream = "stdout"

    if os.path.exists(args.env_file):
        load_dotenv(args.env_file)
        logger.debug("Loaded signals from %s", args.env_file)

    program = sys.argv[0] if sys.argv else "colorlevel"
    snapshot = ProcessSnapshot.of([program, *raw_args], os.environ)
    stream = getattr(sys, config.stream)
    resolver = resolver or CapabilityResolver()

    report = build_report(resolver, stream, config.stream, snapshot)

    if config.as_json:
        stream.write(json.dumps(report) + "\n")
        stream.flush()
        return 0

    level = Level(report["value"])
    console = Console(
        file=stream,
        color_system=RICH_COLOR_SYSTEMS[level],
        force_terminal=level > Level.NONE,
        no_color=level == Level.NONE,
    )
    render_table(console, report)
    return 0
