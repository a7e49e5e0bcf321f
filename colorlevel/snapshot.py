# colorlevel/snapshot.py
"""Immutable view of the process inputs the resolver reads.

Passing a snapshot instead of relying on ``sys.argv`` and ``os.environ``
keeps resolution deterministic when other threads mutate process state.
"""

import os
import sys
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Sequence, Tuple


@dataclass(frozen=True)
class ProcessSnapshot:
    """Argument vector and environment captured at one point in time."""

    argv: Tuple[str, ...] = ()
    env: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def of(
        cls,
        argv: Optional[Sequence[str]] = None,
        env: Optional[Mapping[str, str]] = None,
    ) -> "ProcessSnapshot":
        """Build a snapshot from copies of ``argv`` and ``env``."""
        return cls(
            argv=tuple(argv or ()),
            env=MappingProxyType(dict(env or {})),
        )

    @classmethod
    def current(cls) -> "ProcessSnapshot":
        """Capture the live ``sys.argv`` and ``os.environ``."""
        return cls.of(sys.argv, os.environ)

    def getenv(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self.env.get(name, default)

    def isset(self, name: str) -> bool:
        """True when ``name`` is present in the environment, even if empty."""
        return name in self.env
