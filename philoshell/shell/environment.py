"""Ordered store of environment variables."""

from __future__ import annotations

import re
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

_NAME = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def is_valid_name(name: str) -> bool:
    """Return True for a valid variable name: a letter or _ then letters, digits or _."""
    return _NAME.fullmatch(name) is not None


class Environment:
    """Variables in insertion order; updating a variable keeps its position."""

    def __init__(self, items: Iterable[Tuple[str, str]] = ()) -> None:
        self._vars: Dict[str, str] = {}
        for key, value in items:
            self._vars[key] = value

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> "Environment":
        return cls(mapping.items())

    def get(self, key: str) -> Optional[str]:
        """Return the value of ``key``, or None when it is not set."""
        return self._vars.get(key)

    def set(self, key: str, value: str, overwrite: bool = True) -> None:
        """Add ``key``; an existing value is replaced only when ``overwrite`` is true."""
        if overwrite or key not in self._vars:
            self._vars[key] = value

    def unset(self, key: str) -> None:
        """Remove ``key`` if it is set."""
        self._vars.pop(key, None)

    def to_envp(self) -> List[str]:
        """Return the variables as ``KEY=VALUE`` strings."""
        return [f"{key}={value}" for key, value in self._vars.items()]

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._vars))

    def __contains__(self, key: object) -> bool:
        return key in self._vars

    def __len__(self) -> int:
        return len(self._vars)

    def __repr__(self) -> str:
        return f"Environment({list(self._vars.items())!r})"