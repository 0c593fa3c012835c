"""
Resolution of the ``AUROPAY_*`` variables from the process, ``.env`` files
and explicit overrides.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterator, Mapping, MutableMapping, Optional, Tuple

__all__ = [
    "EnvironmentVariables",
    "build_environment",
    "load_env_file",
]

_QUOTES = ("'", '"')


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] in _QUOTES and value[-1] == value[0]:
        return value[1:-1]
    return value


def _iter_assignments(text: str) -> Iterator[Tuple[str, str]]:
    """
    Yield ``KEY=VALUE`` pairs, allowing shell-style ``export`` and quotes.
    """
    for line in text.splitlines():
        line = line.strip()
        if line.startswith("export "):
            line = line[len("export "):].lstrip()
        name, sep, raw = line.partition("=")
        name = name.strip()
        if not sep or not name or name.startswith("#"):
            continue
        yield name, _unquote(raw.strip())


def _read_env_file(path: Optional[str]) -> Dict[str, str]:
    if path is None:
        return {}
    env_path = Path(path)
    if not env_path.is_file():
        return {}
    return dict(_iter_assignments(env_path.read_text(encoding="utf-8")))


def load_env_file(
    path: str = ".env",
    *,
    environ: Optional[MutableMapping[str, str]] = None,
) -> Dict[str, str]:
    """Fill ``environ`` (default :data:`os.environ`) from ``path``; set keys stay."""
    target = os.environ if environ is None else environ
    for name, value in _read_env_file(path).items():
        target.setdefault(name, value)
    return dict(target)


@dataclass(frozen=True)
class EnvironmentVariables:
    variables: Mapping[str, str]

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        # blank assignments such as ``AUROPAY_ACCESS_KEY=`` count as unset
        return self.variables.get(key) or default


def build_environment(
    *,
    env_file: Optional[str] = ".env",
    base: Optional[Mapping[str, str]] = None,
    overrides: Optional[Mapping[str, str]] = None,
) -> EnvironmentVariables:
    """
    Priority, lowest first: ``env_file``, ``base`` (default :data:`os.environ`),
    ``overrides``.
    """
    resolved = _read_env_file(env_file)
    resolved.update(os.environ if base is None else base)
    resolved.update(overrides or {})
    return EnvironmentVariables(variables=resolved)
