from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List, Optional

_TRUTHY = {"1", "true", "yes", "on"}


def _sep() -> str:
    return ';' if os.name == 'nt' else ':'


# Defaults
_DEFAULT_PRELUDE_FILES: List[Path] = []


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    sep = _sep()
    return [Path(p.strip()) for p in raw.split(sep) if p.strip()]


def flag_from_env(var: str, default: bool = False) -> bool:
    raw = os.environ.get(var)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def get_prelude_files() -> List[Path]:
    """Source files evaluated by Interpreter(prelude='auto'), in order."""
    return paths_from_env('MCLISP_PRELUDE_PATH', _DEFAULT_PRELUDE_FILES)


def trace_enabled() -> bool:
    """Whether evaluation steps are logged at debug level."""
    return flag_from_env('MCLISP_TRACE')


def int_from_env(var: str) -> Optional[int]:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return None
    return int(raw.strip())


def get_recursion_limit() -> Optional[int]:
    """Python recursion limit requested for deep programs, or None to keep the default."""
    return int_from_env('MCLISP_RECURSION_LIMIT')
