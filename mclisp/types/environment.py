"""Runtime environment for mclisp.

The Environment maps symbol names to bound expressions. The top-level
(ambient) scope is created empty and is the only scope that outlives a call;
`defun` installs into it through `define_global`. A function call gets a child
scope from `extend`: the child sees every binding of its caller through the
`outer` link, overlaid with the call's own bindings. Writes to a child never
reach its caller, so bindings made during one call are invisible to sibling
calls and to the caller once the call returns.
"""

from __future__ import annotations

from io import StringIO
from typing import Mapping, Optional

from mclisp import LispValue
from mclisp.types.errors import McLispInvalidSymbol


class Environment:
    """Mapping from symbol names to expressions, with copy-on-extend call scopes."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, LispValue] = {}
        self.outer: Environment | None = outer

    @property
    def root(self) -> Environment:
        """The ambient scope at the end of the outer chain."""
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def bind(self, name: str, value: LispValue) -> None:
        """Bind `name` to `value` in this scope, overwriting any previous binding.

        Raises McLispInvalidSymbol if `name` is not a string.
        """
        if not isinstance(name, str):
            raise McLispInvalidSymbol(f"Cannot bind {name!r} as a symbol")
        self.vars[name] = value

    def define_global(self, name: str, value: LispValue) -> None:
        """Install `name` in the ambient scope so it persists after this call."""
        self.root.bind(name, value)

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest scope in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: str) -> Optional[LispValue]:
        """Return the value bound to `name`, or None when it is unbound."""
        env = self.find(name)
        if env is None:
            return None
        return env.vars[name]

    def extend(self, bindings: Mapping[str, LispValue]) -> Environment:
        """Return a child scope for a call, overlaid with `bindings`.

        The parent is shared rather than copied; the child only ever writes to
        its own frame.
        """
        child = Environment(outer=self)
        for name, value in bindings.items():
            child.bind(name, value)
        return child

    def names(self) -> set[str]:
        """All names visible from this scope."""
        seen: set[str] = set()
        env: Optional[Environment] = self
        while env is not None:
            seen.update(env.vars)
            env = env.outer
        return seen

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
