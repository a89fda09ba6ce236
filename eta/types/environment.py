"""Runtime environment for Eta.

The Environment stores bindings of names to evaluated values and supports
nested scopes via an `outer` link. Environments are shared by reference:
closures and call frames holding the same Environment all observe later
`set` calls on it.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from eta.errors import EtaExpectedSymbol, EtaUnboundSymbol
from eta.types.location import Location
from eta.types.values import Value, type_name


class Environment:
    """Hierarchical mapping from names to values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, Value] = {}
        self.outer: Environment | None = outer

    def get(self, name: str) -> Optional[Value]:
        """Value bound to `name` in the nearest enclosing scope, or None."""
        env = self.find(name)
        if env is None:
            return None
        return env.vars[name]

    def set(self, name: str, value: Value) -> None:
        """Bind `name` to `value` in this frame only; never touches `outer`.

        Raises EtaExpectedSymbol if `name` is not a string.
        """
        if not isinstance(name, str):
            raise EtaExpectedSymbol(type_name(name))
        self.vars[name] = value

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: str, loc: Location | None = None) -> Value:
        """Look up the value bound to `name`.

        Raises EtaUnboundSymbol (located at `loc`) if not found.
        """
        env = self.find(name)
        if env is None:
            raise EtaUnboundSymbol(name, loc)
        return env.vars[name]

    def update(self, mapping: dict[str, Value]) -> None:
        """Bulk-define a mapping of name -> value in the current frame."""
        for k, v in mapping.items():
            self.set(k, v)

    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def __contains__(self, name: str) -> bool:
        return name in self.vars

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v}" for k, v in self.vars.items()))
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
