"""Variable scopes for Monkey.

An :class:`Environment` maps names to values and may point at an outer
environment that lookups fall back to. The outer reference is only ever read;
an environment never changes its outer scope. A root environment is created
once per program run, and every function call gets a fresh environment whose
outer scope is the environment the function captured when it was defined, so
names resolve lexically rather than by call site.

Closures hold their defining environment for as long as they are reachable,
which keeps that scope alive after the call that created it has returned.


File: environment.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from monkeylang.objects import Object


class Environment:
    """A scope of name bindings with an optional outer scope."""

    def __init__(self, outer: Optional[Environment] = None):
        self.store: dict[str, Object] = {}
        self.outer = outer

    def get(self, name: str) -> tuple[Optional[Object], bool]:
        """
        Resolve a name, searching outward through enclosing scopes.

        Returns:
            tuple: The bound value (or None) and whether the name was found.
        """
        env: Optional[Environment] = self
        while env is not None:
            if name in env.store:
                return env.store[name], True
            env = env.outer
        return None, False

    def set(self, name: str, value: Object) -> Object:
        """
        Bind a name in this scope, shadowing any outer binding.
        """
        self.store[name] = value
        return value

    def __repr__(self) -> str:
        return f"Environment({sorted(self.store)}, outer={self.outer is not None})"


def new_environment() -> Environment:
    """
    Create a root environment.
    """
    return Environment()


def new_enclosed_environment(outer: Environment) -> Environment:
    """
    Create an environment whose lookups fall back to ``outer``.
    """
    return Environment(outer)
