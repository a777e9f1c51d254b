"""Function resolution — decides which function a new route attaches to.

A ``Selection`` is the caller's choice: the default function, an existing
one, or a brand new one.  ``resolve`` is the only place new top-level
registry keys are created.
"""

from __future__ import annotations

from dataclasses import dataclass

from devboy.errors import InvalidFunctionName
from devboy.registry.model import DEFAULT_FUNCTION, FunctionEntry, Registry


@dataclass(frozen=True, slots=True)
class UseDefault:
    """Attach the route to the default ``"api"`` function."""


@dataclass(frozen=True, slots=True)
class UseExisting:
    """Attach the route to a function that is already registered."""

    name: str


@dataclass(frozen=True, slots=True)
class CreateNew:
    """Create a function called *name* and attach the route to it."""

    name: str


Selection = UseDefault | UseExisting | CreateNew


def resolve(registry: Registry, selection: Selection) -> tuple[Registry, str]:
    """Return ``(registry, function_name)`` for *selection*.

    For ``CreateNew`` the returned registry holds a fresh
    ``FunctionEntry(name, "<name>.py")``; otherwise it is *registry* itself.

    Raises ``InvalidFunctionName`` for an empty name, a name that already
    exists on creation, or an unknown name on reuse.
    """
    match selection:
        case UseDefault():
            return registry, DEFAULT_FUNCTION
        case UseExisting(name=name):
            if name not in registry:
                msg = f"No function named {name!r}. Known functions: {', '.join(registry.names)}"
                raise InvalidFunctionName(msg)
            return registry, name
        case CreateNew(name=raw_name):
            name = raw_name.strip()
            if not name:
                msg = "Function name cannot be empty. Please enter a valid name."
                raise InvalidFunctionName(msg)
            if name in registry:
                msg = (
                    f"A function named {name!r} already exists. "
                    "Please choose a different name."
                )
                raise InvalidFunctionName(msg)
            return registry.with_function(FunctionEntry(name, f"{name}.py")), name
        case _:
            msg = f"Unknown function selection: {selection!r}"
            raise TypeError(msg)
