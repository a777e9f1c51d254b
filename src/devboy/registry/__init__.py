"""Route registry — the function/route model, its checks, and persistence.

Registries are immutable values.  ``add_route`` returns a new one and
saves it; nothing else writes the document.
"""

from devboy.registry.checks import Violation, is_duplicate, validate, validate_route
from devboy.registry.handlers import scaffold, synthesize
from devboy.registry.model import (
    DEFAULT_FUNCTION,
    FunctionEntry,
    Method,
    Registry,
    RouteEntry,
)
from devboy.registry.registrar import add_route
from devboy.registry.resolver import CreateNew, Selection, UseDefault, UseExisting, resolve
from devboy.registry.store import RegistryStore

__all__ = [
    "DEFAULT_FUNCTION",
    "CreateNew",
    "FunctionEntry",
    "Method",
    "Registry",
    "RegistryStore",
    "RouteEntry",
    "Selection",
    "UseDefault",
    "UseExisting",
    "Violation",
    "add_route",
    "is_duplicate",
    "resolve",
    "scaffold",
    "synthesize",
    "validate",
    "validate_route",
]
