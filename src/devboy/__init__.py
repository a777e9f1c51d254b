"""Devboy — scaffolding and a local dev server for serverless-style HTTP APIs.

Keeps a route registry (``devboy.config.json``) mapping functions to their
routes and handler files, scaffolds handlers, serves them locally, and
refuses to deploy while any handler file is missing.

Basic usage::

    from devboy import CreateNew, RegistryStore, add_route

    store = RegistryStore("devboy.config.json")
    registry = add_route(store.load(), "/jobs", "POST", CreateNew("jobs"), store=store, root=".")

Or from the shell::

    devboy new:route /users/get_profile GET
    devboy start
    devboy deploy
"""

__version__ = "0.1.0"
__all__ = [
    "CreateNew",
    "DevServer",
    "DevboyConfig",
    "DevboyError",
    "DispatchTable",
    "DuplicateRoute",
    "FileHandlerLoader",
    "HandlerLoadError",
    "InvalidFunctionName",
    "Method",
    "PersistenceError",
    "Registry",
    "RegistryStore",
    "UseDefault",
    "UseExisting",
    "ValidationError",
    "add_route",
    "build",
    "validate",
]

_LAZY: dict[str, str] = {
    "CreateNew": "devboy.registry.resolver",
    "UseDefault": "devboy.registry.resolver",
    "UseExisting": "devboy.registry.resolver",
    "Method": "devboy.registry.model",
    "Registry": "devboy.registry.model",
    "RegistryStore": "devboy.registry.store",
    "add_route": "devboy.registry.registrar",
    "validate": "devboy.registry.checks",
    "DispatchTable": "devboy.dispatch.table",
    "build": "devboy.dispatch.table",
    "FileHandlerLoader": "devboy.dispatch.loader",
    "DevServer": "devboy.server.app",
    "DevboyConfig": "devboy.config",
    "DevboyError": "devboy.errors",
    "DuplicateRoute": "devboy.errors",
    "HandlerLoadError": "devboy.errors",
    "InvalidFunctionName": "devboy.errors",
    "PersistenceError": "devboy.errors",
    "ValidationError": "devboy.errors",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import devboy`` fast while providing a clean top-level API.
    """
    module_path = _LAZY.get(name)
    if module_path is None:
        msg = f"module 'devboy' has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_path), name)
