"""Handler path synthesis and stub scaffolding.

``synthesize`` maps a route to its handler file deterministically, so the
same (path, method) always lands on the same file.  ``scaffold`` writes a
starter handler there, never overwriting one that exists.
"""

import logging
from pathlib import Path

from devboy.registry.model import Method, RouteEntry
from devboy.registry.templates import HANDLER_PY

logger = logging.getLogger("devboy.registry")


def synthesize(path: str, method: str | Method, *, filename: str = "index.py") -> str:
    """Return ``"api/<path without leading slash>/<method>/<filename>"``.

    Example::

        >>> synthesize("/users/get_profile", "GET")
        'api/users/get_profile/get/index.py'
    """
    stripped = path[1:] if path.startswith("/") else path
    return f"api/{stripped}/{str(method).lower()}/{filename}"


def render_stub(route: RouteEntry) -> str:
    """Source for the starter handler of *route*."""
    return HANDLER_PY.format(
        method=route.method.value,
        path=route.path,
        name=route.path[1:] if route.path.startswith("/") else route.path,
    )


def scaffold(root: str | Path, route: RouteEntry) -> bool:
    """Write the stub handler for *route* under *root* unless a file is already there.

    Creates any missing parent directories.  Returns True when a file was
    written, False when an existing handler was left alone.
    """
    target = Path(root) / route.handler_path
    if target.exists():
        logger.debug("Keeping existing handler %s", target)
        return False
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(render_stub(route), encoding="utf-8")
    logger.debug("Scaffolded handler %s", target)
    return True
