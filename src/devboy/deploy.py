"""Deployment gate — validate the registry, then hand it to a backend.

Violations are collected, never raised: the caller gets every missing
handler in one batch.  A registry with any violation never reaches the
backend.

Usage::

    result = deploy(registry, root, ReportingBackend())
    if not result.ok:
        for violation in result.violations:
            print(violation.message)
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from devboy.registry.checks import Violation, validate
from devboy.registry.model import Registry

logger = logging.getLogger("devboy.deploy")


class DeploymentBackend(Protocol):
    """Receives a registry that passed validation."""

    def deploy(self, registry: Registry) -> None: ...


@dataclass(frozen=True, slots=True)
class DeployResult:
    """Outcome of a deployment attempt."""

    violations: tuple[Violation, ...] = ()
    deployed: bool = False

    @property
    def ok(self) -> bool:
        return self.deployed and not self.violations


@dataclass(slots=True)
class ReportingBackend:
    """Reports what would be deployed, function by function.

    Writes through *emit* (``print`` by default) so the CLI can show it.
    """

    emit: Callable[[str], None] = field(default=print)

    def deploy(self, registry: Registry) -> None:
        self.emit("Deploying Devboy application...")
        for function in registry:
            if not function.routes:
                continue
            self.emit(f"Deploying {function.name} ({function.handler_path})")
            for route in function.routes:
                self.emit(f"  {route.method} {route.path} -> {route.handler_path}")
            logger.info("Deployed %s with %d routes", function.name, len(function.routes))


def deploy(registry: Registry, root: str | Path, backend: DeploymentBackend) -> DeployResult:
    """Validate *registry* against the files under *root* and deploy it if clean.

    Validation runs on every call; nothing is cached between attempts.
    """
    violations = tuple(validate(registry, root))
    if violations:
        logger.warning("Deployment blocked: %d missing handlers", len(violations))
        return DeployResult(violations=violations, deployed=False)

    backend.deploy(registry)
    return DeployResult(deployed=True)
