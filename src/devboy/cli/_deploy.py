"""``devboy deploy`` — validate the registry and hand it to the backend.

Prints every missing handler at once and exits with code 1 when the
registry is not deployable.
"""

import sys

from devboy.config import DevboyConfig
from devboy.deploy import ReportingBackend, deploy
from devboy.errors import DevboyError
from devboy.registry.store import RegistryStore
from devboy.terminal import format_violations, palette


def run_deploy(config: DevboyConfig) -> None:
    """Deploy the project under ``config.root``."""
    c = palette()
    try:
        registry = RegistryStore(config.registry_path).load()
    except DevboyError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    result = deploy(registry, config.root, ReportingBackend())
    if not result.ok:
        print(f"{c.red}Deployment failed. Please fix the following errors:{c.reset}")
        print(format_violations(result.violations))
        raise SystemExit(1)

    print(f"{c.green}Deployment completed successfully!{c.reset}")

