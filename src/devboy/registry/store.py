"""Registry persistence — whole-document JSON reads and atomic rewrites."""

import json
import logging
import os
import tempfile
from pathlib import Path

from devboy.errors import PersistenceError, RegistryFormatError
from devboy.registry.model import Registry

logger = logging.getLogger("devboy.registry")


class RegistryStore:
    """Loads and saves the registry document at a fixed path.

    Usage::

        store = RegistryStore(Path("devboy.config.json"))
        registry = store.load()
        store.save(registry)
    """

    __slots__ = ("path",)

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> Registry:
        """Read the registry, or return the default one when no document exists.

        Raises ``RegistryFormatError`` when the document is unreadable or
        malformed.
        """
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("No registry at %s, using defaults", self.path)
            return Registry.default()
        except OSError as exc:
            msg = f"Cannot read registry {self.path}: {exc}"
            raise RegistryFormatError(msg) from exc
        except UnicodeDecodeError as exc:
            msg = f"Registry {self.path} is not valid UTF-8: {exc}"
            raise RegistryFormatError(msg) from exc

        try:
            document = json.loads(text)
        except json.JSONDecodeError as exc:
            msg = f"Registry {self.path} is not valid JSON: {exc}"
            raise RegistryFormatError(msg) from exc
        return Registry.from_document(document)

    def save(self, registry: Registry) -> None:
        """Replace the document with the full serialized *registry*.

        The new content goes to a temporary sibling first and is moved into
        place with ``os.replace``, so readers see either the old document or
        the new one.  Raises ``PersistenceError`` on any OS failure.
        """
        payload = json.dumps(registry.to_document(), indent=2) + "\n"
        tmp_name: str | None = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent,
            )
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
            os.replace(tmp_name, self.path)
            tmp_name = None
        except OSError as exc:
            msg = f"Cannot write registry {self.path}: {exc}"
            raise PersistenceError(msg, registry=registry) from exc
        finally:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
        logger.debug("Saved registry with %d functions to %s", len(registry), self.path)
