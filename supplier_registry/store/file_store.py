"""JSON file storage for registry state.

Stores the administrator, the current height and every supplier record in a
single file, so that successive CLI invocations see one continuous ledger.
"""

from __future__ import annotations

import json
from pathlib import Path

import click

from supplier_registry.core.registry import SupplierRegistry
from supplier_registry.host.environment import HostEnvironment
from supplier_registry.logging_config import get_logger

logger = get_logger(__name__)


class StoreError(click.ClickException):
    """The state file exists but cannot be read back."""

    exit_code = 2


class RegistryStore:
    """File-based storage for a host environment and its registry.

    File layout::

        {"admin": "...", "height": 12, "suppliers": {"<identity>": {...}}}
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.exists()

    def load(self, default_admin: str) -> HostEnvironment:
        """Load the stored environment, or a fresh one if nothing is stored."""
        if not self.path.exists():
            logger.debug("state_missing", path=str(self.path), admin=default_admin)
            return HostEnvironment(admin=default_admin)

        try:
            data = json.loads(self.path.read_text())
            if not isinstance(data, dict):
                raise TypeError(f"state must be a mapping, got {type(data).__name__}")
            suppliers = data.get("suppliers", {})
            if not isinstance(suppliers, dict):
                raise TypeError(f"suppliers must be a mapping, got {type(suppliers).__name__}")
            env = HostEnvironment(
                admin=data["admin"],
                height=int(data.get("height", 0)),
                registry=SupplierRegistry.from_snapshot(suppliers),
            )
        except (json.JSONDecodeError, OSError, KeyError, TypeError, ValueError) as e:
            raise StoreError(f"Cannot read registry state from {self.path}: {e}") from e

        logger.debug("state_loaded", path=str(self.path), suppliers=len(env.registry), height=env.height)
        return env

    def save(self, env: HostEnvironment) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        data = {
            "admin": env.admin,
            "height": env.height,
            "suppliers": env.registry.snapshot(),
        }
        with open(self.path, "w") as f:
            json.dump(data, f, indent=2)
        logger.debug("state_saved", path=str(self.path), suppliers=len(env.registry), height=env.height)
