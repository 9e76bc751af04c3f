"""File-backed persistence of a host environment between CLI invocations."""

from supplier_registry.store.file_store import RegistryStore, StoreError

__all__ = ["RegistryStore", "StoreError"]
