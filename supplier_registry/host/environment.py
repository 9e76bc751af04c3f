"""Local stand-in for the ledger runtime that drives the registry.

The runtime owns the transaction sender, the block height and the fixed
administrator identity, and passes them to the registry as trusted inputs
on every call.
"""

from __future__ import annotations

from supplier_registry.core.models import CallContext, Result, SupplierRecord
from supplier_registry.core.registry import SupplierRegistry


class HostEnvironment:
    """Holds the current sender and height and forwards calls to a registry."""

    def __init__(
        self,
        admin: str,
        height: int = 0,
        sender: str | None = None,
        registry: SupplierRegistry | None = None,
    ):
        self._admin = admin
        self.height = height
        self.sender = sender if sender is not None else admin
        self.registry = registry if registry is not None else SupplierRegistry()

    @property
    def admin(self) -> str:
        return self._admin

    def as_sender(self, identity: str) -> HostEnvironment:
        """Make ``identity`` the sender of subsequent calls."""
        self.sender = identity
        return self

    def advance(self, blocks: int = 1) -> int:
        """Move the height forward by ``blocks`` and return the new height."""
        if blocks < 1:
            raise ValueError(f"Height can only move forward, got {blocks} blocks")
        self.height += blocks
        return self.height

    def context(self) -> CallContext:
        return CallContext(caller=self.sender, height=self.height, admin=self._admin)

    # ------------------------------------------------------------------
    # Contract calls
    # ------------------------------------------------------------------

    def register_supplier(self, company_name: str, industry: str) -> Result:
        ctx = self.context()
        return self.registry.register(ctx.caller, company_name, industry, ctx.height)

    def verify_supplier(self, supplier: str, score: int) -> Result:
        ctx = self.context()
        return self.registry.verify(ctx.caller, ctx.admin, supplier, score, ctx.height)

    def is_supplier_verified(self, supplier: str) -> bool:
        return self.registry.is_verified(supplier)

    def is_supplier_registered(self, supplier: str) -> bool:
        return self.registry.is_registered(supplier)

    def get_supplier_details(self, supplier: str) -> SupplierRecord | None:
        return self.registry.get_details(supplier)
