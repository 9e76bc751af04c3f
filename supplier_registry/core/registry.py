"""In-memory supplier registry.

Every mutating call is checked against its preconditions before anything
is written, so a rejected call leaves the registry exactly as it was.
"""

from __future__ import annotations

from dataclasses import replace

from supplier_registry.core.models import ErrorCode, Result, SupplierRecord
from supplier_registry.logging_config import get_logger

logger = get_logger(__name__)


class SupplierRegistry:
    """Keyed store of supplier records with guarded register/verify calls."""

    def __init__(self) -> None:
        self._suppliers: dict[str, SupplierRecord] = {}

    def __len__(self) -> int:
        return len(self._suppliers)

    # ------------------------------------------------------------------
    # Mutating calls
    # ------------------------------------------------------------------

    def register(self, caller: str, company_name: str, industry: str, height: int) -> Result:
        """Register ``caller`` as a new, unverified supplier."""
        if caller in self._suppliers:
            logger.info(
                "register_rejected",
                caller=caller,
                supplier=caller,
                height=height,
                error=ErrorCode.ALREADY_REGISTERED.label,
            )
            return Result.err(ErrorCode.ALREADY_REGISTERED)

        self._suppliers[caller] = SupplierRecord(
            company_name=company_name,
            industry=industry,
            verification_height=height,
        )
        logger.info("supplier_registered", caller=caller, supplier=caller, height=height)
        return Result.ok()

    def verify(self, caller: str, admin: str, supplier: str, score: int, height: int) -> Result:
        """Mark ``supplier`` verified with ``score``.

        Only ``admin`` may verify, and only registered suppliers. Verifying
        an already verified supplier overwrites its score and height.
        """
        if caller != admin:
            logger.info(
                "verify_rejected",
                caller=caller,
                supplier=supplier,
                height=height,
                error=ErrorCode.NOT_AUTHORIZED.label,
            )
            return Result.err(ErrorCode.NOT_AUTHORIZED)

        record = self._suppliers.get(supplier)
        if record is None:
            logger.info(
                "verify_rejected",
                caller=caller,
                supplier=supplier,
                height=height,
                error=ErrorCode.SUPPLIER_NOT_FOUND.label,
            )
            return Result.err(ErrorCode.SUPPLIER_NOT_FOUND)

        record.is_verified = True
        record.verification_height = height
        record.verification_score = score
        logger.info("supplier_verified", caller=caller, supplier=supplier, height=height, score=score)
        return Result.ok()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def is_verified(self, supplier: str) -> bool:
        record = self._suppliers.get(supplier)
        return record.is_verified if record is not None else False

    def is_registered(self, supplier: str) -> bool:
        return supplier in self._suppliers

    def get_details(self, supplier: str) -> SupplierRecord | None:
        """Return a copy of the supplier's record, or None if unregistered."""
        record = self._suppliers.get(supplier)
        return replace(record) if record is not None else None

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def snapshot(self) -> dict[str, dict]:
        """Plain-data copy of every record, keyed by supplier identity."""
        return {identity: record.to_dict() for identity, record in self._suppliers.items()}

    @classmethod
    def from_snapshot(cls, data: dict[str, dict]) -> SupplierRegistry:
        registry = cls()
        for identity, record in data.items():
            registry._suppliers[identity] = SupplierRecord.from_dict(record)
        return registry
