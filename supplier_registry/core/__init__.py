"""Core registry: the state-transition function for supplier records.

The core provides:
- Registration: a caller self-registers once
- Verification: the administrator attests a registered supplier with a score
- Reads: registration flag, verification flag, full record
"""

from supplier_registry.core.models import CallContext, ErrorCode, Result, SupplierRecord
from supplier_registry.core.registry import SupplierRegistry

__all__ = ["CallContext", "ErrorCode", "Result", "SupplierRecord", "SupplierRegistry"]
