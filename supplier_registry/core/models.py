"""Registry data models — supplier records, error codes, and tagged results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class ErrorCode(IntEnum):
    """Why a mutating call was rejected. Values are part of the wire format."""

    ALREADY_REGISTERED = 1
    NOT_AUTHORIZED = 2
    SUPPLIER_NOT_FOUND = 3

    @property
    def label(self) -> str:
        return "".join(part.capitalize() for part in self.name.split("_"))


@dataclass
class SupplierRecord:
    """The single current record kept for a registered supplier."""

    company_name: str
    industry: str
    verification_height: int = 0  # Registration height until first verification
    is_verified: bool = False
    verification_score: int = 0

    def to_dict(self) -> dict:
        return {
            "company-name": self.company_name,
            "industry": self.industry,
            "verification-date": self.verification_height,
            "is-verified": self.is_verified,
            "verification-score": self.verification_score,
        }

    @classmethod
    def from_dict(cls, data: dict) -> SupplierRecord:
        return cls(
            company_name=data["company-name"],
            industry=data["industry"],
            verification_height=data.get("verification-date", 0),
            is_verified=data.get("is-verified", False),
            verification_score=data.get("verification-score", 0),
        )


@dataclass(frozen=True)
class Result:
    """Tagged outcome of a mutating call: ok, or err with a code."""

    error: ErrorCode | None = None

    @classmethod
    def ok(cls) -> Result:
        return cls()

    @classmethod
    def err(cls, code: ErrorCode) -> Result:
        return cls(error=code)

    @property
    def is_ok(self) -> bool:
        return self.error is None

    @property
    def type(self) -> str:
        return "ok" if self.is_ok else "err"

    @property
    def value(self) -> bool | int:
        return True if self.error is None else int(self.error)

    def to_dict(self) -> dict:
        return {"type": self.type, "value": self.value}


@dataclass(frozen=True)
class CallContext:
    """Trusted per-call inputs supplied by the host environment."""

    caller: str
    height: int
    admin: str
