"""Host execution environment that supplies caller, height and admin per call."""

from supplier_registry.host.environment import HostEnvironment

__all__ = ["HostEnvironment"]
