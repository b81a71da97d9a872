"""
Admission Gate

Process-wide Standby/Active switch that decides whether gated routes accept
traffic. The gate is an explicit object created by the application factory and
handed to the components that need it (route dependency, stats reporter);
there is no module-level flag.

State Machine:
==============
    ┌──────────┐   promote()   ┌──────────┐
    │ STANDBY  │ ────────────▶ │  ACTIVE  │
    │(default) │ ◀──────────── │          │
    └──────────┘   demote()    └──────────┘

Both transitions are idempotent. Reads and writes are single attribute
loads/stores, so no lock is taken on the request path. A request that has
already passed the check is not affected by a later transition.

Usage:
======
    gate = AdmissionGate.from_role(settings.SERVER_ROLE)

    if not gate.is_active():
        raise StandbyModeError()

    gate.promote()
"""

from enum import Enum

from todo_service.shared.core.logging import get_logger


logger = get_logger("admission_gate")


class ServerMode(str, Enum):
    """Admission gate mode."""

    STANDBY = "standby"
    ACTIVE = "active"


class AdmissionGate:
    """Binary admission switch shared by gated routes and the stats reporter."""

    def __init__(self, mode: ServerMode = ServerMode.STANDBY) -> None:
        self._mode = mode

    @classmethod
    def from_role(cls, role: str) -> "AdmissionGate":
        """Build a gate from the configured SERVER_ROLE value."""
        return cls(ServerMode(role.strip().lower()))

    @property
    def mode(self) -> ServerMode:
        return self._mode

    def is_active(self) -> bool:
        return self._mode is ServerMode.ACTIVE

    def promote(self) -> ServerMode:
        """Switch to ACTIVE. No-op if already active."""
        previous, self._mode = self._mode, ServerMode.ACTIVE
        if previous is not ServerMode.ACTIVE:
            logger.info("Server promoted", previous=previous.value, mode=self._mode.value)
        return self._mode

    def demote(self) -> ServerMode:
        """Switch to STANDBY. No-op if already in standby."""
        previous, self._mode = self._mode, ServerMode.STANDBY
        if previous is not ServerMode.STANDBY:
            logger.info("Server demoted", previous=previous.value, mode=self._mode.value)
        return self._mode
