"""
VisibilityTransaction — Atomic Attach/Detach Batch

Collects attach/detach/primary operations for every registered unit and
hands them to the ViewContainer in a single commit. A plan that would leave
zero or several units visible never reaches the container.

Usage:
    tx = VisibilityTransaction(container, registry.units())
    tx.attach(unit).set_primary(unit).detach_others().commit()
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional

from core.errors import TransactionStateError
from core.nav_unit import NavigationUnit

log = logging.getLogger(__name__)


class TransactionStatus(Enum):
    PENDING = "pending"
    COMMITTED = "committed"
    FAILED = "failed"


@dataclass
class VisibilityOperation:
    """A single step within a visibility transaction."""
    op_type: str          # "attach", "detach", "primary"
    unit: NavigationUnit


class VisibilityTransaction:

    def __init__(self, container, units: Iterable[NavigationUnit]):
        self._container = container
        self._units: List[NavigationUnit] = list(units)
        self.ops: List[VisibilityOperation] = []
        self.reordering_allowed = False
        self.status = TransactionStatus.PENDING
        self.error_message = ""

    # -------------------------------------------------------------------------
    # BUILDER
    # -------------------------------------------------------------------------

    def attach(self, unit: NavigationUnit) -> "VisibilityTransaction":
        return self._add("attach", unit)

    def detach(self, unit: NavigationUnit) -> "VisibilityTransaction":
        return self._add("detach", unit)

    def set_primary(self, unit: NavigationUnit) -> "VisibilityTransaction":
        return self._add("primary", unit)

    def detach_others(self) -> "VisibilityTransaction":
        """Detach every registered unit that is not attached in this transaction."""
        attached = set(map(id, self._units_for("attach")))
        for unit in self._units:
            if id(unit) not in attached:
                self.detach(unit)
        return self

    def set_reordering_allowed(self, allowed: bool) -> "VisibilityTransaction":
        self._check_pending()
        self.reordering_allowed = allowed
        return self

    # -------------------------------------------------------------------------
    # RESULT VIEW (read by the container during commit)
    # -------------------------------------------------------------------------

    @property
    def attached(self) -> Optional[NavigationUnit]:
        units = self._units_for("attach")
        return units[0] if units else None

    @property
    def detached(self) -> tuple:
        return tuple(self._units_for("detach"))

    @property
    def primary(self) -> Optional[NavigationUnit]:
        units = self._units_for("primary")
        return units[-1] if units else None

    # -------------------------------------------------------------------------
    # COMMIT
    # -------------------------------------------------------------------------

    def commit(self) -> None:
        """Validate the plan, then apply it to the container in one call."""
        self._check_pending()
        try:
            self._validate()
        except TransactionStateError as e:
            self.status = TransactionStatus.FAILED
            self.error_message = str(e)
            log.error("[Tx] Rejected: %s", e)
            raise

        self._container.commit(self)
        self.status = TransactionStatus.COMMITTED
        log.debug("[Tx] Committed: attach=%s detach=%s", self.attached, list(self.detached))

    def _validate(self) -> None:
        attached = self._units_for("attach")
        if len(attached) != 1:
            raise TransactionStateError(
                f"Exactly one unit must be attached, got {len(attached)}"
            )
        unit = attached[0]
        if self.primary is not unit:
            raise TransactionStateError(f"Primary unit must be the attached unit {unit!r}")

        detached = self._units_for("detach")
        if any(d is unit for d in detached):
            raise TransactionStateError(f"{unit!r} is both attached and detached")

        covered = {id(unit)} | set(map(id, detached))
        missing = [u for u in self._units if id(u) not in covered]
        if missing:
            raise TransactionStateError(f"Units left without a visibility state: {missing}")

    def _add(self, op_type: str, unit: NavigationUnit) -> "VisibilityTransaction":
        self._check_pending()
        if not any(u is unit for u in self._units):
            raise TransactionStateError(f"{unit!r} is not registered with this transaction")
        self.ops.append(VisibilityOperation(op_type=op_type, unit=unit))
        return self

    def _units_for(self, op_type: str) -> List[NavigationUnit]:
        seen = []
        for op in self.ops:
            if op.op_type == op_type and not any(u is op.unit for u in seen):
                seen.append(op.unit)
        return seen

    def _check_pending(self) -> None:
        if self.status is not TransactionStatus.PENDING:
            raise TransactionStateError(f"Transaction already {self.status.value}")
