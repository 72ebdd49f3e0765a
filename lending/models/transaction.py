"""
Late-return transaction.

A BorrowTransaction is created Open against a borrower and an item, and the
first process() call computes the fee, applies the student discount when the
borrower has one, charges the borrower and closes. Later calls return the stored
fee without charging again (or raise TransactionClosedError in strict mode).

Not safe for concurrent process() calls on the same instance; each transaction
belongs to a single caller.
"""
import enum
import logging
from decimal import Decimal
from typing import Optional, Protocol

from ..exceptions import TransactionClosedError
from ..utils.constants import ZERO
from .identity import Identifiable
from .item import LibraryItem, check_days_late
from .person import Student

logger = logging.getLogger(__name__)


class Borrower(Identifiable, Protocol):
    """What a transaction needs from whoever returns the item."""

    def deduct(self, amount, strict: bool = False) -> Decimal:
        ...

    def as_student(self) -> Optional[Student]:
        ...


class TransactionState(enum.Enum):
    OPEN = "open"
    CLOSED = "closed"


class BorrowTransaction:

    def __init__(self, borrower: Borrower, item: LibraryItem, days_late: int = 0, strict: bool = False):
        self._borrower = borrower
        self._item = item
        self._days_late = check_days_late(days_late)
        self._strict = strict
        self._state = TransactionState.OPEN
        self._late_fee_cost = ZERO

    def process(self) -> Decimal:
        """
        Charge the late fee once and return it.
        Strict mode also refuses to charge beyond the borrower's balance; the
        transaction then stays open and nothing is deducted.
        """
        if self._state is TransactionState.CLOSED:
            if self._strict:
                raise TransactionClosedError(
                    f"Error: transaction for {self.user_id}/{self.item_id} already closed")
            logger.warning("Transaction %s/%s already closed; returning stored fee %s",
                           self.user_id, self.item_id, self._late_fee_cost)
            return self._late_fee_cost

        fee = self._item.compute_late_fee(self._days_late)
        student = self._borrower.as_student()
        if student is not None:
            fee = fee * student.discount_factor
            logger.debug("Applied student discount %s for %s", student.discount_factor, self.user_id)

        self._borrower.deduct(fee, strict=self._strict)

        self._late_fee_cost = fee
        self._state = TransactionState.CLOSED
        logger.debug("Closed transaction %s/%s with fee %s", self.user_id, self.item_id, fee)
        return fee

    # ---------- Accessors ----------
    @property
    def user_id(self) -> str:
        return self._borrower.id

    @property
    def item_id(self) -> str:
        return self._item.id

    @property
    def days_late(self) -> int:
        return self._days_late

    @property
    def state(self) -> TransactionState:
        return self._state

    @property
    def strict(self) -> bool:
        return self._strict

    def is_open(self) -> bool:
        return self._state is TransactionState.OPEN

    @property
    def late_fee_cost(self) -> Decimal:
        return self._late_fee_cost

    def __repr__(self) -> str:
        return (f"BorrowTransaction(user={self.user_id!r}, item={self.item_id!r}, "
                f"days_late={self._days_late}, state={self._state.value}, fee={self._late_fee_cost})")
