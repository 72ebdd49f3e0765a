"""Return and top-up operations over already-built people and items."""

from typing import Optional, Tuple

from lending.exceptions import LendingError
from lending.models.item import LibraryItem
from lending.models.person import Person
from lending.models.transaction import Borrower, BorrowTransaction
from lending.utils.money import fmt_money, to_money_safe


class LendingService:
    """
    Late returns and balance top-ups.
    Uses polymorphic fees (LibraryItem.compute_late_fee + the borrower's Student view).
    """

    @staticmethod
    def return_late(
            borrower: Borrower,
            item: LibraryItem,
            days_late: int,
            strict: bool = False,
    ) -> Tuple[bool, str, Optional[BorrowTransaction]]:
        """
        Build and process a transaction for an item returned `days_late` days late.

        Returns:
            (ok: bool, message: str, transaction: Optional[BorrowTransaction])
            On a strict-mode refusal the transaction is returned still open.
        """
        try:
            tx = BorrowTransaction(borrower, item, days_late, strict=strict)
        except LendingError as e:
            return False, e.message, None

        try:
            fee = tx.process()
        except LendingError as e:
            return False, e.message, tx

        return True, f"Charged {fmt_money(fee)}", tx

    @staticmethod
    def top_up(person: Person, amount) -> Tuple[bool, str]:
        """Add funds; non-positive or unparseable amounts are reported and leave the balance unchanged."""
        value = to_money_safe(amount)
        if value is None:
            return False, "Amount must be a number"
        if value <= 0:
            return False, "Amount must be positive"
        balance = person.add_funds(value)
        return True, f"Balance now {fmt_money(balance)}"
