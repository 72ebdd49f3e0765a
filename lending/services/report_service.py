"""Plain-text rendering of people, items and transactions for the CLI."""

from decimal import Decimal
from typing import List

from lending.models.item import LibraryItem
from lending.models.transaction import BorrowTransaction
from lending.utils.money import fmt_amount, fmt_money, yes_no


class ReportService:
    """
    Formatting only; holds no state. Works on anything exposing the person
    capability queries, so callers never need to know whether they hold a plain
    member, a single-role user or a teaching assistant.
    """

    @staticmethod
    def describe_person(person) -> List[str]:
        lines = [
            f"{person.name} ({person.id}) | Email: {person.email} | Balance: {fmt_amount(person.balance)}"
        ]
        student = person.as_student()
        staff = person.as_staff()

        if student is not None and staff is not None:
            lines.append(
                "  Role: TeachingAssistant"
                f" | MaxBorrows: {student.max_concurrent_borrows}"
                f" | Discount: {fmt_amount(student.discount_factor)}"
                f" | PurchaseApproval: {yes_no(staff.has_purchase_approval())}"
            )
        elif student is not None:
            lines.append(
                f"  Role: Student | MaxBorrows: {student.max_concurrent_borrows}"
                f" | Discount: {fmt_amount(student.discount_factor)}"
            )
        elif staff is not None:
            lines.append(f"  Role: Staff | PurchaseApproval: {yes_no(staff.has_purchase_approval())}")
        return lines

    @staticmethod
    def describe_item(item: LibraryItem) -> str:
        return f"{item.id} | {item.title} | {item.type_name} | fee/day: {fmt_amount(item.late_fee_per_day)}"

    @staticmethod
    def transaction_summary(tx: BorrowTransaction, balance: Decimal) -> List[str]:
        return [
            f"User: {tx.user_id} | Item: {tx.item_id}",
            f"Days late: {tx.days_late} | Fee charged: {fmt_money(tx.late_fee_cost)}",
            f"Remaining balance: {fmt_money(balance)}",
            f"Transaction open: {yes_no(tx.is_open())}",
        ]
