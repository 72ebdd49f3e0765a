from decimal import Decimal

import pytest

from lending.exceptions import InsufficientFundsError, InvalidAttributeError, TransactionClosedError
from lending.models.item import Book
from lending.models.person import make_member
from lending.models.transaction import BorrowTransaction, TransactionState


def test_new_transaction_is_open(student, book):
    tx = BorrowTransaction(student, book, 5)
    assert tx.is_open()
    assert tx.state is TransactionState.OPEN
    assert tx.late_fee_cost == Decimal("0")
    assert tx.user_id == "S100"
    assert tx.item_id == "B001"
    assert student.balance == Decimal("50")


def test_scenario_a_non_student(book):
    borrower = make_member("P1", "Noor", "noor@uni.edu", 20)
    assert book.compute_late_fee(5) == Decimal("5.0")
    fee = BorrowTransaction(borrower, book, 5).process()
    assert fee == Decimal("5.0")
    assert borrower.balance == Decimal("15")


def test_scenario_b_student_discount(student, book):
    tx = BorrowTransaction(student, book, 5)
    assert tx.process() == Decimal("4.0")
    assert student.balance == Decimal("46.0")


def test_scenario_c_staff_clamped(staff, magazine):
    tx = BorrowTransaction(staff, magazine, 10)
    assert tx.process() == Decimal("5.0")
    assert tx.late_fee_cost == Decimal("5.0")
    assert staff.balance == Decimal("0")


def test_scenario_d_teaching_assistant(ta, dvd):
    fee = BorrowTransaction(ta, dvd, 3).process()
    assert fee == Decimal("5.1")
    assert ta.balance == Decimal("54.9")


def test_role_view_as_borrower(ta, dvd):
    # borrowing through the staff view still finds the student discount
    fee = BorrowTransaction(ta.as_staff(), dvd, 3).process()
    assert fee == Decimal("5.1")
    assert ta.as_student().balance == Decimal("54.9")


def test_process_is_idempotent(student, book):
    tx = BorrowTransaction(student, book, 5)
    first = tx.process()
    second = tx.process()
    third = tx.process()
    assert first == second == third == Decimal("4.0")
    assert student.balance == Decimal("46.0")


def test_closed_stays_closed(student, book):
    tx = BorrowTransaction(student, book, 5)
    tx.process()
    for _ in range(3):
        assert not tx.is_open()
        tx.process()
    assert tx.state is TransactionState.CLOSED


def test_zero_days_late(student, book):
    tx = BorrowTransaction(student, book)
    assert tx.process() == Decimal("0")
    assert student.balance == Decimal("50")
    assert not tx.is_open()


def test_negative_days_rejected(student, book):
    with pytest.raises(InvalidAttributeError):
        BorrowTransaction(student, book, -2)


def test_strict_second_process_raises(student, book):
    tx = BorrowTransaction(student, book, 5, strict=True)
    tx.process()
    with pytest.raises(TransactionClosedError):
        tx.process()
    assert student.balance == Decimal("46.0")


def test_strict_insufficient_funds_leaves_open(staff, magazine):
    tx = BorrowTransaction(staff, magazine, 10, strict=True)
    with pytest.raises(InsufficientFundsError):
        tx.process()
    assert tx.is_open()
    assert tx.late_fee_cost == Decimal("0")
    assert staff.balance == Decimal("3.0")

    staff.add_funds(2)
    assert tx.process() == Decimal("5.0")
    assert staff.balance == Decimal("0")


def test_accessors_after_close(ta):
    item = Book("B9", "Patterns", 2)
    tx = BorrowTransaction(ta, item, 4)
    tx.process()
    assert tx.user_id == "TA300"
    assert tx.item_id == "B9"
    assert tx.days_late == 4
    assert tx.late_fee_cost == Decimal("6.80")


def test_borrower_is_identifiable(ta):
    from lending.models.identity import Identifiable
    from lending.models.transaction import Borrower

    assert Identifiable in Borrower.__mro__
    assert isinstance(ta.as_student(), Identifiable)
    assert isinstance(ta.as_staff(), Identifiable)
