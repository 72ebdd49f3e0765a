"""
Library users.

A Person owns the only copy of identity, contact details and balance. Roles are
plain attribute records (StudentRole, StaffRole) attached to that person, and
Student / Staff are lightweight views that delegate every shared field back to
the same Person. A teaching assistant is just a Person holding both roles, so a
balance change made through one view is visible through the other.
"""
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from ..exceptions import InsufficientFundsError, InvalidAttributeError
from ..utils.constants import (
    DEFAULT_DISCOUNT_FACTOR,
    DEFAULT_MAX_BORROWS,
    DEFAULT_PURCHASE_APPROVAL,
    Role,
    ZERO,
)
from ..utils.money import to_money, to_money_safe

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StudentRole:
    """
    Student attributes. max_concurrent_borrows is stored for reporting only;
    nothing rejects a borrow that would exceed it.
    """
    max_concurrent_borrows: int = DEFAULT_MAX_BORROWS
    discount_factor: Decimal = DEFAULT_DISCOUNT_FACTOR

    def __post_init__(self):
        try:
            factor = to_money(self.discount_factor)
        except (TypeError, ValueError):
            raise InvalidAttributeError(
                f"Error: discount factor must be a number, got {self.discount_factor!r}") from None
        if not (ZERO < factor <= 1):
            raise InvalidAttributeError(f"Error: discount factor must be in (0, 1], got {factor}")
        if isinstance(self.max_concurrent_borrows, bool) or not isinstance(self.max_concurrent_borrows, int):
            raise InvalidAttributeError("Error: max concurrent borrows must be an integer")
        if self.max_concurrent_borrows < 0:
            raise InvalidAttributeError("Error: max concurrent borrows must not be negative")
        object.__setattr__(self, "discount_factor", factor)


@dataclass(frozen=True)
class StaffRole:
    can_approve_purchases: bool = DEFAULT_PURCHASE_APPROVAL


class Person:
    """
    A library user with a non-negative balance.

    Role capabilities are queried with as_student() / as_staff(), which return a
    view over this same object or None when the role is not attached.
    """

    def __init__(self, person_id: str, name: str, email: str, balance=0,
                 student: Optional[StudentRole] = None, staff: Optional[StaffRole] = None):
        if not person_id or not str(person_id).strip():
            raise InvalidAttributeError("Error: person id must not be empty")
        try:
            opening = to_money(balance)
        except (TypeError, ValueError):
            raise InvalidAttributeError(f"Error: balance must be a number, got {balance!r}") from None
        if opening < ZERO:
            raise InvalidAttributeError(f"Error: opening balance must not be negative, got {opening}")

        self._person_id = str(person_id)
        self._name = name
        self._email = email
        self._balance = opening
        self._student = student
        self._staff = staff

    # ---------- Identity / contact ----------
    @property
    def id(self) -> str:
        return self._person_id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email

    @property
    def balance(self) -> Decimal:
        return self._balance

    # ---------- Funds ----------
    def add_funds(self, amount) -> Decimal:
        """
        Increase the balance by a positive amount and return the balance.
        Zero, negative, non-finite and non-numeric amounts are ignored.
        """
        value = to_money_safe(amount)
        if value is None:
            logger.info("Ignored non-numeric top-up of %r for %s", amount, self._person_id)
        elif value > ZERO:
            self._balance += value
            logger.debug("Added %s to %s, balance now %s", value, self._person_id, self._balance)
        else:
            logger.info("Ignored non-positive top-up of %s for %s", value, self._person_id)
        return self._balance

    def deduct(self, amount, strict: bool = False) -> Decimal:
        """
        Charge an amount against the balance and return the new balance.

        Lenient mode clamps the balance at zero and absorbs the shortfall.
        Strict mode raises InsufficientFundsError and leaves the balance untouched.
        Non-positive amounts are ignored so a deduction can never act as a refund.
        """
        value = to_money(amount)
        if value <= ZERO:
            logger.info("Ignored non-positive deduction of %s for %s", value, self._person_id)
            return self._balance
        if value > self._balance:
            if strict:
                raise InsufficientFundsError(balance=self._balance, amount=value)
            logger.info("Deduction of %s exceeds balance %s for %s; clamping to zero",
                        value, self._balance, self._person_id)
            self._balance = ZERO
            return self._balance
        self._balance -= value
        logger.debug("Deducted %s from %s, balance now %s", value, self._person_id, self._balance)
        return self._balance

    # ---------- Capabilities ----------
    def as_student(self) -> Optional["Student"]:
        return Student(self, self._student) if self._student is not None else None

    def as_staff(self) -> Optional["Staff"]:
        return Staff(self, self._staff) if self._staff is not None else None

    @property
    def role_label(self) -> str:
        if self._student is not None and self._staff is not None:
            return Role.TEACHING_ASSISTANT
        if self._student is not None:
            return Role.STUDENT
        if self._staff is not None:
            return Role.STAFF
        return Role.MEMBER

    def __repr__(self) -> str:
        return f"Person(id={self._person_id!r}, role={self.role_label!r}, balance={self._balance})"


class _RoleView:
    """Shared delegation for role views; holds a reference, never a copy."""

    __slots__ = ("_person", "_role")

    def __init__(self, person: Person, role):
        self._person = person
        self._role = role

    @property
    def person(self) -> Person:
        return self._person

    @property
    def id(self) -> str:
        return self._person.id

    @property
    def name(self) -> str:
        return self._person.name

    @property
    def email(self) -> str:
        return self._person.email

    @property
    def balance(self) -> Decimal:
        return self._person.balance

    @property
    def role_label(self) -> str:
        return self._person.role_label

    def add_funds(self, amount) -> Decimal:
        return self._person.add_funds(amount)

    def deduct(self, amount, strict: bool = False) -> Decimal:
        return self._person.deduct(amount, strict=strict)

    def as_student(self) -> Optional["Student"]:
        return self._person.as_student()

    def as_staff(self) -> Optional["Staff"]:
        return self._person.as_staff()

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._person is other._person

    def __hash__(self):
        return hash((type(self), id(self._person)))


class Student(_RoleView):
    """Student view of a person: discount factor and borrow limit."""

    __slots__ = ()

    @property
    def discount_factor(self) -> Decimal:
        return self._role.discount_factor

    @property
    def max_concurrent_borrows(self) -> int:
        return self._role.max_concurrent_borrows

    def __repr__(self) -> str:
        return f"Student(id={self.id!r}, discount={self.discount_factor})"


class Staff(_RoleView):
    """Staff view of a person."""

    __slots__ = ()

    def has_purchase_approval(self) -> bool:
        return self._role.can_approve_purchases

    def __repr__(self) -> str:
        return f"Staff(id={self.id!r}, approval={self.has_purchase_approval()})"


# -------- factories --------
def make_member(person_id: str, name: str, email: str, balance=0) -> Person:
    """A person with no role attached."""
    return Person(person_id, name, email, balance)


def make_student(person_id: str, name: str, email: str, balance=0,
                 max_concurrent_borrows: int = DEFAULT_MAX_BORROWS,
                 discount_factor=DEFAULT_DISCOUNT_FACTOR) -> Person:
    return Person(person_id, name, email, balance,
                  student=StudentRole(max_concurrent_borrows, discount_factor))


def make_staff(person_id: str, name: str, email: str, balance=0,
               can_approve_purchases: bool = DEFAULT_PURCHASE_APPROVAL) -> Person:
    return Person(person_id, name, email, balance,
                  staff=StaffRole(can_approve_purchases))


def make_teaching_assistant(person_id: str, name: str, email: str, balance=0,
                            max_concurrent_borrows: int = DEFAULT_MAX_BORROWS,
                            discount_factor=DEFAULT_DISCOUNT_FACTOR,
                            can_approve_purchases: bool = DEFAULT_PURCHASE_APPROVAL) -> Person:
    """
    One person, both roles. The student and staff views returned by
    as_student() / as_staff() point at the same record.
    """
    return Person(person_id, name, email, balance,
                  student=StudentRole(max_concurrent_borrows, discount_factor),
                  staff=StaffRole(can_approve_purchases))
