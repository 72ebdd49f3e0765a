from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar, Optional

from ..exceptions import InvalidAttributeError
from ..utils.constants import BOOK_RATE, DVD_RATE, MAGAZINE_RATE, ZERO
from ..utils.money import to_money


def check_days_late(days_late) -> int:
    """Return days_late if it is a non-negative int, else raise InvalidAttributeError."""
    if isinstance(days_late, bool) or not isinstance(days_late, int):
        raise InvalidAttributeError(f"Error: days late must be an integer, got {days_late!r}")
    if days_late < 0:
        raise InvalidAttributeError(f"Error: days late must not be negative, got {days_late}")
    return days_late


@dataclass(frozen=True)
class LibraryItem:
    """
    Base item model. Each kind carries its own per-day late fee; when no rate is
    given the kind's DEFAULT_RATE applies. Items are immutable once built.
    Subclasses set TYPE_NAME and may override compute_late_fee for a different formula.
    """
    item_id: str
    title: str
    late_fee_per_day: Optional[Decimal] = None

    TYPE_NAME: ClassVar[str] = ""
    DEFAULT_RATE: ClassVar[Optional[Decimal]] = None

    def __post_init__(self):
        if not self.TYPE_NAME:
            raise TypeError("LibraryItem is abstract; use Book, Magazine or DVD")
        if not self.item_id or not str(self.item_id).strip():
            raise InvalidAttributeError("Error: item id must not be empty")
        raw = self.DEFAULT_RATE if self.late_fee_per_day is None else self.late_fee_per_day
        try:
            rate = to_money(raw)
        except (TypeError, ValueError):
            raise InvalidAttributeError(f"Error: late fee rate must be a number, got {raw!r}") from None
        if rate <= ZERO:
            raise InvalidAttributeError(f"Error: late fee rate must be positive, got {rate}")
        object.__setattr__(self, "late_fee_per_day", rate)

    @property
    def id(self) -> str:
        return self.item_id

    @property
    def type_name(self) -> str:
        return self.TYPE_NAME

    def compute_late_fee(self, days_late: int) -> Decimal:
        """Late fee before any borrower discount: days late times the daily rate."""
        return check_days_late(days_late) * self.late_fee_per_day


class Book(LibraryItem):
    TYPE_NAME = "Book"
    DEFAULT_RATE = BOOK_RATE


class Magazine(LibraryItem):
    TYPE_NAME = "Magazine"
    DEFAULT_RATE = MAGAZINE_RATE


class DVD(LibraryItem):
    TYPE_NAME = "DVD"
    DEFAULT_RATE = DVD_RATE
