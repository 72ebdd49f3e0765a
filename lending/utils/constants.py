# lending/utils/constants.py

"""
Global constants for role labels and default attribute values.
These constants are imported by both models and services.
"""

from decimal import Decimal

ZERO = Decimal("0")
CENTS = Decimal("0.01")


class Role:
    MEMBER = "Member"
    STUDENT = "Student"
    STAFF = "Staff"
    TEACHING_ASSISTANT = "TeachingAssistant"


# --- Role defaults ---
DEFAULT_MAX_BORROWS = 2
DEFAULT_DISCOUNT_FACTOR = Decimal("0.8")
DEFAULT_PURCHASE_APPROVAL = False

# --- Late fee per day by item kind ---
BOOK_RATE = Decimal("1.0")
MAGAZINE_RATE = Decimal("0.5")
DVD_RATE = Decimal("2.0")
