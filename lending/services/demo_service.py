"""
Demo roster and walkthrough.

Everything is built explicitly and passed in; nothing here is module-level state.
"""

from typing import Callable, List, Tuple

from lending.models.item import DVD, Book, LibraryItem, Magazine
from lending.models.person import Person, make_staff, make_student, make_teaching_assistant
from lending.services.lending_service import LendingService
from lending.services.report_service import ReportService

DEMO_TOP_UPS = (20, 10, 5)
DEMO_DAYS_LATE = 5


def build_demo_roster() -> Tuple[List[Person], List[LibraryItem]]:
    """One user per role and one item per kind."""
    users = [
        make_student("S100", "Amina", "amina@uni.edu", 50.0, 2, 0.8),
        make_staff("ST200", "Omar", "omar@uni.edu", 75.0, True),
        make_teaching_assistant("TA300", "Lina", "lina@uni.edu", 60.0, 2, 0.85, True),
    ]
    items = [
        Book("B001", "Effective C++"),
        Magazine("M010", "Tech Monthly"),
        DVD("D100", "C++ Patterns"),
    ]
    return users, items


def run_demo(users: List[Person], items: List[LibraryItem],
             echo: Callable[[str], None], strict: bool = False) -> bool:
    """
    Print the users, top them up, list the items, then have the first user
    return the first item late and print the transaction summary.
    Returns False if the return could not be processed.
    """
    echo("=== Users ===")
    for u in users:
        for line in ReportService.describe_person(u):
            echo(line)

    for u, amount in zip(users, DEMO_TOP_UPS):
        LendingService.top_up(u, amount)

    echo("")
    echo("=== Users After Adding Funds ===")
    for u in users:
        for line in ReportService.describe_person(u):
            echo(line)

    echo("")
    echo("=== Library Items ===")
    for it in items:
        echo(ReportService.describe_item(it))

    borrower, borrowed = users[0], items[0]
    ok, msg, tx = LendingService.return_late(borrower, borrowed, DEMO_DAYS_LATE, strict=strict)

    echo("")
    echo("=== Transaction Summary ===")
    if tx is None:
        echo(msg)
        return False
    for line in ReportService.transaction_summary(tx, borrower.balance):
        echo(line)
    if not ok:
        echo(msg)
    return ok
