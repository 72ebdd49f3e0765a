import click
from flask import Blueprint, current_app

from ..exceptions import LendingError
from ..models.item import DVD, Book, Magazine
from ..models.person import make_member, make_student
from ..models.transaction import BorrowTransaction
from ..services.demo_service import build_demo_roster, run_demo
from ..services.report_service import ReportService
from ..utils.money import fmt_money

bp = Blueprint("lending", __name__, cli_group="lending")

ITEM_KINDS = {"book": Book, "magazine": Magazine, "dvd": DVD}


@bp.cli.command("demo")
@click.option("--strict/--lenient", default=None,
              help="Raise on insufficient funds instead of clamping. Defaults to LENDING_STRICT.")
def demo(strict):
    """Walk through the sample users, items and one late return."""
    if strict is None:
        strict = bool(current_app.config["LENDING_STRICT"])
    users, items = build_demo_roster()
    ok = run_demo(users, items, click.echo, strict=strict)
    if not ok:
        raise SystemExit(1)


@bp.cli.command("fee")
@click.argument("kind", type=click.Choice(sorted(ITEM_KINDS), case_sensitive=False))
@click.argument("days", type=click.IntRange(min=0))
@click.option("--student", is_flag=True, help="Apply a student discount.")
@click.option("--discount", default=None, help="Student discount factor in (0, 1]; implies --student.")
@click.option("--rate", default=None, help="Override the per-day late fee for this kind.")
def fee_quote(kind, days, student, discount, rate):
    """Quote the late fee for returning an item of KIND DAYS days late."""
    try:
        item = ITEM_KINDS[kind.lower()]("QUOTE", kind, rate)
        if student or discount is not None:
            factor = discount if discount is not None else current_app.config["LENDING_DEFAULT_DISCOUNT"]
            borrower = make_student("QUOTE", "quote", "", discount_factor=factor)
        else:
            borrower = make_member("QUOTE", "quote", "")
        tx = BorrowTransaction(borrower, item, days)
        base = item.compute_late_fee(days)
        charged = tx.process()
    except LendingError as e:
        # ClickException adds its own "Error: " prefix
        raise click.ClickException(e.message.removeprefix("Error: "))

    click.echo(ReportService.describe_item(item))
    click.echo(f"Base fee: {fmt_money(base)}")
    click.echo(f"Fee charged: {fmt_money(charged)}")
