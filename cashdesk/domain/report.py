"""Pure functions for account and balance reports.

All monetary amounts are in cents (Money type).
"""

from cashdesk.domain.models import Account, AccountType, Money


def format_money(amount: Money, currency: str) -> str:
    """Format an amount in cents for display.

    Args:
        amount: Amount in cents.
        currency: Currency code shown after the amount.

    Returns:
        Formatted string (e.g., "-12.50 CHF").
    """
    sign = "-" if amount < 0 else ""
    return f"{sign}{abs(amount) / 100:,.2f} {currency}"


def negative_user_balances(balances: list[tuple[Account, Money]]) -> list[tuple[Account, Money]]:
    """Select user accounts that owe money.

    Args:
        balances: List of (account, balance) tuples.

    Returns:
        User accounts with a balance below zero, in input order.
    """
    return [
        (account, balance)
        for account, balance in balances
        if account.account_type == AccountType.USER and balance < 0
    ]
