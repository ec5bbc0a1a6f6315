from datetime import date
from typing import Optional


def format_date(value: Optional[date]) -> str:
    """DD/MM/YYYY, or "N/A" when there is no date"""
    if value is None:
        return "N/A"
    return value.strftime("%d/%m/%Y")


def format_rupees(amount: Optional[int]) -> str:
    """Rent as shown in tables; zero or missing rent renders as "-" """
    if not amount:
        return "-"
    return f"₹{amount}"


def is_default_date(value: Optional[date], today: Optional[date] = None) -> bool:
    """
    True for a period date that was never really set.

    Rooms are created with today's date as their period, so a date within
    one day of today is treated as a placeholder.
    """
    if value is None:
        return True
    today = today or date.today()
    return abs((value - today).days) <= 1
