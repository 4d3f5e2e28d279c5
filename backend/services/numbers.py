import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (also for negatives: -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def round_to_nearest_five(value: float) -> int:
    return round_half_up(value / 5) * 5


def clamp(value, low, high):
    return max(low, min(high, value))


def format_premium(value: float) -> str:
    """Format a fractional premium for display: 0.25 -> "+25%", -0.15 -> "-15%"."""
    if value == 0:
        return "0%"
    percent = round_half_up(value * 100)
    sign = "+" if value > 0 else ""
    return f"{sign}{percent}%"


def format_money(value: float) -> str:
    """Whole amounts without decimals, anything else to the cent: 1500 -> "1,500", 45.5 -> "45.50"."""
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.2f}"
