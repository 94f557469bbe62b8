"""Display helpers for listing output."""

from decimal import ROUND_HALF_UP, Decimal


def _scaled(amount: int, unit: int, places: str) -> Decimal:
    # Halves round up, so $1.25B renders as $1.3B
    return (Decimal(amount) / Decimal(unit)).quantize(Decimal(places), rounding=ROUND_HALF_UP)


def format_funding(amount: int) -> str:
    """Render a funding amount as $1.8B / $630M / $950."""
    if amount >= 10**9:
        return f"${_scaled(amount, 10**9, '0.1')}B"
    if amount >= 10**6:
        return f"${_scaled(amount, 10**6, '1')}M"
    return f"${amount}"


def format_signal(signal: str) -> str:
    """recent_blog_post -> Recent Blog Post"""
    return " ".join(word[:1].upper() + word[1:] for word in signal.split("_"))
