"""Money helpers — integer cents for the base currency, atoms for settlement."""

import math
from decimal import ROUND_HALF_UP, Decimal

ATOMS_PER_COIN = 100_000_000
MATOMS_PER_ATOM = 1000


def to_cents(amount: float) -> int:
    """Convert a currency amount to whole cents, rounding away float drift."""
    return int(round(amount * 100))


def format_cents(cents: int) -> str:
    return f"${cents / 100:.2f}"


def settlement_atoms(total_cents: int, exchange_rate: float | None) -> int:
    """Convert a base-currency total to settlement atoms at ``exchange_rate`` (base units per coin)."""
    if not exchange_rate or not math.isfinite(exchange_rate) or exchange_rate <= 0 or total_cents <= 0:
        return 0
    coins = Decimal(total_cents) / 100 / Decimal(str(exchange_rate))
    return int((coins * ATOMS_PER_COIN).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def format_atoms(atoms: int, currency: str) -> str:
    """Render an atom amount as coins, e.g. ``0.999 DCR``."""
    coins = Decimal(atoms) / ATOMS_PER_COIN
    text = format(coins.normalize(), "f") if atoms else "0"
    return f"{text} {currency}"
