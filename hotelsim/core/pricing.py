"""Pricing engine.

Prices are never stored. Every display recomputes the total from the stored
inputs through ``final_price`` so quotes and later listings always agree.
"""

BREAKFAST_FACTOR = 0.95


def final_price(
    base_price: float,
    nights: int,
    discount_rate: float,
    includes_breakfast: bool,
    breakfast_factor: float = BREAKFAST_FACTOR,
) -> float:
    """Compute the total price of a stay.

    The tier discount is applied first; the breakfast reduction multiplies the
    discounted total afterwards (it is not added to the tier discount).

    Args:
        base_price: Per-night rate of the room
        nights: Number of nights
        discount_rate: Tier discount as a fraction (0.10 means 10% off)
        includes_breakfast: Whether the breakfast reduction applies
        breakfast_factor: Multiplier applied when breakfast is included

    Returns:
        The total amount for the stay
    """
    total = base_price * nights * (1.0 - discount_rate)
    if includes_breakfast:
        total *= breakfast_factor
    return total
