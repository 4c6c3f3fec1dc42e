"""How many complete levels of a square beer-can pyramid a bonus buys."""


def beeramid(bonus: int, price: float) -> int:
    """Return the number of complete levels affordable with ``bonus`` at ``price`` per can."""
    if bonus < price:
        return 0
    if price <= 0:
        raise ValueError("price must be positive")

    remaining = float(bonus)
    level = 0
    while True:
        cost = (level + 1) ** 2 * price
        if cost > remaining:
            return level
        remaining -= cost
        level += 1