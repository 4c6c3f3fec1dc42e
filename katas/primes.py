"""Find the first pair of consecutive primes separated by a given gap."""

from __future__ import annotations


def is_prime(i: int) -> bool:
    """Return whether ``i`` is a prime number."""
    if i <= 1:
        return False
    if i <= 3:
        return True
    if i % 2 == 0 or i % 3 == 0:
        return False
    j = 5
    while j * j <= i:
        if i % j == 0 or i % (j + 2) == 0:
            return False
        j += 6
    return True


def next_prime(i: int) -> int:
    """Return the first prime at ``i`` or after, stepping over odd numbers."""
    if i % 2 == 0:
        i += 1
    while not is_prime(i):
        i += 2
    return i


def gap(g: int, m: int, n: int) -> list[int] | None:
    """Return the first consecutive primes in ``[m, n]`` that are ``g`` apart."""
    a = next_prime(m)
    b = next_prime(a + 2)
    while b <= n:
        if b - a == g:
            return [a, b]
        a, b = b, next_prime(b + 2)
    return None