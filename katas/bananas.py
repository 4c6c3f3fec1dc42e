"""Find every way to cross out letters so that only "banana" remains."""

from functools import cache

_TARGET = "banana"


def bananas(text: str) -> list[str]:
    """Return the sorted, distinct masked forms of ``text`` that spell banana."""

    @cache
    def search(pattern: str, rest: str) -> frozenset[str]:
        if not pattern:
            return frozenset({"-" * len(rest)})
        if not rest:
            return frozenset()

        omitted = {"-" + s for s in search(pattern, rest[1:])}
        if pattern[0] == rest[0]:
            taken = {pattern[0] + s for s in search(pattern[1:], rest[1:])}
            return frozenset(taken | omitted)
        return frozenset(omitted)

    return sorted(search(_TARGET, text))