"""Pick the first usable value out of several candidates."""

__all__ = ["coalesce", "lazy", "Lazy"]

from ._absent import FALLBACK_NULLISH, accepts, check_fallback


class Lazy:
    """Candidate for `coalesce` that is only computed when reached.

    Args:
        func: Callable taking no arguments
    """
    __slots__ = ("func",)

    def __init__(self, func):
        if not callable(func):
            raise TypeError(f"Lazy needs a callable, got {type(func).__name__}")
        self.func = func

    def __call__(self):
        return self.func()

    def __repr__(self):
        return f"Lazy({self.func!r})"


def lazy(func) -> Lazy:
    """Wrap `func` so `coalesce` only calls it when earlier values are missing."""
    return Lazy(func)


def coalesce(*values, fallback=FALLBACK_NULLISH):
    """Return the first value that is present.

    Works like chaining `??` (or `||` with the "falsy" fallback).
    `Lazy` candidates are evaluated in turn, and only when every earlier
    candidate was rejected.

        coalesce(resolve(hero, "get_health()"), lazy(lambda: hero.health))

    Args:
        values: Candidates in order of preference
        fallback: (str) "nullish" skips None and ABSENT, "falsy" skips
            anything falsy
    Returns:
        First accepted value, or None when there is none
    """
    check_fallback(fallback)
    for value in values:
        if isinstance(value, Lazy):
            value = value()
        if accepts(value, fallback):
            return value
    return None
