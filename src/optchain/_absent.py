"""Marker for values that were not found."""

__all__ = ["ABSENT", "is_absent", "FALLBACK_NULLISH", "FALLBACK_FALSY"]


FALLBACK_NULLISH = "nullish"
FALLBACK_FALSY = "falsy"


class _AbsentType:
    """Singleton type for `ABSENT`.

    Distinct from None so callers can tell "found None" from "found
    nothing" when they need to. It is falsy, like None.
    """
    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return "ABSENT"

    def __reduce__(self):
        return (_AbsentType, ())


ABSENT = _AbsentType()


def is_absent(value):
    """True for None and `ABSENT`."""
    return value is None or value is ABSENT


def check_fallback(fallback):
    """Raise ValueError unless `fallback` names a known mode."""
    if fallback not in (FALLBACK_NULLISH, FALLBACK_FALSY):
        raise ValueError(
            f"Unknown fallback mode {fallback!r}, "
            f"expected {FALLBACK_NULLISH!r} or {FALLBACK_FALSY!r}"
        )
    return fallback


def accepts(value, fallback):
    """Test whether a resolved value counts as found under a fallback mode.

    Args:
        value: Resolved value
        fallback: (str) A mode accepted by `check_fallback`
    Returns:
        (bool) False when the default should be used instead. In "falsy"
        mode a value whose truth test raises TypeError or ValueError
        counts as found.
    """
    if fallback == FALLBACK_FALSY:
        try:
            return bool(value)
        except (TypeError, ValueError):
            # No single truth value, as with multi-element arrays
            return True
    return not is_absent(value)
