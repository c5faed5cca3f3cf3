"""Capability checks for the values a path walks through.

An entity is anything a field can be looked up on. Mappings expose their
keys as fields, other objects expose their attributes. Scalars expose
nothing, so a path that reaches a scalar before its last step stops there.
Sequences only expose positions. Other containers (sets, iterators,
generators) expose nothing, so no method of theirs is ever called.
"""

__all__ = ["lookup_field", "lookup_position", "is_scalar", "is_sequence", "is_container"]

import decimal
import fractions
from collections.abc import Collection, Iterator, Mapping, Sequence

from ._absent import ABSENT


_SCALARS = (
    str, bytes, bytearray, int, float, complex,
    decimal.Decimal, fractions.Fraction,
)


def is_scalar(value) -> bool:
    """True for strings, bytes, and numbers (bool included)."""
    return isinstance(value, _SCALARS)


def is_sequence(value) -> bool:
    """True for positional containers that are not strings."""
    return isinstance(value, Sequence) and not is_scalar(value)


def is_container(value) -> bool:
    """True for non-mapping collections and iterators, strings excluded."""
    if isinstance(value, Mapping) or is_scalar(value):
        return False
    return isinstance(value, (Collection, Iterator))


def lookup_field(current, name: str):
    """Get the field `name` from `current`, or `ABSENT`.

    Args:
        current: Value to look into (never None or ABSENT)
        name: Field name
    Returns:
        Field value, or ABSENT if `current` has no such field. Scalars and
        non-mapping containers never have fields.
    """
    if isinstance(current, Mapping):
        # Membership first so defaultdict factories are not triggered
        if name in current:
            return current[name]
        return ABSENT
    if is_scalar(current) or is_container(current):
        return ABSENT
    # Only AttributeError counts as a missing field
    return getattr(current, name, ABSENT)


def lookup_position(current, position: int):
    """Get the item at `position` from `current`, or `ABSENT`.

    Mappings are looked up with the integer as a key. Negative positions
    count from the end of a sequence.
    """
    if isinstance(current, Mapping):
        if position in current:
            return current[position]
        return ABSENT
    if is_sequence(current):
        try:
            return current[position]
        except IndexError:
            return ABSENT
    return ABSENT
