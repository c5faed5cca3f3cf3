"""Walk a path through nested values without failing on missing steps."""

__all__ = ["resolve", "has"]

import logging

from ._absent import ABSENT, FALLBACK_NULLISH, accepts, check_fallback, is_absent
from ._path import as_path


_log = logging.getLogger(__name__)


def resolve(root, path, default=None, *, fallback=FALLBACK_NULLISH):
    """Get the value at the end of `path`, or `default`.

    The path is walked left to right starting from `root`. As soon as a
    step lands on nothing (None or ABSENT) the walk stops and `default`
    is returned; the remaining steps are never evaluated, so no method
    further along the path gets called.

    Missing fields, positions out of range, fields looked up on scalars,
    and invocations of names that are not callable all count as nothing.
    None of them raise.

    With the default "nullish" fallback, a found value of 0, False, or ""
    is returned as-is. The "falsy" fallback behaves like `value or default`
    and replaces those with `default` too; it is there for code that
    relies on that behavior, and it will silently drop legitimate falsy
    results.

    Args:
        root: Value to start from, may be None
        path: (Path | str | Iterable[Step]) Steps to take
        default: Returned when the path does not lead to a value
        fallback: (str) "nullish" or "falsy"
    Returns:
        The value found, or default
    Raises:
        TypeError: If path is not a path
        PathError: If path is text that does not parse
        ValueError: If fallback is not a known mode

    >>> resolve({"weapon": {"damage": 30}}, "weapon.damage", 0)
    30
    >>> resolve({}, "weapon.damage", 0)
    0
    """
    check_fallback(fallback)
    path = as_path(path)

    current = root
    for i, step in enumerate(path):
        if is_absent(current):
            _log.debug("path %s stopped before step %d (%s)", path, i, step)
            current = ABSENT
            break
        current = step.lookup(current)

    if accepts(current, fallback):
        return current
    return default


def has(root, path) -> bool:
    """True when `path` leads to a value that is not None.

    Invocation steps along the path are called to find out.
    """
    return not is_absent(resolve(root, path, ABSENT))
