"""Pull one field out of several named entries."""

__all__ = ["describe_all"]

from ._absent import ABSENT, FALLBACK_NULLISH, accepts, check_fallback, is_absent
from ._path import Field, Path, as_path
from ._resolve import resolve


def describe_all(entity, names, field_path, default=None, *, fallback=FALLBACK_NULLISH):
    """Resolve `field_path` under each named entry of `entity`.

    For every name, `entity[name]` followed by `field_path` is resolved.
    Entries that lead nowhere are dropped, unless `default` is given, in
    which case it takes their place. Results keep the order of `names`.

    >>> skills = {"run": {"description": "Escapes"}}
    >>> describe_all(skills, ["run", "negotiate"], "description")
    ['Escapes']

    Args:
        entity: Mapping or object holding the named entries, may be None
        names: (Iterable[str]) Entry names to look up
        field_path: (Path | str | Iterable[Step]) Path under each entry
        default: Stand-in for missing entries, None to drop them
        fallback: (str) "nullish", or "falsy" to also drop falsy results
    Returns:
        (list) Resolved values
    """
    check_fallback(fallback)
    field_path = as_path(field_path)

    results = []
    for name in names:
        value = resolve(entity, Path((Field(name),)) + field_path, ABSENT)
        if not accepts(value, fallback):
            value = default
        if not is_absent(value):
            results.append(value)
    return results
