"""Path steps and the Path chain that holds them."""

__all__ = ["Step", "Field", "Index", "Invoke", "Path", "field", "index", "invoke", "as_path"]

import logging
import re
from collections.abc import Iterable

import optchain

from ._absent import ABSENT
from . import _entity


_log = logging.getLogger(__name__)

# Names that can be written bare after a dot; others use ['quoted'] form.
# Must stay in sync with NAME in lark/path.lark
_BARE_NAME = re.compile(r"[A-Za-z_$][\w$-]*\Z")


class Step:
    """Base class for a single lookup in a path.

    Steps are immutable. Each one knows how to look itself up on the
    current value and how to write itself back out as path text.

    This is a base class that should not be instantiated directly.
    Subclasses must implement lookup() and unparse().
    """
    __slots__ = ()

    def lookup(self, current):
        """Take this step from `current`.

        Args:
            current: The value reached so far (never None or ABSENT)
        Returns:
            The value after this step, or ABSENT
        """
        raise NotImplementedError(f"{self.__class__.__name__}.lookup() not implemented")

    def unparse(self, first=False) -> str:
        """Convert this step to path text.

        Args:
            first: (bool) True when this is the first step, which drops
                the leading dot
        """
        raise NotImplementedError(f"{self.__class__.__name__}.unparse() not implemented")

    def _key(self):
        raise NotImplementedError

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash((type(self).__name__, self._key()))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), (self._key(),))

    def __repr__(self):
        return f"{type(self).__name__}({self._key()!r})"


def _check_name(name, kind):
    if not isinstance(name, str):
        raise TypeError(f"{kind} name must be string, got {type(name).__name__}")
    if not name:
        raise ValueError(f"{kind} name cannot be empty")
    return name


def _unparse_name(name, first):
    if _BARE_NAME.match(name):
        return name if first else f".{name}"
    return f"[{name!r}]"


class Field(Step):
    """Named field access: .name

    Args:
        name: Field name to look up
    """
    __slots__ = ("name",)

    def __init__(self, name: str):
        object.__setattr__(self, "name", _check_name(name, "Field"))

    def lookup(self, current):
        return _entity.lookup_field(current, self.name)

    def unparse(self, first=False) -> str:
        return _unparse_name(self.name, first)

    def _key(self):
        return self.name


class Index(Step):
    """Positional access: [0], [-1]

    Args:
        position: Position in a sequence, or integer key in a mapping
    """
    __slots__ = ("position",)

    def __init__(self, position: int):
        # bool is an int, but [True] is never what anyone meant
        if not isinstance(position, int) or isinstance(position, bool):
            raise TypeError(f"Index position must be int, got {type(position).__name__}")
        object.__setattr__(self, "position", position)

    def lookup(self, current):
        return _entity.lookup_position(current, self.position)

    def unparse(self, first=False) -> str:
        return f"[{self.position}]"

    def _key(self):
        return self.position


class Invoke(Step):
    """Method invocation with no arguments: .name()

    The callable is found the same way as a `Field`. When there is
    nothing callable under the name the call is skipped and the step
    is absent. Exceptions raised by the callable itself propagate.

    Args:
        name: Name of the method or callable field
    """
    __slots__ = ("name",)

    def __init__(self, name: str):
        object.__setattr__(self, "name", _check_name(name, "Invoke"))

    def lookup(self, current):
        func = _entity.lookup_field(current, self.name)
        if func is None or func is ABSENT:
            return ABSENT
        if not callable(func):
            _log.debug("skipped invoking %r: %s is not callable", self.name, type(func).__name__)
            return ABSENT
        return func()

    def unparse(self, first=False) -> str:
        return f"{_unparse_name(self.name, first)}()"

    def _key(self):
        return self.name


def field(name: str) -> Field:
    """Shorthand for `Field(name)`."""
    return Field(name)


def index(position: int) -> Index:
    """Shorthand for `Index(position)`."""
    return Index(position)


def invoke(name: str) -> Invoke:
    """Shorthand for `Invoke(name)`."""
    return Invoke(name)


class Path:
    """Immutable chain of steps: weapon.damage, pet.attack(), items[0]

    Paths behave like tuples of `Step` objects. They can be built from
    steps directly or parsed from text with `Path.parse`, and they write
    themselves back out with `unparse` (also `str`). Text produced by
    `unparse` parses back to an equal path.

    Args:
        steps: Iterable of Step instances

    Attributes:
        steps: (tuple) The steps in order
    """
    __slots__ = ("steps",)

    def __init__(self, steps: Iterable[Step] = ()):
        steps = tuple(steps)
        for i, step in enumerate(steps):
            if not isinstance(step, Step):
                raise TypeError(
                    f"Path step {i} must be a Step, got {type(step).__name__}"
                )
        object.__setattr__(self, "steps", steps)

    @classmethod
    def parse(cls, text: str) -> "Path":
        """Parse path text like "skills['run'].description".

        Raises:
            PathError: If the text is not a valid path
        """
        return optchain.parse_path(text)

    def unparse(self) -> str:
        return "".join(step.unparse(first=not i) for i, step in enumerate(self.steps))

    def __setattr__(self, name, value):
        raise AttributeError("Path is immutable")

    def __reduce__(self):
        return (Path, (self.steps,))

    def __iter__(self):
        return iter(self.steps)

    def __len__(self):
        return len(self.steps)

    def __bool__(self):
        return bool(self.steps)

    def __getitem__(self, key):
        if isinstance(key, slice):
            return Path(self.steps[key])
        return self.steps[key]

    def __add__(self, other):
        if isinstance(other, Path):
            return Path(self.steps + other.steps)
        if isinstance(other, Step):
            return Path(self.steps + (other,))
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, Path):
            return NotImplemented
        return self.steps == other.steps

    def __hash__(self):
        return hash(self.steps)

    def __str__(self):
        return self.unparse()

    def __repr__(self):
        return f"Path({self.unparse()!r})"


def as_path(path) -> Path:
    """Coerce path text, a Step, or an iterable of Steps into a Path.

    Raises:
        TypeError: For anything else
        PathError: For path text that does not parse
    """
    if isinstance(path, Path):
        return path
    if isinstance(path, str):
        return optchain.parse_path(path)
    if isinstance(path, Step):
        return Path((path,))
    if isinstance(path, Iterable) and not isinstance(path, (bytes, bytearray)):
        return Path(path)
    raise TypeError(f"Path must be text, a Path, or Steps, got {type(path).__name__}")
