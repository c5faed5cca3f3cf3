"""Parse path text into Path objects.

Path text looks like the property access it stands for::

    weapon.damage
    pet.attack()
    skills['run'].description
    inventory[0].name
    ['odd key'].value

Names are written bare after a dot, anything that is not a plain name goes
in quoted brackets. A trailing `()` turns a lookup into an invocation.
The empty string is the empty path.
"""

__all__ = ["parse_path"]

import ast
import functools
import logging

import lark

import optchain


_log = logging.getLogger(__name__)

_parsers = {}


def parse_path(text):
    """Parse path text into a `Path`.

    Parsed paths are cached, repeated lookups of the same text are cheap.

    Args:
        text: (str) Path text
    Returns:
        (Path) Parsed path
    Raises:
        TypeError: If text is not a string
        PathError: If text is not a valid path
    """
    if not isinstance(text, str):
        raise TypeError(f"Path text must be string, got {type(text).__name__}")
    return _parse_cached(text)


@functools.lru_cache(maxsize=256)
def _parse_cached(text):
    parser = _lark_parser("path")
    try:
        tree = parser.parse(text)
    except lark.exceptions.UnexpectedInput as e:
        position = getattr(e, "pos_in_stream", None)
        if position is None or position < 0:
            position = len(text)
        raise optchain.PathError(f"Invalid path {text!r}", position) from e

    try:
        return _PathTransformer().transform(tree)
    except lark.exceptions.VisitError as e:
        # Bad quoted keys and empty names surface from the transformer
        raise optchain.PathError(f"Invalid path {text!r}: {e.orig_exc}") from e.orig_exc


class _PathTransformer(lark.Transformer):
    """Convert the lark tree into Step objects."""

    def start(self, steps):
        return optchain.Path(steps)

    def name_step(self, children):
        name, call = children
        return _step(str(name), call)

    def index_step(self, children):
        return optchain.Index(int(children[0]))

    def key_step(self, children):
        literal, call = children
        return _step(ast.literal_eval(str(literal)), call)


def _step(name, call):
    if call is not None:
        return optchain.Invoke(name)
    return optchain.Field(name)


def _lark_parser(name):
    """Get globally shared lark parser.

    Args:
        name: (str) name of the grammar file (without .lark)

    Returns:
        (lark.Lark) Parser instance
    """
    parser = _parsers.get(name)
    if parser is not None:
        return parser

    path = f"lark/{name}.lark"
    parser = lark.Lark.open(
        path, rel_to=__file__, parser="lalr", maybe_placeholders=True
    )
    _log.debug("built %s parser from %s", name, path)
    _parsers[name] = parser
    return parser
