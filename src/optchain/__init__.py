"""
Optchain: safe chained access into nested values

Walk a path of fields, positions and method calls into nested mappings and
objects. A missing step anywhere along the way gives back a default instead
of an exception.

    >>> import optchain
    >>> hero = {"name": "John", "weapon": {"damage": 30}}
    >>> optchain.resolve(hero, "weapon.damage", 0)
    30
    >>> optchain.resolve(hero, "pet.attack()", 0)
    0
"""

__version__ = "0.1.0"


from ._error import *
from ._absent import *
from ._entity import *
from ._path import *
from ._parse import *
from ._resolve import *
from ._collect import *
from ._fallback import *
