"""
Shorthand abbreviation index: every non-empty prefix of the registered long options.

What this module provides
- AbbreviationIndex: a read-only mapping from each prefix of each registered name to a verdict.
- Verdicts returned by AbbreviationIndex.resolve():
  • NotFound: no registered option starts with the token (falsy singleton).
  • Unique(name): exactly one registered option owns the token, or the token is itself a
    registered name (exact matches always win over longer names sharing the same spelling).
  • Ambiguous(candidates): two or more distinct registered options share the token and none
    of them is spelled exactly like it.

Core ideas
- Built once per parse from the registered names and never mutated afterwards.
- The verdict table depends only on the set of names, never on the order they were given.

Quick example
    >>> index = AbbreviationIndex(["--alpha", "--beta", "--bellamy"])
    >>> index.resolve("--a")
    Unique(name='--alpha')
    >>> index.resolve("--be")
    Ambiguous(candidates=('--bellamy', '--beta'))
    >>> index.resolve("--alphax")
    NotFound
"""
import functools
from collections import namedtuple
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import final

from rich.text import Text


@final
class NotFoundType:
    """
    Singleton verdict for tokens that are not a prefix of any registered option.

    Falsy, so `if index.resolve(token):` reads naturally; printable as "NotFound".
    """

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "NotFound"

    def __rich__(self):
        return Text(repr(self), style="dim")

    def __reduce__(self):
        return "NotFound"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'NotFoundType' is not an acceptable base type")


NotFound = NotFoundType()


class Unique(namedtuple("Unique", ("name",))):
    """Verdict for a token owned by exactly one registered option."""
    __slots__ = ()


class Ambiguous(namedtuple("Ambiguous", ("candidates",))):
    """Verdict for a token shared by several registered options (candidates are sorted)."""
    __slots__ = ()


class AbbreviationIndex(Mapping):
    """
    Immutable prefix table over a set of registered long-option names.

    Construction
    - AbbreviationIndex(names) or AbbreviationIndex.build(names), where names is an iterable
      of non-empty strings. Duplicate names are harmless (idempotent).

    Invariants
    - every non-empty prefix of every registered name is a key.
    - a registered name always maps to Unique(itself).
    - a prefix owned by two or more distinct names, none spelled exactly like the prefix,
      maps to Ambiguous(sorted names).

    Mapping protocol
    - index[prefix] returns the verdict or raises KeyError; iteration yields prefixes in
      insertion order; `prefix in index` tests key presence.
    """
    __slots__ = ("_names", "_table")

    def __init__(self, names=(), /):
        if isinstance(names, str) or not isinstance(names, Iterable):
            raise TypeError("AbbreviationIndex() argument must be an iterable of strings")

        registered = {}  # ordered set of distinct names
        owners = {}  # prefix -> ordered set of names sharing it

        for name in names:
            if not isinstance(name, str):
                raise TypeError("AbbreviationIndex() names must be strings, not %r" % type(name).__name__)
            if not name:
                raise ValueError("AbbreviationIndex() names must be non-empty strings")
            if name in registered:
                continue
            registered[name] = None
            for length in range(1, len(name) + 1):
                owners.setdefault(name[:length], {})[name] = None

        table = {}
        for prefix, candidates in owners.items():
            if prefix in registered:
                table[prefix] = Unique(prefix)
            elif len(candidates) == 1:
                table[prefix] = Unique(next(iter(candidates)))
            else:
                table[prefix] = Ambiguous(tuple(sorted(candidates)))

        object.__setattr__(self, "_names", tuple(registered))
        object.__setattr__(self, "_table", MappingProxyType(table))

    @classmethod
    def build(cls, names, /):
        """Build a fresh index from the given registered names."""
        return cls(names)

    @property
    def names(self):
        """Distinct registered names, in first-seen order."""
        return self._names

    def resolve(self, token, /):
        """
        Classify a token against the registered names.

        Returns
        - Unique(name) when a single registered option owns the token (or it is a full name).
        - Ambiguous(candidates) when several registered options share it.
        - NotFound when no registered option starts with it.
        """
        if not isinstance(token, str):
            raise TypeError("resolve() argument must be a string")
        return self._table.get(token, NotFound)

    def candidates(self, prefix, /):
        """Sorted registered names starting with prefix (empty when none)."""
        if not isinstance(prefix, str):
            raise TypeError("candidates() argument must be a string")
        return tuple(sorted(name for name in self._names if name.startswith(prefix)))

    def __getitem__(self, prefix):
        return self._table[prefix]

    def __iter__(self):
        return iter(self._table)

    def __len__(self):
        return len(self._table)

    def __setattr__(self, name, value):
        raise AttributeError("'AbbreviationIndex' object is immutable")

    def __delattr__(self, name):
        raise AttributeError("'AbbreviationIndex' object is immutable")

    def __repr__(self):
        return "%s(%r)" % (type(self).__name__, self._names)

    def __rich_repr__(self):
        yield self._names


__all__ = (
    "AbbreviationIndex",
    "NotFoundType",
    "NotFound",
    "Unique",
    "Ambiguous",
)
