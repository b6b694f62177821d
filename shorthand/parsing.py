"""
Shorthand parsing bridge: abbreviation-aware front door for argparse.

What this module provides
- long_options(source): the '--' prefixed option names declared by a collaborator, either an
  argparse.ArgumentParser (sub-parsers included) or plain declaration strings such as
  "--beta, --gamma".
- parse(parser, prompt): expand abbreviations against the parser's long options, then let
  the parser do the real work (value extraction, type conversion, defaults, help).

Quick start
    import argparse
    from shorthand import parse

    parser = argparse.ArgumentParser(allow_abbrev=False)
    parser.add_argument("--alpha", type=int)
    parser.add_argument("--beta")
    parser.add_argument("--bellamy", action="store_true")

    namespace = parse(parser, "--bet bs --a 14 --bel")
    # Namespace(alpha=14, beta='bs', bellamy=True)

Notes
- Rejections (unknown or ambiguous long options) are raised before argparse sees the vector.
- argparse's own errors are neither caught nor wrapped.
- A bare '--' ends expansion: it and every later token reach argparse untouched.
"""
import argparse
import logging
import shlex
import sys
from collections.abc import Iterable

from .index import AbbreviationIndex
from .rewriter import MARKER, rewrite
from .utils import Unset, coalesce

logger = logging.getLogger(__name__)


def _parsers(parser):
    """Yield parser and, recursively, every sub-parser registered on it (each once)."""
    pending = [parser]
    seen = set()
    while pending:
        current = pending.pop(0)
        if id(current) in seen:
            continue
        seen.add(id(current))
        yield current
        for action in current._actions:
            if isinstance(action, argparse._SubParsersAction):
                pending.extend(action.choices.values())


def long_options(source, /):
    """
    Collect the long option names declared by a collaborator, in declaration order.

    Parameters
    - source: argparse.ArgumentParser | Iterable[str]
      • a parser: its option strings and those of all its sub-parsers.
      • declaration strings: each may carry comma-separated aliases ("--beta, --gamma, -b").

    Returns
    - list[str]: distinct names starting with '--' (short aliases are dropped).
    """
    if isinstance(source, argparse.ArgumentParser):
        declarations = [
            option
            for parser in _parsers(source)
            for action in parser._actions
            for option in action.option_strings
        ]
    elif isinstance(source, Iterable) and not isinstance(source, str):
        declarations = []
        for item in source:
            if not isinstance(item, str):
                raise TypeError("long_options() declarations must be strings")
            declarations.extend(item.split(","))
    else:
        raise TypeError("long_options() argument must be an ArgumentParser or an iterable of strings")

    names = {}
    for declaration in declarations:
        if (name := declaration.strip()).startswith(MARKER) and name != MARKER:
            names.setdefault(name, None)
    return list(names)


def _tokens(prompt):
    if isinstance(prompt, str):
        return shlex.split(prompt)
    if isinstance(prompt, Iterable):
        tokens = list(prompt)
        if not all(isinstance(token, str) for token in tokens):
            raise TypeError("parse() prompt must be a string or an iterable of strings")
        return tokens
    raise TypeError("parse() prompt must be a string or an iterable of strings")


def parse(parser, prompt=Unset, /, **options):
    """
    Expand abbreviated long options, then parse with the collaborating argparse parser.

    Parameters
    - parser: argparse.ArgumentParser
    - prompt:
      • Unset: read tokens from sys.argv[1:].
      • str: shell-like string; split via shlex.split.
      • Iterable[str]: pre-tokenized vector.
    - options: runtime presentation options for rejections (shell, fancy, colorful, prog).
      prog defaults to parser.prog.

    Returns
    - argparse.Namespace produced by parser.parse_args on the rewritten vector.
    """
    if not isinstance(parser, argparse.ArgumentParser):
        raise TypeError("parse() first argument must be an ArgumentParser")

    tokens = _tokens(coalesce(prompt, sys.argv[1:]))
    index = AbbreviationIndex(long_options(parser))
    logger.debug("expanding %d tokens against %d long options", len(tokens), len(index.names))

    # argparse reads everything after the first bare "--" as positionals
    try:
        split = tokens.index(MARKER)
    except ValueError:
        split = len(tokens)

    options.setdefault("prog", parser.prog)
    return parser.parse_args(rewrite(tokens[:split], index, **options) + tokens[split:])


__all__ = (
    "long_options",
    "parse",
)
