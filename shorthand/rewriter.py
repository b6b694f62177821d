"""
Shorthand rewriter: expand abbreviated long options inside an argument vector.

Behavior
- Tokens are scanned left to right; only tokens starting with '--' are candidates.
  Values, positionals and short options pass through untouched and unexamined.
- A candidate is resolved against an AbbreviationIndex:
  • Unique(name)  → the token is replaced by the full registered name.
  • NotFound      → UnknownOptionError (nothing registered starts with the token).
  • Ambiguous     → AmbiguousOptionError (the abbreviation is too short to decide).
- The first rejection aborts the whole call; no partially rewritten vector is returned.
- '--name=value' candidates are resolved on their '--name' part; the value is kept verbatim.
- A bare '--' is a candidate like any other: it is a prefix of every registered name, so it
  resolves (or is refused) literally. End-of-options handling belongs to the caller.

Known sharp edge
- A value token that itself starts with '--' is taken for an option, since option
  values are not known here. Pass such values inline ('--name=--value').
"""
import difflib
import logging
from collections.abc import MutableSequence

from .faults import FaultCode, UnknownOptionError, AmbiguousOptionError, trigger, getdoc
from .index import AbbreviationIndex, Unique, Ambiguous
from .utils import ordinal

logger = logging.getLogger(__name__)

MARKER = "--"


def _split(token):
    name, separator, value = token.partition("=")
    return name, separator + value


def _reject(token, position, verdict, index, validated, options):
    logger.debug("rejected %r at position %d; validated so far: %r", token, position, validated)

    if isinstance(verdict, Ambiguous):
        candidates = verdict.candidates
        fault = AmbiguousOptionError(
            "ambiguous option %r at %s position" % (token, ordinal(position)),
            title="ambiguous option",
            code=FaultCode.AMBIGUOUS_OPTION,
            token=token,
            index=position,
            candidates=candidates,
            hint="type more characters to pick one of %s" % ", ".join(map(repr, candidates)),
            docs=getdoc(FaultCode.AMBIGUOUS_OPTION),
        )
    else:
        suggestions = difflib.get_close_matches(token, index.names, 5)
        try:
            hint = "did you mean %r?" % suggestions[0]
        except IndexError:
            hint = "check the spelling; known options are %s" % (", ".join(map(repr, index.names)) or "none")
        fault = UnknownOptionError(
            "unknown option %r at %s position" % (token, ordinal(position)),
            title="unknown option",
            code=FaultCode.UNKNOWN_OPTION,
            token=token,
            index=position,
            suggestions=suggestions,
            hint=hint,
            docs=getdoc(FaultCode.UNKNOWN_OPTION),
        )
    trigger(fault, **options)


def rewrite(args, index, /, *, inplace=False, **options):
    """
    Replace every unambiguous long-option abbreviation in args by its full registered name.

    Parameters
    - args: sequence of str
      The raw argument vector (without the program name).
    - index: AbbreviationIndex
      The registered long options for this parse.
    - inplace: bool
      When True, args must be a mutable sequence and is rewritten in place; otherwise a new
      list is returned and args is left untouched.
    - options: runtime presentation options forwarded to the fault (shell, fancy, colorful, prog).

    Returns
    - list[str] (or args itself when inplace): same length and order, only long options changed.

    Raises
    - UnknownOptionError / AmbiguousOptionError (outside shell mode) for the first refused token.
    """
    if not isinstance(index, AbbreviationIndex):
        raise TypeError("rewrite() second argument must be an AbbreviationIndex")
    if isinstance(args, str):
        raise TypeError("rewrite() first argument must be a sequence of strings, not a string")
    if inplace and not isinstance(args, MutableSequence):
        raise TypeError("rewrite() first argument must be a mutable sequence when inplace is set")

    target = args if inplace else list(args)
    changes = {}

    for position, token in enumerate(target, start=1):
        if not isinstance(token, str):
            raise TypeError("rewrite() arguments must be strings, not %r" % type(token).__name__)
        if not token.startswith(MARKER):
            continue

        name, tail = _split(token)
        verdict = index.resolve(name)
        if not isinstance(verdict, Unique):
            validated = [changes.get(offset, target[offset]) for offset in range(position - 1)]
            return _reject(name, position, verdict, index, validated, options)

        if verdict.name != name:
            logger.debug("expanded %r to %r at position %d", name, verdict.name, position)
            changes[position - 1] = verdict.name + tail

    # nothing is written back until every candidate has been accepted
    for offset, token in changes.items():
        target[offset] = token
    return target


def expand(names, args, /, **options):
    """Build an index from names and return a rewritten copy of args."""
    return rewrite(args, AbbreviationIndex(names), **options)


__all__ = (
    "rewrite",
    "expand",
)
