import argparse
import logging
import sys

from rich.logging import RichHandler
from rich.pretty import pprint

from shorthand import parse
from shorthand.utils import Unset

parser = argparse.ArgumentParser(prog="demo", allow_abbrev=False)
parser.add_argument("--alpha", type=int)
parser.add_argument("--beta", "--gamma", "--tistadecthephobpa")
parser.add_argument("--bellamy", action="store_true")
parser.add_argument("--verbose", action="store_true")

logger = logging.getLogger("shorthand")


def configure():
    """Show shorthand debug logs through rich (installed once)."""
    logger.setLevel(logging.DEBUG)
    if not logger.handlers:
        logger.addHandler(RichHandler())


def main(prompt=Unset):
    tokens = sys.argv[1:] if prompt is Unset else prompt
    namespace = parse(parser, tokens, shell=True, colorful=True)
    if namespace.verbose:
        configure()
        # parse again so the expansions are logged
        namespace = parse(parser, tokens, shell=True, colorful=True)
        logger.debug("parsed %r", namespace)
    pprint(namespace)
    return namespace


if __name__ == '__main__':
    main()
