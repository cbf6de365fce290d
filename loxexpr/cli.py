"""
Command line entry point: print an expression in postfix form.

Examples:
    loxexpr "-1 * (2 + 3)"          # 1 NEGATE 2 3 + *
    loxexpr --ast "-1 * (2 + 3)"    # (* (- 1) (group (+ 2 3)))
    echo "1 ? 2 : 3" | loxexpr      # reads stdin when no expression is given
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import log
from .lexer import Lexer
from .parser import ExpressionParser, LoggingReporter
from .printer import AstPrinter, RpnPrinter

logger = logging.getLogger(__name__)

# sysexits.h EX_DATAERR
EXIT_DATA_ERROR = 65


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="loxexpr",
        description="Parse an expression and print it in reverse Polish notation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument('expression', nargs='?',
                        help='Expression source; read from --file or stdin when omitted')
    parser.add_argument('-f', '--file',
                        help='Read the expression from this file')
    parser.add_argument('--ast', action='store_true',
                        help='Print the parenthesized tree instead of postfix')
    parser.add_argument('-d', '--debug', action='store_true',
                        help='Write debug information to stderr')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    log.initialize(args.debug)

    if args.expression is not None:
        source, filename = args.expression, "<argument>"
    elif args.file:
        with open(args.file, 'r', encoding='utf-8') as f:
            source, filename = f.read(), args.file
    else:
        source, filename = sys.stdin.read(), "<stdin>"

    lexer = Lexer(source, filename)
    tokens = lexer.tokenize()
    if lexer.has_errors():
        for error in lexer.errors:
            logger.error("[line %d] Error: %s", error.location.line, error.diagnostic.message)
        return EXIT_DATA_ERROR

    logger.debug("scanned %d token(s) from %s", len(tokens), filename)

    reporter = LoggingReporter()
    expr = ExpressionParser(tokens, reporter).parse()
    if expr is None:
        return EXIT_DATA_ERROR

    printer = AstPrinter() if args.ast else RpnPrinter()
    print(printer.print(expr))
    return 0


if __name__ == "__main__":
    sys.exit(main())
