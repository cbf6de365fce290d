#!/usr/bin/env python3
"""
Main test runner for loxexpr.

Runs a quick pipeline check, then the unittest suite under tests/.
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_pipeline_check() -> bool:
    """Lex, parse and print one expression end to end."""
    print("loxexpr test suite")
    print("=" * 60)

    try:
        from loxexpr.lexer.lexer import Lexer
        from loxexpr.parser.parser import ExpressionParser
        from loxexpr.parser.reporting import CollectingReporter
        from loxexpr.printer import RpnPrinter
    except ImportError as e:
        print(f"Failed to import loxexpr modules: {e}")
        return False

    source = "-1 * (2 + 3) == 4 ? true : nil"
    tokens = Lexer(source).tokenize()
    print(f"  lexing...   {len(tokens)} tokens")

    reporter = CollectingReporter()
    expr = ExpressionParser(tokens, reporter).parse()
    if expr is None:
        print(f"  parsing...  failed: {reporter.formatted()}")
        return False
    print(f"  parsing...  {len(list(expr.walk()))} nodes")

    output = RpnPrinter().print(expr)
    print(f"  printing... {output}")
    print()
    return output == "1 NEGATE 2 3 + * 4 == true ? nil :"


def run_all_tests() -> bool:
    if not run_pipeline_check():
        return False

    suite = unittest.defaultTestLoader.discover(os.path.join(project_root, "tests"))
    result = unittest.TextTestRunner(verbosity=2).run(suite)
    return result.wasSuccessful()


if __name__ == "__main__":
    sys.exit(0 if run_all_tests() else 1)
