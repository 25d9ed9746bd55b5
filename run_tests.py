#!/usr/bin/env python3
"""
Main test runner for the Lox expression interpreter.

Author: xwest
"""

import sys
import os
import io
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_all_tests():
    """Run all Lox interpreter tests."""

    print("Lox Expression Interpreter Test Suite")
    print("=" * 60)

    # Test if basic imports work
    try:
        from lox.lexer import Scanner
        from lox.parser import Parser, AstPrinter
        from lox.interpreter import Interpreter
        from lox.reporting import ErrorReporter

        print("All modules imported successfully")
        print()

    except ImportError as e:
        print(f"Failed to import modules: {e}")
        return False

    # Test a simple pipeline
    print("Testing simple pipeline...")
    try:
        code = '(1 + 2) * 3 == 9'

        errors = io.StringIO()
        output = io.StringIO()
        reporter = ErrorReporter(errors)

        tokens = Scanner(code, reporter).scan_tokens()
        print(f"  Scanned {len(tokens)} tokens")

        expr = Parser(tokens, reporter).parse()
        if expr is None:
            print(f"  Parsing failed:\n{errors.getvalue()}")
            return False
        print(f"  Parsed: {AstPrinter().print(expr)}")

        Interpreter(reporter, output).interpret(expr)
        result = output.getvalue().strip()
        print(f"  Evaluated: {result}")

        if result != "true":
            print("  Unexpected result")
            return False
        print()

    except Exception as e:
        print(f"Pipeline test failed: {e}")
        return False

    # Run the unit tests
    print("Running unit tests...")
    print("-" * 60)
    loader = unittest.TestLoader()
    suite = loader.discover(os.path.join(project_root, "tests"), pattern="test_*.py")
    result = unittest.TextTestRunner(verbosity=2).run(suite)

    print("=" * 60)
    if result.wasSuccessful():
        print(f"All {result.testsRun} tests passed")
    else:
        print(f"{len(result.failures)} failures, {len(result.errors)} errors")

    return result.wasSuccessful()


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
