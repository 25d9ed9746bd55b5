"""
Test suite for the lox command-line driver.

Tests cover:
- Script mode and its exit codes
- Inline expressions and the debugging dumps
- The interactive prompt

Author: xwest
"""

import io
import unittest
import sys
import os
import tempfile
from contextlib import redirect_stderr, redirect_stdout
from unittest import mock

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

import lox
from lox.cli import (
    EX_DATAERR, EX_INTERRUPTED, EX_NOINPUT, EX_USAGE, main, run, run_file
)
from lox.interpreter import Interpreter
from lox.reporting import ErrorReporter


class TestDriver(unittest.TestCase):
    """Test cases for the driver entry points."""

    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(self.temp_dir.cleanup)

    def _write_script(self, source: str) -> str:
        """Helper to write a script file and return its path."""
        path = os.path.join(self.temp_dir.name, "script.lox")
        with open(path, "w", encoding="utf-8") as f:
            f.write(source)
        return path

    def _main(self, *argv):
        """Helper running main() with captured stdout and stderr."""
        stdout, stderr = io.StringIO(), io.StringIO()
        with redirect_stdout(stdout), redirect_stderr(stderr):
            code = main(list(argv))
        return code, stdout.getvalue(), stderr.getvalue()

    def test_run_file_success(self):
        """Test that a valid script prints its value and exits 0."""
        code, out, err = self._main(self._write_script("1 + 2"))
        self.assertEqual(code, 0)
        self.assertEqual(out, "3\n")
        self.assertEqual(err, "")

    def test_run_file_syntax_error(self):
        """Test that a syntax error exits 65 without evaluating."""
        code, out, err = self._main(self._write_script("(1 + 2"))
        self.assertEqual(code, EX_DATAERR)
        self.assertEqual(out, "")
        self.assertEqual(err, "[line 1] Error: Expect ')' after expression.\n")

    def test_run_file_lexical_error_skips_evaluation(self):
        """Test that a lexical error alone is enough to skip evaluation."""
        code, out, err = self._main(self._write_script("1 @ "))
        self.assertEqual(code, EX_DATAERR)
        self.assertEqual(out, "")
        self.assertIn("Unexpected character.", err)

    def test_run_file_runtime_error(self):
        """Test that a runtime error also exits 65."""
        code, out, err = self._main(self._write_script('"a" + 1'))
        self.assertEqual(code, EX_DATAERR)
        self.assertEqual(out, "")
        self.assertEqual(err, "Operands must be two numbers or two strings.\n[line 1]\n")

    def test_run_file_missing(self):
        """Test that an unreadable script exits 66."""
        missing = os.path.join(self.temp_dir.name, "missing.lox")
        code, out, err = self._main(missing)
        self.assertEqual(code, EX_NOINPUT)
        self.assertIn("Could not read", err)

    def test_run_file_invalid_utf8(self):
        """Test that a script that is not UTF-8 exits 66 without a traceback."""
        path = os.path.join(self.temp_dir.name, "latin.lox")
        with open(path, "wb") as f:
            f.write(b"\xff\xfe 1+2")

        code, out, err = self._main(path)
        self.assertEqual(code, EX_NOINPUT)
        self.assertEqual(out, "")
        self.assertIn("Could not read", err)

    def test_run_file_deep_nesting(self):
        """Test that deeply nested input is an ordinary script error."""
        code, out, err = self._main(self._write_script("(" * 120 + "1" + ")" * 120))
        self.assertEqual(code, EX_DATAERR)
        self.assertEqual(out, "")
        self.assertIn("Expression nested too deeply.", err)

    def test_run_file_with_explicit_streams(self):
        """Test run_file with a reporter writing to its own stream."""
        errors = io.StringIO()
        output = io.StringIO()
        reporter = ErrorReporter(errors)
        interpreter = Interpreter(reporter, output)

        code = run_file(self._write_script("-nil"), interpreter, reporter)
        self.assertEqual(code, EX_DATAERR)
        self.assertEqual(errors.getvalue(), "Operand must be a number.\n[line 1]\n")
        self.assertEqual(output.getvalue(), "")

    def test_too_many_arguments(self):
        """Test the usage error for more than one script."""
        code, out, _ = self._main("a.lox", "b.lox")
        self.assertEqual(code, EX_USAGE)
        self.assertEqual(out, "Usage: lox [script]\n")

    def test_script_and_expression_conflict(self):
        """Test that a script cannot be combined with -e."""
        code, out, _ = self._main("a.lox", "-e", "1")
        self.assertEqual(code, EX_USAGE)
        self.assertEqual(out, "Usage: lox [script]\n")

    def test_eval_option(self):
        """Test evaluating an inline expression."""
        code, out, _ = self._main("-e", "1+1")
        self.assertEqual(code, 0)
        self.assertEqual(out, "2\n")

    def test_eval_option_error(self):
        """Test that an inline expression error exits 65."""
        code, _, err = self._main("-e", "(")
        self.assertEqual(code, EX_DATAERR)
        self.assertEqual(err, "[line 1] Error: Expect expression.\n")

    def test_ast_dump(self):
        """Test that --ast prints the tree before the value."""
        code, out, _ = self._main("--ast", "-e", "1 + 2 * 3")
        self.assertEqual(code, 0)
        self.assertEqual(out, "(+ 1 (* 2 3))\n7\n")

    def test_tokens_dump(self):
        """Test that --tokens prints one token per line."""
        code, out, _ = self._main("--tokens", "-e", "1")
        self.assertEqual(code, 0)
        self.assertEqual(out, "NUMBER 1 1.0\nEOF  \n1\n")

    def test_verbose_diagnostics(self):
        """Test that -v adds error codes."""
        code, _, err = self._main("-v", "-e", "@")
        self.assertEqual(code, EX_DATAERR)
        self.assertIn("code: L001", err)

    def test_version_option(self):
        """Test that --version prints the package version."""
        stdout = io.StringIO()
        with redirect_stdout(stdout), self.assertRaises(SystemExit) as ctx:
            main(["--version"])
        self.assertEqual(ctx.exception.code, 0)
        self.assertEqual(stdout.getvalue(), f"lox {lox.__version__}\n")

    def test_package_exports_resolve(self):
        """Test that every exported name exists on the package."""
        for name in lox.__all__:
            with self.subTest(name=name):
                self.assertTrue(hasattr(lox, name))
        self.assertEqual(lox.__author__, "xwest")

    def test_run_skips_evaluation_after_earlier_error(self):
        """Test that run() evaluates nothing once the reporter holds a static error."""
        output = io.StringIO()
        reporter = ErrorReporter(io.StringIO())
        reporter.error(1, "Earlier.")

        run("1 + 1", Interpreter(reporter, output), reporter)
        self.assertEqual(output.getvalue(), "")


class TestPrompt(unittest.TestCase):
    """Test cases for the interactive prompt."""

    def _prompt(self, lines):
        """Helper running the prompt over scripted input lines."""
        stdout, stderr = io.StringIO(), io.StringIO()
        with mock.patch("builtins.input", side_effect=lines), \
                redirect_stdout(stdout), redirect_stderr(stderr):
            code = main([])
        return code, stdout.getvalue(), stderr.getvalue()

    def test_each_line_is_independent(self):
        """Test that an error on one line does not stop the next."""
        code, out, err = self._prompt(["1 + 1", "(", "2 * 3", EOFError()])

        self.assertEqual(code, 0)
        self.assertEqual(out, "2\n6\n\n")
        self.assertEqual(err, "[line 1] Error: Expect expression.\n")

    def test_runtime_error_does_not_end_session(self):
        """Test that a runtime error is reported and the prompt continues."""
        code, out, err = self._prompt(['"a" + 1', '"a" + "b"', EOFError()])

        self.assertEqual(code, 0)
        self.assertEqual(out, "ab\n\n")
        self.assertIn("Operands must be two numbers or two strings.", err)

    def test_deep_nesting_does_not_end_session(self):
        """Test that nesting errors in parsing or evaluation leave the prompt running."""
        deep_grouping = "(" * 120 + "1" + ")" * 120
        deep_negation = "-" * 400 + "1"
        code, out, err = self._prompt([deep_grouping, deep_negation, "2 + 2", EOFError()])

        self.assertEqual(code, 0)
        self.assertEqual(out, "4\n\n")
        self.assertEqual(err.count("Expression nested too deeply."), 2)

    def test_interrupt(self):
        """Test that Ctrl-C ends the session with 130."""
        code, out, _ = self._prompt(["1", KeyboardInterrupt()])
        self.assertEqual(code, EX_INTERRUPTED)
        self.assertEqual(out, "1\n\n")


if __name__ == '__main__':
    unittest.main()
