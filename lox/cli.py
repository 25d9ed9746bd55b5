"""
Command-line driver for the Lox expression interpreter.

    lox                 # interactive prompt, one expression per line
    lox script.lox      # evaluate a file
    lox --ast -e ...    # see --help for debugging options

Exit codes: 64 for bad usage, 65 when the script reported any error,
66 when the script cannot be read, 130 on Ctrl-C at the prompt.

Author: xwest
"""

import argparse
import sys
from typing import List, Optional, TextIO

from . import __version__
from .lexer import Scanner
from .parser import AstPrinter, Parser
from .interpreter import Interpreter
from .reporting import ErrorReporter

EX_USAGE = 64
EX_DATAERR = 65
EX_NOINPUT = 66
EX_INTERRUPTED = 130

PROMPT = "> "


def run(source: str, interpreter: Interpreter, reporter: ErrorReporter,
        show_tokens: bool = False, show_ast: bool = False,
        dump: Optional[TextIO] = None):
    """
    Scan, parse and evaluate one top-level input.

    Evaluation is skipped when scanning or parsing reported an error.
    """
    dump = dump if dump is not None else sys.stdout

    tokens = Scanner(source, reporter).scan_tokens()
    if show_tokens:
        for token in tokens:
            print(token, file=dump)

    expr = Parser(tokens, reporter).parse()
    if reporter.had_error or expr is None:
        return

    if show_ast:
        print(AstPrinter().print(expr), file=dump)

    interpreter.interpret(expr)


def run_file(path: str, interpreter: Interpreter, reporter: ErrorReporter,
             show_tokens: bool = False, show_ast: bool = False) -> int:
    """Run a script file once and return the process exit code."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            source = f.read()
    except (OSError, UnicodeDecodeError) as e:
        reason = getattr(e, "strerror", None) or e
        print(f"Could not read '{path}': {reason}", file=reporter.stream)
        return EX_NOINPUT

    run(source, interpreter, reporter, show_tokens, show_ast)

    if reporter.has_errors:
        return EX_DATAERR
    return 0


def run_prompt(interpreter: Interpreter, reporter: ErrorReporter,
               show_tokens: bool = False, show_ast: bool = False) -> int:
    """Read-eval-print loop; each line is an independent input."""
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            print()
            return 0
        except KeyboardInterrupt:
            print()
            return EX_INTERRUPTED

        run(line, interpreter, reporter, show_tokens, show_ast)
        # An error on one line must not affect the next
        reporter.reset()


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lox",
        description="Evaluate Lox expressions from a file or an interactive prompt",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    lox                       # Start the prompt
    lox calc.lox              # Evaluate a file
    lox --ast calc.lox        # Print the parsed tree before evaluating
    lox -e '(1 + 2) * 3'      # Evaluate an expression given inline
        """
    )

    parser.add_argument('script', nargs='*',
                        help='Script to run (omit for the interactive prompt)')
    parser.add_argument('-e', '--eval', dest='expression', metavar='EXPR',
                        help='Evaluate EXPR instead of reading a script')
    parser.add_argument('--tokens', action='store_true',
                        help='Print the scanned tokens of each input')
    parser.add_argument('--ast', action='store_true',
                        help='Print the parsed tree of each input')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Add error codes and help text to diagnostics')
    parser.add_argument('--version', action='version',
                        version=f'%(prog)s {__version__}')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``lox`` console script."""
    args = build_arg_parser().parse_args(argv)

    if len(args.script) > 1 or (args.script and args.expression is not None):
        print("Usage: lox [script]")
        return EX_USAGE

    reporter = ErrorReporter(verbose=args.verbose)
    interpreter = Interpreter(reporter)

    if args.expression is not None:
        run(args.expression, interpreter, reporter, args.tokens, args.ast)
        return EX_DATAERR if reporter.has_errors else 0

    if args.script:
        return run_file(args.script[0], interpreter, reporter, args.tokens, args.ast)

    return run_prompt(interpreter, reporter, args.tokens, args.ast)


if __name__ == "__main__":
    sys.exit(main())
