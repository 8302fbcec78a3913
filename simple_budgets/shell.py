"""Command line entry point and interactive budget shell.

Usage::

    simple-budgets budget.txt new      # start an empty budget
    simple-budgets budget.txt open     # edit an existing one

Inside the shell the following commands are accepted (each has a one
letter alias)::

    insert NAME VALUE EXPANDABLE   VALUE is annual and stored per month
    preview
    calculate INCOME
    exit                           saves the budget back to the file
"""

from __future__ import annotations

import argparse
import shlex
import sys
from pathlib import Path
from typing import Callable, List, Optional, TextIO

from .exceptions import DecodeError, ValidationError
from .formatting import annual_to_monthly, parse_amount, parse_bool
from .logging_config import configure_logging, get_logger
from .models import Budget
from .planner import allocate_result, insert, new_budget
from .reporting import render_allocation, render_preview
from .storage import BudgetFileStorage

logger = get_logger("shell")

PROMPT = "Please enter a command: "


class _HelpShown(Exception):
    """Raised instead of exiting after argparse has printed help."""


class _ShellArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports problems instead of exiting the process."""

    def error(self, message: str) -> None:  # type: ignore[override]
        prog = self.prog.strip()
        raise ValidationError('command', None, f"{prog}: {message}" if prog else message)

    def exit(self, status: int = 0, message: Optional[str] = None) -> None:  # type: ignore[override]
        if message:
            self._print_message(message, sys.stderr)
        raise _HelpShown()


def _amount_arg(text: str) -> float:
    try:
        return parse_amount(text, allow_negative=True)
    except ValidationError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def _value_arg(text: str) -> float:
    try:
        return parse_amount(text)
    except ValidationError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def _bool_arg(text: str) -> bool:
    try:
        return parse_bool(text)
    except ValidationError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def build_command_parser() -> argparse.ArgumentParser:
    """Parser for the commands typed at the shell prompt."""
    parser = _ShellArgumentParser(prog='', add_help=False)
    commands = parser.add_subparsers(dest='command', required=True, metavar='command')

    exit_cmd = commands.add_parser('exit', aliases=['e'], help='Exits the program in a clean way.')
    exit_cmd.set_defaults(handler=BudgetShell.do_exit)

    preview_cmd = commands.add_parser('preview', aliases=['p'], help='Previews the current budget.')
    preview_cmd.set_defaults(handler=BudgetShell.do_preview)

    insert_cmd = commands.add_parser('insert', aliases=['i'], help='Inserts a new piece of the budget.')
    insert_cmd.add_argument('name', help='The name of the part of the budget.')
    insert_cmd.add_argument(
        'value', type=_value_arg,
        help='The value of the budget part. The amount going in annually.',
    )
    insert_cmd.add_argument(
        'expandable', type=_bool_arg,
        help='If the budget part can be mutable. If the part is not required.',
    )
    insert_cmd.set_defaults(handler=BudgetShell.do_insert)

    calculate_cmd = commands.add_parser(
        'calculate', aliases=['c'], help='Calculates the divided values among the budget parts.'
    )
    calculate_cmd.add_argument('income', type=_amount_arg, help='The provided income.')
    calculate_cmd.set_defaults(handler=BudgetShell.do_calculate)

    return parser


class BudgetShell:
    """Read-eval loop over one budget, saved back to ``path`` on exit."""

    def __init__(
        self,
        path: Path,
        budget: Budget,
        *,
        input_func: Callable[[str], str] = input,
        output: Optional[TextIO] = None,
    ):
        self.storage = BudgetFileStorage(path)
        self.budget = budget
        self._input = input_func
        self._output = output or sys.stdout
        self.parser = build_command_parser()

    def _print(self, text: str = '') -> None:
        print(text, file=self._output)

    def execute(self, line: str) -> bool:
        """Run one command line. Returns True when the session should end."""
        try:
            tokens = shlex.split(line)
        except ValueError as exc:
            self._print(str(exc))
            return False
        if not tokens:
            return False

        try:
            args = self.parser.parse_args(tokens)
        except ValidationError as exc:
            self._print(f"error: {exc}")
            return False
        except _HelpShown:
            return False
        return args.handler(self, args)

    def do_exit(self, args: argparse.Namespace) -> bool:
        return True

    def do_preview(self, args: argparse.Namespace) -> bool:
        self._print(render_preview(self.budget))
        return False

    def do_insert(self, args: argparse.Namespace) -> bool:
        try:
            part = insert(self.budget, args.name, annual_to_monthly(args.value), args.expandable)
        except ValidationError as exc:
            self._print(f"error: {exc}")
            return False
        logger.debug("inserted %r", part)
        self._print(f"Pushed budget: {part.name}, use preview to view the new budget.")
        return False

    def do_calculate(self, args: argparse.Namespace) -> bool:
        result = allocate_result(self.budget, args.income)
        self._print(render_allocation(result))
        return False

    def run(self) -> int:
        """Prompt for commands until ``exit`` or end of input, then save."""
        while True:
            try:
                line = self._input(PROMPT)
            except EOFError:
                self._print()
                break
            self._print()
            done = self.execute(line)
            self._print()
            if done:
                break

        self._print("Exiting and saving budget file...")
        try:
            self.storage.save(self.budget)
        except OSError as exc:
            logger.error("%s", exc)
            self._print(str(exc))
            return 1
        self._print("Budget file saved.")
        return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='simple-budgets',
        description='Plan how a monthly income is divided across budget parts.',
    )
    parser.add_argument('file', help='Sets the file to interact with.')
    parser.add_argument(
        '-v', '--verbose', action='count', default=0,
        help='Log progress (-v) or allocation detail (-vv) to stderr.',
    )
    modes = parser.add_subparsers(dest='command', required=True, metavar='{open,new}')
    modes.add_parser(
        'open', aliases=['o'], help='Opens a budget file for modification or viewing.'
    ).set_defaults(mode='open')
    modes.add_parser('new', aliases=['n'], help='Starts a new budget.').set_defaults(mode='new')
    return parser


def main(
    argv: Optional[List[str]] = None,
    *,
    input_func: Callable[[str], str] = input,
    output: Optional[TextIO] = None,
) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose > 1:
        configure_logging('DEBUG')
    elif args.verbose == 1:
        configure_logging('INFO')
    else:
        configure_logging()

    out = output or sys.stdout
    path = Path(args.file)

    if args.mode == 'open':
        storage = BudgetFileStorage(path)
        if not storage.exists():
            print("That file does not exist.", file=out)
            return 1
        try:
            budget = storage.load()
        except DecodeError as exc:
            logger.error("Failed to read %s as a budget: %s", path, exc)
            print(f"Failed to read input file as a budget: {exc}", file=out)
            return 1
        except OSError as exc:
            print(f"Failed to open {path}: {exc}", file=out)
            return 1
    else:
        if path.exists():
            logger.warning("%s already exists and will be overwritten on exit", path)
        budget = new_budget()

    shell = BudgetShell(path, budget, input_func=input_func, output=out)
    return shell.run()


if __name__ == '__main__':
    raise SystemExit(main())
