#!/usr/bin/env python3
"""
bigcalc.py — bigcalc CLI.

Integer calculator with arbitrary-precision operands, variables and
brackets. Runs fully locally; variables live only as long as the process.

Configuration: environment variables with the BIGCALC_ prefix
or a .env file (e.g. BIGCALC_LOG_LEVEL=DEBUG).

Subcommands:
    repl     — interactive session (default when no subcommand is given)
    eval     — run every line of a text through one session (batch REPL)
    tokens   — show the token stream of an expression
    postfix  — show the postfix notation of an expression

Usage:
    python bigcalc.py
    python bigcalc.py eval --text "x = 5
    x * (2 + 3)"
    echo "2 + 3 * 4" | python bigcalc.py eval
    python bigcalc.py tokens --text "1 --(3 + x) / 2"
    python bigcalc.py postfix --text "(2 + 3) * 4"

REPL commands:
    /help    — short description
    /exit    — print the farewell and quit
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Callable, Iterable

from rich import box
from rich.console import Console
from rich.table import Table

from adapters.notation_converter.shunting_yard import render_postfix
from adapters.tokenizer.regex_tokenizer import RegexTokenizer
from adapters.variable_store.in_memory_store import InMemoryVariableStore
from config import Settings
from contracts import CalculatorError, LineOutcome, OperatorToken, Token
from engine import ExpressionEngine
from ports.variable_store import VariableStore

logger = logging.getLogger("bigcalc.repl")

UNKNOWN_COMMAND = "Unknown command"


# -- helpers ---------------------------------------------------------------

_CONSOLE: Console | None = None


def _console() -> Console:
    global _CONSOLE
    if _CONSOLE is None:
        _CONSOLE = Console(highlight=False)
    return _CONSOLE


def _emit(console: Console, text: str) -> None:
    # soft_wrap keeps long numbers on one line; markup off for user text.
    console.print(text, markup=False, soft_wrap=True)


def _read_text(args: argparse.Namespace) -> str:
    if args.text is not None:
        return args.text
    return sys.stdin.read()


def _build_engine(settings: Settings) -> ExpressionEngine:
    # The digit limit is process-wide; set it wherever an engine is built.
    sys.set_int_max_str_digits(settings.int_max_str_digits)
    return ExpressionEngine(tokenizer=RegexTokenizer(strict=settings.strict_tokens))


def _configure(settings: Settings) -> None:
    logging.basicConfig(level=settings.log_level)


def _token_row(index: int, token: Token) -> tuple[str, ...]:
    if isinstance(token, OperatorToken):
        return (str(index), token.token_type, token.text,
                str(token.precedence), "yes" if token.unary else "no")
    return (str(index), token.token_type, token.text, "", "")


def _print_tokens_table(tokens: list[Token], console: Console) -> None:
    table = Table(title=f"Tokens [{len(tokens)}]", box=box.ASCII, show_lines=False)
    table.add_column("#", justify="right", no_wrap=True)
    table.add_column("Type", no_wrap=True, style="cyan")
    table.add_column("Text")
    table.add_column("Prec", justify="right", no_wrap=True)
    table.add_column("Unary", no_wrap=True)
    for i, token in enumerate(tokens):
        table.add_row(*_token_row(i, token))
    console.print(table)


# -- session ---------------------------------------------------------------

class ReplSession:
    """
    Read loop around ExpressionEngine.
    Owns the command table; every other non-blank line goes to the engine.
    """

    def __init__(
        self,
        engine: ExpressionEngine | None = None,
        env: VariableStore | None = None,
        settings: Settings | None = None,
        console: Console | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.engine = engine or _build_engine(self.settings)
        self.env = env if env is not None else InMemoryVariableStore()
        self.console = console or _console()
        self.finished = False
        self.commands: dict[str, Callable[[str], LineOutcome]] = {
            "/exit": self._exit,
            "/help": self._help,
        }

    def handle(self, line: str) -> LineOutcome:
        """Processes one line and prints its output, if any."""
        outcome = self._dispatch(line)
        if outcome.output is not None:
            _emit(self.console, outcome.output)
        if outcome.finished:
            self.finished = True
        return outcome

    def feed(self, lines: Iterable[str]) -> list[LineOutcome]:
        """Handles lines in order until exhausted or /exit."""
        outcomes = []
        for line in lines:
            outcomes.append(self.handle(line))
            if self.finished:
                break
        return outcomes

    def run(self, read_line: Callable[[str], str] = input) -> None:
        logger.info("Session started")
        while not self.finished:
            try:
                line = read_line(self.settings.prompt)
            except (EOFError, KeyboardInterrupt):
                break
            self.handle(line)
        logger.info("Session finished (%d variable(s))", len(self.env.snapshot()))

    # -- Private ------------------------------------------------------------

    def _dispatch(self, line: str) -> LineOutcome:
        stripped = line.strip()
        if stripped.startswith("/"):
            action = self.commands.get(stripped)
            if action is None:
                logger.debug("Unknown command %r", stripped)
                return LineOutcome(line=line, kind="command", output=UNKNOWN_COMMAND,
                                   error="UnknownCommand")
            return action(line)
        return self.engine.process(line, self.env)

    def _exit(self, line: str) -> LineOutcome:
        return LineOutcome(line=line, kind="command", output=self.settings.farewell,
                           finished=True)

    def _help(self, line: str) -> LineOutcome:
        return LineOutcome(line=line, kind="command", output=self.settings.help_text)


# -- subcommands -----------------------------------------------------------

def _repl(args: argparse.Namespace, settings: Settings) -> None:
    ReplSession(settings=settings).run()


def _eval(args: argparse.Namespace, settings: Settings) -> None:
    text = _read_text(args)
    session = ReplSession(settings=settings)
    outcomes = session.feed(text.splitlines())
    if args.check and any(not o.ok for o in outcomes):
        sys.exit(1)


def _tokens(args: argparse.Namespace, settings: Settings) -> None:
    text = _read_text(args).strip()
    engine = _build_engine(settings)
    try:
        tokens = engine.tokenize(text)
    except CalculatorError as exc:
        _emit(_console(), exc.user_message)
        sys.exit(1)
    _print_tokens_table(tokens, _console())


def _postfix(args: argparse.Namespace, settings: Settings) -> None:
    text = _read_text(args).strip()
    engine = _build_engine(settings)
    try:
        postfix = engine.to_postfix(text)
    except CalculatorError as exc:
        _emit(_console(), exc.user_message)
        sys.exit(1)
    _emit(_console(), render_postfix(postfix))


# -- main ------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bigcalc",
        description="bigcalc — arbitrary-precision integer calculator",
    )
    sub = parser.add_subparsers(dest="command")

    # repl
    sub.add_parser("repl", help="Interactive session (default)")

    # eval
    p = sub.add_parser("eval", help="Run every line of a text through one session")
    p.add_argument("--text", "-t", help="Lines to evaluate (or stdin)")
    p.add_argument("--check", action="store_true",
                   help="Exit with status 1 if any line was rejected")

    # tokens
    p = sub.add_parser("tokens", help="Show the token stream of an expression")
    p.add_argument("--text", "-t", help="Expression (or stdin)")

    # postfix
    p = sub.add_parser("postfix", help="Show the postfix notation of an expression")
    p.add_argument("--text", "-t", help="Expression (or stdin)")

    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    settings = Settings()
    _configure(settings)

    commands: dict[str, Callable[[argparse.Namespace, Settings], Any]] = {
        "repl":    _repl,
        "eval":    _eval,
        "tokens":  _tokens,
        "postfix": _postfix,
    }
    commands[args.command or "repl"](args, settings)


if __name__ == "__main__":
    main()
