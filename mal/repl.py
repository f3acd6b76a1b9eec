"""Line-oriented read-eval-print loop with readline history."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Optional, TextIO

import readline

from mal import config
from mal.errors import MalError
from mal.interpreter import Interpreter

log = logging.getLogger(__name__)


def load_history() -> None:
    path = config.get_history_path()
    if path is None:
        return
    readline.set_history_length(config.get_history_length())
    try:
        readline.read_history_file(path)
    except FileNotFoundError:
        pass
    except OSError as e:
        log.warning("could not read history file %s: %s", path, e)


def save_history() -> None:
    path = config.get_history_path()
    if path is None:
        return
    try:
        readline.write_history_file(path)
    except OSError as e:
        log.warning("could not write history file %s: %s", path, e)


def repl(
    interpreter: Interpreter,
    read_line: Callable[[str], str] = input,
    out: TextIO = sys.stdout,
    err: TextIO = sys.stderr,
) -> None:
    """Run until `read_line` raises EOFError. A failed line never ends the loop."""
    prompt = config.get_prompt()
    while True:
        try:
            line = read_line(prompt)
        except EOFError:
            out.write("\n")
            return
        except KeyboardInterrupt:
            out.write("\n")
            continue
        try:
            result = interpreter.rep(line)
        except MalError as e:
            print(f"Error: {e}", file=err)
            continue
        except RecursionError:
            print("Error: maximum recursion depth exceeded", file=err)
            continue
        if result:
            print(result, file=out)


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="mal", description="mal read-eval-print loop")
    parser.add_argument("--verbose", action="store_true", help="log failed requests with tracebacks")
    parser.add_argument("--no-history", action="store_true", help="do not load or save line history")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if not args.no_history:
        load_history()
    try:
        repl(Interpreter())
    finally:
        if not args.no_history:
            save_history()
    return 0


if __name__ == "__main__":
    sys.exit(main())
