import argparse
import logging

from calculex.config import Settings
from calculex.errors import EvalError, ParserError
from calculex.parser import parse
from calculex.runtime import execute
from calculex.symbols import SymbolTable
from calculex.syntax_tree import Assignment
from calculex.tokenizer import TokenizerError, tokenize

logger = logging.getLogger("calculex.repl")


def parse_args(settings: Settings) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Interactive calculator")
    parser.add_argument("--log-level", default=settings.log_level, help="logging level (default: %(default)s)")
    parser.add_argument("--prompt", default=settings.prompt, help="input prompt (default: %(default)r)")
    parser.add_argument("--show-ast", action="store_true", default=settings.show_ast, help="print parsed statements")
    return parser.parse_args()


def run_line(code: str, symbols: SymbolTable, show_ast: bool = False) -> None:
    try:
        tokens = tokenize(code)
    except TokenizerError as e:
        print(e)
        return

    try:
        statement = parse(tokens)
    except ParserError as e:
        print(e.render(code))
        return

    if show_ast:
        print(f"ast: {statement!r}")

    try:
        value = execute(statement, symbols)
    except EvalError as e:
        print(e)
        return

    if isinstance(statement, Assignment):
        print(f"{statement.name} = {value:g}")
    else:
        print(f"{value:g}")


if __name__ == "__main__":
    args = parse_args(Settings())
    logging.basicConfig(level=args.log_level.upper())

    symbols = SymbolTable()

    while True:
        try:
            code = input(args.prompt)
        except EOFError:
            break

        command = code.strip()
        if not command:
            continue
        elif command in ("exit", "quit"):
            break
        elif command == "vars":
            for name, value in symbols.items():
                print(f"{name} = {value!r}")
            continue
        elif command == "reset":
            symbols.reset()
            logger.info("Symbol table reset")
            continue

        run_line(code, symbols, show_ast=args.show_ast)
