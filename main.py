from __future__ import annotations
import argparse
import json
import sys
from typing import Callable, List, Optional, Tuple
from lexer import Lexer
from tokens import Token
from ast_nodes import ProgramNode
from parser import Parser
from evaluator import Evaluator
from objects import Object, render
from diagnostics import Diagnostics
from pretty_printer import PrettyPrinter
from ast_json import ast_to_json
from ast_viz import write_and_render

PROMPT = ">>> "
EXIT_COMMAND = "salir"


def lex(text: str) -> List[Token]:
    """Tokenize input string."""
    return Lexer(text).tokenize()


def parse_source(text: str) -> Tuple[ProgramNode, Diagnostics]:
    """Parse source text into a Program plus any syntax diagnostics."""
    parser = Parser(Lexer(text))
    program = parser.parse_program()
    return program, parser.diagnostics


def run_source(text: str) -> Tuple[Optional[Object], Diagnostics]:
    """Lex, parse and evaluate `text` in a fresh top-level environment."""
    program, diagnostics = parse_source(text)
    evaluator = Evaluator()
    value = evaluator.evaluate_program(program)
    diagnostics.extend(evaluator.diagnostics)
    return value, diagnostics


def process_program(
    text: str,
    *,
    print_tokens: bool = False,
    print_ast: bool = False,
    show_errors: bool = False,
    dump_ast_path: Optional[str] = None,
    viz_path: Optional[str] = None,
    viz_format: str = "svg",
) -> Optional[Object]:
    """Process a single program: lex, parse, evaluate and print the result.

    Flags control which intermediate stages are printed or written out.
    """
    if print_tokens:
        tokens = lex(text)
        print(f"Tokens ({len(tokens)}):")
        for i, token in enumerate(tokens[:50]):
            print(f"  {i:3}: {token}")
        if len(tokens) > 50:
            print(f"  ... and {len(tokens) - 50} more")

    program, diagnostics = parse_source(text)
    if print_ast:
        print("AST:")
        print(PrettyPrinter.print_ast(program))

    if dump_ast_path:
        try:
            with open(dump_ast_path, "w", encoding="utf-8") as fh:
                json.dump(ast_to_json(program), fh, indent=2, ensure_ascii=False)
            print(f"Wrote AST JSON to {dump_ast_path}")
        except OSError as e:
            print(f"Failed to write AST JSON to {dump_ast_path}: {e}")

    if viz_path:
        try:
            out = write_and_render(program, viz_path, fmt=viz_format)
            print(f"Wrote AST visualization to {out}")
        except Exception as e:
            print(f"Failed to render AST visualization to {viz_path}: {e}")

    evaluator = Evaluator()
    value = evaluator.evaluate_program(program)
    diagnostics.extend(evaluator.diagnostics)

    if show_errors:
        for diagnostic in diagnostics:
            print(diagnostic)

    text_value = render(value)
    if text_value:
        print(text_value)
    return value


def interactive_mode(
    show_errors: bool = False,
    read_line: Callable[[str], str] = input,
) -> None:
    """Run the REPL: every line is appended to a buffer that is re-run from scratch."""
    lines: List[str] = []

    while True:
        try:
            line = read_line(PROMPT)
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if line.strip() == EXIT_COMMAND:
            break
        if not line.strip():
            continue

        lines.append(line)
        value, diagnostics = run_source("\n".join(lines))
        if show_errors:
            for diagnostic in diagnostics:
                print(diagnostic)
        text_value = render(value)
        if text_value:
            print(text_value)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Evaluate a program from a file or interactively from stdin"
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--file", "-f", dest="file", help="Path to source file to evaluate"
    )
    group.add_argument(
        "--interactive",
        "-i",
        dest="interactive",
        action="store_true",
        help="Start interactive REPL mode (the default without --file)",
    )
    # printing/verbosity options
    parser.add_argument(
        "--print-tokens", dest="print_tokens", action="store_true", help="Print tokens"
    )
    parser.add_argument(
        "--print-ast", dest="print_ast", action="store_true", help="Print the AST"
    )
    parser.add_argument(
        "--show-errors",
        dest="show_errors",
        action="store_true",
        help="Print lexical, syntactic and semantic diagnostics",
    )
    parser.add_argument(
        "--dump-ast", dest="dump_ast", help="Path to write the AST as JSON"
    )
    parser.add_argument(
        "--viz-ast",
        dest="viz_ast",
        help="Path (without extension) to write Graphviz visualization of the AST",
    )
    parser.add_argument(
        "--viz-format",
        dest="viz_format",
        default="svg",
        help="Format for Graphviz output (svg, png, pdf, etc)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    if not args.file:
        interactive_mode(show_errors=args.show_errors)
        return 0

    try:
        with open(args.file, "r", encoding="utf-8") as fh:
            text = fh.read()
    except OSError as e:
        print(f"Failed to read file {args.file}: {e}")
        return 1

    process_program(
        text,
        print_tokens=args.print_tokens,
        print_ast=args.print_ast,
        show_errors=args.show_errors,
        dump_ast_path=args.dump_ast,
        viz_path=args.viz_ast,
        viz_format=args.viz_format,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
