from lexer import Lexer
from parser import Parser
from evaluator import Evaluator
from objects import render


def lex_types(text: str):
    """Return the token types produced for the given source text."""
    return [t.type for t in Lexer(text).tokenize()]


def parse_text(text: str):
    """Convenience: lex+parse a source text into a Program node."""
    return Parser(Lexer(text)).parse_program()


def parse_with_errors(text: str):
    parser = Parser(Lexer(text))
    program = parser.parse_program()
    return program, list(parser.diagnostics)


def eval_text(text: str):
    """Parse and evaluate `text`, returning the evaluator and the final value."""
    evaluator = Evaluator()
    value = evaluator.evaluate_program(parse_text(text))
    return evaluator, value


def run_text(text: str) -> str:
    """Rendered result of evaluating `text`."""
    _, value = eval_text(text)
    return render(value)
