"""Graphviz visualization helpers for syntax trees.

Provides `render_ast_dot(node)` which returns a `graphviz.Digraph` object
(not rendered), and `write_and_render(node, out_path, fmt)` which writes the
rendered file to disk.

Layout: every syntax node becomes a box labelled with its kind and payload
(the name, value or operator); edges point from a node to its children and
are labelled with the child's role (`left`, `condition`, `form[0]`, ...).
"""

from typing import Iterator, List, Tuple
from ast_nodes import *
from graphviz import Digraph


def _label(node: ASTNode) -> str:
    match node:
        case IntegerNode(value=v):
            return f"Integer\\n{v}"
        case BooleanNode(value=v):
            return "Boolean\\n" + ("verdadero" if v else "falso")
        case IdentifierNode(name=n):
            return f"Identifier\\n{n}"
        case InfixNode(operator=op):
            return f"Infix\\n{op.literal}"
        case AssignmentNode(name=n):
            return f"Assignment\\n{n} :="
        case FunctionCallNode(name=n):
            return f"FunctionCall\\n{n}()"
        case _:
            return node.type.name.title().replace("_", "")


def _children(node: ASTNode) -> Iterator[Tuple[str, ASTNode]]:
    match node:
        case InfixNode(left=l, right=r):
            yield "left", l
            yield "right", r
        case MinusNode(operand=operand) | NotNode(operand=operand):
            yield "operand", operand
        case AssignmentNode(value=value):
            yield "value", value
        case FunctionCallNode(arguments=args):
            for i, arg in enumerate(args):
                yield f"arg[{i}]", arg
        case FunctionNode(parameters=params, body=body):
            for i, param in enumerate(params):
                yield f"param[{i}]", param
            yield "body", body
        case IfNode(condition=cond, consequence=then_b, alternative=else_b):
            yield "condition", cond
            yield "then", then_b
            if else_b is not None:
                yield "else", else_b
        case WhileNode(condition=cond, body=body):
            yield "condition", cond
            yield "body", body
        case BlockNode(forms=forms) | ProgramNode(forms=forms):
            for i, form in enumerate(forms):
                yield f"form[{i}]", form


def render_ast_dot(node: ASTNode) -> Digraph:
    """Return a graphviz.Digraph for the tree rooted at `node`.

    The caller may call `dot.source` to inspect the dot text, or call
    `dot.render(filename, format=...)` to write files (requires Graphviz installed).
    """
    dot = Digraph(format="svg")
    dot.attr("graph", rankdir="TB")
    dot.attr("node", shape="box", fontname="Helvetica", fontsize="10")

    counter = 0
    stack: List[Tuple[str, ASTNode]] = [("n0", node)]
    while stack:
        ident, current = stack.pop()
        dot.node(ident, label=_label(current))
        children = []
        for role, child in _children(current):
            counter += 1
            child_id = f"n{counter}"
            dot.edge(ident, child_id, label=role, fontsize="8")
            children.append((child_id, child))
        # Reverse so children are emitted in source order.
        stack.extend(reversed(children))

    return dot


def write_and_render(node: ASTNode, out_path: str, fmt: str = "svg") -> str:
    """Write and render the tree to the given path (without extension).

    Example: write_and_render(program, 'out/ast', fmt='png') will create
    out/ast.png (requires Graphviz). Returns the rendered file's path."""
    dot = render_ast_dot(node)
    dot.format = fmt
    # Note: render will append extension automatically
    return dot.render(out_path, cleanup=True)
