"""Pretty-printer for the AST.

Provides `PrettyPrinter.print_ast(node, indent, prefix)` which renders an
AST into a readable multi-line string, and `PrettyPrinter.print_surface(node)`
which renders it back into source syntax. The printers are intended for
debugging, tests and the `--print-ast` driver flag.

Examples:
    PrettyPrinter.print_ast(program_node)
    PrettyPrinter.print_surface(program_node)  # "a := 1 + 2. a."
"""

from __future__ import annotations
from ast_nodes import *


class PrettyPrinter:
    @staticmethod
    def print_ast(node: ASTNode, indent: int = 0, prefix: str = "") -> str:
        """Pretty print AST and return as string."""
        lines = []
        indent_str = " " * indent

        if not isinstance(node, ASTNode):
            lines.append(f"{indent_str}{prefix}{node}")
            return "\n".join(lines)

        match node:
            case IntegerNode(value=v):
                lines.append(f"{indent_str}{prefix}Integer({v})")

            case BooleanNode(value=v):
                lines.append(f"{indent_str}{prefix}Boolean({v})")

            case IdentifierNode(name=n):
                lines.append(f"{indent_str}{prefix}Identifier({n})")

            case InfixNode(left=left, operator=op, right=right):
                lines.append(f"{indent_str}{prefix}Infix({op.literal})")
                lines.append(PrettyPrinter.print_ast(left, indent + 2, "left: "))
                lines.append(PrettyPrinter.print_ast(right, indent + 2, "right: "))

            case MinusNode(operand=operand):
                lines.append(f"{indent_str}{prefix}Minus")
                lines.append(PrettyPrinter.print_ast(operand, indent + 2))

            case NotNode(operand=operand):
                lines.append(f"{indent_str}{prefix}Not")
                lines.append(PrettyPrinter.print_ast(operand, indent + 2))

            case FunctionCallNode(name=name, arguments=args):
                lines.append(f"{indent_str}{prefix}FunctionCall({name})")
                for i, arg in enumerate(args):
                    lines.append(PrettyPrinter.print_ast(arg, indent + 4, f"arg[{i}]: "))

            case FunctionNode(parameters=params, body=body):
                names = ", ".join(p.name for p in params)
                lines.append(f"{indent_str}{prefix}Function(params=[{names}])")
                lines.append(PrettyPrinter.print_ast(body, indent + 4, "body: "))

            case AssignmentNode(name=name, value=value):
                lines.append(f"{indent_str}{prefix}Assignment({name})")
                lines.append(PrettyPrinter.print_ast(value, indent + 2, "value: "))

            case WhileNode(condition=cond, body=body):
                lines.append(f"{indent_str}{prefix}While")
                lines.append(PrettyPrinter.print_ast(cond, indent + 4, "condition: "))
                lines.append(PrettyPrinter.print_ast(body, indent + 4, "body: "))

            case IfNode(condition=cond, consequence=then_b, alternative=else_b):
                lines.append(f"{indent_str}{prefix}If")
                lines.append(PrettyPrinter.print_ast(cond, indent + 4, "condition: "))
                lines.append(PrettyPrinter.print_ast(then_b, indent + 4, "then: "))
                if else_b:
                    lines.append(PrettyPrinter.print_ast(else_b, indent + 4, "else: "))

            case BlockNode(forms=forms):
                lines.append(f"{indent_str}{prefix}Block")
                for i, form in enumerate(forms):
                    lines.append(PrettyPrinter.print_ast(form, indent + 4, f"form[{i}]: "))

            case ProgramNode(forms=forms):
                lines.append(f"{indent_str}{prefix}Program")
                for i, form in enumerate(forms):
                    lines.append(PrettyPrinter.print_ast(form, indent + 4, f"form[{i}]: "))

            case _:
                lines.append(f"{indent_str}{prefix}Unknown node type: {type(node)}")

        return "\n".join(line for line in lines if line)

    @staticmethod
    def print_surface(node: ASTNode) -> str:
        """Return source text for `node`.

        Infix and unary expressions are fully parenthesized and every form is
        terminated with `.`, so parsing the output yields an equivalent tree.
        """
        if node is None:
            return ""

        def _p(n: ASTNode) -> str:
            return PrettyPrinter.print_surface(n)

        def _block(b: BlockNode) -> str:
            if not b.forms:
                return "{}"
            return "{" + " ".join(_form(f) for f in b.forms) + "}"

        def _form(n: ASTNode) -> str:
            text = _p(n)
            # Conditionals and loops end in a block; a `.` there would be
            # skipped anyway.
            if isinstance(n, (IfNode, WhileNode)):
                return text
            return f"{text}."

        match node:
            case IntegerNode(value=v):
                # Only a wrapped literal is negative; print the digits that wrap to it.
                return str(v + 2**64) if v < 0 else str(v)
            case BooleanNode(value=v):
                return "verdadero" if v else "falso"
            case IdentifierNode(name=n):
                return n
            case InfixNode(left=l, operator=op, right=r):
                return f"({_p(l)} {op.literal} {_p(r)})"
            case MinusNode(operand=operand):
                return f"(-{_p(operand)})"
            case NotNode(operand=operand):
                return f"(no {_p(operand)})"
            case FunctionCallNode(name=name, arguments=args):
                return f"{name}(" + " ".join(f"{_p(a)}." for a in args) + ")"
            case FunctionNode(parameters=params, body=body):
                names = " ".join(f"{p.name}." for p in params)
                return f"función({names}) {_block(body)}"
            case AssignmentNode(name=name, value=value):
                return f"{name} := {_p(value)}"
            case IfNode(condition=cond, consequence=then_b, alternative=else_b):
                text = f"si {_p(cond)} {_block(then_b)}"
                if else_b is not None:
                    text += f" sino {_block(else_b)}"
                return text
            case WhileNode(condition=cond, body=body):
                return f"mientras {_p(cond)} {_block(body)}"
            case BlockNode():
                return _block(node)
            case ProgramNode(forms=forms):
                return " ".join(_form(f) for f in forms)
            case _:
                s = PrettyPrinter.print_ast(node)
                return " ".join(line.strip() for line in s.splitlines())
