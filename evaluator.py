"""Tree-walking evaluator.

`Evaluator.evaluate_program(program)` evaluates each top-level form in one
shared top-level `Environment` and returns the value of the last form.

Errors do not raise. A sub-evaluation that cannot produce a value (unbound
name, operands of different kinds, non-Boolean condition, calling something
that is not a function, wrong number of arguments, division by zero) yields
`None`, the "no value" result, and the reason is appended to
`self.diagnostics`. `None` then propagates upward through infix, `si` and
`mientras` until a form tolerates it.

Function calls evaluate their body in a fresh environment holding only the
parameter bindings, so functions do not see the caller's names.
"""

from __future__ import annotations
from typing import List, Optional
from ast_nodes import *
from diagnostics import Diagnostics
from objects import (
    BooleanObject,
    Environment,
    FunctionObject,
    IntegerObject,
    Object,
    wrap_int64,
)


def _truncating_div(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


class Evaluator:
    def __init__(self) -> None:
        self.env = Environment()
        self.diagnostics = Diagnostics()

    def error(self, node: ASTNode, message: str) -> Optional[Object]:
        """Record a semantic diagnostic; returns no value for the caller to pass on."""
        self.diagnostics.report("semantic", message, node.line, node.column)
        return None

    def evaluate_program(self, program: ProgramNode) -> Optional[Object]:
        result: Optional[Object] = None
        try:
            for form in program.forms:
                result = self.evaluate(form, self.env)
        except RecursionError:
            return self.error(program, "Maximum call depth exceeded")
        return result

    def evaluate_block(self, block: BlockNode, env: Environment) -> Optional[Object]:
        """Evaluate forms in order, keeping the last one that produced a value."""
        result: Optional[Object] = None
        for form in block.forms:
            value = self.evaluate(form, env)
            if value is not None:
                result = value
        return result

    def evaluate(self, node: ASTNode, env: Environment) -> Optional[Object]:
        match node:
            case AssignmentNode(name=name, value=value):
                env.set(name, self.evaluate(value, env))
                return None
            case IntegerNode(value=v):
                return IntegerObject(value=v)
            case BooleanNode(value=v):
                return BooleanObject(value=v)
            case IdentifierNode(name=name):
                if name not in env:
                    return self.error(node, f"Unbound name '{name}'")
                return env.get(name)
            case InfixNode():
                return self.evaluate_infix(node, env)
            case MinusNode(operand=operand):
                value = self.evaluate(operand, env)
                if value is None:
                    return None
                if not isinstance(value, IntegerObject):
                    return self.error(node, f"Cannot negate a {value.type}")
                return IntegerObject(value=wrap_int64(-value.value))
            case NotNode(operand=operand):
                value = self.evaluate(operand, env)
                if value is None:
                    return None
                if not isinstance(value, BooleanObject):
                    return self.error(node, f"'no' expects a boolean, got {value.type}")
                return BooleanObject(value=not value.value)
            case IfNode():
                return self.evaluate_if(node, env)
            case WhileNode():
                return self.evaluate_while(node, env)
            case FunctionNode():
                return FunctionObject(function=node)
            case FunctionCallNode():
                return self.evaluate_call(node, env)
            case BlockNode():
                return self.evaluate_block(node, env)
            case _:
                raise RuntimeError(f"Unhandled node type: {node}")

    def evaluate_condition(self, node: ASTNode, env: Environment) -> Optional[bool]:
        value = self.evaluate(node, env)
        if value is None:
            return None
        if not isinstance(value, BooleanObject):
            self.error(node, f"Condition must be a boolean, got {value.type}")
            return None
        return value.value

    def evaluate_infix(self, node: InfixNode, env: Environment) -> Optional[Object]:
        left = self.evaluate(node.left, env)
        right = self.evaluate(node.right, env)
        if left is None or right is None:
            return None

        op = node.operator
        if left.type != right.type:
            return self.error(
                node, f"Cannot apply '{op.literal}' to {left.type} and {right.type}"
            )

        if isinstance(left, FunctionObject):
            return self.error(node, f"Cannot apply '{op.literal}' to functions")

        if op.type == TokenType.EQUALS:
            return BooleanObject(value=left.value == right.value)

        if not isinstance(left, IntegerObject):
            return self.error(node, f"Cannot apply '{op.literal}' to {left.type}")

        a, b = left.value, right.value
        match op.type:
            case TokenType.PLUS:
                result = a + b
            case TokenType.MINUS:
                result = a - b
            case TokenType.MULTIPLICATION:
                result = a * b
            case TokenType.DIVISION:
                if b == 0:
                    return self.error(node, "Division by zero")
                result = _truncating_div(a, b)
            case _:
                return self.error(node, f"Unsupported operator '{op.literal}'")
        return IntegerObject(value=wrap_int64(result))

    def evaluate_if(self, node: IfNode, env: Environment) -> Optional[Object]:
        condition = self.evaluate_condition(node.condition, env)
        if condition is None:
            return None
        if condition:
            return self.evaluate_block(node.consequence, env)
        if node.alternative is not None:
            return self.evaluate_block(node.alternative, env)
        return None

    def evaluate_while(self, node: WhileNode, env: Environment) -> Optional[Object]:
        result: Optional[Object] = None
        while True:
            condition = self.evaluate_condition(node.condition, env)
            if condition is None:
                return None
            if not condition:
                return result
            result = self.evaluate_block(node.body, env)

    def evaluate_call(self, node: FunctionCallNode, env: Environment) -> Optional[Object]:
        if node.name not in env:
            return self.error(node, f"Unbound name '{node.name}'")
        callee = env.get(node.name)
        if not isinstance(callee, FunctionObject):
            kind = callee.type if callee is not None else "no value"
            return self.error(node, f"'{node.name}' is not a function ({kind})")

        parameters: List[IdentifierNode] = callee.function.parameters
        if len(parameters) != len(node.arguments):
            return self.error(
                node,
                f"'{node.name}' expects {len(parameters)} argument(s), "
                f"got {len(node.arguments)}",
            )

        local_env = Environment()
        for param, arg in zip(parameters, node.arguments):
            local_env.set(param.name, self.evaluate(arg, env))
        return self.evaluate_block(callee.function.body, local_env)
