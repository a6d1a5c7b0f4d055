"""Convert AST nodes into JSON-serializable structures.

This module provides `ast_to_json(node)` which returns a nested structure
of dicts/lists/primitives describing the AST node. It encodes the node kind,
its source position and its key fields; the driver's `--dump-ast` flag writes
the result with `json.dump`.
"""

from typing import Any, Dict, Optional
from ast_nodes import *


def ast_to_json(node: Optional[ASTNode]) -> Any:
    if node is None:
        return None

    data: Dict[str, Any] = {
        "node_type": node.type.name,
        "line": node.line,
        "column": node.column,
    }

    match node:
        case IntegerNode(value=v) | BooleanNode(value=v):
            data["value"] = v
        case IdentifierNode(name=n):
            data["name"] = n
        case InfixNode(left=l, operator=op, right=r):
            data["operator"] = op.literal
            data["left"] = ast_to_json(l)
            data["right"] = ast_to_json(r)
        case MinusNode(operand=operand) | NotNode(operand=operand):
            data["operand"] = ast_to_json(operand)
        case FunctionCallNode(name=name, arguments=args):
            data["name"] = name
            data["arguments"] = [ast_to_json(a) for a in args]
        case FunctionNode(parameters=params, body=body):
            data["parameters"] = [p.name for p in params]
            data["body"] = ast_to_json(body)
        case AssignmentNode(name=name, value=value):
            data["name"] = name
            data["value"] = ast_to_json(value)
        case IfNode(condition=cond, consequence=then_b, alternative=else_b):
            data["condition"] = ast_to_json(cond)
            data["consequence"] = ast_to_json(then_b)
            data["alternative"] = ast_to_json(else_b)
        case WhileNode(condition=cond, body=body):
            data["condition"] = ast_to_json(cond)
            data["body"] = ast_to_json(body)
        case BlockNode(forms=forms) | ProgramNode(forms=forms):
            data["forms"] = [ast_to_json(f) for f in forms]

    return data
