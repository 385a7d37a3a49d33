"""
FurryScript Interpreter
=======================
Tree-walking interpreter that executes the AST produced by the Parser.

Statements run strictly in program order. The first error aborts the
rest of the program. Function declarations are recorded but never
invoked; calling one is a runtime error.
"""
import logging
from typing import Callable

from .errors import RuntimeErrorKind, ScriptRuntimeError
from .parser import (
    ASTNode, ProgramNode, StringLiteralNode, IntegerLiteralNode, FloatLiteralNode,
    IdentifierNode, PrintNode, VariableDeclarationNode, VariableAccessNode,
    FunctionDeclarationNode, FunctionCallNode, UnaryExpressionNode, BinaryExpressionNode,
)
from .values import Value, apply_binary, format_value, negate


class Environment:
    """Name-to-value bindings for one run of a program."""

    def __init__(self):
        self._values: dict[str, Value] = {}

    def get(self, name: str, node: ASTNode | None = None) -> Value:
        if name not in self._values:
            line, col = (node.line, node.col) if node is not None else (0, 0)
            raise ScriptRuntimeError(RuntimeErrorKind.UNDEFINED_VARIABLE, name, line, col)
        return self._values[name]

    def set(self, name: str, value: Value):
        self._values[name] = value

    def __contains__(self, name: str) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def items(self):
        return self._values.items()

    def clear(self):
        self._values.clear()


class Interpreter:
    """
    Tree-walking interpreter for FurryScript programs.

    Usage:
        interp = Interpreter()
        interp.execute(ast)
    """

    def __init__(self, output_fn: Callable[[str], None] | None = None,
                 env: Environment | None = None):
        self.env = env if env is not None else Environment()
        self.output_fn = output_fn or (lambda s: print(s))
        self.functions: dict[str, FunctionDeclarationNode] = {}
        self.logger = logging.getLogger(__name__)

    def execute(self, node: ASTNode) -> None:
        """Execute a program or a single statement."""
        match node:
            case ProgramNode():
                for stmt in node.statements:
                    try:
                        self.execute(stmt)
                    except RecursionError:
                        raise ScriptRuntimeError(
                            RuntimeErrorKind.NESTING_TOO_DEEP, stmt.node_type, stmt.line, stmt.col,
                        ) from None
            case PrintNode():
                value = self.evaluate(node.argument, self.env)
                self.output_fn(self._located(node, format_value, value))
            case VariableDeclarationNode():
                value = self.evaluate(node.value, self.env)
                self.env.set(node.name, value)
                self.logger.debug("Bound %s = %r", node.name, value)
            case VariableAccessNode():
                self.env.get(node.name, node)
            case FunctionDeclarationNode():
                # Recorded for inspection only; bodies are never run.
                self.functions[node.name] = node
                self.logger.debug("Declared function %s/%d", node.name, len(node.parameters))
            case _:
                # Expression statement: evaluate for its errors, discard the result.
                self.evaluate(node, self.env)

    def evaluate(self, node: ASTNode, env: Environment) -> Value:
        """Evaluate an expression node against ``env`` without modifying it."""
        match node:
            case StringLiteralNode() | IntegerLiteralNode() | FloatLiteralNode():
                return node.value
            case IdentifierNode() | VariableAccessNode():
                return env.get(node.name, node)
            case UnaryExpressionNode():
                operand = self.evaluate(node.argument, env)
                if node.operator != "-":
                    raise ScriptRuntimeError(
                        RuntimeErrorKind.UNSUPPORTED_OPERATOR, node.operator, node.line, node.col,
                    )
                return self._located(node, negate, operand)
            case BinaryExpressionNode():
                left = self.evaluate(node.left, env)
                right = self.evaluate(node.right, env)
                return self._located(node, apply_binary, node.operator, left, right)
            case FunctionCallNode():
                kind = (RuntimeErrorKind.UNSUPPORTED_CALL if node.name in self.functions
                        else RuntimeErrorKind.UNDEFINED_FUNCTION)
                raise ScriptRuntimeError(kind, node.name, node.line, node.col)
            case _:
                raise TypeError(f"Cannot evaluate node type: {node.node_type}")

    @staticmethod
    def _located(node: ASTNode, fn, *args) -> Value:
        """Call a value operation, attaching ``node``'s position to any error it raises."""
        try:
            return fn(*args)
        except ScriptRuntimeError as e:
            raise ScriptRuntimeError(e.kind, e.subject, node.line, node.col) from None


def interpret(program: ProgramNode, output_fn: Callable[[str], None] | None = None,
              env: Environment | None = None) -> Interpreter:
    """Execute ``program`` with a fresh Interpreter and return it."""
    interp = Interpreter(output_fn=output_fn, env=env)
    interp.execute(program)
    return interp
