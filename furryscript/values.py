"""
FurryScript Runtime Values
==========================
A runtime value is a ``str``, an ``int``, or a ``float``. Every operation
dispatches on the value's type; strings and numbers never coerce into
each other.
"""
from typing import Union

from .errors import RuntimeErrorKind, ScriptRuntimeError

Value = Union[str, int, float]


def negate(value: Value) -> Value:
    """Apply unary minus."""
    match value:
        case int() | float():
            return -value
        case _:
            raise ScriptRuntimeError(RuntimeErrorKind.UNSUPPORTED_OPERAND, f"-{type_name(value)}")


def apply_binary(operator: str, left: Value, right: Value) -> Value:
    """Apply ``+ - * /`` to two values.

    int with int stays int, except for an inexact division. Any float
    operand promotes the result to float. Strings only support ``+`` with
    another string.
    """
    match (left, right):
        case (str(), str()) if operator == "+":
            return left + right
        case (str(), _) | (_, str()):
            raise ScriptRuntimeError(
                RuntimeErrorKind.UNSUPPORTED_OPERAND,
                f"{type_name(left)} {operator} {type_name(right)}",
            )

    try:
        match operator:
            case "+":
                return left + right
            case "-":
                return left - right
            case "*":
                return left * right
            case "/":
                return _divide(left, right)
    except OverflowError:
        # An int too large to convert to float
        raise ScriptRuntimeError(
            RuntimeErrorKind.NUMERIC_OVERFLOW,
            f"{type_name(left)} {operator} {type_name(right)}",
        ) from None
    raise ScriptRuntimeError(RuntimeErrorKind.UNSUPPORTED_OPERATOR, operator)


def _divide(left: int | float, right: int | float) -> int | float:
    if right == 0:
        raise ScriptRuntimeError(RuntimeErrorKind.DIVISION_BY_ZERO, f"{type_name(left)} / 0")
    if isinstance(left, int) and isinstance(right, int) and left % right == 0:
        return left // right
    return left / right


def format_value(value: Value) -> str:
    """Format a value the way ``purr`` prints it."""
    match value:
        case str():
            return value
        case int():
            try:
                return str(value)
            except ValueError:
                # Past sys.get_int_max_str_digits()
                raise ScriptRuntimeError(
                    RuntimeErrorKind.NUMERIC_OVERFLOW, "integer too large to print",
                ) from None
        case float():
            return repr(value)
        case _:
            raise TypeError(f"Not a FurryScript value: {value!r}")


def type_name(value: Value) -> str:
    match value:
        case str():
            return "string"
        case int():
            return "integer"
        case float():
            return "float"
        case _:
            return type(value).__name__
