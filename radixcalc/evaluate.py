import logging
from typing import Optional

from radixcalc.errors import Overflow
from radixcalc.node import Node, NodeKind
from radixcalc.parse import Parse
from radixcalc.token import Radix
from radixcalc.tokenize import tokenize
from radixcalc.utils import signed_range

logger = logging.getLogger(__name__)


def check_range(value: int, node: Node, expression: str, bits: Optional[int]) -> int:
    if bits is None:
        return value
    low, high = signed_range(bits)
    if not low <= value <= high:
        raise Overflow(
            expression,
            node.token.location,
            node.token.expression,
            f"integer overflow: result does not fit in {bits} bits",
        )
    return value


def evaluate_node(node: Node, expression: str = "", bits: Optional[int] = None) -> int:
    match node.kind:
        case NodeKind.Number:
            return check_range(node.value, node, expression, bits)
    left = evaluate_node(node.left, expression, bits)
    right = evaluate_node(node.right, expression, bits)
    match node.kind:
        case NodeKind.Add:
            return check_range(left + right, node, expression, bits)
        case NodeKind.Sub:
            return check_range(left - right, node, expression, bits)
        case NodeKind.Mul:
            return check_range(left * right, node, expression, bits)
    raise ValueError("invalid node kind")


def format_number(value: int, radix: Radix) -> str:
    if radix == Radix.Hexadecimal:
        return f"{value:X}"
    return f"{value}"


def format_result(value: int, radix: Radix) -> str:
    return f"{radix.prefix}{format_number(value, radix)}"


def evaluate(line: str, bits: Optional[int] = None) -> str:
    """Evaluate one input line such as ``"d10 + hA d"`` and render the result.

    Raises an :class:`~radixcalc.errors.EvalError` subclass when the line
    cannot be tokenized, parsed or (with ``bits`` set) computed without
    overflow.
    """
    tokens = tokenize(line)
    node, radix = Parse(tokens, line).parse_line()
    value = evaluate_node(node, line, bits)
    logger.debug("%r evaluated to %#x", line, value)
    try:
        return format_result(value, radix)
    except ValueError:
        # interpreter limit on int/str conversion digits
        raise Overflow(
            line,
            len(line.rstrip()) - 1,
            radix.prefix,
            "result too large to render",
        ) from None
