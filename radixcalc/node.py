from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from radixcalc.token import Token, TokenType


class NodeKind(IntEnum):
    Add = 1
    Sub = 2
    Mul = 3
    Number = 4


BINARY_KINDS = {
    TokenType.Plus: NodeKind.Add,
    TokenType.Minus: NodeKind.Sub,
    TokenType.Star: NodeKind.Mul,
}


@dataclass
class Node:
    kind: Optional[NodeKind] = None
    left: Optional["Node"] = None
    right: Optional["Node"] = None
    value: Optional[int] = None
    token: Optional["Token"] = None


def new_node(kind: NodeKind, token: Token) -> Node:
    node = Node(kind)
    node.token = token
    return node


def new_binary(token: Token, left: Node, right: Node) -> Node:
    node = new_node(BINARY_KINDS[token.kind], token)
    node.left = left
    node.right = right
    return node


def new_number(token: Token) -> Node:
    node = new_node(NodeKind.Number, token)
    node.value = token.value
    return node
