import heapq
import math
from collections.abc import Hashable, Iterable, Mapping
from dataclasses import dataclass
from itertools import count
from typing import Generic, TypeVar

from bitarray import bitarray
from loguru import logger

from .errors import EmptyInputError, InvalidWeightError, PrefixError
from .utils.bits import Bits, as_bits

T = TypeVar("T", bound=Hashable)


@dataclass(frozen=True)
class Leaf(Generic[T]):
    weight: float
    symbol: T

    def __str__(self) -> str:
        return f"symbol: {self.symbol}, weight: {self.weight}"

    def is_leaf(self) -> bool:
        return True


@dataclass(frozen=True)
class Internal(Generic[T]):
    weight: float
    # Only trees rebuilt from an incomplete code have a missing child.
    left: "Leaf[T] | Internal[T] | None"
    right: "Leaf[T] | Internal[T] | None"

    def __str__(self) -> str:
        return f"weight: {self.weight}, left: {self.left}, right: {self.right}"

    def is_leaf(self) -> bool:
        return False


HuffmanNode = Leaf | Internal


def build_tree(weighted_symbols: Iterable[tuple[float, T]]) -> HuffmanNode:
    """Build a Huffman tree from ``(weight, symbol)`` pairs.

    The two lightest nodes are merged until a single root remains. The node
    popped first becomes the left child. Nodes of equal weight leave the
    queue in the order they entered it: input leaves in input order, then
    merged nodes in the order they were created.

    A single symbol yields a bare ``Leaf`` with no merge.
    """
    order = count()
    queue: list[tuple[float, int, HuffmanNode]] = []
    for weight, symbol in weighted_symbols:
        if not math.isfinite(weight) or weight < 0:
            raise InvalidWeightError(f"Invalid weight {weight!r} for symbol {symbol!r}")
        queue.append((float(weight), next(order), Leaf(float(weight), symbol)))

    if not queue:
        raise EmptyInputError("Cannot build a Huffman tree from zero symbols")

    logger.debug(f"Building Huffman tree from {len(queue)} symbols")
    heapq.heapify(queue)
    while len(queue) > 1:
        _, _, left = heapq.heappop(queue)
        _, _, right = heapq.heappop(queue)
        merged = Internal(left.weight + right.weight, left, right)
        heapq.heappush(queue, (merged.weight, next(order), merged))

    root = queue[0][2]
    logger.debug(f"Huffman tree root weight: {root.weight}")
    return root


def extract_codes(root: HuffmanNode) -> dict[T, bitarray]:
    """Map every symbol of the tree to its path from the root (0 = left, 1 = right)."""
    codes: dict[T, bitarray] = {}
    stack: list[tuple[HuffmanNode, bitarray]] = [(root, bitarray(endian="big"))]
    while stack:
        node, path = stack.pop()
        match node:
            case Leaf(symbol=symbol):
                codes[symbol] = path
            case Internal(left=left, right=right):
                # Right is pushed first so that the left subtree is visited first.
                if right is not None:
                    stack.append((right, path + bitarray("1")))
                if left is not None:
                    stack.append((left, path + bitarray("0")))
    return codes


class _Branch:
    # Mutable scratch node used while codewords are inserted.
    def __init__(self) -> None:
        self.children: list["_Branch | Leaf | None"] = [None, None]


def tree_from_code(code: Mapping[T, Bits]) -> HuffmanNode:
    """Rebuild a decode tree from a prefix-free code.

    Each leaf weighs ``2 ** -len(codeword)``, so a complete code yields a
    root of weight 1.0. Branches no codeword passes through are ``None``.
    """
    entries = [(as_bits(bits), symbol) for symbol, bits in code.items()]
    if not entries:
        raise EmptyInputError("Cannot build a tree from an empty code")

    root = _Branch()
    for bits, symbol in entries:
        if not bits:
            if len(entries) > 1:
                raise PrefixError(f"Empty codeword of symbol {symbol!r} is a prefix of every codeword")
            return Leaf(1.0, symbol)
        _insert(root, bits, symbol)
    return _freeze(root)


def _insert(root: _Branch, bits: bitarray, symbol: T) -> None:
    current_node = root
    for bit in bits[:-1]:
        child = current_node.children[bit]
        if child is None:
            # Create an intermediate node
            child = current_node.children[bit] = _Branch()
        elif isinstance(child, Leaf):
            raise PrefixError(
                f"Codeword of symbol {child.symbol!r} is a prefix of {bits.to01()!r} of symbol {symbol!r}"
            )
        current_node = child

    if current_node.children[bits[-1]] is not None:
        raise PrefixError(f"Codeword {bits.to01()!r} of symbol {symbol!r} collides with another codeword")
    current_node.children[bits[-1]] = Leaf(2.0 ** -len(bits), symbol)


# Post-order pass turning the scratch branches into Internal nodes.
def _freeze(root: _Branch) -> Internal:
    frozen: dict[int, Internal] = {}
    stack: list[tuple[_Branch, bool]] = [(root, False)]
    while stack:
        branch, children_done = stack.pop()
        if not children_done:
            stack.append((branch, True))
            stack.extend((child, False) for child in branch.children if isinstance(child, _Branch))
            continue
        left, right = (
            frozen.pop(id(child)) if isinstance(child, _Branch) else child for child in branch.children
        )
        weight = sum(child.weight for child in (left, right) if child is not None)
        frozen[id(branch)] = Internal(weight, left, right)
    return frozen[id(root)]


def format_tree(root: HuffmanNode) -> str:
    """Render the tree sideways: right subtree above, left subtree below."""
    lines: list[str] = []
    stack: list[tuple[HuffmanNode | None, int, bool]] = [(root, 0, False)]
    while stack:
        node, start_depth, children_done = stack.pop()
        if node is None:
            continue
        if isinstance(node, Leaf):
            lines.append(f'{" " * 4 * start_depth} -> [{node.symbol}]')
        elif children_done:
            lines.append(f'{" " * 4 * start_depth} -> ({node.weight:g})')
        else:
            # Popped in reverse: right subtree, this node, then left subtree.
            stack.append((node.left, start_depth + 1, False))
            stack.append((node, start_depth, True))
            stack.append((node.right, start_depth + 1, False))
    return "\n".join(lines)
