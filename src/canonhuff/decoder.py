from collections.abc import Hashable
from typing import TypeVar

from .errors import DecodeError
from .tree import Internal, Leaf
from .utils.bits import Bits, as_bits

T = TypeVar("T", bound=Hashable)


def decode_prefix(bits: Bits, root: Leaf[T] | Internal[T]) -> tuple[T, int]:
    """Decode the codeword at the front of ``bits``.

    Returns the symbol and the number of bits consumed. Bits after the
    codeword are left alone.
    """
    bits = as_bits(bits)
    node = root
    consumed = 0
    while isinstance(node, Internal):
        if consumed == len(bits):
            raise DecodeError(f"Bit sequence ended after {consumed} bits inside the tree")
        node = node.right if bits[consumed] else node.left
        consumed += 1
        if node is None:
            raise DecodeError(f"No codeword starts with {bits[:consumed].to01()!r}")
    return node.symbol, consumed


def decode(bits: Bits, root: Leaf[T] | Internal[T]) -> T:
    """Decode a bit sequence holding exactly one codeword."""
    bits = as_bits(bits)
    symbol, consumed = decode_prefix(bits, root)
    if consumed != len(bits):
        raise DecodeError(
            f"{len(bits) - consumed} trailing bits after codeword {bits[:consumed].to01()!r}"
        )
    return symbol
