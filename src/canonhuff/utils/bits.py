from collections.abc import Iterable

from bitarray import bitarray
from bitarray.util import int2ba

from ..errors import InvalidBitsError

Bits = bitarray | str | Iterable[bool] | Iterable[int]


# Accepts a bitarray, a string like "0110" or any iterable of bools / 0 and 1.
# The leftmost bit is the decision taken at the root.
def as_bits(value: Bits) -> bitarray:
    if isinstance(value, bitarray):
        return bitarray(value, endian="big")
    if isinstance(value, str):
        if not set(value) <= {"0", "1"}:
            raise InvalidBitsError(f"Invalid bit string {value!r}")
        return bitarray(value, endian="big")

    bits = bitarray(endian="big")
    for bit in value:
        # True and False compare equal to 1 and 0
        if bit not in (0, 1):
            raise InvalidBitsError(f"Invalid bit {bit!r}")
        bits.append(bool(bit))
    return bits


# e.g. (5, 4) -> 0101
def int_to_bits(value: int, length: int) -> bitarray:
    return int2ba(value, length=length, endian="big")


def format_bits(bits: bitarray) -> str:
    return bits.to01()
