from collections.abc import Hashable, Mapping
from typing import TypeVar

from bitarray import bitarray
from loguru import logger
from toolz import frequencies, pipe

from .errors import EmptyInputError, InvalidLengthError
from .utils.bits import Bits, as_bits, int_to_bits

T = TypeVar("T", bound=Hashable)


def code_lengths(code: Mapping[T, Bits]) -> dict[T, int]:
    return {symbol: len(as_bits(bits)) for symbol, bits in code.items()}


def length_histogram(lengths: Mapping[T, int]) -> dict[int, int]:
    """Count the symbols of each code length.

    The zero length is always present with a count of 0: it is the base case
    of the first code recurrence, not a real code length.
    """
    return pipe(
        lengths.values(),
        frequencies,
        lambda arg: {**arg, 0: 0},
        lambda arg: dict(sorted(arg.items())),
    )


def first_codes(histogram: Mapping[int, int]) -> dict[int, int]:
    """Numeric value of the first code of each length, as in RFC 1951 section 3.2.2."""
    max_length = max(histogram)
    code = 0
    next_code = {0: 0}
    for bits in range(1, max_length + 1):
        code = (code + histogram.get(bits - 1, 0)) << 1
        next_code[bits] = code
    return next_code


# Kraft inequality in integers: sum(2 ** (max_length - length)) <= 2 ** max_length
def _check_kraft(lengths: Mapping[T, int]) -> None:
    max_length = max(lengths.values())
    total = sum(1 << (max_length - length) for length in lengths.values())
    if total > 1 << max_length:
        raise InvalidLengthError(
            f"Code lengths violate the Kraft inequality (sum = {total}/{1 << max_length})"
        )


def canonicalize_lengths(lengths: Mapping[T, int]) -> dict[T, bitarray]:
    """Assign canonical codes to a ``symbol -> code length`` table.

    Symbols are visited in their natural order and each takes the next
    unused code of its own length, so codes of one length increase with the
    symbol. A lone symbol always gets the one-bit code ``0``.
    """
    if not lengths:
        raise EmptyInputError("Cannot canonicalize an empty code")

    if len(lengths) == 1:
        (symbol,) = lengths
        return {symbol: int_to_bits(0, 1)}

    for symbol, length in lengths.items():
        if length < 1:
            raise InvalidLengthError(f"Invalid code length {length} for symbol {symbol!r}")
    _check_kraft(lengths)

    histogram = length_histogram(lengths)
    logger.debug(f"Bit length counts: {histogram}")
    next_code = first_codes(histogram)
    logger.debug(f"First codes: {next_code}")

    canonical: dict[T, bitarray] = {}
    for symbol in sorted(lengths):
        length = lengths[symbol]
        canonical[symbol] = int_to_bits(next_code[length], length)
        next_code[length] += 1
    return canonical


def canonicalize(code: Mapping[T, Bits]) -> dict[T, bitarray]:
    """Canonical form of a prefix code. Only the codeword lengths are used."""
    if not code:
        raise EmptyInputError("Cannot canonicalize an empty code")
    return canonicalize_lengths(code_lengths(code))
