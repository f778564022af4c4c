import pytest
from bitarray import bitarray

from canonhuff.errors import InvalidBitsError
from canonhuff.utils.bits import as_bits, format_bits, int_to_bits


class TestBits:
    def test_as_bits_str(self) -> None:
        assert as_bits("0110") == bitarray("0110")

    def test_as_bits_bools(self) -> None:
        assert as_bits([False, True, True]) == bitarray("011")

    def test_as_bits_ints(self) -> None:
        assert as_bits([1, 0, 0]) == bitarray("100")

    def test_as_bits_empty(self) -> None:
        assert as_bits("") == bitarray()
        assert as_bits([]) == bitarray()

    def test_as_bits_copies(self) -> None:
        bits = bitarray("01")
        copy = as_bits(bits)
        copy.append(1)
        assert bits == bitarray("01")

    def test_as_bits_rejects_other_ints(self) -> None:
        with pytest.raises(InvalidBitsError):
            as_bits([1, 2, 0])

    def test_as_bits_rejects_other_characters(self) -> None:
        with pytest.raises(InvalidBitsError):
            as_bits("0120")
        with pytest.raises(InvalidBitsError):
            as_bits("01 10")

    def test_as_bits_rejects_strings_in_iterable(self) -> None:
        with pytest.raises(InvalidBitsError):
            as_bits(["0", "1"])

    def test_invalid_bits_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            as_bits([-1])

    def test_int_to_bits(self) -> None:
        assert int_to_bits(5, 4) == bitarray("0101")
        assert int_to_bits(0, 1) == bitarray("0")

    def test_format_bits(self) -> None:
        assert format_bits(bitarray("1110")) == "1110"
