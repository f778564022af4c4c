class HuffmanError(Exception):
    """Base class for every error raised by canonhuff."""


class EmptyInputError(HuffmanError):
    """No symbols were supplied."""


class InvalidWeightError(HuffmanError, ValueError):
    """A symbol weight is negative, NaN or infinite."""


class InvalidLengthError(HuffmanError):
    """The code lengths cannot form a prefix code."""


class PrefixError(HuffmanError):
    """A codeword is a prefix of another codeword."""


class DecodeError(HuffmanError):
    """The bit sequence does not match the shape of the tree."""


class InvalidBitsError(HuffmanError, ValueError):
    """A bit sequence holds a value other than 0 or 1."""
