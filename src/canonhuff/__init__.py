from loguru import logger

from .canonical import canonicalize, canonicalize_lengths, code_lengths, first_codes, length_histogram
from .decoder import decode, decode_prefix
from .errors import (
    DecodeError,
    EmptyInputError,
    HuffmanError,
    InvalidBitsError,
    InvalidLengthError,
    InvalidWeightError,
    PrefixError,
)
from .log import setup_logging
from .tree import HuffmanNode, Internal, Leaf, build_tree, extract_codes, format_tree, tree_from_code

# Silent unless setup_logging() is called.
logger.disable("canonhuff")

__all__ = [
    "DecodeError",
    "EmptyInputError",
    "HuffmanError",
    "HuffmanNode",
    "Internal",
    "InvalidBitsError",
    "InvalidLengthError",
    "InvalidWeightError",
    "Leaf",
    "PrefixError",
    "build_tree",
    "canonicalize",
    "canonicalize_lengths",
    "code_lengths",
    "decode",
    "decode_prefix",
    "extract_codes",
    "first_codes",
    "format_tree",
    "length_histogram",
    "setup_logging",
    "tree_from_code",
]
