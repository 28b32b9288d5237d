"""
Exceptions raised by the Huffman codec.

Every error derives from HuffmanError and from the builtin exception
that the rest of the project already uses for the same situation,
so callers catching ValueError or EOFError keep working.
"""


class HuffmanError(Exception):
    """Base class for all codec failures."""


class EmptyInputError(HuffmanError, ValueError):
    """The tree builder was given an empty frequency table."""


class MalformedTreeError(HuffmanError, ValueError):
    """The serialized tree is truncated or contains an unknown marker."""


class InvalidFormatError(HuffmanError, ValueError):
    """The container does not start with the expected magic tag."""


class UnexpectedEndOfStreamError(HuffmanError, EOFError):
    """The payload ran out before the declared number of symbols was decoded."""
