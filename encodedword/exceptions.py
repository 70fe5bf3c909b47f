"""Module containing the exceptions raised by the encoded word codec."""

from __future__ import annotations

from typing import Final

__all__ = ['EncodedWordError', 'UnsupportedEncoding', 'UnsupportedCharset',
           'MultiByteCharset', 'InvalidPayload']


class EncodedWordError(Exception):
    """The base exception for all errors raised by the codec."""
    pass


class UnsupportedEncoding(EncodedWordError, ValueError):
    """The content encoding given to the encoder was not one of the encodings
    defined by RFC 2047.

    Args:
        encoding: The rejected content encoding.

    """

    def __init__(self, encoding: object) -> None:
        super().__init__(f'Unsupported content encoding: {encoding!s}')
        self.encoding: Final = encoding


class UnsupportedCharset(EncodedWordError, LookupError):
    """The charset name is not known to the host as a text encoding, or may
    not be used for the requested operation.

    Args:
        charset: The rejected charset name.
        msg: Describes why the charset was rejected.

    """

    def __init__(self, charset: str,
                 msg: str = 'Unsupported charset') -> None:
        super().__init__(f'{msg}: {charset!r}')
        self.charset: Final = charset


class MultiByteCharset(UnsupportedCharset):
    """The Q encoding was requested with a charset that may use more than one
    byte per character.

    Args:
        charset: The rejected charset name.

    """

    def __init__(self, charset: str) -> None:
        super().__init__(charset, 'Q encoding requires a single-byte charset')


class InvalidPayload(EncodedWordError, ValueError):
    """The payload of an encoded word could not be decoded, e.g. because it
    was not valid Base64.

    Args:
        word: The raw text of the encoded word.

    """

    def __init__(self, word: str) -> None:
        super().__init__(f'Invalid encoded word payload: {word!r}')
        self.word: Final = word
