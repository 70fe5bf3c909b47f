"""Assembles encoded words, folding long payloads across several lines."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Final

from .encoding import ContentEncoding
from .exceptions import UnsupportedCharset
from .tokenizer import fold_separator

__all__ = ['LineFolder', 'max_line_length']

_log = logging.getLogger(__name__)

#: The maximum length of an encoded word.
#:
#: See Also:
#:     `RFC 2047 2 <https://tools.ietf.org/html/rfc2047#section-2>`_
max_line_length: Final = 75


class LineFolder:
    """Wraps an encoded payload in one or more encoded words, so that no
    encoded word is longer than the maximum line length.

    Args:
        line_length: The maximum length of each line.

    """

    __slots__ = ['line_length']

    def __init__(self, line_length: int = max_line_length) -> None:
        super().__init__()
        self.line_length: Final = line_length

    @classmethod
    def wrap(cls, charset: str, encoding: ContentEncoding,
             payload: str) -> str:
        """Build a single encoded word.

        Args:
            charset: The charset name.
            encoding: The content encoding.
            payload: The encoded text.

        """
        return f'=?{charset}?{encoding.tag}?{payload}?='

    def chunk_length(self, charset: str, encoding: ContentEncoding) -> int:
        """The number of payload characters that fit in each encoded word.

        Args:
            charset: The charset name.
            encoding: The content encoding.

        """
        return self.line_length - len(self.wrap(charset, encoding, ''))

    def fold(self, charset: str, encoding: ContentEncoding,
             payload: str) -> str:
        """Build the encoded words for the payload. If the payload does not
        fit in a single encoded word, it is split into chunks and each encoded
        word is followed by a fold.

        Args:
            charset: The charset name.
            encoding: The content encoding.
            payload: The encoded text.

        Raises:
            :exc:`~encodedword.exceptions.UnsupportedCharset`

        """
        chunk_len = self.chunk_length(charset, encoding)
        if chunk_len <= 0:
            raise UnsupportedCharset(charset, 'Charset name too long')
        if len(payload) <= chunk_len:
            return self.wrap(charset, encoding, payload)
        _log.debug('Folding %d characters into chunks of %d',
                   len(payload), chunk_len)
        return ''.join(self.wrap(charset, encoding, chunk) + fold_separator
                       for chunk in self._split(payload, chunk_len))

    @classmethod
    def _split(cls, payload: str, chunk_len: int) -> Iterator[str]:
        for i in range(0, len(payload), chunk_len):
            yield payload[i:i + chunk_len]
