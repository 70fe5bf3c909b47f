"""Implements the content encodings used for the payload of an encoded word.

See Also:
    `RFC 2047 4 <https://tools.ietf.org/html/rfc2047#section-4>`_

"""

from __future__ import annotations

import base64
import re
from abc import abstractmethod, ABCMeta
from collections.abc import Sequence
from re import Match
from typing import Final

from .charset import Charset
from .encoding import ContentEncoding
from .exceptions import UnsupportedEncoding, MultiByteCharset

__all__ = ['ContentTranscoder', 'specials']

#: Characters that are always escaped by the Q encoding, even though they are
#: otherwise printable ASCII.
specials: Final = frozenset(b'()<>@,;:/[]?.=\t')


class ContentTranscoder(metaclass=ABCMeta):
    """Decodes and encodes the payload of an encoded word, as decided by its
    content encoding tag.

    """

    @classmethod
    def of(cls, encoding: ContentEncoding) -> ContentTranscoder:
        """Return the transcoder for the content encoding.

        Args:
            encoding: The content encoding.

        """
        if encoding == ContentEncoding.QEncoding:
            return _QEncodingTranscoder()
        elif encoding == ContentEncoding.Base64:
            return _Base64Transcoder()
        else:
            return _UnknownTranscoder()

    def decode(self, payload: str, charset: Charset) -> str:
        """Decode and return the text of the payload.

        Args:
            payload: The encoded text of the encoded word.
            charset: The charset of the decoded bytes.

        Raises:
            binascii.Error: The payload was not valid Base64.

        """
        return self.decode_words([payload], charset)

    @abstractmethod
    def decode_words(self, payloads: Sequence[str], charset: Charset) -> str:
        """Decode and return the text of the payloads of adjacent encoded
        words that share a charset and content encoding, as if they were a
        single encoded word.

        Args:
            payloads: The encoded text of each encoded word, in order.
            charset: The charset of the decoded bytes.

        Raises:
            binascii.Error: The payload was not valid Base64.

        """
        ...

    @abstractmethod
    def encode(self, text: str, charset: Charset) -> str:
        """Encode and return the payload for the text.

        Args:
            text: The plain text to encode.
            charset: The charset used to convert the text to bytes.

        Raises:
            :exc:`~encodedword.exceptions.EncodedWordError`
            UnicodeEncodeError

        """
        ...


class _UnknownTranscoder(ContentTranscoder):

    def decode_words(self, payloads: Sequence[str], charset: Charset) -> str:
        return ''

    def encode(self, text: str, charset: Charset) -> str:
        raise UnsupportedEncoding(ContentEncoding.Unknown)


class _QEncodingTranscoder(ContentTranscoder):
    """Each run of consecutive ``=XX`` escapes is decoded through the charset
    as one byte string, so a multi-byte character such as ``=C3=A4`` in
    UTF-8 decodes to a single character. For single-byte charsets this is the
    same as decoding each escaped byte on its own.

    """

    _escapes = re.compile(r'(?:=[0-9a-fA-F]{2})+')

    _encode_table: Final = tuple(
        chr(byte) if byte <= 0x7f and byte not in specials
        else '=%02X' % byte
        for byte in range(256))

    def decode_words(self, payloads: Sequence[str], charset: Charset) -> str:
        decoded = ''.join(payloads).replace('_', ' ')

        def replace(match: Match[str]) -> str:
            raw = bytes.fromhex(match.group(0).replace('=', ''))
            return charset.decode(raw)
        return self._escapes.sub(replace, decoded)

    def encode(self, text: str, charset: Charset) -> str:
        if not charset.is_single_byte:
            raise MultiByteCharset(charset.name)
        table = self._encode_table
        encoded = ''.join(table[byte] for byte in charset.encode(text))
        return encoded.replace(' ', '_')


class _Base64Transcoder(ContentTranscoder):

    def decode_words(self, payloads: Sequence[str], charset: Charset) -> str:
        # A folded stream may be split at any offset, so only decode once a
        # whole number of 4-character groups is buffered. A padded word ends
        # the stream and is decoded on its own.
        data = bytearray()
        pending = ''
        for payload in payloads:
            pending += payload
            if len(pending) % 4 == 0 or pending.endswith('='):
                data += base64.b64decode(pending, validate=True)
                pending = ''
        if pending:
            data += base64.b64decode(pending, validate=True)
        return charset.decode(bytes(data))

    def encode(self, text: str, charset: Charset) -> str:
        raw = charset.encode(text)
        return base64.b64encode(raw).decode('ascii')
