"""Decodes and encodes the RFC 2047 encoded words used to represent non-ASCII
text in message header fields.

See Also:
    `RFC 2047 <https://tools.ietf.org/html/rfc2047>`_

"""

from __future__ import annotations

import binascii
import logging
from collections.abc import Sequence
from typing import Final

from .charset import Charset
from .config import CodecConfig
from .cte import ContentTranscoder
from .encoding import ContentEncoding
from .exceptions import UnsupportedEncoding, InvalidPayload
from .folding import LineFolder
from .tokenizer import EncodedWordToken, Tokenizer

__all__ = ['Decoder', 'Encoder', 'decode', 'encode']

_log = logging.getLogger(__name__)


class Decoder:
    """Replaces the encoded words found in text with their decoded text.

    Args:
        config: The codec settings.
        tokenizer: Finds the encoded words in the text.

    """

    __slots__ = ['config', 'tokenizer']

    def __init__(self, config: CodecConfig = None,
                 tokenizer: Tokenizer = None) -> None:
        super().__init__()
        self.config: Final = config or CodecConfig()
        self.tokenizer: Final = tokenizer or Tokenizer()

    def decode(self, encoded: str) -> str:
        """Decode the encoded words in the text. Text that is not part of an
        encoded word is returned unchanged.

        Args:
            encoded: Text that may contain encoded words.

        Raises:
            :exc:`~encodedword.exceptions.InvalidPayload`

        """
        parts: list[str] = []
        for group in self.tokenizer.groups(encoded):
            if isinstance(group, str):
                parts.append(group)
            else:
                parts.append(self._decode_words(group))
        return ''.join(parts)

    def _decode_words(self, words: Sequence[EncodedWordToken]) -> str:
        first = words[0]
        if first.encoding == ContentEncoding.Unknown:
            _log.debug('Dropping encoded word with unknown encoding: %r',
                       first.word)
            return ''
        charset = Charset.resolve(first.charset, self.config.fallback_charset)
        transcoder = ContentTranscoder.of(first.encoding)
        payloads = [word.payload for word in words]
        try:
            return transcoder.decode_words(payloads, charset)
        except binascii.Error as exc:
            raw = ''.join(word.word for word in words)
            raise InvalidPayload(raw) from exc


class Encoder:
    """Builds the encoded words that represent plain text.

    Args:
        config: The codec settings.

    """

    __slots__ = ['config', 'folder']

    def __init__(self, config: CodecConfig = None) -> None:
        super().__init__()
        self.config: Final = config or CodecConfig()
        self.folder: Final = LineFolder(self.config.max_line_length)

    def encode(self, text: str, encoding: ContentEncoding = None,
               charset: str = None) -> str:
        """Encode the text into one or more encoded words. Empty text is
        returned as-is, without validating the other arguments.

        Args:
            text: The plain text to encode.
            encoding: The content encoding, defaulting to the configured
                encoding.
            charset: The charset name, defaulting to the configured charset.

        Raises:
            :exc:`~encodedword.exceptions.UnsupportedEncoding`
            :exc:`~encodedword.exceptions.UnsupportedCharset`
            :exc:`~encodedword.exceptions.MultiByteCharset`
            UnicodeEncodeError

        """
        if not text:
            return ''
        if encoding is None:
            encoding = self.config.default_encoding
        if charset is None:
            charset = self.config.default_charset
        if encoding == ContentEncoding.Unknown:
            raise UnsupportedEncoding(encoding)
        resolved = Charset.of(charset)
        transcoder = ContentTranscoder.of(encoding)
        payload = transcoder.encode(text, resolved)
        return self.folder.fold(charset, encoding, payload)


_decoder: Final = Decoder()
_encoder: Final = Encoder()


def decode(encoded: str) -> str:
    """Decode the encoded words in the text, using the default settings.

    See Also:
        :meth:`Decoder.decode`

    Args:
        encoded: Text that may contain encoded words.

    """
    return _decoder.decode(encoded)


def encode(text: str,
           encoding: ContentEncoding = ContentEncoding.QEncoding,
           charset: str = 'iso-8859-1') -> str:
    """Encode the text into one or more encoded words, using the default
    settings.

    See Also:
        :meth:`Encoder.encode`

    Args:
        text: The plain text to encode.
        encoding: The content encoding.
        charset: The charset name.

    """
    return _encoder.encode(text, encoding, charset)
