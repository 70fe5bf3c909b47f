"""Resolves charset names found in, or requested for, encoded words against
the text encodings known to the :mod:`codecs` registry.

"""

from __future__ import annotations

import codecs
import logging
from codecs import CodecInfo
from functools import lru_cache
from typing import Final, Optional

from .exceptions import UnsupportedCharset

__all__ = ['Charset', 'fallback_charset']

_log = logging.getLogger(__name__)

#: The charset substituted when decoding an encoded word with an unsupported
#: charset. Every byte value decodes to a character in this charset.
fallback_charset: Final = 'iso-8859-1'

# Characters from several scripts, at least one of which any multi-byte
# charset encodes into more than one byte.
_probe: Final = ('é', 'Ā', 'Ж', 'α', 'א', 'ا',
                 'ก', 'あ', '中', '가', '€',
                 '\U0001f600', '+', '~')

_all_bytes: Final = bytes(range(256))


@lru_cache(maxsize=None)
def _is_usable(codec_name: str) -> bool:
    # Some text codecs reject the replace error handler or refuse to work at
    # all, e.g. idna and undefined.
    codec = codecs.lookup(codec_name)
    try:
        codec.decode(_all_bytes, 'replace')
        codec.encode('a')
    except UnicodeError:
        return False
    return True


@lru_cache(maxsize=None)
def _is_single_byte(codec_name: str) -> bool:
    codec = codecs.lookup(codec_name)
    encoded, _ = codec.encode('a')
    if len(encoded) != 1:
        return False
    for char in _probe:
        try:
            encoded, _ = codec.encode(char)
        except UnicodeEncodeError:
            continue
        if len(encoded) > 1:
            return False
    return True


class Charset:
    """A charset name paired with the codec that implements it.

    Args:
        name: The charset name, as it should appear in an encoded word.
        codec: The codec implementing the charset.

    """

    __slots__ = ['name', 'codec']

    def __init__(self, name: str, codec: CodecInfo) -> None:
        super().__init__()
        self.name: Final = name
        self.codec: Final = codec

    @classmethod
    def lookup(cls, name: str) -> Optional[Charset]:
        """Find the charset with the given name, compared case-insensitively,
        or ``None`` if the name is not a usable text encoding.

        Args:
            name: The charset name.

        """
        try:
            codec = codecs.lookup(name)
        except (LookupError, ValueError):
            return None
        if not getattr(codec, '_is_text_encoding', True):
            return None
        elif not _is_usable(codec.name):
            return None
        return cls(name, codec)

    @classmethod
    def is_supported(cls, name: str) -> bool:
        """True if the charset name is a usable text encoding.

        Args:
            name: The charset name.

        """
        return cls.lookup(name) is not None

    @classmethod
    def of(cls, name: str) -> Charset:
        """Find the charset with the given name, failing if it is not a usable
        text encoding.

        Args:
            name: The charset name.

        Raises:
            :exc:`~encodedword.exceptions.UnsupportedCharset`

        """
        charset = cls.lookup(name)
        if charset is None:
            raise UnsupportedCharset(name)
        return charset

    @classmethod
    def resolve(cls, name: str, fallback: str = fallback_charset) -> Charset:
        """Find the charset with the given name, substituting the fallback
        charset if it is not a usable text encoding.

        Args:
            name: The charset name.
            fallback: The charset name to use instead of an unknown name.

        """
        charset = cls.lookup(name)
        if charset is None:
            _log.debug('Unsupported charset %r, falling back to %r',
                       name, fallback)
            return cls.of(fallback)
        return charset

    @property
    def is_single_byte(self) -> bool:
        """True if every character representable in the charset is encoded as
        exactly one byte.

        """
        return _is_single_byte(self.codec.name)

    def encode(self, text: str) -> bytes:
        """Encode the text to bytes in this charset.

        Args:
            text: The text to encode.

        Raises:
            UnicodeEncodeError

        """
        encoded, _ = self.codec.encode(text)
        return encoded

    def decode(self, data: bytes) -> str:
        """Decode the bytes to text in this charset. Byte sequences the
        charset cannot decode are replaced with ``U+FFFD``. If the codec
        fails anyway, the bytes are decoded with :data:`fallback_charset`.

        Args:
            data: The bytes to decode.

        """
        try:
            decoded, _ = self.codec.decode(data, 'replace')
        except UnicodeError as exc:
            _log.debug('Charset %r failed to decode, falling back to %r: %s',
                       self.name, fallback_charset, exc)
            decoded = data.decode(fallback_charset)
        return decoded

    def __eq__(self, other) -> bool:
        if isinstance(other, Charset):
            return self.codec.name == other.codec.name
        return super().__eq__(other)

    def __hash__(self) -> int:
        return hash(self.codec.name)

    def __repr__(self) -> str:
        return f'<Charset name={self.name!r} codec={self.codec.name!r}>'
