from __future__ import annotations

from argparse import Namespace
from collections.abc import Mapping
from typing import Any, Final, TypeVar

from .charset import Charset, fallback_charset
from .encoding import ContentEncoding
from .folding import max_line_length

__all__ = ['ConfigT', 'CodecConfig']

#: Type variable with an upper bound of :class:`CodecConfig`.
ConfigT = TypeVar('ConfigT', bound='CodecConfig')


class CodecConfig:
    """Configurable settings that control how encoded words are decoded and
    encoded.

    Args:
        max_line_length: The maximum length of each encoded word produced by
            the encoder.
        fallback_charset: The charset used to decode encoded words with an
            unsupported charset.
        default_charset: The charset used by the encoder when none is given.
        default_encoding: The content encoding used by the encoder when none
            is given.

    Raises:
        ValueError: A setting was not valid.

    """

    __slots__ = ['max_line_length', 'fallback_charset', 'default_charset',
                 'default_encoding']

    def __init__(self, *,
                 max_line_length: int = max_line_length,
                 fallback_charset: str = fallback_charset,
                 default_charset: str = fallback_charset,
                 default_encoding: ContentEncoding =
                 ContentEncoding.QEncoding) -> None:
        super().__init__()
        if max_line_length <= 0:
            raise ValueError(f'Invalid line length: {max_line_length}')
        if not Charset.is_supported(fallback_charset):
            raise ValueError(f'Invalid fallback charset: {fallback_charset}')
        if default_encoding == ContentEncoding.Unknown:
            raise ValueError(f'Invalid default encoding: {default_encoding}')
        self.max_line_length: Final = max_line_length
        self.fallback_charset: Final = fallback_charset
        self.default_charset: Final = default_charset
        self.default_encoding: Final = default_encoding

    @classmethod
    def parse_args(cls, args: Namespace) -> Mapping[str, Any]:
        """Given command-line arguments, return a dictionary of keywords that
        should be passed in to the :class:`CodecConfig` (or sub-class)
        constructor.

        Args:
            args: The arguments parsed from the command-line.

        """
        ret: dict[str, Any] = {}
        max_len = getattr(args, 'max_line_length', None)
        if max_len is not None:
            ret['max_line_length'] = max_len
        fallback = getattr(args, 'fallback_charset', None)
        if fallback is not None:
            ret['fallback_charset'] = fallback
        charset = getattr(args, 'charset', None)
        if charset is not None:
            ret['default_charset'] = charset
        tag = getattr(args, 'encoding', None)
        if tag is not None:
            ret['default_encoding'] = ContentEncoding.of(tag)
        return ret

    @classmethod
    def from_args(cls: type[ConfigT], args: Namespace,
                  **overrides: Any) -> ConfigT:
        """Build and return a new :class:`CodecConfig` using command-line
        arguments.

        Args:
            args: The arguments parsed from the command-line.
            overrides: Override keyword arguments to the config constructor.

        """
        parsed_args = {**cls.parse_args(args), **overrides}
        return cls(**parsed_args)
