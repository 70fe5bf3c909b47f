"""Defines the content encodings that may appear in an encoded word.

See Also:
    `RFC 2047 4 <https://tools.ietf.org/html/rfc2047#section-4>`_

"""

from __future__ import annotations

import enum

__all__ = ['ContentEncoding']


class ContentEncoding(enum.Enum):
    """The content encoding named by the single-character tag of an encoded
    word.

    """

    #: The tag was not recognized. Never a valid input for encoding.
    Unknown = enum.auto()

    #: The "Q" encoding, a restricted variant of quoted-printable.
    QEncoding = enum.auto()

    #: The "B" encoding, standard Base64.
    Base64 = enum.auto()

    @classmethod
    def of(cls, tag: str) -> ContentEncoding:
        """Classify the encoding tag character, case-insensitively.

        Args:
            tag: The tag found between the second and third ``?`` delimiters.

        """
        if tag in ('Q', 'q'):
            return cls.QEncoding
        elif tag in ('B', 'b'):
            return cls.Base64
        else:
            return cls.Unknown

    @property
    def tag(self) -> str:
        """The upper-case tag character used when building an encoded word.

        Raises:
            ValueError: The encoding is :attr:`.Unknown`.

        """
        if self == ContentEncoding.QEncoding:
            return 'Q'
        elif self == ContentEncoding.Base64:
            return 'B'
        raise ValueError(self)
