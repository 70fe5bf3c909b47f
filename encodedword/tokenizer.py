"""Finds the encoded words in a string of text.

See Also:
    `RFC 2047 2 <https://tools.ietf.org/html/rfc2047#section-2>`_

"""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from re import Match, Pattern
from typing import Final, Union

from .encoding import ContentEncoding

__all__ = ['EncodedWordToken', 'Tokenizer', 'fold_separator']

#: Inserted between adjacent encoded words to fold a long line.
fold_separator: Final = '\r\n '

_Item = Union[str, 'EncodedWordToken']
_Group = Union[str, Sequence['EncodedWordToken']]


@dataclass(frozen=True)
class EncodedWordToken:
    """An encoded word found by the :class:`Tokenizer`.

    Args:
        charset: The charset name, as found and not yet validated.
        encoding: The content encoding classified from the tag character.
        payload: The encoded text between the third and fourth ``?``
            delimiters.
        word: The full text of the encoded word.

    """

    charset: str
    encoding: ContentEncoding
    payload: str
    word: str

    @classmethod
    def of(cls, match: Match[str]) -> EncodedWordToken:
        """Build the token from a match of the tokenizer pattern.

        Args:
            match: The pattern match.

        """
        encoding = ContentEncoding.of(match.group('encoding'))
        return cls(match.group('charset'), encoding,
                   match.group('payload'), match.group(0))

    def continued_by(self, other: EncodedWordToken) -> bool:
        """True if the other token uses the same charset and content encoding,
        so that the two may be decoded as one.

        Args:
            other: The token immediately following this one.

        """
        return self.encoding == other.encoding \
            and self.charset.lower() == other.charset.lower()


class Tokenizer:
    """Splits text into runs of plain text and encoded words.

    Args:
        pattern: The compiled encoded word pattern, which must define the
            ``charset``, ``encoding``, and ``payload`` groups.

    """

    #: Matches the encoded words whose tag is one of ``Q`` or ``B``.
    default_pattern: Final = re.compile(
        r'=\?(?P<charset>.*?)\?(?P<encoding>[qQbB])\?(?P<payload>.*?)\?=',
        re.DOTALL)

    #: Matches encoded words with any single-character tag.
    broad_pattern: Final = re.compile(
        r'=\?(?P<charset>.*?)\?(?P<encoding>[^?])\?(?P<payload>.*?)\?=',
        re.DOTALL)

    _folded: Final = '?=' + fold_separator + '=?'
    _unfolded: Final = '?==?'

    __slots__ = ['pattern']

    def __init__(self, pattern: Pattern[str] = default_pattern) -> None:
        super().__init__()
        self.pattern: Final = pattern

    @classmethod
    def unfold(cls, text: str) -> str:
        """Join the adjacent encoded words that were separated by a fold.

        Args:
            text: The text to unfold.

        """
        return text.replace(cls._folded, cls._unfolded)

    def tokenize(self, text: str) -> Iterator[_Item]:
        """Unfold the text and then iterate through the plain text and the
        encoded words in the order they occur. A fold following the final
        encoded word at the end of the text is dropped, whether it was added
        by :class:`~encodedword.folding.LineFolder` or was already part of
        the caller's text, so ``=?cs?Q?a?=\\r\\n `` decodes to ``a``.

        Args:
            text: The text to tokenize.

        """
        unfolded = self.unfold(text)
        pos = 0
        for match in self.pattern.finditer(unfolded):
            start, end = match.span()
            if start > pos:
                yield unfolded[pos:start]
            yield EncodedWordToken.of(match)
            pos = end
        tail = unfolded[pos:]
        if tail and (pos == 0 or tail != fold_separator):
            yield tail

    def groups(self, text: str) -> Iterator[_Group]:
        """Like :meth:`.tokenize`, but adjacent encoded words with the same
        charset and content encoding are yielded together.

        Args:
            text: The text to tokenize.

        """
        group: list[EncodedWordToken] = []
        for item in self.tokenize(text):
            if isinstance(item, str):
                if group:
                    yield group
                    group = []
                yield item
            elif group and not group[-1].continued_by(item):
                yield group
                group = [item]
            else:
                group.append(item)
        if group:
            yield group
