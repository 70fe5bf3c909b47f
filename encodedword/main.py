"""Decode or encode RFC 2047 encoded words."""

from __future__ import annotations

import argparse
import logging
import logging.config
import os
import sys
from argparse import ArgumentParser, Namespace
from string import Template

from . import __version__
from .codec import Decoder, Encoder
from .config import CodecConfig
from .exceptions import EncodedWordError


def main() -> None:
    parser = _EncodedWordArgumentParser(description=__doc__)
    parser.add_argument('--debug', action='store_true',
                        help='increase printed output for debugging')
    parser.add_argument('--version', action='version',
                        version='%(prog)s ' + __version__)
    parser.add_argument('--logging-cfg', metavar='PATH',
                        help='config file for logging')
    parser.add_argument('--max-line-length', metavar='NUM', type=int,
                        help='maximum length of each encoded word')
    parser.add_argument('--fallback-charset', metavar='NAME',
                        help='charset used when decoding an unknown charset')
    subparsers = parser.add_subparsers(dest='command', required=True,
                                       metavar='COMMAND')

    decode = subparsers.add_parser('decode', help='decode encoded words')
    decode.add_argument('text', nargs='*',
                        help='text to decode, read from stdin if not given')
    decode.set_defaults(run=_run_decode)

    encode = subparsers.add_parser('encode', help='encode plain text')
    encode.add_argument('--encoding', choices=['Q', 'B'],
                        help='the content encoding, Q if not given')
    encode.add_argument('--charset', metavar='NAME',
                        help='the charset name, iso-8859-1 if not given')
    encode.add_argument('text', nargs='*',
                        help='text to encode, read from stdin if not given')
    encode.set_defaults(run=_run_encode)
    args = parser.parse_args()

    if args.logging_cfg:
        logging.config.fileConfig(args.logging_cfg)
    else:
        logging.basicConfig(level=logging.WARNING)
    if args.debug:
        logging.getLogger(__package__).setLevel(logging.DEBUG)

    try:
        config = CodecConfig.from_args(args)
        output = args.run(args, config)
    except (EncodedWordError, ValueError) as exc:
        parser.exit(1, f'{parser.prog}: {exc}\n')
    sys.stdout.write(output + '\n')


def _read_text(args: Namespace) -> str:
    if args.text:
        return ' '.join(args.text)
    return sys.stdin.read().removesuffix('\n')


def _run_decode(args: Namespace, config: CodecConfig) -> str:
    decoder = Decoder(config)
    return decoder.decode(_read_text(args))


def _run_encode(args: Namespace, config: CodecConfig) -> str:
    encoder = Encoder(config)
    return encoder.encode(_read_text(args))


class _EncodedWordArgumentParser(ArgumentParser):

    def __init__(self, **extra) -> None:
        formatter_class = argparse.ArgumentDefaultsHelpFormatter
        super().__init__(fromfile_prefix_chars='@',
                         formatter_class=formatter_class,
                         **extra)

    def convert_arg_line_to_args(self, arg_line: str) -> list[str]:
        try:
            return [Template(arg_line).substitute(os.environ)]
        except KeyError as exc:
            raise EnvironmentError(
                f'Missing environment variable: ${exc.args[0]}') from exc
