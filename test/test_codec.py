import unittest

from encodedword.codec import Decoder, Encoder, decode, encode
from encodedword.config import CodecConfig
from encodedword.encoding import ContentEncoding
from encodedword.exceptions import UnsupportedEncoding, UnsupportedCharset, \
    MultiByteCharset, InvalidPayload
from encodedword.tokenizer import Tokenizer

_hola = '¡Hola, señor!'


class TestDecode(unittest.TestCase):

    def test_empty(self) -> None:
        self.assertEqual('', decode(''))

    def test_no_encoded_words(self) -> None:
        text = 'Re: a = b? maybe ?= not =? really'
        self.assertEqual(text, decode(text))

    def test_lower_case_q(self) -> None:
        self.assertEqual(_hola, decode('=?iso-8859-1?q?=A1Hola,_se=F1or!?='))

    def test_upper_case_q(self) -> None:
        self.assertEqual(_hola, decode('=?iso-8859-1?Q?=A1Hola,_se=F1or!?='))

    def test_upper_case_b(self) -> None:
        self.assertEqual('Some test text',
                         decode('=?iso-8859-1?B?U29tZSB0ZXN0IHRleHQ=?='))

    def test_lower_case_b(self) -> None:
        self.assertEqual('Some test text',
                         decode('=?iso-8859-1?b?U29tZSB0ZXN0IHRleHQ=?='))

    def test_multiple_words(self) -> None:
        encoded = 'Normal and multiple =?iso-8859-1?Q?=A1Hola,_se=F1or!?= ' \
            'quoted blocks =?iso-8859-1?B?U29tZSB0ZXN0IHRleHQ=?='
        self.assertEqual('Normal and multiple ¡Hola, señor! quoted blocks '
                         'Some test text', decode(encoded))

    def test_fallback_charset(self) -> None:
        self.assertEqual(_hola, decode('=?wrong?Q?=A1Hola,_se=F1or!?='))
        self.assertEqual(_hola,
                         decode('=?wrong-charset?Q?=A1Hola,_se=F1or!?='))

    def test_unrecognized_encoding(self) -> None:
        encoded = '=?iso-8859-1?Z?=A1Hola,_se=F1or!?='
        self.assertEqual(encoded, decode(encoded))

    def test_unknown_encoding_dropped(self) -> None:
        decoder = Decoder(tokenizer=Tokenizer(Tokenizer.broad_pattern))
        self.assertEqual('AB', decoder.decode('A=?iso-8859-1?Z?=A1Hola?=B'))
        self.assertEqual('A¡Hola',
                         decoder.decode('A=?iso-8859-1?Q?=A1Hola?='))

    def test_invalid_hex(self) -> None:
        self.assertEqual('=Z4Hola, señor!',
                         decode('=?iso-8859-1?Q?=Z4Hola,_se=F1or!?='))

    def test_utf8(self) -> None:
        self.assertEqual('mingi äge fail.ddoc',
                         decode('=?UTF-8?Q?mingi_=C3=A4ge_fail=2Eddoc?='))
        self.assertEqual('листи-запрошення.doc', decode(
            '=?UTF-8?B?0LvQuNGB0YLQuC3Qt9Cw0L/RgNC+0YjQtdC90L3Rjy5kb2M=?='))

    def test_folded(self) -> None:
        encoded = 'A=?iso-8859-1?Q?x?=\r\n =?iso-8859-1?Q?y?=B'
        self.assertEqual('AxyB', decode(encoded))

    def test_folded_split_escape(self) -> None:
        encoded = '=?iso-8859-1?Q?se=F?=\r\n =?iso-8859-1?Q?1or?='
        self.assertEqual('señor', decode(encoded))

    def test_folded_different_charsets(self) -> None:
        encoded = '=?iso-8859-1?Q?=E9?=\r\n =?utf-8?Q?=C3=A9?='
        self.assertEqual('éé', decode(encoded))

    def test_folded_independent_base64(self) -> None:
        encoded = '=?iso-8859-1?B?U29tZQ==?=\r\n =?iso-8859-1?B?IHRleHQ=?='
        self.assertEqual('Some text', decode(encoded))

    def test_other_whitespace_not_unfolded(self) -> None:
        encoded = '=?iso-8859-1?Q?x?=\n\t=?iso-8859-1?Q?y?='
        self.assertEqual('x\n\ty', decode(encoded))

    def test_invalid_base64(self) -> None:
        with self.assertRaises(InvalidPayload) as raised:
            decode('=?iso-8859-1?B?abc?=')
        self.assertEqual('=?iso-8859-1?B?abc?=', raised.exception.word)
        with self.assertRaises(ValueError):
            decode('=?iso-8859-1?B?ab!d?=')

    def test_invalid_base64_padding_folded(self) -> None:
        encoded = '=?iso-8859-1?B?QQ=?=\r\n =?iso-8859-1?B?=?='
        with self.assertRaises(InvalidPayload):
            decode(encoded)

    def test_unusable_codec_falls_back(self) -> None:
        self.assertEqual('A', decode('=?idna?B?QQ==?='))
        self.assertEqual('A', decode('=?idna?Q?=41?='))
        self.assertEqual('A', decode('=?undefined?B?QQ==?='))
        self.assertEqual('A', decode('=?undefined?Q?=41?='))

    def test_trailing_fold_in_text(self) -> None:
        self.assertEqual('a', decode('=?iso-8859-1?Q?a?=\r\n '))
        self.assertEqual('a\r\n b', decode('=?iso-8859-1?Q?a?=\r\n b'))


class TestEncode(unittest.TestCase):

    def test_empty(self) -> None:
        self.assertEqual('', encode(''))
        self.assertEqual('', encode('', ContentEncoding.Unknown, 'bogus'))

    def test_q_encoding(self) -> None:
        self.assertEqual('=?iso-8859-1?Q?=A1Hola=2C_se=F1or!?=',
                         encode(_hola))

    def test_base64(self) -> None:
        self.assertEqual('=?iso-8859-1?B?U29tZSB0ZXN0IHRleHQ=?=',
                         encode('Some test text', ContentEncoding.Base64))
        self.assertEqual('=?utf-8?B?c2XDsW9y?=',
                         encode('señor', ContentEncoding.Base64, 'utf-8'))

    def test_special_characters(self) -> None:
        self.assertEqual('=?iso-8859-1?Q?a=2C_b?=', encode('a, b'))

    def test_underscore_not_escaped(self) -> None:
        encoded = encode('a_b')
        self.assertEqual('=?iso-8859-1?Q?a_b?=', encoded)
        self.assertEqual('a b', decode(encoded))

    def test_unknown_encoding(self) -> None:
        with self.assertRaises(UnsupportedEncoding):
            encode('test', ContentEncoding.Unknown, 'iso-8859-1')

    def test_unsupported_charset(self) -> None:
        with self.assertRaises(UnsupportedCharset) as raised:
            encode('test', ContentEncoding.QEncoding, 'not-a-real-charset')
        self.assertEqual('not-a-real-charset', raised.exception.charset)

    def test_multi_byte_charset(self) -> None:
        with self.assertRaises(MultiByteCharset):
            encode('test', ContentEncoding.QEncoding, 'utf-8')

    def test_unrepresentable_text(self) -> None:
        with self.assertRaises(UnicodeEncodeError):
            encode('中文', ContentEncoding.QEncoding, 'iso-8859-1')

    def test_unusable_codec(self) -> None:
        for charset in ('undefined', 'idna'):
            with self.assertRaises(UnsupportedCharset):
                encode('x', ContentEncoding.Base64, charset)

    def test_folded_line_length(self) -> None:
        encoded = encode('Grüße aus Köln! ' * 20, ContentEncoding.Base64)
        self.assertTrue(encoded.endswith('\r\n '))
        lines = encoded.split('\r\n ')
        self.assertEqual('', lines[-1])
        self.assertGreater(len(lines), 2)
        for line in lines:
            self.assertLessEqual(len(line), 75)

    def test_config_defaults(self) -> None:
        config = CodecConfig(default_charset='utf-8',
                             default_encoding=ContentEncoding.Base64,
                             max_line_length=30)
        encoder = Encoder(config)
        encoded = encoder.encode('Some test text')
        self.assertEqual('=?utf-8?B?U29tZSB0ZXN0IHRleH?=\r\n =?utf-8?B?Q=?='
                         '\r\n ', encoded)
        self.assertEqual('Some test text', decode(encoded))


class TestRoundTrip(unittest.TestCase):

    _texts = {
        'iso-8859-1': 'Grüße aus Köln, señor! ¿Qué tal? (ñ/ø) [x] <y> @z;',
        'cp1252': 'Ça coûte 10 € – très «cher».',
        'iso-8859-15': 'Œuvre à 5 € pour é prix: Š, Ž.',
        'koi8-r': 'Привет, мир! Как дела?',
        'ascii': 'Plain (ASCII) text: a=b, c?d. [ok] <tab>\t.'}

    def _round_trip(self, encoding: ContentEncoding) -> None:
        for charset, text in self._texts.items():
            for value in (text, text * 10):
                encoded = encode(value, encoding, charset)
                self.assertEqual(value, decode(encoded),
                                 f'{charset}: {encoded!r}')

    def test_q_encoding(self) -> None:
        self._round_trip(ContentEncoding.QEncoding)

    def test_base64(self) -> None:
        self._round_trip(ContentEncoding.Base64)

    def test_base64_multi_byte(self) -> None:
        text = 'листи-запрошення, 中文, 한국어 ' * 5
        for charset in ('utf-8', 'utf-16', 'gb18030'):
            encoded = encode(text, ContentEncoding.Base64, charset)
            self.assertEqual(text, decode(encoded), charset)

    def test_surrounding_text(self) -> None:
        encoded = encode('señor ' * 20)
        self.assertEqual('Subject: ' + 'señor ' * 20 + 'x',
                         decode('Subject: ' + encoded.rstrip() + 'x'))
        self.assertEqual('Subject: ' + 'señor ' * 20 + '\r\n x',
                         decode('Subject: ' + encoded + 'x'))
