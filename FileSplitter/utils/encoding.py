# FileSplitter/FileSplitter/utils/encoding.py
import locale
from typing import NamedTuple, Union
from pathlib import Path
from ..errors import ConfigurationError

BOM_CHAR = '\ufeff'


class TextEncoding(NamedTuple):
    """Named text encoding used for both reading and writing a file"""
    name: str
    codec: str
    signature: bool


ENCODING_NAMES = ['Default', 'ASCII', 'UTF7', 'UTF8', 'Unicode', 'UTF32', 'BigEndianUnicode']

_CODECS = {
    'ASCII': ('ascii', False),
    'UTF7': ('utf-7', False),
    'UTF8': ('utf-8', True),
    'Unicode': ('utf-16-le', True),
    'BigEndianUnicode': ('utf-16-be', True),
    'UTF32': ('utf-32-be', True),
}

# No pattern is a prefix of another, so order does not matter
_SIGNATURES = [
    (b'\x2b\x2f\x76', 'UTF7'),
    (b'\xff\xfe', 'Unicode'),
    (b'\xfe\xff', 'BigEndianUnicode'),
    (b'\x00\x00\xfe\xff', 'UTF32'),
    (b'\xef\xbb\xbf', 'UTF8'),
]


def get_encoding(name: str) -> TextEncoding:
    """
    Resolve one of ENCODING_NAMES (case-insensitive) to a TextEncoding.

    Decoding is strict: a byte the codec can't decode (e.g. anything above
    0x7F under ASCII) fails that input with OpenFailureError rather than
    being replaced.
    """
    for known in ENCODING_NAMES:
        if known.lower() == str(name).lower():
            if known == 'Default':
                return TextEncoding('Default', locale.getpreferredencoding(False), False)
            codec, signature = _CODECS[known]
            return TextEncoding(known, codec, signature)
    raise ConfigurationError(f"Unknown encoding '{name}'. Available: {ENCODING_NAMES}")


def sniff_encoding(path: Union[str, Path]) -> TextEncoding:
    """
    Guess a file's encoding from the byte-order mark in its first 4 bytes.

    Falls back to the platform default encoding when no known mark is found.
    Errors opening the file propagate to the caller.
    """
    with open(path, 'rb') as f:
        head = f.read(4)

    for pattern, name in _SIGNATURES:
        if head.startswith(pattern):
            return get_encoding(name)
    return get_encoding('Default')
