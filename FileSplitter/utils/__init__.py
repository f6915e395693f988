# FileSplitter/FileSplitter/utils/__init__.py
from .logging_config import setup_logger
from .encoding import TextEncoding, ENCODING_NAMES, get_encoding, sniff_encoding

__all__ = [
    'setup_logger',
    'TextEncoding',
    'ENCODING_NAMES',
    'get_encoding',
    'sniff_encoding'
]
