# FileSplitter/FileSplitter/__init__.py
from .config import SplitConfig, load_config
from .errors import SplitterError, ConfigurationError, InvalidPathError, OpenFailureError
from .splitter import Batch, LineSplitter, plan_batches, resolve_inputs, split
from .utils import TextEncoding, ENCODING_NAMES, get_encoding, sniff_encoding, setup_logger

__all__ = [
    'SplitConfig', 'load_config',
    'SplitterError', 'ConfigurationError', 'InvalidPathError', 'OpenFailureError',
    'Batch', 'LineSplitter', 'plan_batches', 'resolve_inputs', 'split',
    'TextEncoding', 'ENCODING_NAMES', 'get_encoding', 'sniff_encoding', 'setup_logger'
]
