# FileSplitter/FileSplitter/config.py
from dataclasses import dataclass, fields, asdict
from importlib.resources import files
from pathlib import Path
from typing import Optional, Union, Dict, Any
import yaml
from omegaconf import OmegaConf, DictConfig
from .errors import ConfigurationError
from .utils.encoding import TextEncoding, get_encoding

DETECT_POLICIES = ['once', 'per_file']
ERROR_POLICIES = ['stop', 'continue']
LINE_ENDINGS = {'native': None, 'lf': '\n', 'crlf': '\r\n'}
VERBOSITY_LEVELS = ['quiet', 'normal', 'debug']


def _is_count(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class SplitConfig:
    """Validated, read-only settings for one split run"""
    split_size: int
    header_lines: int = 1
    skip_header: bool = False
    encoding: Optional[str] = None
    batch_naming: bool = False
    export_path: Optional[str] = None
    detect_encoding: str = 'once'
    on_error: str = 'stop'
    line_ending: str = 'native'
    dry_run: bool = False
    verbosity: str = 'normal'

    def __post_init__(self):
        if not _is_count(self.split_size) or self.split_size < 1:
            raise ConfigurationError(f"split_size must be a positive integer, got {self.split_size!r}")

        if not _is_count(self.header_lines) or self.header_lines < 0:
            raise ConfigurationError(f"header_lines must be a non-negative integer, got {self.header_lines!r}")

        if self.encoding is not None:
            get_encoding(self.encoding)

        if self.detect_encoding not in DETECT_POLICIES:
            raise ConfigurationError(f"detect_encoding must be one of {DETECT_POLICIES}, got '{self.detect_encoding}'")

        if self.on_error not in ERROR_POLICIES:
            raise ConfigurationError(f"on_error must be one of {ERROR_POLICIES}, got '{self.on_error}'")

        if self.line_ending not in LINE_ENDINGS:
            raise ConfigurationError(f"line_ending must be one of {list(LINE_ENDINGS)}, got '{self.line_ending}'")

        if self.verbosity not in VERBOSITY_LEVELS:
            raise ConfigurationError(f"verbosity must be one of {VERBOSITY_LEVELS}, got '{self.verbosity}'")

    @property
    def text_encoding(self) -> Optional[TextEncoding]:
        """Declared encoding, or None when it should be sniffed"""
        return get_encoding(self.encoding) if self.encoding is not None else None

    @property
    def newline(self) -> Optional[str]:
        """Value for open(newline=...) when writing outputs"""
        return LINE_ENDINGS[self.line_ending]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_default_config() -> DictConfig:
    """Load the packaged default settings"""
    config_dir = Path(files('FileSplitter').joinpath('configs'))
    with open(config_dir / 'default_split_config.yaml') as f:
        return OmegaConf.create(yaml.safe_load(f))


def load_config(config: Optional[Union[str, Path, Dict, DictConfig]] = None,
                **overrides) -> SplitConfig:
    """
    Build a SplitConfig from the packaged defaults.

    Args:
        config: Path to a YAML file, a dict, or an OmegaConf node merged over the defaults
        **overrides: Individual settings applied last; None values are ignored
    """
    merged = load_default_config()
    known = {f.name for f in fields(SplitConfig)}

    layers = []
    if config is not None:
        if isinstance(config, (str, Path)):
            try:
                with open(config) as f:
                    config = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError) as e:
                raise ConfigurationError(f"Could not read config file {config}: {e}") from e
        if not isinstance(config, (dict, DictConfig)):
            raise ConfigurationError(f"Config must be a mapping of settings, got {type(config).__name__}")
        layers.append(OmegaConf.create(config) if not isinstance(config, DictConfig) else config)

    layers.append(OmegaConf.create({k: v for k, v in overrides.items() if v is not None}))

    for layer in layers:
        unknown = set(layer.keys()) - known
        if unknown:
            raise ConfigurationError(f"Unknown config keys: {sorted(unknown)}")
        merged = OmegaConf.merge(merged, layer)

    values = OmegaConf.to_container(merged, resolve=True)
    if values.get('split_size') is None:
        raise ConfigurationError("split_size is required")
    if values.get('export_path') is not None:
        values['export_path'] = str(values['export_path'])

    return SplitConfig(**values)
