# tests/test_config.py
import dataclasses
import pytest
import yaml
from omegaconf import OmegaConf
from FileSplitter.config import SplitConfig, load_config, load_default_config
from FileSplitter.errors import ConfigurationError

def test_packaged_defaults():
    defaults = load_default_config()
    assert defaults.split_size is None
    assert defaults.header_lines == 1
    assert defaults.detect_encoding == 'once'
    assert defaults.on_error == 'stop'

def test_load_config_with_overrides(default_config):
    assert default_config.split_size == 50
    assert default_config.header_lines == 1
    assert default_config.skip_header is False
    assert default_config.encoding is None
    assert default_config.text_encoding is None
    assert default_config.newline is None

def test_none_overrides_are_ignored():
    config = load_config(split_size=10, header_lines=None, encoding=None)
    assert config.header_lines == 1

def test_yaml_file_is_merged(tmp_path):
    config_path = tmp_path / "split.yaml"
    config_path.write_text(yaml.safe_dump({'split_size': 20, 'header_lines': 3, 'encoding': 'UTF8'}))

    config = load_config(str(config_path), header_lines=2)
    assert config.split_size == 20
    assert config.header_lines == 2
    assert config.text_encoding.codec == 'utf-8'

def test_omegaconf_node_is_merged():
    config = load_config(OmegaConf.create({'split_size': 5, 'line_ending': 'crlf'}))
    assert config.newline == '\r\n'

def test_split_size_is_required():
    with pytest.raises(ConfigurationError):
        load_config()

def test_missing_config_file(tmp_path):
    with pytest.raises(ConfigurationError):
        load_config(str(tmp_path / "nope.yaml"), split_size=5)

def test_malformed_config_file(tmp_path):
    config_path = tmp_path / "broken.yaml"
    config_path.write_text("split_size: [1, 2\n")
    with pytest.raises(ConfigurationError):
        load_config(str(config_path))

@pytest.mark.parametrize("content", ["- 1\n- 2\n", "42\n"])
def test_config_file_must_be_a_mapping(tmp_path, content):
    config_path = tmp_path / "list.yaml"
    config_path.write_text(content)
    with pytest.raises(ConfigurationError):
        load_config(config_path, split_size=5)

def test_config_object_must_be_a_mapping():
    with pytest.raises(ConfigurationError):
        load_config([('split_size', 5)])

def test_unknown_key_rejected():
    with pytest.raises(ConfigurationError):
        load_config({'split_size': 5, 'chunk_bytes': 100})

@pytest.mark.parametrize("overrides", [
    {'split_size': 0},
    {'split_size': -3},
    {'split_size': True},
    {'split_size': 10, 'header_lines': -1},
    {'split_size': 10, 'encoding': 'Latin9'},
    {'split_size': 10, 'detect_encoding': 'always'},
    {'split_size': 10, 'on_error': 'retry'},
    {'split_size': 10, 'line_ending': 'cr'},
    {'split_size': 10, 'verbosity': 'loud'},
])
def test_invalid_values_rejected(overrides):
    with pytest.raises(ConfigurationError):
        load_config(**overrides)

def test_config_is_immutable(default_config):
    with pytest.raises(dataclasses.FrozenInstanceError):
        default_config.split_size = 5

def test_header_lines_may_be_zero():
    assert SplitConfig(split_size=1, header_lines=0).header_lines == 0
