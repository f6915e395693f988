# tests/conftest.py
import pytest
from FileSplitter import load_config

@pytest.fixture
def default_config():
    """Packaged defaults with a split size of 50 and quiet logging"""
    return load_config(split_size=50, verbosity='quiet')

@pytest.fixture
def sample_header():
    return ["id,name,value\n", "int,str,float\n"]

@pytest.fixture
def sample_data():
    """103 data rows"""
    return [f"{i},row{i},{i * 0.5}\n" for i in range(1, 104)]

@pytest.fixture
def make_file(tmp_path):
    """Write lines to a file under tmp_path and return its path"""
    def _make(name, lines, encoding='utf-8', bom=b''):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(bom + ''.join(lines).encode(encoding))
        return path
    return _make

@pytest.fixture
def read_lines():
    """Read an output file back as a list of lines without terminators"""
    def _read(path, encoding='utf-8-sig'):
        return path.read_text(encoding=encoding).splitlines()
    return _read
