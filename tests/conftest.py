# conftest.py - shared fixtures

import io

import pytest
from rich.console import Console

from markov_textgen.utils.logger_utils import Log


@pytest.fixture
def quiet_log():
    """Logger that keeps everything in memory, nothing on the terminal."""
    return Log(level="DEBUG", console=Console(file=io.StringIO()))


@pytest.fixture
def corpus_file(tmp_path):
    def _write(text, name="corpus.txt"):
        p = tmp_path / name
        p.write_text(text, encoding="utf-8")
        return str(p)
    return _write
