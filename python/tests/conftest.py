"""Pytest configuration and fixtures."""

import pytest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from eijiro.ingest import eijiro_text
from eijiro.builder import build


@pytest.fixture
def sample_corpus_content():
    """Sample EIJIRO corpus: two senses of "cat", one of "catalog"."""
    return """■cat  {名} : feline animal■・The cat slept.
■cat  {動} : to move stealthily
■catalog : a list of items
"""


@pytest.fixture
def rich_corpus_content():
    """Sample EIJIRO corpus with complements, examples and odd headwords."""
    return """■abandon  {他動-1} : 〔計画などを〕断念する、中止する◆【用法】目的語は名詞■・She abandoned her dreams. 彼女は夢を捨てた。■・They abandoned ship.
■abandon  {名} : 奔放、気まま
■bat  {名-1} : 〔野球の〕バット
■cat  {名} : 猫、ネコ◆【複】cats■・The cat slept. 猫は眠った。
■cats : ネコ科

■Café : カフェ
■cut  {他動} : 切る
■rock'n'roll : ロックンロール
"""


@pytest.fixture
def sample_dictionary(sample_corpus_content):
    """Dictionary built from the sample corpus."""
    return build(eijiro_text.parse(sample_corpus_content))


@pytest.fixture
def rich_dictionary(rich_corpus_content):
    """Dictionary built from the rich corpus."""
    return build(eijiro_text.parse(rich_corpus_content))


@pytest.fixture
def corpus_file(tmp_path, rich_corpus_content):
    """Rich corpus written to a UTF-8 file."""
    path = tmp_path / "EIJIRO.txt"
    path.write_text(rich_corpus_content, encoding="utf-8")
    return path
