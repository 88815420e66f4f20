"""Test configuration and fixtures."""

import pytest
from pathlib import Path
import tempfile

from sentencesplit.segmenters.sentence import SentenceSplitter


@pytest.fixture
def en_splitter():
    """Provide an English splitter using the bundled prefix table."""
    return SentenceSplitter("en")


@pytest.fixture
def sample_prefix_text():
    """Provide a small custom prefix file body."""
    return """#
# Temporary prefix file
#

Prefix1
Prefix2
No #NUMERIC_ONLY#
Fig   # trailing comment
"""


@pytest.fixture
def temp_prefix_file(sample_prefix_text):
    """Provide a temporary prefix file for testing."""
    with tempfile.NamedTemporaryFile(mode='w', suffix='.txt', delete=False,
                                     encoding='utf-8') as f:
        f.write(sample_prefix_text)
        temp_path = Path(f.name)

    yield temp_path

    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


@pytest.fixture
def sample_config_yaml():
    """Provide a sample config YAML for testing."""
    return """
language: de
"""


class SimpleTestLogger:
    """Simple logger for testing that captures messages."""

    def __init__(self):
        self.messages = []

    def info(self, msg: str, **kv):
        self.messages.append(('info', msg, kv))

    def warn(self, msg: str, **kv):
        self.messages.append(('warn', msg, kv))

    def error(self, msg: str, **kv):
        self.messages.append(('error', msg, kv))

    def clear(self):
        """Clear captured messages."""
        self.messages.clear()


@pytest.fixture
def test_logger():
    """Provide a test logger that captures messages."""
    return SimpleTestLogger()
