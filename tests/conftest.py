import json
import os
from pathlib import Path

import pytest

# Set environment defaults for settings initialization
# Must be set BEFORE importing phraselint modules that use settings
os.environ["PHRASELINT_ENV"] = "test"
os.environ["PHRASELINT_LOG_LEVEL"] = "WARNING"
os.environ.pop("PHRASELINT_ENTRY", None)
os.environ.pop("PHRASELINT_REF", None)

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"

@pytest.fixture
def fixtures_dir():
    """Directory holding the static locale fixture directories."""
    return FIXTURES_DIR

@pytest.fixture
def locale_dir(tmp_path):
    """
    Build a locale directory under tmp_path.
    Values are dumped as JSON, raw strings are written as-is.
    """
    def _make(files):
        base = tmp_path / "i18n"
        base.mkdir(exist_ok=True)
        for name, content in files.items():
            text = content if isinstance(content, str) else json.dumps(content, ensure_ascii=False)
            (base / name).write_text(text, encoding="utf-8")
        return base
    return _make
