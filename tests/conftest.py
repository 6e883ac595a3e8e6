"""Test configuration ensuring local package import when editable install not active.

If users invoke `pytest` outside the project's virtualenv, we still add the project
root to sys.path so `import fogbugz_app` works.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def _fresh_column_sets():
    """Column sets are cached per process; reload defaults around each test."""
    from fogbugz_app.core.column_config import load_column_sets

    load_column_sets(ROOT / "tests", refresh=True)
    yield
    load_column_sets(ROOT / "tests", refresh=True)
