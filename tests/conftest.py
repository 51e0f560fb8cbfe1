import sys, pathlib

import pytest

# Ensure the project root directory is in sys.path so that the presence_types
# package (which lives at the repository root) can be imported when the test
# runner's working directory is the tests/ folder.
PROJECT_ROOT = pathlib.Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from presence_types import config


@pytest.fixture
def lenient(monkeypatch):
    """Turn strict validation off for a single test."""
    monkeypatch.setattr(config, "STRICT_VALIDATE", False)


@pytest.fixture(params=[True, False], ids=["shared-empty", "fresh-empty"])
def share_empty(request, monkeypatch):
    """Run a test with both absent-instance strategies."""
    monkeypatch.setattr(config, "SHARE_EMPTY", request.param)
    return request.param
