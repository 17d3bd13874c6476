import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from lanescore import config  # noqa: E402


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    """Keep engine settings at their defaults regardless of the caller's shell."""
    monkeypatch.setattr(config, "DEFAULT_ENTRY_MODE", "pin_by_pin")
    yield
