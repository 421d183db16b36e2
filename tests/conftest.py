"""
Shared test fixtures for gridtable tests.
Patches the config module so no test depends on a real .env or leaked flags.
"""

import pytest

from gridtable import config


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch):
    """Ensure every test starts with a clean config state."""
    monkeypatch.setattr(config, "env", {})
    monkeypatch.setattr(config, "LOG_ENABLED", False)
    monkeypatch.setattr(config, "JSON_INDENT", 2)
    monkeypatch.setattr(config, "BORDER_DEFAULT", True)
    monkeypatch.setattr(config, "MCP_RESPONSE_MODE", "legacy")
    monkeypatch.setattr(config, "RUNTIME_QUIET", False)
    monkeypatch.setattr(config, "RUNTIME_VERBOSE", False)


@pytest.fixture
def people():
    """Two-column table with two rows, one added each way."""
    from gridtable import create_table

    tb = create_table("id", "name")
    tb.add_row({"id": "1", "name": "Alice"})
    tb.add_row(["2", "Bob"])
    return tb
