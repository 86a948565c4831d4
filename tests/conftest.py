"""Shared pytest fixtures."""

import pytest

from taxcalc.sdk.taxes import rules as rules_module


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Point config and data dirs at a temp directory so user settings never leak in."""
    config_dir = tmp_path / "config"
    data_dir = tmp_path / "data"

    monkeypatch.setenv("TAX_CALC_CONFIG_PATH", str(config_dir))
    monkeypatch.setenv("XDG_DATA_HOME", str(data_dir))
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    rules_module._load_tax_rules.cache_clear()
    yield {"config_dir": config_dir, "data_dir": data_dir / "tax-calc"}
    rules_module._load_tax_rules.cache_clear()
