import pytest


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Run each settings test without LOOM_DATA_* variables nor a .env file around."""
    for name in ("LOOM_DATA_LOG_LEVEL", "LOOM_DATA_DEV"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
