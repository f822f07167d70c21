import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Keep tests away from the developer's own config and environment."""
    for var in ("MDTASKS_FILE", "MDTASKS_HEADING", "MDTASKS_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
