import pytest

ENV_VARS = [
    "MACFORGE_KEY",
    "MACFORGE_MESSAGE",
    "MACFORGE_CONSTANT_TIME",
    "LOG_PATH",
    "LOG_PASSWORD",
    "LOG_SALT",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def log_env(monkeypatch, tmp_path):
    log_path = tmp_path / "macforge.log"
    monkeypatch.setenv("LOG_PATH", str(log_path))
    monkeypatch.setenv("LOG_PASSWORD", "password de teste")
    monkeypatch.setenv("LOG_SALT", "139888fab4de")
    return log_path
