from app.core.config import DEFAULT_BASE_URL, Settings


def test_default_base_url(monkeypatch):
    monkeypatch.delenv("BASE_URL", raising=False)
    monkeypatch.delenv("BaseUrl", raising=False)
    assert Settings(_env_file=None).BASE_URL == DEFAULT_BASE_URL


def test_base_url_from_env(monkeypatch):
    monkeypatch.delenv("BaseUrl", raising=False)
    monkeypatch.setenv("BASE_URL", "https://sho.rt")
    assert Settings(_env_file=None).BASE_URL == "https://sho.rt"


def test_base_url_from_legacy_key(monkeypatch):
    monkeypatch.delenv("BASE_URL", raising=False)
    monkeypatch.setenv("BaseUrl", "https://legacy.example")
    assert Settings(_env_file=None).BASE_URL == "https://legacy.example"
