from app.settings import get_settings


def test_get_settings_is_cached():
    get_settings.cache_clear()
    s1 = get_settings()
    s2 = get_settings()
    assert s1 is s2  # lru_cache returns the same instance


def test_access_code_defaults(monkeypatch):
    monkeypatch.delenv("ACCESS_CODE_TTL_SECONDS", raising=False)
    monkeypatch.delenv("ACCESS_CODE_KEY_PREFIX", raising=False)
    get_settings.cache_clear()
    s = get_settings()
    assert s.access_code_ttl_seconds == 300
    assert s.access_code_key_prefix == "accessCode:"
    get_settings.cache_clear()


def test_env_overrides_and_cache_clear(monkeypatch):
    # override via env and ensure cache is respected
    monkeypatch.setenv("ACCESS_CODE_TTL_SECONDS", "123")
    monkeypatch.setenv("CORS_ORIGINS", '["https://example.com"]')
    get_settings.cache_clear()
    s = get_settings()
    assert s.access_code_ttl_seconds == 123
    assert s.cors_origins == ["https://example.com"]

    # cleanup: remove env and reset cache
    monkeypatch.delenv("ACCESS_CODE_TTL_SECONDS", raising=False)
    monkeypatch.delenv("CORS_ORIGINS", raising=False)
    get_settings.cache_clear()
    s2 = get_settings()
    assert s2.access_code_ttl_seconds != 123  # back to default or another env value
