from btc_stats.config import Settings, get_settings

ENV_KEYS = (
    "BTC_STATS_COINGECKO_URL",
    "BTC_STATS_COINGECKO_API_KEY",
    "BTC_STATS_HTTP_TIMEOUT",
    "BTC_STATS_DEFAULT_DAYS",
    "BTC_STATS_BUFFER_SIZE",
    "BTC_STATS_LOG_LEVEL",
)


def _clear_env(monkeypatch) -> None:
    # setenv first so monkeypatch also undoes whatever load_dotenv writes
    for key in ENV_KEYS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)


def test_defaults_without_env(monkeypatch) -> None:
    _clear_env(monkeypatch)
    settings = Settings.from_env()

    assert settings.coingecko_url == "https://api.coingecko.com/api/v3"
    assert settings.coingecko_api_key is None
    assert settings.default_days == 90


def test_reads_dotenv_file(tmp_path, monkeypatch) -> None:
    _clear_env(monkeypatch)
    env_file = tmp_path / ".env"
    env_file.write_text(
        "BTC_STATS_COINGECKO_API_KEY=CG-demo-key\n"
        "BTC_STATS_COINGECKO_URL=https://pro-api.test/v3/\n"
        "BTC_STATS_HTTP_TIMEOUT=2.5\n"
        "BTC_STATS_LOG_LEVEL=debug\n"
    )

    settings = Settings.from_env(env_file=env_file)

    assert settings.coingecko_api_key == "CG-demo-key"
    assert settings.coingecko_url == "https://pro-api.test/v3"
    assert settings.http_timeout == 2.5
    assert settings.log_level == "DEBUG"


def test_process_env_overrides_dotenv_file(tmp_path, monkeypatch) -> None:
    _clear_env(monkeypatch)
    env_file = tmp_path / ".env"
    env_file.write_text("BTC_STATS_DEFAULT_DAYS=30\nBTC_STATS_BUFFER_SIZE=500\n")
    monkeypatch.setenv("BTC_STATS_DEFAULT_DAYS", "7")

    settings = Settings.from_env(env_file=env_file)

    assert settings.default_days == 7
    assert settings.buffer_size == 500


def test_get_settings_loads_dotenv_from_working_directory(tmp_path, monkeypatch) -> None:
    _clear_env(monkeypatch)
    (tmp_path / ".env").write_text("BTC_STATS_COINGECKO_API_KEY=CG-from-file\nBTC_STATS_DEFAULT_DAYS=14\n")
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    try:
        settings = get_settings()
    finally:
        get_settings.cache_clear()

    assert settings.coingecko_api_key == "CG-from-file"
    assert settings.default_days == 14
