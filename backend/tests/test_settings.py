from moneyvalue import db
from moneyvalue.settings import get_settings


def test_settings_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("MONEYVALUE_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("MONEYVALUE_DATABASE_URL", raising=False)
    get_settings.cache_clear()
    try:
        settings = get_settings()
        assert settings.data_dir == tmp_path
        assert settings.database_url == f"sqlite:///{(tmp_path / 'moneyvalue.db').as_posix()}"
    finally:
        get_settings.cache_clear()


def test_database_url_env_wins(monkeypatch, tmp_path):
    monkeypatch.setenv("MONEYVALUE_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("MONEYVALUE_DATABASE_URL", "  sqlite://  ")
    get_settings.cache_clear()
    try:
        assert db.get_database_url() == "sqlite://"
    finally:
        get_settings.cache_clear()
