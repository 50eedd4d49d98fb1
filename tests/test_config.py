import pytest

from tabledrag_tree.config import Settings


@pytest.mark.unit
def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("ITEM_ID_LIMIT", "11")
    monkeypatch.setenv("DATABASE_URL", "sqlite:///./other.db")
    current = Settings()
    assert current.item_id_limit == 11
    assert current.database_url == "sqlite:///./other.db"


@pytest.mark.unit
def test_settings_do_not_reread_dotenv_per_instance(monkeypatch, tmp_path):
    (tmp_path / ".env").write_text("ITEM_ID_LIMIT=3\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ITEM_ID_LIMIT", raising=False)
    # .env is loaded once by load_dotenv at import, not re-read per instance
    assert Settings().item_id_limit is None
