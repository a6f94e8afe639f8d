import pytest

from config import reset_config


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    for var in ("DAMAS_FIRST_TO_MOVE", "DAMAS_DRAW_OFFERS", "DAMAS_MEMOIZE",
                "DAMAS_LOG_LEVEL", "DAMAS_LOG_FILE"):
        monkeypatch.delenv(var, raising=False)
    reset_config()
    yield
    reset_config()
