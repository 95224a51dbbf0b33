import pytest
from pydantic import ValidationError

from api.app.settings import PROJECT_ROOT, Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("PORT", "HOST", "PUBLIC_DIR", "RUN_ID_POLICY", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)
        s = Settings()
        assert s.host == "0.0.0.0"
        assert s.port == 3000
        assert s.run_id_policy == "counter"
        assert s.public_dir == str(PROJECT_ROOT / "public")

    def test_port_from_env(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        assert Settings().port == 8080

    def test_id_policy_from_env(self, monkeypatch):
        monkeypatch.setenv("RUN_ID_POLICY", "length")
        assert Settings().run_id_policy == "length"

    def test_unknown_id_policy(self, monkeypatch):
        monkeypatch.setenv("RUN_ID_POLICY", "random")
        with pytest.raises(ValidationError):
            Settings()
