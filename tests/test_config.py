import pytest

from deckcode.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("DECKCODE_STRICT_FORMAT", raising=False)

        config = Settings(_env_file=None)

        assert config.strict_format is False

    def test_strict_format_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DECKCODE_STRICT_FORMAT", "true")

        assert Settings(_env_file=None).strict_format is True

    def test_unprefixed_variable_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("DECKCODE_STRICT_FORMAT", raising=False)
        monkeypatch.setenv("STRICT_FORMAT", "true")

        assert Settings(_env_file=None).strict_format is False
