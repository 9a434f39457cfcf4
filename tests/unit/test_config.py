from src.config import Settings


class TestSettings:
    """Settings 테스트"""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("FREE_USER_DAILY_MESSAGE_LIMIT", raising=False)
        monkeypatch.delenv("ROOMS", raising=False)

        settings = Settings(_env_file=None)

        assert settings.LOG_LEVEL == "BASIC"
        assert settings.FREE_USER_DAILY_MESSAGE_LIMIT == 10
        assert settings.ROOMS == {"CtrlCat": "Cat lovers", "Dogorithm": "Dog enthusiasts"}

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("FREE_USER_DAILY_MESSAGE_LIMIT", "5")
        monkeypatch.setenv("ROOMS", '{"Birdnet": "Bird watchers"}')

        settings = Settings(_env_file=None)

        assert settings.LOG_LEVEL == "DEBUG"
        assert settings.FREE_USER_DAILY_MESSAGE_LIMIT == 5
        assert settings.ROOMS == {"Birdnet": "Bird watchers"}
