"""Tests for reading bot settings from the environment."""

import pytest

from aoc_leaderboard import SortMode
from aoc_leaderboard.config import BotConfig, get

REQUIRED = {
    "TOKEN": "discord-token",
    "GUILD_ID": "774561547930304536",
    "LEADERBOARD_ID": "12345",
    "AOC_SESSION": "s3cr3t",
}


@pytest.fixture
def env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for key in (*REQUIRED, "AOC_YEAR", "AOC_SORT"):
        monkeypatch.delenv(key, raising=False)
    for key, value in REQUIRED.items():
        monkeypatch.setenv(key, value)
    return monkeypatch


class TestGet:
    """Tests for the required-variable helper."""

    def test_returns_value(self, env: pytest.MonkeyPatch) -> None:
        assert get("TOKEN") == "discord-token"

    @pytest.mark.parametrize("value", [None, ""])
    def test_missing_raises(self, env: pytest.MonkeyPatch, value) -> None:
        if value is None:
            env.delenv("TOKEN")
        else:
            env.setenv("TOKEN", value)
        with pytest.raises(RuntimeError, match="'TOKEN' not set"):
            get("TOKEN")


class TestBotConfig:
    """Tests for BotConfig.from_env."""

    def test_reads_required_keys(self, env: pytest.MonkeyPatch) -> None:
        env.setenv("AOC_YEAR", "2022")
        config = BotConfig.from_env(load=False)

        assert config.guild_id == 774561547930304536
        assert config.leaderboard_id == 12345
        assert config.session_cookie == "s3cr3t"
        assert config.year == 2022
        assert config.sort is SortMode.BY_LOCAL_SCORE

    def test_secrets_not_in_repr(self, env: pytest.MonkeyPatch) -> None:
        text = repr(BotConfig.from_env(load=False))
        assert "s3cr3t" not in text
        assert "discord-token" not in text

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            pytest.param("stars", SortMode.BY_STARS, id="stars"),
            pytest.param("GLOBAL", SortMode.BY_GLOBAL_SCORE, id="case_insensitive"),
        ],
    )
    def test_sort_choice(self, env: pytest.MonkeyPatch, name: str, expected: SortMode) -> None:
        env.setenv("AOC_SORT", name)
        assert BotConfig.from_env(load=False).sort is expected

    def test_unknown_sort(self, env: pytest.MonkeyPatch) -> None:
        env.setenv("AOC_SORT", "alphabetical")
        with pytest.raises(RuntimeError, match="AOC_SORT"):
            BotConfig.from_env(load=False)

    def test_missing_session(self, env: pytest.MonkeyPatch) -> None:
        env.delenv("AOC_SESSION")
        with pytest.raises(RuntimeError, match="AOC_SESSION"):
            BotConfig.from_env(load=False)
