"""Tests for CheckerConfiguration loading and validation."""

from __future__ import annotations

import pytest

from note_compliance.core.config import CheckerConfiguration, ConfigDefaults
from note_compliance.core.enums import NoteFormat
from note_compliance.core.exceptions import ConfigurationError

ENV_KEYS = ("SIMULATED_DELAY_SECONDS", "DEFAULT_NOTE_TYPE", "LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    # setenv first so teardown also removes values a .env file loaded
    for key in ENV_KEYS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


class TestFromEnvironment:
    def test_defaults(self) -> None:
        config = CheckerConfiguration.from_environment()
        assert config.simulated_delay_seconds == ConfigDefaults.DEFAULT_SIMULATED_DELAY
        assert config.default_note_type is None
        assert config.log_level == "INFO"

    def test_reads_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("SIMULATED_DELAY_SECONDS", "0.25")
        monkeypatch.setenv("DEFAULT_NOTE_TYPE", "treatment plan")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        config = CheckerConfiguration.from_environment()
        assert config.simulated_delay_seconds == 0.25
        assert config.default_note_type == NoteFormat.TREATMENT_PLAN
        assert config.log_level == "DEBUG"

    def test_reads_env_file(self, tmp_path) -> None:
        env_file = tmp_path / "custom.env"
        env_file.write_text("SIMULATED_DELAY_SECONDS=0\nDEFAULT_NOTE_TYPE=dap\n")
        config = CheckerConfiguration.from_environment(env_file=str(env_file))
        assert config.simulated_delay_seconds == 0.0
        assert config.default_note_type == NoteFormat.DAP

    def test_reads_dotenv_in_working_directory(self, tmp_path) -> None:
        (tmp_path / ".env").write_text("LOG_LEVEL=warning\n")
        assert CheckerConfiguration.from_environment().log_level == "WARNING"

    @pytest.mark.parametrize(
        "key,value",
        [
            ("SIMULATED_DELAY_SECONDS", "soon"),
            ("SIMULATED_DELAY_SECONDS", "-1"),
            ("DEFAULT_NOTE_TYPE", "narrative"),
            ("LOG_LEVEL", "verbose"),
        ],
    )
    def test_invalid_values(self, monkeypatch, key: str, value: str) -> None:
        monkeypatch.setenv(key, value)
        with pytest.raises(ConfigurationError) as exc_info:
            CheckerConfiguration.from_environment()
        assert exc_info.value.context["setting"] == key

    def test_skip_validation(self, monkeypatch) -> None:
        monkeypatch.setenv("SIMULATED_DELAY_SECONDS", "-1")
        config = CheckerConfiguration.from_environment(validate_on_load=False)
        assert config.simulated_delay_seconds == -1.0


class TestToDict:
    def test_to_dict(self) -> None:
        config = CheckerConfiguration(simulated_delay_seconds=0, default_note_type=NoteFormat.BIRP)
        assert config.to_dict() == {
            "simulated_delay_seconds": 0,
            "default_note_type": "BIRP",
            "log_level": "INFO",
        }
