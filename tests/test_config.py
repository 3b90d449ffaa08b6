"""Tests for configuration loading and validation."""

from datetime import date, datetime

import pytest

from maat_insight.config import AnalysisConfig, load_config
from maat_insight.exceptions import ConfigurationError, InvalidConfigError


class TestDefaults:
    def test_defaults(self):
        """Defaults match the documented thresholds."""
        config = AnalysisConfig()
        assert config.analysis == "authors"
        assert config.min_revs == 5
        assert config.min_shared_revs == 5
        assert config.min_coupling == 30
        assert config.max_coupling == 100
        assert config.max_changeset_size == 30
        assert config.input_encoding == "utf-8"
        assert config.rows is None

    def test_frozen(self):
        """Config instances are immutable."""
        with pytest.raises(AttributeError):
            AnalysisConfig().min_revs = 1


class TestValidation:
    @pytest.mark.parametrize(
        "overrides",
        [
            {"min_revs": -1},
            {"min_coupling": 101},
            {"min_coupling": 60, "max_coupling": 50},
            {"max_changeset_size": 0},
            {"rows": 0},
            {"output_format": "json"},
            {"expression_to_match": "(unclosed"},
            {"age_time_now": "10/01/2024"},
            {"age_time_now": 20240110},
        ],
    )
    def test_invalid_values(self, overrides):
        """Out-of-range or malformed values are rejected."""
        with pytest.raises(InvalidConfigError):
            AnalysisConfig(**overrides)

    def test_age_time_now_from_iso_string(self):
        """ISO date strings become dates."""
        config = AnalysisConfig(age_time_now="2024-01-10")
        assert config.age_time_now == date(2024, 1, 10)
        assert config.reference_date() == date(2024, 1, 10)

    def test_age_time_now_from_datetime(self):
        """A datetime keeps only its date part."""
        config = AnalysisConfig(age_time_now=datetime(2024, 5, 1, 10, 30))
        assert config.age_time_now == date(2024, 5, 1)
        assert type(config.age_time_now) is date

    def test_reference_date_defaults_to_today(self):
        assert AnalysisConfig().reference_date() == date.today()


class TestLoadConfig:
    def test_overrides_win_and_none_is_ignored(self):
        """Unset CLI flags do not mask defaults."""
        config = load_config(min_revs=2, analysis=None)
        assert config.min_revs == 2
        assert config.analysis == "authors"

    def test_project_file(self, tmp_path):
        """maat-insight.toml in the working directory is picked up."""
        (tmp_path / "cwd" / "maat-insight.toml").write_text('analysis = "coupling"\nmin_revs = 3\n')
        config = load_config()
        assert config.analysis == "coupling"
        assert config.min_revs == 3

    def test_explicit_file_beats_project_file(self, tmp_path):
        (tmp_path / "cwd" / "maat-insight.toml").write_text("min_revs = 3\n")
        explicit = tmp_path / "explicit.toml"
        explicit.write_text("min_revs = 7\n")
        assert load_config(config_file=explicit).min_revs == 7

    def test_toml_date_and_datetime(self, tmp_path):
        """TOML dates and local date-times both load as dates."""
        path = tmp_path / "ages.toml"
        path.write_text("age_time_now = 2024-05-01\n")
        assert load_config(config_file=path).age_time_now == date(2024, 5, 1)
        path.write_text("age_time_now = 2024-05-01T10:00:00\n")
        assert load_config(config_file=path).age_time_now == date(2024, 5, 1)

    def test_toml_non_date_age_is_rejected(self, tmp_path):
        """A numeric age_time_now in TOML is a configuration error."""
        path = tmp_path / "ages.toml"
        path.write_text("age_time_now = 20240501\n")
        with pytest.raises(InvalidConfigError):
            load_config(config_file=path)

    def test_env_vars(self, monkeypatch):
        """MAAT_* variables are parsed to the field types."""
        monkeypatch.setenv("MAAT_MIN_COUPLING", "45")
        monkeypatch.setenv("MAAT_VERBOSE_RESULTS", "yes")
        monkeypatch.setenv("MAAT_AGE_TIME_NOW", "2020-05-05")
        config = load_config()
        assert config.min_coupling == 45
        assert config.verbose_results is True
        assert config.age_time_now == date(2020, 5, 5)

    def test_overrides_beat_env_vars(self, monkeypatch):
        monkeypatch.setenv("MAAT_MIN_REVS", "9")
        assert load_config(min_revs=1).min_revs == 1

    def test_bad_env_value(self, monkeypatch):
        """Unparsable env values raise ConfigurationError."""
        monkeypatch.setenv("MAAT_MIN_REVS", "many")
        with pytest.raises(ConfigurationError):
            load_config()

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            load_config(config_file=tmp_path / "nope.toml")

    def test_unknown_key(self, tmp_path):
        """Unknown keys are reported, not ignored."""
        path = tmp_path / "bad.toml"
        path.write_text("no_such_option = 1\n")
        with pytest.raises(ConfigurationError):
            load_config(config_file=path)

    def test_invalid_toml(self, tmp_path):
        path = tmp_path / "broken.toml"
        path.write_text("min_revs = \n")
        with pytest.raises(ConfigurationError):
            load_config(config_file=path)
