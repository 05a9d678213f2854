"""Tests for YAML config loading and the command line entry point."""

import logging

import pytest

from body_fat_index.config import estimator_config, load_config, setup_logging
from body_fat_index.estimator import EstimatorConfig
from body_fat_index.exceptions import InvalidConfig
from body_fat_index.main import main


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "units:\n"
        "  weight_unit: st\n"
        "  length_unit: ft\n"
        "logging:\n"
        "  level: WARNING\n"
    )
    return path


@pytest.fixture(autouse=True)
def reset_logging():
    root = logging.getLogger()
    level = root.level
    yield
    # Drop handlers installed by setup_logging
    for handler in root.handlers[:]:
        if isinstance(handler, logging.FileHandler) or type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


class TestLoadConfig:
    def test_loads_sections(self, config_file):
        config = load_config(str(config_file))
        assert config["units"] == {"weight_unit": "st", "length_unit": "ft"}
        assert config["logging"]["level"] == "WARNING"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(str(path)) == {}

    def test_top_level_must_be_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- kg\n- m\n")
        with pytest.raises(InvalidConfig, match="must contain a mapping"):
            load_config(str(path))

    def test_unreadable_path(self, tmp_path):
        with pytest.raises(InvalidConfig, match="Cannot read config file"):
            load_config(str(tmp_path))

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("units: [kg\n")
        with pytest.raises(InvalidConfig, match="Invalid YAML"):
            load_config(str(path))


class TestEstimatorConfig:
    def test_from_units_section(self, config_file):
        config = estimator_config(load_config(str(config_file)))
        assert config == EstimatorConfig(weight_unit="st", length_unit="ft")

    def test_overrides(self, config_file):
        config = estimator_config(load_config(str(config_file)), weight_unit="kg")
        assert config == EstimatorConfig(weight_unit="kg", length_unit="ft")

    def test_defaults_without_units(self):
        assert estimator_config({}) == EstimatorConfig()

    def test_unknown_unit_key(self):
        with pytest.raises(InvalidConfig, match="mass_unit"):
            estimator_config({"units": {"mass_unit": "kg"}})


class TestSetupLogging:
    def test_creates_log_directory(self, tmp_path):
        log_file = tmp_path / "logs" / "bfi.log"
        setup_logging({"logging": {"level": "debug", "file": str(log_file)}})
        assert log_file.parent.is_dir()
        assert logging.getLogger().level == logging.DEBUG

    def test_invalid_level(self):
        with pytest.raises(InvalidConfig, match="Invalid logging level"):
            setup_logging({"logging": {"level": "LOUD"}})


class TestMain:
    def test_male(self, capsys):
        assert main(["--sex", "m", "--weight", "60", "--waist", "38"]) == 0
        assert capsys.readouterr().out.strip() == "97.27% Obese"

    def test_female(self, capsys):
        argv = [
            "-s", "F",
            "--weight", "60",
            "--waist", "40",
            "--wrist", "3",
            "--hips", "30",
            "--forearm", "3",
        ]
        assert main(argv) == 0
        assert capsys.readouterr().out.strip() == "30.98% Average"

    def test_units_from_config(self, config_file, capsys):
        argv = ["-c", str(config_file), "--sex", "m", "--weight", "10", "--waist", "3"]
        assert main(argv) == 0
        out = capsys.readouterr().out.strip()

        main(["--sex", "m", "--weight", "140", "--waist", "36"])
        assert capsys.readouterr().out.strip() == out

    def test_female_missing_fields(self, capsys):
        assert main(["--sex", "f", "--weight", "60", "--waist", "40"]) == 1
        assert capsys.readouterr().out == ""

    def test_invalid_sex(self):
        assert main(["--sex", "x", "--weight", "60", "--waist", "40"]) == 1

    def test_missing_config_file(self, tmp_path, capsys):
        missing = tmp_path / "nope.yaml"
        argv = ["-c", str(missing), "--sex", "m", "--weight", "60", "--waist", "38"]
        assert main(argv) == 1
        assert "Config file not found" in capsys.readouterr().out

    def test_weight_nan(self):
        assert main(["--sex", "m", "--weight", "nan", "--waist", "38"]) == 1

    def test_config_is_directory(self, tmp_path, capsys):
        argv = ["-c", str(tmp_path), "--sex", "m", "--weight", "60", "--waist", "38"]
        assert main(argv) == 1
        assert capsys.readouterr().out == ""

    def test_unit_flags_any_case(self, capsys):
        argv = [
            "--weight-unit", "ST",
            "--length-unit", "Ft",
            "--sex", "m",
            "--weight", "10",
            "--waist", "3",
        ]
        assert main(argv) == 0
        out = capsys.readouterr().out.strip()

        main(["--sex", "m", "--weight", "140", "--waist", "36"])
        assert capsys.readouterr().out.strip() == out

    def test_unit_choices(self):
        with pytest.raises(SystemExit):
            main(["--weight-unit", "oz", "--sex", "m", "--weight", "60", "--waist", "38"])
