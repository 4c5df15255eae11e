import pytest
import yaml

from gedent.core.config.config_manager import ConfigManager, convert_value
from gedent.core.errors import ConfigError

CONFIG = """\
gedent:
  default_extension: gjf
parameters:
  method: b3lyp
  charge: 0
  scale: 1.5
  solvation: false
"""


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "gedent.yaml"
    path.write_text(CONFIG)
    return path


def test_load(config_file):
    config = ConfigManager(config_file)
    assert config.get_parameters() == {"method": "b3lyp", "charge": 0, "scale": 1.5, "solvation": False}
    assert config.default_extension == "gjf"
    assert config.strict_template_options is False


def test_defaults_for_empty_file(tmp_path):
    path = tmp_path / "gedent.yaml"
    path.write_text("")
    config = ConfigManager(path)
    assert config.get_parameters() == {}
    assert config.default_extension == "inp"


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        ConfigManager(tmp_path / "gedent.yaml")


def test_invalid_yaml(tmp_path):
    path = tmp_path / "gedent.yaml"
    path.write_text("parameters: [unclosed\n")
    with pytest.raises(ConfigError, match="Error parsing YAML"):
        ConfigManager(path)


def test_nested_parameter_rejected(tmp_path):
    path = tmp_path / "gedent.yaml"
    path.write_text("parameters:\n  basis:\n    - a\n    - b\n")
    with pytest.raises(ConfigError, match="basis"):
        ConfigManager(path)


def test_set_keeps_type(config_file):
    config = ConfigManager(config_file)
    config.set("charge", "-1")
    config.set("solvation", "True")
    config.set("scale", "2")
    assert config.parameters["charge"] == -1
    assert config.parameters["solvation"] is True
    assert config.parameters["scale"] == 2.0


def test_set_bad_value(config_file):
    with pytest.raises(ConfigError, match="Cannot convert"):
        ConfigManager(config_file).set("charge", "one")


def test_set_unknown_key(config_file):
    with pytest.raises(ConfigError, match="Cannot find"):
        ConfigManager(config_file).set("basis_set", "svp")


def test_add_and_delete(config_file):
    config = ConfigManager(config_file)
    config.add("nprocs", "8", "int")
    assert config.parameters["nprocs"] == 8
    with pytest.raises(ConfigError, match="already contains"):
        config.add("nprocs", "4", "int")
    config.delete("nprocs")
    assert "nprocs" not in config.parameters
    with pytest.raises(ConfigError, match="not found"):
        config.delete("nprocs")


def test_write_round_trip(config_file):
    config = ConfigManager(config_file)
    config.add("basis_set", "def2-svp")
    config.write()
    data = yaml.safe_load(config_file.read_text())
    assert data["parameters"]["basis_set"] == "def2-svp"
    assert data["gedent"]["default_extension"] == "gjf"


@pytest.mark.parametrize("value, arg_type, expected", [
    ("x", "string", "x"), ("3", "int", 3), ("0.5", "float", 0.5), ("FALSE", "bool", False)])
def test_convert_value(value, arg_type, expected):
    assert convert_value(value, arg_type) == expected


def test_convert_value_bad_bool():
    with pytest.raises(ConfigError):
        convert_value("yes", "bool")


def test_strict_template_options_must_be_bool(tmp_path):
    path = tmp_path / "gedent.yaml"
    path.write_text('gedent:\n  strict_template_options: "false"\nparameters: {}\n')
    with pytest.raises(ConfigError, match="strict_template_options"):
        ConfigManager(path)


def test_strict_template_options_true(tmp_path):
    path = tmp_path / "gedent.yaml"
    path.write_text("gedent:\n  strict_template_options: true\n")
    assert ConfigManager(path).strict_template_options is True
