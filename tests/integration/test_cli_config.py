"""Config, template and init subcommands through the command line."""

import pytest
import yaml

from gedent.cli import main


@pytest.fixture
def home(tmp_path, monkeypatch):
    home = tmp_path / "home"
    (home / "templates").mkdir(parents=True)
    (home / "templates" / "sp").write_text("{{ method }}\n")
    (home / "presets").mkdir()
    (home / "presets" / "gaussian").write_text("#p {{ method }}\n")
    (home / "gedent.yaml").write_text("parameters:\n  method: hf\n  charge: 0\n")
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.setenv("GEDENT_HOME", str(home))
    monkeypatch.chdir(work)
    return home


def read_parameters(path):
    return yaml.safe_load(path.read_text())["parameters"]


def test_config_print(home, capsys):
    assert main(["config", "print", "--location"]) == 0
    out = capsys.readouterr().out
    assert str(home / "gedent.yaml") in out
    assert "method: hf" in out


def test_config_set_add_del(home):
    config = home / "gedent.yaml"
    assert main(["config", "set", "charge", "2"]) == 0
    assert main(["c", "add", "nprocs", "8", "-t", "int"]) == 0
    assert main(["config", "del", "method"]) == 0
    assert read_parameters(config) == {"charge": 2, "nprocs": 8}


def test_config_set_unknown_key_fails(home):
    assert main(["config", "set", "basis_set", "svp"]) == 1


def test_init_then_local_config_wins(home, tmp_path):
    work = tmp_path / "work"
    assert main(["init"]) == 0
    assert (work / "gedent.yaml").is_file()
    assert main(["config", "set", "method", "mp2"]) == 0
    assert read_parameters(work / "gedent.yaml")["method"] == "mp2"
    assert read_parameters(home / "gedent.yaml")["method"] == "hf"
    assert main(["init"]) == 1


def test_template_list_print_new(home, capsys):
    assert main(["template", "new", "gaussian", "g16/opt"]) == 0
    assert main(["t", "list"]) == 0
    assert capsys.readouterr().out.splitlines() == ["g16/opt", "sp"]
    assert main(["template", "print", "g16/opt"]) == 0
    assert capsys.readouterr().out == "#p {{ method }}\n"


def test_template_edit_uses_editor(home, monkeypatch):
    calls = []
    monkeypatch.setattr("subprocess.run", lambda cmd, check: calls.append(cmd))
    monkeypatch.setenv("EDITOR", "nano -w")
    monkeypatch.delenv("VISUAL", raising=False)
    assert main(["template", "edit", "sp"]) == 0
    assert calls == [["nano", "-w", str(home / "templates" / "sp")]]
