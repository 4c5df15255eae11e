import pytest

from gedent.core.errors import TemplateHeaderError
from gedent.core.templates.template_store import TemplateStore


@pytest.fixture
def home(tmp_path):
    templates = tmp_path / "templates"
    (templates / "orca").mkdir(parents=True)
    (templates / "orca" / "sp").write_text('--@\nextension = "inp"\n--@\n! {{ method }}\n')
    (templates / "gaussian").write_text("#p {{ method }}\n")
    presets = tmp_path / "presets"
    presets.mkdir()
    (presets / "orca").write_text("! {{ method }} {{ basis_set }}\n")
    return tmp_path


def test_load(home):
    template = TemplateStore(home).load("orca/sp")
    assert template.name == "orca/sp"
    assert template.options.extension == "inp"
    assert template.body == "! {{ method }}\n"


def test_load_missing(home):
    with pytest.raises(FileNotFoundError, match="nope"):
        TemplateStore(home).load("nope")


def test_load_strict(home):
    (home / "templates" / "tagged").write_text('--@\ntag = "x"\n--@\nBODY\n')
    store = TemplateStore(home)
    assert store.load("tagged").body == "BODY\n"
    with pytest.raises(TemplateHeaderError):
        store.load("tagged", strict=True)


def test_list_templates(home):
    assert TemplateStore(home).list_templates() == ["gaussian", "orca/sp"]


def test_list_templates_without_folder(tmp_path):
    assert TemplateStore(tmp_path).list_templates() == []


def test_new_from_preset(home):
    store = TemplateStore(home)
    target = store.new("orca", "orca/opt")
    assert target == home / "templates" / "orca" / "opt"
    assert store.read("orca/opt") == "! {{ method }} {{ basis_set }}\n"
    with pytest.raises(FileExistsError):
        store.new("orca", "orca/opt")


def test_new_missing_preset(home):
    with pytest.raises(FileNotFoundError, match="molpro"):
        TemplateStore(home).new("molpro", "x")
