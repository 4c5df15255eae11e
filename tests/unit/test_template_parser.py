import pytest

from gedent.core.errors import TemplateHeaderError
from gedent.core.parsers.template_parser import Template, TemplateOptions, compile_template


def test_header_round_trip():
    body, options = compile_template('--@\nextension = "inp"\n--@\nBODY')
    assert body == "BODY"
    assert options.extension == "inp"


def test_no_header_returns_text_unchanged():
    text = "! {{ method }}\n\n* xyz 0 1\n{{ print_molecule(molecule) }}\n*\n"
    body, options = compile_template(text)
    assert body == text
    assert options == TemplateOptions()
    assert options.extension is None


def test_compiling_a_body_again_is_a_no_op():
    body, _ = compile_template('--@\nextension = "gjf"\n--@\n#p {{ method }}\n')
    assert compile_template(body) == (body, TemplateOptions())


def test_body_keeps_lines_around_header_in_order():
    text = "before\n--@\nextension = 'out'\n--@\nafter 1\nafter 2\n"
    body, options = compile_template(text)
    assert body == "before\nafter 1\nafter 2\n"
    assert options.extension == "out"


def test_marker_may_be_embedded_in_a_comment_line():
    body, options = compile_template('# --@\nextension = "com"\n# --@\nBODY\n')
    assert body == "BODY\n"
    assert options.extension == "com"


def test_empty_header_gives_defaults():
    body, options = compile_template("--@\n--@\nBODY")
    assert body == "BODY"
    assert options.extension is None


def test_unknown_keys_ignored():
    _, options = compile_template('--@\nextension = "inp"\nauthor = "me"\n--@\nBODY')
    assert options.extension == "inp"


def test_unknown_keys_rejected_in_strict_mode():
    with pytest.raises(TemplateHeaderError, match="author"):
        compile_template('--@\nauthor = "me"\n--@\nBODY', strict=True)


def test_malformed_header_is_fatal():
    with pytest.raises(TemplateHeaderError, match="Malformed"):
        compile_template("--@\nextension = inp\n--@\nBODY")


def test_extension_must_be_a_string():
    with pytest.raises(TemplateHeaderError, match="must be a string"):
        compile_template("--@\nextension = 3\n--@\nBODY")


@pytest.mark.parametrize("text", ["--@\nextension = 'inp'\nBODY", "--@\n--@\n--@\nBODY"])
def test_marker_count_must_be_two(text):
    with pytest.raises(TemplateHeaderError, match="exactly two"):
        compile_template(text)


def test_template_from_text():
    template = Template.from_text("orca/sp", '--@\nextension = "inp"\n--@\n! {{ method }}\n')
    assert template.name == "orca/sp"
    assert template.body == "! {{ method }}\n"
    assert template.options.extension == "inp"
    assert template.render({"method": "B3LYP"}) == "! B3LYP\n"
