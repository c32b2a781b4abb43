import pytest

from asciibanner.cli import (
    Options,
    UsageError,
    check_equals_form,
    check_validity,
    is_ascii,
    is_banner,
    main,
    parse_options,
    validate_args_order,
)

FONT_TEXT = "\n  \n  \n\n! \n! \n"


@pytest.fixture
def font_dir(tmp_path, monkeypatch):
    (tmp_path / "standard.txt").write_text(FONT_TEXT)
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_validate_args_order_accepts_flags_first():
    validate_args_order(["--color=red", "x", "y"])
    with pytest.raises(UsageError):
        validate_args_order(["x", "--color=red"])


def test_validate_args_order_reports_position():
    with pytest.raises(UsageError, match="at position 2"):
        validate_args_order(["x", "--color=red"])


def test_check_equals_form_rejects_separated_color():
    with pytest.raises(UsageError, match="Usage"):
        check_equals_form(["--color", "red", "x"])


def test_check_equals_form_rejects_separated_output():
    with pytest.raises(UsageError, match="--output=value"):
        check_equals_form(["--output", "a.txt", "x"])


def test_is_banner():
    assert is_banner("Shadow") == "shadow.txt"
    assert is_banner("thinkertoy") == "thinkertoy.txt"
    assert is_banner("fancy") is None


def test_is_ascii():
    assert is_ascii("hello\\n")
    assert not is_ascii("héllo")


def test_parse_single_argument():
    options = parse_options(["hello"])
    assert options.text == "hello"
    assert options.banner == "standard.txt"
    assert options.highlight == ""
    assert options.align == "left"


def test_parse_colour_highlights_whole_input():
    options = parse_options(["--color=red", "hello"])
    assert options.highlight == "hello"
    assert options.color == "red"


def test_parse_banner_argument():
    options = parse_options(["hello", "SHADOW"])
    assert options.text == "hello"
    assert options.banner == "shadow.txt"


def test_parse_substring_and_input():
    options = parse_options(["--color=red", "ell", "hello"])
    assert options.text == "hello"
    assert options.highlight == "ell"
    assert options.banner == "standard.txt"


def test_parse_three_arguments():
    options = parse_options(["ell", "hello", "thinkertoy"])
    assert options.text == "hello"
    assert options.highlight == "ell"
    assert options.banner == "thinkertoy.txt"


def test_parse_invalid_banner():
    with pytest.raises(UsageError, match="is not a valid banner"):
        parse_options(["hello", "fancy"])


def test_parse_undefined_flag():
    with pytest.raises(UsageError, match="not defined"):
        parse_options(["--justify=left", "hello"])


def test_parse_flag_with_separate_value():
    options = parse_options(["--align", "center", "hello"])
    assert options.align == "center"
    assert options.text == "hello"


def test_check_validity_missing_banner(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(UsageError, match="File does not exist!"):
        check_validity(Options(args=("hello",)))


def test_check_validity_bad_colour(font_dir):
    with pytest.raises(UsageError, match="Invalid color format"):
        check_validity(Options(args=("hello",), color="purple"))


def test_check_validity_accepts_colour_forms(font_dir):
    for colour in ("red", "#00ff00", "rgb1,2,3"):
        check_validity(Options(args=("hello",), color=colour))
    with pytest.raises(UsageError):
        check_validity(Options(args=("hello",), color="#zz0000"))


def test_check_validity_non_ascii(font_dir):
    options = parse_options(["a", "b", "é"])
    with pytest.raises(UsageError, match="Only ASCII"):
        check_validity(options)


def test_main_renders(font_dir, capsys):
    assert main(["!"]) == 0
    assert capsys.readouterr().out == "! \n! \n"


def test_main_writes_output(font_dir, capsys):
    assert main(["--output=art.txt", "!!"]) == 0
    assert (font_dir / "art.txt").read_text() == "!  ! \n!  ! \n"
    assert capsys.readouterr().out.startswith("!")


def test_main_rejects_wrong_order(font_dir, capsys):
    assert main(["!", "--color=red"]) == 1
    out = capsys.readouterr().out
    assert "Invalid argument order: Flags must precede positional arguments." in out


def test_main_rejects_invalid_banner(font_dir, capsys):
    assert main(["!", "fancy"]) == 1
    assert "is not a valid banner" in capsys.readouterr().out


def test_main_rejects_unknown_flag(font_dir, capsys):
    assert main(["--bogus=1", "!"]) == 2
    assert "flag provided but not defined: -bogus" in capsys.readouterr().err