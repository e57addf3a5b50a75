import pytest

from dssparse import (
    __version__,
    TokenizerOptions,
    Param,
    DssParseError,
    ConversionError,
    InlineMathError,
    DEFAULT_BEGIN_QUOTES,
    DEFAULT_END_QUOTES,
)


def test_version():
    assert __version__ == "0.1.0"


def test_default_options():
    opts = TokenizerOptions()
    assert opts.whitespace == " \t"
    assert opts.delimiters == ",="
    assert opts.begin_quotes == DEFAULT_BEGIN_QUOTES == "(\"'[{"
    assert opts.end_quotes == DEFAULT_END_QUOTES == ")}']"
    assert opts.matrix_row_terminator == "|"
    assert opts.comment_char == "!"
    assert not opts.auto_increment


def test_end_quote_pairing():
    opts = TokenizerOptions()
    assert opts.end_quote_for("(") == ")"
    assert opts.end_quote_for('"') == "}"
    assert opts.end_quote_for("'") == "'"
    assert opts.end_quote_for("[") == "]"
    assert opts.end_quote_for("{") is None
    assert opts.end_quote_for("x") is None

    opts = TokenizerOptions(begin_quotes="<{", end_quotes=">}")
    assert opts.end_quote_for("<") == ">"
    assert opts.end_quote_for("{") == "}"


def test_reset_delims():
    opts = TokenizerOptions(whitespace=" ", delimiters=";", matrix_row_terminator="/", auto_increment=True)
    opts.reset_delims()
    assert opts.whitespace == " \t"
    assert opts.delimiters == ",="
    assert opts.matrix_row_terminator == "|"
    assert opts.auto_increment  # Not a delimiter setting


def test_single_char_options():
    with pytest.raises(ValueError):
        TokenizerOptions(comment_char="!!")
    with pytest.raises(ValueError):
        TokenizerOptions(matrix_row_terminator="")


def test_options_validate_on_assignment():
    opts = TokenizerOptions()
    with pytest.raises(ValueError):
        opts.comment_char = "!!"
    with pytest.raises(ValueError):
        opts.matrix_row_terminator = ""
    opts.comment_char = "#"
    assert opts.comment_char == "#"
    opts.reset_delims()
    assert opts.comment_char == "!"


def test_param():
    p = Param("phases", "3")
    assert p.name == "phases"
    assert p.value == "3"
    assert not p.quoted
    assert p == Param(name="phases", value="3", quoted=False)


def test_errors():
    with pytest.raises(DssParseError, match="boom"):
        DssParseError.throw("boom")

    e = InlineMathError("Invalid inline math entry", "foo")
    assert isinstance(e, ConversionError)
    assert e.text == "foo"

    with pytest.raises(ConversionError, match="bad number") as ce:
        ConversionError.throw("bad number", "1x")
    assert ce.value.text == "1x"
