import io

from flagparse.core.registry import FlagRegistry
from flagparse.domain.types import FlagErrorKind, FlagType, ParseError
from flagparse.presentation import (
    NO_ERROR_MESSAGE,
    format_default,
    format_error,
    format_options,
    print_error,
    print_options,
    render_error,
    render_options,
)


def _registry():
    registry = FlagRegistry()
    registry.declare(FlagType.BOOL, "verbose", False, "Chatty output")
    registry.declare(FlagType.UINT64, "count", 1, "How many times")
    registry.declare(FlagType.STR, "name", "world", "Who to greet")
    registry.declare(FlagType.BOOL, "color", True, "Colorize")
    registry.declare(FlagType.STR, "line", None, "Line to print")
    return registry


EXPECTED_OPTIONS = (
    "    -verbose\n"
    "        Chatty output\n"
    "    -count\n"
    "        How many times\n"
    "        Default: 1\n"
    "    -name\n"
    "        Who to greet\n"
    "        Default: world\n"
    "    -color\n"
    "        Colorize\n"
    "        Default: true\n"
    "    -line\n"
    "        Line to print\n"
)


def test_format_error_reasons():
    cases = {
        FlagErrorKind.UNKNOWN: "ERROR: -x: unknown flag\n",
        FlagErrorKind.NO_VALUE: "ERROR: -x: no value provided\n",
        FlagErrorKind.INVALID_NUMBER: "ERROR: -x: invalid number\n",
        FlagErrorKind.INTEGER_OVERFLOW: "ERROR: -x: integer overflow\n",
    }
    for kind, expected in cases.items():
        assert format_error(ParseError(kind=kind, flag_name="x")) == expected


def test_format_error_without_error_is_sentinel():
    text = format_error(None)
    assert text == NO_ERROR_MESSAGE
    assert text


def test_format_options_layout():
    assert format_options(_registry()) == EXPECTED_OPTIONS


def test_format_options_empty_registry():
    assert format_options(FlagRegistry()) == ""


def test_format_default_rules():
    registry = FlagRegistry()
    registry.declare(FlagType.BOOL, "off", False, "")
    registry.declare(FlagType.UINT64, "zero", 0, "")
    registry.declare(FlagType.STR, "empty", "", "")
    registry.declare(FlagType.STR, "unset", None, "")

    assert format_default(registry.find("off")) is None
    assert format_default(registry.find("zero")) == "0"
    assert format_default(registry.find("empty")) == ""
    assert format_default(registry.find("unset")) is None


def test_format_options_shows_default_not_current_value():
    registry = _registry()
    registry.find("count").value = 99
    assert "Default: 1\n" in format_options(registry)
    assert "99" not in format_options(registry)


def test_render_matches_plain_format():
    error = ParseError(kind=FlagErrorKind.UNKNOWN, flag_name="bogus")
    assert render_error(error).plain == format_error(error)
    assert render_options(_registry()).plain == EXPECTED_OPTIONS


def test_print_error_writes_to_stream():
    stream = io.StringIO()
    print_error(ParseError(kind=FlagErrorKind.NO_VALUE, flag_name="count"), stream)
    assert stream.getvalue() == "ERROR: -count: no value provided\n"


def test_print_options_writes_plain_text_to_non_terminal():
    stream = io.StringIO()
    print_options(_registry(), stream)
    assert stream.getvalue() == EXPECTED_OPTIONS


def test_print_options_with_color_emits_styles(monkeypatch):
    monkeypatch.setenv("TERM", "xterm-256color")
    stream = io.StringIO()
    print_options(_registry(), stream, color=True)
    output = stream.getvalue()
    assert "\x1b[" in output
    assert "-verbose" in output


def test_printing_twice_is_identical():
    registry = _registry()
    first, second = io.StringIO(), io.StringIO()
    print_options(registry, first)
    print_options(registry, second)
    assert first.getvalue() == second.getvalue()


def _whitespace_registry():
    registry = FlagRegistry()
    registry.declare(FlagType.STR, "sep", "\t", "Field\tseparator")
    registry.declare(FlagType.STR, "eol", "\r\n", "Line ending")
    return registry


def test_format_options_keeps_tabs_and_carriage_returns():
    text = format_options(_whitespace_registry())
    assert text == (
        "    -sep\n"
        "        Field\tseparator\n"
        "        Default: \t\n"
        "    -eol\n"
        "        Line ending\n"
        "        Default: \r\n\n"
    )


def test_print_options_writes_user_text_unchanged():
    registry = _whitespace_registry()
    stream = io.StringIO()
    print_options(registry, stream)
    output = stream.getvalue()
    assert output == format_options(registry)
    assert "Field\tseparator" in output
    assert "Default: \t\n" in output
    assert "Default: \r\n" in output


def test_print_error_keeps_tab_in_flag_name():
    error = ParseError(kind=FlagErrorKind.UNKNOWN, flag_name="a\tb")
    stream = io.StringIO()
    print_error(error, stream)
    assert stream.getvalue() == format_error(error) == "ERROR: -a\tb: unknown flag\n"


def test_color_false_writes_plain_text():
    registry = _whitespace_registry()
    stream = io.StringIO()
    print_options(registry, stream, color=False)
    assert stream.getvalue() == format_options(registry)


def test_force_color_env_does_not_style_plain_streams(monkeypatch):
    monkeypatch.setenv("FORCE_COLOR", "1")
    monkeypatch.setenv("TERM", "xterm-256color")
    err, out = io.StringIO(), io.StringIO()
    print_error(ParseError(kind=FlagErrorKind.UNKNOWN, flag_name="x"), err)
    print_options(_registry(), out)
    assert err.getvalue() == "ERROR: -x: unknown flag\n"
    assert out.getvalue() == EXPECTED_OPTIONS


class _TerminalStream(io.StringIO):
    def isatty(self):
        return True


def test_terminal_stream_is_styled_by_default(monkeypatch):
    monkeypatch.setenv("TERM", "xterm-256color")
    stream = _TerminalStream()
    print_error(ParseError(kind=FlagErrorKind.UNKNOWN, flag_name="x"), stream)
    assert "\x1b[" in stream.getvalue()
    assert "unknown flag" in stream.getvalue()
