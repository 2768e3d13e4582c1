"""Tests for usage, help, version and failure text."""

from getopts.registry import OptionRegistry
from getopts.renderer import (
    chunk_text,
    quote,
    render_failure,
    render_help,
    render_option_row,
    render_usage,
    render_version,
)

FULL_HELP = """\
test - test-summary

test-description

Version: v0.1.0-beta

Usage:
  test [--bar <string>] --foo <string> param1 param2 [param3 [param4]]
  test --help
  test --version

Options:
  -b, --bar <string>

  bar-description

  -f, --foo <string>  : foo-help
  -h, --help          : show this help message and exit
  -v, --version       : show version and exit

"""


def make_full_registry() -> OptionRegistry:
    return OptionRegistry.build(
        {
            "name": "test",
            "version": "v0.1.0-beta",
            "params": ["param1", "param2", "param3", "param4"],
            "params_required": 2,
            "summary": "test-summary",
            "desc": "test-description",
        },
        {
            "foo": {"alias": "f", "required": True, "help": "foo-help"},
            "bar": {"alias": "b", "desc": "bar-description"},
        },
    )


def test_render_help_full_layout() -> None:
    assert render_help(make_full_registry()) == FULL_HELP


def test_render_help_without_summary_desc_or_version() -> None:
    registry = OptionRegistry.build({"name": "tool"}, {"quiet": {"alias": "q", "is_flag": True}})

    assert render_help(registry) == (
        "tool\n"
        "\n"
        "Usage:\n"
        "  tool [--quiet] [...]\n"
        "  tool --help\n"
        "\n"
        "Options:\n"
        "  -h, --help   : show this help message and exit\n"
        "  -q, --quiet\n"
        "\n"
    )


def test_render_usage_aligns_rows_without_alias() -> None:
    registry = OptionRegistry.build({"name": "tool", "params": []}, {"name": {"help": "who"}})

    assert render_usage(registry) == (
        "Usage:\n"
        "  tool [--name <string>]\n"
        "  tool --help\n"
        "\n"
        "Options:\n"
        "  -h, --help       : show this help message and exit\n"
        "  --name <string>  : who\n"
        "\n"
    )


def test_render_usage_marks_required_options_and_params() -> None:
    registry = OptionRegistry.build(
        {"name": "copy", "params": ["src", "dst"], "params_required": 2},
        {"mode": {"required": True, "type": "number"}},
    )

    usage_line = render_usage(registry).splitlines()[1]

    assert usage_line == "  copy --mode <number> src dst"


def test_render_usage_nests_all_optional_params() -> None:
    registry = OptionRegistry.build({"name": "list", "params": ["first", "second", "third"]}, {})

    usage_line = render_usage(registry).splitlines()[1]

    assert usage_line == "  list [first [second [third]]]"


def test_render_usage_wraps_long_lines() -> None:
    registry = OptionRegistry.build(
        {"name": "test"},
        {
            "alpha-option": {},
            "bravo-option": {},
            "charlie-option": {},
            "delta-option": {},
            "echo-option": {},
        },
    )

    lines = render_usage(registry).splitlines()

    assert lines[1] == (
        "  test [--alpha-option <string>] [--bravo-option <string>]"
        " [--charlie-option <string>]"
    )
    assert lines[2] == "   [--delta-option <string>] [--echo-option <string>] [...]"
    assert lines[3] == "  test --help"


def test_render_option_row_chunks_long_help() -> None:
    registry = OptionRegistry.build({"name": "test"}, {"foo": {"help": "a" * 60}})

    rows = render_option_row(registry.option("foo"), registry.max_spec_width)

    assert rows == [
        "  --foo <string>  : " + "a" * 56 + "\n" + " " * 16 + "  : " + "aaaa"
    ]


def test_render_option_row_with_help_and_description() -> None:
    registry = OptionRegistry.build(
        {"name": "test"},
        {"foo": {"alias": "f", "help": "short", "desc": "Longer text.\nSecond line."}},
    )

    rows = render_option_row(registry.option("foo"), registry.max_spec_width)

    assert rows == [
        "  -f, --foo <string>  : short",
        "\n  Longer text.\nSecond line.\n",
    ]


def test_render_option_row_with_empty_help() -> None:
    registry = OptionRegistry.build({"name": "test"}, {"foo": {"help": ""}})

    rows = render_option_row(registry.option("foo"), registry.max_spec_width)

    assert rows == ["  --foo <string>  : "]


def test_render_version() -> None:
    assert render_version(make_full_registry()) == "v0.1.0-beta\n"


def test_render_failure_prefixes_message() -> None:
    registry = make_full_registry()

    text = render_failure(registry, "too many parameters")

    assert text == "too many parameters\n\n" + render_usage(registry)


def test_chunk_text() -> None:
    assert chunk_text("abcdefg", 3) == ["abc", "def", "g"]
    assert chunk_text("abc", 3) == ["abc"]
    assert chunk_text("", 3) == []
    assert chunk_text("abc", 0) == ["abc"]


def test_quote_escapes_special_characters() -> None:
    assert quote("--foo") == '"--foo"'
    assert quote('a"b') == '"a\\"b"'
    assert quote("a\\b") == '"a\\\\b"'
    assert quote("a\nb") == '"a\\\nb"'
