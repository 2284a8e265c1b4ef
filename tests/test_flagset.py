"""Tests for the per-command flag set (infra/flagset.py).

Coverage:
* Declaration, defaults and live value handles.
* ``-name=value``, ``-name value`` and ``--name`` spellings.
* Boolean switches never consume the next token.
* Parsing stops at the first positional and after ``--``.
* Errors surface as typed exceptions.
"""

from __future__ import annotations

import pytest

from subcmd.exceptions import FlagParseError, HelpRequested
from subcmd.infra.flagset import FlagKind, FlagSet, format_value, parse_bool


# ---------------------------------------------------------------------------
# Factory helper
# ---------------------------------------------------------------------------

def _flagset() -> FlagSet:
    flags = FlagSet("add")
    flags.add_int("number", 0, "some number")
    flags.add_bool("verbose", False, "verbose output")
    flags.add_string("name", "", "a name")
    flags.add_float("ratio", 0.5, "a ratio")
    return flags


# ---------------------------------------------------------------------------
# Declaration
# ---------------------------------------------------------------------------

class TestDeclaration:
    def test_handle_holds_default_before_parse(self) -> None:
        flags = FlagSet("add")
        number = flags.add_int("number", 7, "some number")
        assert number.value == 7
        assert number.kind is FlagKind.INT
        assert not flags.parsed

    def test_redefinition_rejected(self) -> None:
        flags = FlagSet("add")
        flags.add_int("number")
        with pytest.raises(ValueError, match="redefined"):
            flags.add_string("number")

    @pytest.mark.parametrize("name", ["", "-number", "a=b"])
    def test_bad_names_rejected(self, name: str) -> None:
        with pytest.raises(ValueError, match="bad flag name"):
            FlagSet("add").add_string(name)

    def test_visit_all_sorted_by_name(self) -> None:
        names = [flag.name for flag in _flagset().visit_all()]
        assert names == ["name", "number", "ratio", "verbose"]

    def test_lookup_and_contains(self) -> None:
        flags = _flagset()
        assert "number" in flags
        assert flags.lookup("number") is not None
        assert flags.lookup("missing") is None


# ---------------------------------------------------------------------------
# Default text
# ---------------------------------------------------------------------------

class TestDefaultText:
    @pytest.mark.parametrize(
        ("kind", "value", "expected"),
        [
            (FlagKind.BOOL, False, "false"),
            (FlagKind.BOOL, True, "true"),
            (FlagKind.INT, 42, "42"),
            (FlagKind.FLOAT, 0.0, "0"),
            (FlagKind.FLOAT, 1.5, "1.5"),
            (FlagKind.STRING, "", ""),
            (FlagKind.STRING, "hello", "hello"),
        ],
    )
    def test_format_value(self, kind: FlagKind, value: object, expected: str) -> None:
        assert format_value(kind, value) == expected

    def test_flag_default_text(self) -> None:
        assert _flagset().lookup("ratio").default_text == "0.5"  # type: ignore[union-attr]


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

class TestParse:
    def test_no_tokens_keeps_defaults(self) -> None:
        flags = _flagset()
        assert flags.parse([]) == []
        assert flags.lookup("number").value == 0  # type: ignore[union-attr]
        assert flags.parsed

    @pytest.mark.parametrize(
        "tokens",
        [["-number=5"], ["-number", "5"], ["--number=5"], ["--number", "5"]],
    )
    def test_value_spellings(self, tokens: list[str]) -> None:
        flags = _flagset()
        flags.parse(tokens)
        assert flags.lookup("number").value == 5  # type: ignore[union-attr]

    def test_integer_base_prefix(self) -> None:
        flags = _flagset()
        flags.parse(["-number=0x10"])
        assert flags.lookup("number").value == 16  # type: ignore[union-attr]

    def test_negative_integer_value(self) -> None:
        flags = _flagset()
        flags.parse(["-number", "-3"])
        assert flags.lookup("number").value == -3  # type: ignore[union-attr]

    def test_float_value(self) -> None:
        flags = _flagset()
        flags.parse(["-ratio=2.25"])
        assert flags.lookup("ratio").value == 2.25  # type: ignore[union-attr]

    def test_bool_switch(self) -> None:
        flags = _flagset()
        flags.parse(["-verbose"])
        assert flags.lookup("verbose").value is True  # type: ignore[union-attr]

    def test_bool_explicit_false(self) -> None:
        flags = FlagSet("add")
        verbose = flags.add_bool("verbose", True)
        flags.parse(["-verbose=false"])
        assert verbose.value is False

    def test_bool_does_not_consume_next_token(self) -> None:
        flags = _flagset()
        assert flags.parse(["-verbose", "bob"]) == ["bob"]
        assert flags.lookup("verbose").value is True  # type: ignore[union-attr]

    def test_stops_at_first_positional(self) -> None:
        flags = _flagset()
        rest = flags.parse(["-name=x", "bob", "-number=3"])
        assert rest == ["bob", "-number=3"]
        assert flags.lookup("name").value == "x"  # type: ignore[union-attr]
        assert flags.lookup("number").value == 0  # type: ignore[union-attr]

    def test_double_dash_terminator_is_consumed(self) -> None:
        flags = _flagset()
        assert flags.parse(["-number=1", "--", "-verbose", "x"]) == ["-verbose", "x"]
        assert flags.lookup("verbose").value is False  # type: ignore[union-attr]

    def test_single_dash_is_positional(self) -> None:
        assert _flagset().parse(["-", "x"]) == ["-", "x"]

    def test_args_property(self) -> None:
        flags = _flagset()
        flags.parse(["a", "b"])
        assert flags.args == ["a", "b"]

    @pytest.mark.parametrize("value", ["h", "help"])
    def test_value_named_like_help_is_a_value(self, value: str) -> None:
        flags = FlagSet("add")
        label = flags.add_string("label")
        assert flags.parse(["-label", value, "bob"]) == ["bob"]
        assert label.value == value

    def test_value_starting_with_dash(self) -> None:
        flags = FlagSet("add")
        label = flags.add_string("label")
        verbose = flags.add_bool("v")
        assert flags.parse(["-label", "-v", "bob"]) == ["bob"]
        assert label.value == "-v"
        assert verbose.value is False

    def test_empty_separate_value(self) -> None:
        flags = FlagSet("add")
        label = flags.add_string("label", "x")
        flags.parse(["-label", ""])
        assert label.value == ""

    def test_dashed_flag_name(self) -> None:
        flags = FlagSet("deploy")
        dry_run = flags.add_bool("dry-run")
        flags.parse(["-dry-run", "prod"])
        assert dry_run.value is True


class TestParseErrors:
    def test_unknown_flag(self) -> None:
        with pytest.raises(FlagParseError) as exc_info:
            _flagset().parse(["-bogus"])
        assert exc_info.value.flagset == "add"

    def test_bad_integer(self) -> None:
        with pytest.raises(FlagParseError, match="invalid integer value"):
            _flagset().parse(["-number=abc"])

    def test_bad_bool(self) -> None:
        with pytest.raises(FlagParseError, match="invalid boolean value"):
            _flagset().parse(["-verbose=maybe"])

    def test_missing_value(self) -> None:
        with pytest.raises(FlagParseError):
            _flagset().parse(["-name"])

    @pytest.mark.parametrize("token", ["-h", "-help", "--help"])
    def test_help_requested(self, token: str) -> None:
        with pytest.raises(HelpRequested):
            _flagset().parse([token])

    def test_declared_help_flag_is_a_flag(self) -> None:
        flags = FlagSet("show")
        help_flag = flags.add_bool("help")
        flags.parse(["-help"])
        assert help_flag.value is True


class TestParseBool:
    @pytest.mark.parametrize("text", ["1", "t", "T", "TRUE", "true", "True"])
    def test_true_words(self, text: str) -> None:
        assert parse_bool(text) is True

    @pytest.mark.parametrize("text", ["0", "f", "F", "FALSE", "false", "False"])
    def test_false_words(self, text: str) -> None:
        assert parse_bool(text) is False
