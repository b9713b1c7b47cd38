"""Tests for the Flag identity primitive."""

import dataclasses

import pytest

from flagcat.errors import InvalidFlagDefinition
from flagcat.flag import Flag

# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestConstruct:
    def test_long_only(self) -> None:
        flag = Flag("--no-cache")
        assert flag.long_name == "--no-cache"
        assert flag.short_name is None

    def test_long_and_short(self) -> None:
        flag = Flag("--working-dir", "-w")
        assert flag.short_name == "-w"

    def test_empty_long_name_rejected(self) -> None:
        with pytest.raises(InvalidFlagDefinition):
            Flag("", "-x")

    def test_short_equal_to_long_rejected(self) -> None:
        with pytest.raises(InvalidFlagDefinition, match="must differ"):
            Flag("--same", "--same")

    def test_empty_short_name_rejected(self) -> None:
        with pytest.raises(InvalidFlagDefinition):
            Flag("--output-path", "")

    @pytest.mark.parametrize("args", [(5,), (None,), ("--level", 3)])
    def test_non_string_names_rejected(self, args: tuple) -> None:
        with pytest.raises(InvalidFlagDefinition, match="must be a string"):
            Flag(*args)

    def test_invalid_definition_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Flag("")

    def test_frozen(self) -> None:
        flag = Flag("--format", "-f")
        with pytest.raises(dataclasses.FrozenInstanceError):
            flag.long_name = "--other"  # type: ignore[misc]

    def test_value_equality_and_hash(self) -> None:
        assert Flag("--format", "-f") == Flag("--format", "-f")
        assert len({Flag("--format", "-f"), Flag("--format", "-f")}) == 1
        assert Flag("--format", "-f") != Flag("--format")


# ---------------------------------------------------------------------------
# names / accepted_names()
# ---------------------------------------------------------------------------


class TestNames:
    def test_long_only(self) -> None:
        assert Flag("--no-cache").names == ("--no-cache",)

    def test_short_first(self) -> None:
        assert Flag("--output-path", "-o").names == ("-o", "--output-path")

    def test_accepted_names_matches_names(self) -> None:
        flag = Flag("--timeout", "-t")
        assert flag.accepted_names() == flag.names

    @pytest.mark.parametrize(
        "flag",
        [Flag("--a-b"), Flag("--env-var", "-e"), Flag("--root-dir")],
    )
    def test_first_name_rule(self, flag: Flag) -> None:
        names = flag.accepted_names()
        assert names
        expected = flag.short_name if flag.short_name is not None else flag.long_name
        assert names[0] == expected

    def test_usage(self) -> None:
        assert Flag("--output-path", "-o").usage() == "-o, --output-path"
        assert Flag("--no-cache").usage() == "--no-cache"

    def test_str_is_long_name(self) -> None:
        assert str(Flag("--output-path", "-o")) == "--output-path"


# ---------------------------------------------------------------------------
# matches()
# ---------------------------------------------------------------------------


class TestMatches:
    def test_working_dir_scenario(self) -> None:
        flag = Flag("--working-dir", "-w")
        assert flag.matches("-w")
        assert flag.matches("--working-dir")
        assert not flag.matches("-working-dir")
        assert not flag.matches("--WORKING-DIR")

    @pytest.mark.parametrize(
        "token",
        ["--working", "--working-di", "working-dir", "--working-dir=.", "-W", "-wf", "", " -w"],
    )
    def test_no_partial_or_split_matching(self, token: str) -> None:
        assert not Flag("--working-dir", "-w").matches(token)

    def test_long_only_never_matches_none_short(self) -> None:
        flag = Flag("--no-cache")
        assert flag.matches("--no-cache")
        assert not flag.matches("-n")


# ---------------------------------------------------------------------------
# check_convention()
# ---------------------------------------------------------------------------


class TestConvention:
    def test_conforming(self) -> None:
        assert Flag("--external-module-reader", "-e").check_convention() == []

    def test_single_dash_long(self) -> None:
        problems = Flag("-verbose").check_convention()
        assert len(problems) == 1
        assert "lowercase" in problems[0]

    def test_uppercase_long(self) -> None:
        assert Flag("--Verbose").check_convention()

    def test_multi_letter_short(self) -> None:
        problems = Flag("--verbose", "-vv").check_convention()
        assert problems == ["short name '-vv' should be '-' plus one letter"]
