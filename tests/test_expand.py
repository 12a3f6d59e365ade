"""Tests for escape resolution and variable expansion."""

from __future__ import annotations

import pytest

from dotparse.expand import expand_escapes, expand_variables


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("a\\nb", "a\nb"),
        ("a\\rb", "a\rb"),
        ("a\\tb", "atb"),
        ('say \\"hi\\"', 'say "hi"'),
        ("a\\\\nb", "a\\nb"),
        ("cost \\$5", "cost \\$5"),
        ("plain", "plain"),
    ],
)
def test_expand_escapes(raw, expected):
    assert expand_escapes(raw) == expected


def test_expand_variables_plain_and_braced():
    variables = {"FOO": "x"}
    assert expand_variables("$FOO", variables) == "x"
    assert expand_variables("${FOO}bar", variables) == "xbar"
    assert expand_variables("a$FOO-b", variables) == "ax-b"


def test_expand_variables_missing_is_empty():
    assert expand_variables("[$NOPE]", {}) == "[]"
    assert expand_variables("${NOPE}", {}) == ""


def test_expand_variables_escaped_reference_is_literal():
    assert expand_variables("\\$FOO", {"FOO": "x"}) == "$FOO"
    assert expand_variables("\\${FOO}", {"FOO": "x"}) == "${FOO}"


def test_expand_variables_command_substitution_not_supported():
    assert expand_variables("$(whoami)", {}) == "(whoami)"
    assert expand_variables("$(FOO)", {"FOO": "x"}) == "(FOO)"


def test_expand_variables_lone_dollar_and_lowercase_names():
    assert expand_variables("costs $ 5", {}) == "costs $ 5"
    assert expand_variables("$foo", {"foo": "x"}) == "$foo"


def test_expand_variables_unclosed_brace():
    assert expand_variables("${FOO", {"FOO": "x"}) == "x"


def test_escapes_then_expansion():
    variables = {"FOO": "test"}
    assert expand_variables(expand_escapes("foo\\${FOO} ${FOO}"), variables) == "foo${FOO} test"
    assert expand_variables(expand_escapes("line\\n$FOO"), variables) == "line\ntest"
