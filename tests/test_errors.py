from __future__ import annotations

from zcw.errors import (
    UndefinedVariable,
    UnexpectedCharacter,
    UnknownCoreMethod,
    UnknownMethod,
    ZCWError,
    ZCWRuntimeError,
    ZCWSyntaxError,
    format_error,
)


def test_location_prefix() -> None:
    assert str(ZCWError("boom", line=3, column=7)) == "Line 3:7 | [ZCW_ERROR] boom"
    assert str(ZCWError("boom", line=3)) == "Line 3 | [ZCW_ERROR] boom"
    assert str(ZCWError("boom")) == "[ZCW_ERROR] boom"


def test_syntax_error_details() -> None:
    error = ZCWSyntaxError(
        "Cannot parse statement",
        line=1,
        column=1,
        expected=["CORE", "IDENTIFIER"],
        found="STRING",
        suggestion="Start each statement with a call",
    )

    assert str(error).splitlines() == [
        "Line 1:1 | [SYNTAX_ERROR] Cannot parse statement",
        "  Expected one of: CORE, IDENTIFIER",
        "  Found: STRING",
        "  Suggestion: Start each statement with a call",
    ]


def test_hierarchy() -> None:
    assert issubclass(UnexpectedCharacter, ZCWSyntaxError)
    assert issubclass(UnknownCoreMethod, ZCWRuntimeError)
    assert issubclass(ZCWRuntimeError, ZCWError)
    assert issubclass(ZCWError, Exception)


def test_runtime_error_details() -> None:
    error = UnknownCoreMethod("Core method not found: click", method_name="click", available=["visit", "wait"])

    assert str(error) == (
        "[UNKNOWN_CORE_METHOD] Core method not found: click\n"
        "  Available core methods: visit, wait"
    )
    assert str(UndefinedVariable("Undefined variable: page", name="page")) == (
        "[UNDEFINED_VARIABLE] Undefined variable: page"
    )
    assert "Methods on page: click" in str(
        UnknownMethod("no", object_name="page", method_name="x", available=["click"])
    )


def test_format_error() -> None:
    error = UnknownCoreMethod("Core method not found: click", method_name="click", available=["visit"])

    assert format_error(error) == "[UNKNOWN_CORE_METHOD] Core method not found: click"
    assert format_error(RuntimeError("crashed")) == "RuntimeError: crashed"
    assert format_error(KeyError()) == "KeyError: KeyError"
