"""Tests for target resolution and the JSON parse/serialize primitives."""

import pytest

from exceptions import ParseError, WatchTargetMissingError
from services.json_file import (
    parse_document,
    read_target_file,
    resolve_target,
    serialize_document,
    write_target_file,
)


# ---------------------------------------------------------------------------
# resolve_target
# ---------------------------------------------------------------------------

def test_resolve_target_returns_absolute_path(json_path, monkeypatch):
    monkeypatch.chdir(json_path.parent)
    target = resolve_target("data.json")
    assert target.path.is_absolute()
    assert target.path == json_path.resolve()
    assert target.directory == json_path.resolve().parent


def test_resolve_target_strips_surrounding_quotes(json_path):
    target = resolve_target(f'"{json_path}"')
    assert target.path == json_path.resolve()


def test_resolve_target_missing_file(tmp_path):
    with pytest.raises(WatchTargetMissingError) as excinfo:
        resolve_target(str(tmp_path / "nope.json"))
    assert "does not exist" in str(excinfo.value)


# ---------------------------------------------------------------------------
# read / write
# ---------------------------------------------------------------------------

def test_read_and_write_round_trip_file(target):
    write_target_file(target, '{"x":"é"}')
    assert read_target_file(target) == '{"x":"é"}'


# ---------------------------------------------------------------------------
# parse_document
# ---------------------------------------------------------------------------

def test_parse_valid_document():
    assert parse_document('{"a": [1, 2], "b": null}') == {"a": [1, 2], "b": None}


def test_parse_error_reports_zero_based_column():
    with pytest.raises(ParseError) as excinfo:
        parse_document('{"a": 1 x}')
    err = excinfo.value
    assert err.line == 1
    assert err.column == 8
    assert err.message == "Expecting ',' delimiter"


def test_parse_error_on_later_line():
    content = '{\n  "a": 1,\n  "b": #2\n}'
    with pytest.raises(ParseError) as excinfo:
        parse_document(content)
    err = excinfo.value
    assert err.line == 3
    assert content.split("\n")[2][err.column] == "#"


def test_parse_rejects_undefined_token():
    with pytest.raises(ParseError) as excinfo:
        parse_document('{"b": undefined}')
    assert excinfo.value.column == 6


# ---------------------------------------------------------------------------
# serialize_document
# ---------------------------------------------------------------------------

def test_serialize_is_compact():
    assert serialize_document({"a": 1, "b": [1, 2]}) == '{"a":1,"b":[1,2]}'


def test_serialize_keeps_non_ascii():
    assert serialize_document({"name": "café"}) == '{"name":"café"}'


def test_serialize_strips_undefined_artifact():
    assert serialize_document(["undefined,", "x"]) == '["","x"]'
    assert serialize_document({"k": "a undefined, b"}) == '{"k":"a  b"}'


def test_resolve_target_rejects_directory(tmp_path):
    with pytest.raises(WatchTargetMissingError):
        resolve_target(str(tmp_path))
