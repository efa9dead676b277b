"""
CLI Integration Tests

Tests the uuidv7 commands end-to-end through typer's CliRunner.
"""

import json

from typer.testing import CliRunner

from uuidv7_kit.cli.main import app
from uuidv7_kit.codec.transcoder import Transcoder
from uuidv7_kit.codec.validator import is_valid, timestamp_of
from tests.helpers import REFERENCE_ID, REFERENCE_MS, assert_strictly_increasing

runner = CliRunner()


def test_gen_single() -> None:
    result = runner.invoke(app, ["gen"])
    assert result.exit_code == 0
    assert is_valid(result.stdout.strip())


def test_gen_many() -> None:
    result = runner.invoke(app, ["gen", "--count", "20"])
    assert result.exit_code == 0
    ids = result.stdout.split()
    assert len(ids) == 20
    assert_strictly_increasing(ids)


def test_gen_fixed_timestamp() -> None:
    result = runner.invoke(app, ["gen", "-n", "3", "--timestamp", str(REFERENCE_MS)])
    assert result.exit_code == 0
    ids = result.stdout.split()
    assert [timestamp_of(identifier) for identifier in ids] == [REFERENCE_MS] * 3
    assert_strictly_increasing(ids)


def test_gen_rejects_bad_arguments() -> None:
    result = runner.invoke(app, ["gen", "--count", "0"])
    assert result.exit_code == 1
    assert "greater than 0" in result.output

    result = runner.invoke(app, ["gen", "--timestamp", "-5"])
    assert result.exit_code == 1
    assert "out of range" in result.output

    result = runner.invoke(app, ["gen", "--timestamp", "5", "--count", "0"])
    assert result.exit_code == 1


def test_gen_encoded() -> None:
    result = runner.invoke(app, ["gen", "--encode", "--alphabet", "0123456789abcdef"])
    assert result.exit_code == 0
    encoded = result.stdout.strip()
    assert is_valid(Transcoder("0123456789abcdef").decode_or_raise(encoded))


def test_encode_decode_round_trip() -> None:
    result = runner.invoke(app, ["encode", REFERENCE_ID])
    assert result.exit_code == 0
    encoded = result.stdout.strip()

    result = runner.invoke(app, ["decode", encoded])
    assert result.exit_code == 0
    assert result.stdout.strip() == REFERENCE_ID


def test_encode_invalid_identifier() -> None:
    result = runner.invoke(app, ["encode", "c8cb31ca-8fb7-476d-806a-e2181dcdf980"])
    assert result.exit_code == 1
    assert "Not a valid UUIDv7" in result.output


def test_decode_reports_bad_character() -> None:
    result = runner.invoke(app, ["decode", "abc0def"])
    assert result.exit_code == 1
    assert "index 3" in result.output


def test_invalid_alphabet() -> None:
    result = runner.invoke(app, ["encode", REFERENCE_ID, "--alphabet", "abc"])
    assert result.exit_code == 1
    assert "between 16 and 64" in result.output


def test_inspect_json() -> None:
    result = runner.invoke(app, ["inspect", REFERENCE_ID, "--json"])
    assert result.exit_code == 0
    info = json.loads(result.stdout)
    assert info["timestamp"] == REFERENCE_MS
    assert info["date"] == "2024-04-22T19:55:02.151000+00:00"
    assert info["rand_a"] == 0x37D


def test_inspect_text() -> None:
    result = runner.invoke(app, ["inspect", REFERENCE_ID.upper()])
    assert result.exit_code == 0
    assert f"Timestamp: {REFERENCE_MS}" in result.stdout
    assert REFERENCE_ID in result.stdout


def test_inspect_timestamp_past_year_9999() -> None:
    result = runner.invoke(app, ["inspect", "ffffffff-ffff-7fff-bfff-ffffffffffff", "--json"])
    assert result.exit_code == 0
    info = json.loads(result.stdout)
    assert info["timestamp"] == 2**48 - 1
    assert info["date"] is None


def test_inspect_invalid() -> None:
    result = runner.invoke(app, ["inspect", "not-a-uuid"])
    assert result.exit_code == 1


def test_validate() -> None:
    assert runner.invoke(app, ["validate", REFERENCE_ID]).exit_code == 0
    result = runner.invoke(app, ["validate", "00000000-0000-0000-0000-000000000000"])
    assert result.exit_code == 1
    assert "invalid" in result.stdout
