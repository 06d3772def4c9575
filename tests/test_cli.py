# pylint: skip-file
# ruff: noqa
import json
import math
import random
import re

import pytest

from randomoutputpy.cli.random_output import main

ENTRY_REGEX = r"random-number<<(?P<delim>ghadelimiter_[0-9a-f-]{36})\n(?P<value>\d+)\n(?P=delim)\n"


def test_no_arguments_no_environment(capsys):
    main([])

    out = capsys.readouterr().out
    match = re.search(r"^::set-output name=random-number::(\d+)$", out, re.MULTILINE)
    assert match
    assert 0 <= int(match.group(1)) <= 99
    assert f"Generated random number: {match.group(1)}" in out


def test_writes_to_github_output(tmp_path, monkeypatch, capsys):
    output_file = tmp_path / "github_output"
    output_file.touch()
    monkeypatch.setenv("GITHUB_OUTPUT", str(output_file))

    main(["--seed", "42"])

    match = re.fullmatch(ENTRY_REGEX, output_file.read_text())
    assert match
    assert match.group("value") == str(math.floor(random.Random(42).random() * 100))
    assert "::set-output" not in capsys.readouterr().out


def test_seed_from_environment(tmp_path, monkeypatch):
    output_file = tmp_path / "github_output"
    output_file.touch()
    monkeypatch.setenv("GITHUB_OUTPUT", str(output_file))
    monkeypatch.setenv("ROS_SEED", "5")

    main([])
    main([])

    values = [m.group("value") for m in re.finditer(ENTRY_REGEX, output_file.read_text())]
    assert values == [str(math.floor(random.Random(5).random() * 100))] * 2


def test_missing_output_file_fails(tmp_path, monkeypatch, capsys):
    output_file = tmp_path / "does_not_exist"
    monkeypatch.setenv("GITHUB_OUTPUT", str(output_file))

    with pytest.raises(SystemExit) as ex:
        main([])

    assert ex.value.code == 1
    assert not output_file.exists()
    assert f"::error::Missing file at path: {output_file}" in capsys.readouterr().out


def test_file_runner_without_output_file(capsys):
    with pytest.raises(SystemExit) as ex:
        main(["--runner", "file"])

    assert ex.value.code == 1
    assert (
        "::error::Unable to find environment variable for file command GITHUB_OUTPUT"
        in capsys.readouterr().out
    )


def test_invalid_seed_in_environment(monkeypatch, capsys):
    monkeypatch.setenv("ROS_SEED", "abc")

    with pytest.raises(SystemExit) as ex:
        main([])

    assert ex.value.code == 1
    assert "::error::ROS_SEED must be an integer, got 'abc'" in capsys.readouterr().out


def test_json_logging(monkeypatch, capsys):
    monkeypatch.setenv("ROS_LOG_JSON", "1")

    main(["--seed", "3"])

    log_lines = [
        json.loads(line)
        for line in capsys.readouterr().out.splitlines()
        if line.startswith("{")
    ]
    messages = [line["message"] for line in log_lines]
    expected = math.floor(random.Random(3).random() * 100)
    assert f"Generated random number: {expected}" in messages


def test_verbosity(capsys):
    main(["-v", "2"])

    out = capsys.readouterr().out
    assert "VERBOSE2" in out
    assert "Log verbosity: 2" in out


def test_verbosity_reaches_module_loggers(tmp_path, monkeypatch, capsys):
    output_file = tmp_path / "github_output"
    output_file.touch()
    monkeypatch.setenv("GITHUB_OUTPUT", str(output_file))

    main(["-v", "2"])

    out = capsys.readouterr().out
    assert "Loaded settings" in out
    assert f"Wrote output 'random-number' to {output_file}" in out


def test_default_verbosity_hides_verbose_lines(tmp_path, monkeypatch, capsys):
    output_file = tmp_path / "github_output"
    output_file.touch()
    monkeypatch.setenv("GITHUB_OUTPUT", str(output_file))

    main([])

    out = capsys.readouterr().out
    assert "Loaded settings" not in out
    assert "Wrote output" not in out
    assert "Generated random number" in out
