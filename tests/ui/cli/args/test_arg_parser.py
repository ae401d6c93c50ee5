"""Tests for command line argument parser."""

import logging
from argparse import Namespace
from io import StringIO
from pathlib import Path

import pytest
from pytest_mock import MockerFixture
from rich.console import Console

from osuexport.config import ExportConfig
from osuexport.features.export import ExportSummary
from osuexport.ui.cli.args import ArgumentParser, ExportArgs
from osuexport.ui.cli.commands.export import ExportCommand


def test_create_parser() -> None:
    """Short and long flags map to the same destinations."""

    parser = ArgumentParser.create_parser()

    short: Namespace = parser.parse_args(["-p", "osu/Songs"])
    assert short.songs_path == "osu/Songs"
    assert short.output_path == "Songs"
    assert not short.verbose and not short.quiet

    long: Namespace = parser.parse_args(
        ["--songs-path", "osu/Songs", "--output", "out", "--verbose", "--log-file", "x.log"]
    )
    assert long.songs_path == "osu/Songs"
    assert long.output_path == "out"
    assert long.verbose
    assert long.log_file == "x.log"


def test_missing_songs_path_exits_with_2(capsys: pytest.CaptureFixture[str]) -> None:
    """Omitting ``-p`` is a usage error."""

    with pytest.raises(SystemExit) as exc_info:
        _ = ArgumentParser.process_args([])

    assert exc_info.value.code == 2
    assert "-p" in capsys.readouterr().err


def test_process_args_defaults(mocker: MockerFixture) -> None:
    """Defaults produce INFO console logging and the ``Songs`` output."""

    mock_setup_logger = mocker.patch("osuexport.ui.cli.args.parser.setup_logger")

    args = ArgumentParser.process_args(["-p", "library"])

    assert isinstance(args, ExportArgs)
    assert args.config == ExportConfig(songs_path=Path("library"), output_path=Path("Songs"))
    assert args.log_file is None
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.INFO
    assert mock_setup_logger.call_args.kwargs["log_file"] is None


def test_process_args_verbosity(mocker: MockerFixture) -> None:
    """``--verbose`` selects DEBUG and ``--quiet`` wins with ERROR."""

    mock_setup_logger = mocker.patch("osuexport.ui.cli.args.parser.setup_logger")

    _ = ArgumentParser.process_args(["-p", "library", "--verbose", "--log-file", "run.log"])
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.DEBUG
    assert mock_setup_logger.call_args.kwargs["log_file"] == Path("run.log")

    _ = ArgumentParser.process_args(["-p", "library", "--verbose", "--quiet"])
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.ERROR


def test_process_args_expands_user(
    mocker: MockerFixture, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    """A leading ``~`` is expanded in both paths."""

    _ = mocker.patch("osuexport.ui.cli.args.parser.setup_logger")
    monkeypatch.setenv("HOME", str(tmp_path))

    args = ArgumentParser.process_args(["-p", "~/Songs", "-d", "~/out"])

    assert args.config.songs_path == tmp_path / "Songs"
    assert args.config.output_path == tmp_path / "out"


def test_export_command_runs_parsed_config(mocker: MockerFixture) -> None:
    """The command hands the parsed ``ExportConfig`` to the runner unchanged."""

    _ = mocker.patch("osuexport.ui.cli.args.parser.setup_logger")
    mock_run_export = mocker.patch(
        "osuexport.ui.cli.commands.export.run_export", return_value=ExportSummary()
    )
    args = ArgumentParser.process_args(["-p", "library", "-d", "out"])

    _ = ExportCommand(args, Console(file=StringIO())).execute()

    assert mock_run_export.call_args.args[0] is args.config
    assert args.config == ExportConfig(songs_path=Path("library"), output_path=Path("out"))
