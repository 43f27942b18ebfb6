from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import pytest

from ttt_minimax.cli import main, parse_board


SRC = str(Path(__file__).resolve().parents[1] / "src")


def _run_cli(args: list[str], cwd: Path, stdin: str | None = None, env: dict | None = None) -> subprocess.CompletedProcess:
    exe = [sys.executable, "-m", "ttt_minimax.cli"]
    env = dict(os.environ if env is None else env)
    env["PYTHONPATH"] = os.pathsep.join(p for p in (SRC, env.get("PYTHONPATH")) if p)
    return subprocess.run(exe + args, cwd=cwd, capture_output=True, text=True, input=stdin, env=env)


def test_parse_board_accepts_dots():
    assert str(parse_board("o...x....")) == "o   x    "


def test_cli_move_and_tactics(tmp_path: Path):
    r = _run_cli(["move", "--board", "ooxxo...."], cwd=tmp_path)
    assert r.returncode == 0
    s = r.stdout + r.stderr
    assert "move=8" in s and "value=6" in s
    r = _run_cli(["tactics", "--board", "  o  o xx"], cwd=tmp_path)
    assert r.returncode == 0
    s = r.stdout + r.stderr
    assert "wins=[]" in s and "blocks=[6]" in s


def test_cli_stop_at_line_flag_and_env(tmp_path: Path):
    r = _run_cli(["--stop-at-line", "move", "--board", "xx..o....", "--scores"], cwd=tmp_path)
    assert r.returncode == 0
    s = r.stdout + r.stderr
    assert "move=2 value=0" in s
    assert "scores={2: 0, 3: -8" in s

    env = dict(os.environ, TTT_STOP_AT_LINE="1")
    r = _run_cli(["move", "--board", "xx..o...."], cwd=tmp_path, env=env)
    assert r.returncode == 0
    assert "move=2" in r.stdout + r.stderr


def test_cli_selfplay(tmp_path: Path):
    r = _run_cli(["--stop-at-line", "selfplay", "--board", "x........"], cwd=tmp_path)
    assert r.returncode == 0
    assert "result=draw" in r.stdout + r.stderr


def test_cli_move_stdin_streams_csv(tmp_path: Path):
    lines = "ooxxo    \nbad\n\noxoxoxoxo\n  o  o xx\n"
    r = _run_cli(["move", "--stdin"], cwd=tmp_path, stdin=lines)
    assert r.returncode == 0
    rows = r.stdout.strip().splitlines()
    assert rows[0] == "board,move,value"
    assert rows[1:] == ["ooxxo    ,8,6", "  o  o xx,6,5"]


@pytest.mark.parametrize("bad", ["abc", "oxoxoxox", "oxoxoxoxox", "oxoxoxoxq"])
def test_cli_error_invalid_boards(tmp_path: Path, bad: str):
    r = _run_cli(["move", "--board", bad], cwd=tmp_path)
    assert r.returncode == 2
    assert "Invalid board string" in r.stderr
    r = _run_cli(["tactics", "--board", bad], cwd=tmp_path)
    assert r.returncode == 2


def test_cli_error_full_board(tmp_path: Path):
    r = _run_cli(["move", "--board", "oxoxoxoxo"], cwd=tmp_path)
    assert r.returncode == 2
    assert "already over" in r.stderr


def test_cli_unknown_log_level(tmp_path: Path):
    env = dict(os.environ, TTT_LOG_LEVEL="LOUD")
    r = _run_cli(["move", "--board", "ooxxo...."], cwd=tmp_path, env=env)
    assert r.returncode == 2
    assert "Unknown log level" in r.stderr


def test_main_in_process(capsys):
    assert main(["move", "--board", "  o  o xx"]) == 0
    assert capsys.readouterr().out == "move=6 value=5\n"
    assert main(["--stop-at-line", "selfplay", "--board", "ooxxo...."]) == 0
    out = capsys.readouterr().out
    assert "result=self" in out
    assert "moves=[8]" in out


def test_results_printed_when_log_level_raised(tmp_path: Path):
    env = dict(os.environ, TTT_LOG_LEVEL="WARNING")
    r = _run_cli(["move", "--board", "ooxxo...."], cwd=tmp_path, env=env)
    assert r.returncode == 0
    assert "move=8 value=6" in r.stdout
    r = _run_cli(["tactics", "--board", "  o  o xx"], cwd=tmp_path, env=env)
    assert r.returncode == 0
    assert "blocks=[6]" in r.stdout
    r = _run_cli(["--stop-at-line", "selfplay", "--board", "ooxxo...."], cwd=tmp_path, env=env)
    assert r.returncode == 0
    assert "result=self" in r.stdout


def test_move_requires_board_or_stdin(tmp_path: Path):
    r = _run_cli(["move"], cwd=tmp_path)
    assert r.returncode == 2
    assert "--board is required unless --stdin is given" in r.stderr
    assert "0 squares" not in r.stderr


def test_main_without_command_prints_help(capsys):
    assert main([]) == 0
    assert "ttt-minimax" in capsys.readouterr().out
