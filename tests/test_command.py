import os

import pytest

from pipex.command import find_command, path_dirs
from pipex.errors import ERR_126, ERR_127, PipexError


def _make_file(path, executable=True):
    path.write_text("#!/bin/sh\nexit 0\n")
    path.chmod(0o755 if executable else 0o644)
    return path


def test_path_dirs_drops_empty_entries():
    assert path_dirs({"PATH": "/a::/b:"}) == ["/a", "/b"]


def test_path_dirs_without_path_is_empty():
    assert path_dirs({"HOME": "/home/someone"}) == []


def test_path_dirs_empty_value():
    assert path_dirs({"PATH": ""}) == []


def test_find_command_in_later_directory(tmp_path):
    first = tmp_path / "one"
    second = tmp_path / "two"
    first.mkdir()
    second.mkdir()
    _make_file(second / "tool")
    result = find_command("tool", [str(first), str(second)])
    assert result == f"{second}/tool"


def test_find_command_prefers_first_directory(tmp_path):
    first = tmp_path / "one"
    second = tmp_path / "two"
    first.mkdir()
    second.mkdir()
    _make_file(first / "tool")
    _make_file(second / "tool")
    assert find_command("tool", [str(first), str(second)]) == f"{first}/tool"


def test_find_command_skips_unexecutable_candidate(tmp_path):
    first = tmp_path / "one"
    second = tmp_path / "two"
    first.mkdir()
    second.mkdir()
    _make_file(first / "tool", executable=False)
    _make_file(second / "tool")
    assert find_command("tool", [str(first), str(second)]) == f"{second}/tool"


def test_find_command_not_executable(tmp_path):
    _make_file(tmp_path / "tool", executable=False)
    with pytest.raises(PipexError) as info:
        find_command("tool", [str(tmp_path)])
    assert info.value.code == 126
    assert info.value.message == "tool" + ERR_126


def test_find_command_not_found(tmp_path):
    with pytest.raises(PipexError) as info:
        find_command("missing", [str(tmp_path)])
    assert info.value.code == 127
    assert info.value.message == "missing" + ERR_127


def test_find_command_no_paths():
    with pytest.raises(PipexError) as info:
        find_command("missing", [])
    assert info.value.code == 127


def test_find_command_absolute_path(tmp_path):
    tool = _make_file(tmp_path / "tool")
    assert find_command(str(tool), []) == str(tool)


def test_find_command_name_in_working_directory(tmp_path, monkeypatch):
    _make_file(tmp_path / "tool")
    monkeypatch.chdir(tmp_path)
    assert find_command("tool", ["/nonexistent"]) == "tool"
    assert os.path.exists("tool")