import os
import subprocess
from unittest.mock import patch

import pytest

from modules.sites import control
from utils import editor
from utils.error_handler import EditorError, ServiceError


@pytest.fixture
def temp_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(editor, "TEMP_DIR", str(tmp_path))
    monkeypatch.setenv("EDITOR", "fake-editor")
    return tmp_path


def test_edit_returns_saved_text_and_removes_temp_file(temp_dir):
    seen = {}

    def fake_run(args):
        seen["args"] = args
        with open(args[1]) as f:
            seen["initial"] = f.read()
        with open(args[1], "w") as f:
            f.write("edited\n")
        return subprocess.CompletedProcess(args, 0)

    with patch.object(editor.subprocess, "run", side_effect=fake_run):
        result = editor.edit("original\n", "yaml")

    assert result == "edited\n"
    assert seen["initial"] == "original\n"
    assert seen["args"][0] == "fake-editor"
    assert seen["args"][1].endswith(".tmp.yaml")
    assert os.listdir(temp_dir) == []


def test_edit_non_zero_exit_raises_and_cleans_up(temp_dir):
    with patch.object(editor.subprocess, "run", return_value=subprocess.CompletedProcess([], 1)):
        with pytest.raises(EditorError):
            editor.edit("text", "conf")
    assert os.listdir(temp_dir) == []


def test_edit_missing_editor_raises(temp_dir):
    with patch.object(editor.subprocess, "run", side_effect=FileNotFoundError("fake-editor")):
        with pytest.raises(EditorError):
            editor.edit("text", "conf")
    assert os.listdir(temp_dir) == []


def test_get_editor_default(monkeypatch):
    monkeypatch.delenv("EDITOR", raising=False)
    assert editor.get_editor() == "vim"


@pytest.mark.parametrize("action, expected", [
    (control.reload_nginx, ["systemctl", "reload", "nginx"]),
    (control.restart_nginx, ["systemctl", "restart", "nginx"]),
])
def test_nginx_control_runs_systemctl(action, expected):
    with patch("utils.shell.subprocess.run") as run:
        run.return_value = subprocess.CompletedProcess(expected, 0)
        action()
    assert run.call_args[0][0] == expected


def test_nginx_control_failure_raises_service_error():
    failure = subprocess.CalledProcessError(1, ["systemctl"], stderr="Job for nginx.service failed\n")
    with patch("utils.shell.subprocess.run", side_effect=failure):
        with pytest.raises(ServiceError) as exc:
            control.reload_nginx()
    assert exc.value.details == "Job for nginx.service failed"
