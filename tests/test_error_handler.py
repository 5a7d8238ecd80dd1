import json
from datetime import datetime, timedelta

import pytest

from utils import error_handler
from utils.error_handler import (
    NgxError, ConfigIOError, LinkError, ValidationError, handle_error,
)


@pytest.fixture
def log_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(error_handler, "LOG_DIR", tmp_path)
    return tmp_path


def test_subclasses_carry_codes_and_modules():
    error = LinkError("Cannot enable blog")
    assert error.code == "E2004"
    assert error.module == "Sites"
    assert str(error) == "[E2004] Cannot enable blog"
    assert isinstance(ConfigIOError("x"), NgxError)


def test_validation_error_records_field():
    error = ValidationError("Missing required field: host", field="host")
    assert error.field == "host"
    assert error.code == "E2001"


def test_suggestions_detected_from_details():
    error = LinkError("Cannot enable blog", details="[Errno 13] Permission denied: '/etc/nginx'")
    assert "Run with sudo: sudo ngx" in error.suggestions


def test_handle_error_appends_json_line(log_dir):
    handle_error(ConfigIOError("Error parsing config file", details="bad yaml"))

    [log_file] = list(log_dir.glob("error-*.log"))
    entry = json.loads(log_file.read_text().splitlines()[0])
    assert entry["code"] == "E1001"
    assert entry["message"] == "Error parsing config file"
    assert entry["details"] == "bad yaml"


def test_old_logs_are_pruned(log_dir):
    old = (datetime.now() - timedelta(days=30)).strftime("%Y-%m-%d")
    (log_dir / f"error-{old}.log").write_text("{}\n")
    (log_dir / "error-garbage.log").write_text("{}\n")

    error_handler.init_error_handler()

    names = sorted(p.name for p in log_dir.iterdir())
    assert names == ["error-garbage.log"]
