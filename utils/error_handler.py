"""Centralized error handling for ngx.

Provides:
- NgxError exception hierarchy with error codes
- Dual logging: Rich console (user-friendly) + JSON file (debugging)
- Auto-detection of common issues with contextual suggestions
- Log rotation by date (keep 7 days)
"""

import os
import json
from datetime import datetime, timedelta
from pathlib import Path
from typing import Optional, List, Dict, Any

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from config import LOG_CONFIG

console = Console()

LOG_DIR = Path(LOG_CONFIG["log_dir"])

ERROR_CODES = {
    # E1xxx - STARTUP (fatal when raised before the menu loop)
    "E1001": ("Config", "Configuration file unreadable"),
    "E1002": ("Config", "Configuration file unwritable"),
    "E1003": ("Sites", "Sites directory cannot be listed"),
    "E1004": ("System", "Root privileges required"),

    # E2xxx - SITES
    "E2001": ("Sites", "Missing required field"),
    "E2002": ("Sites", "Site already exists"),
    "E2003": ("Sites", "Site file write failed"),
    "E2004": ("Sites", "Enable failed"),
    "E2005": ("Sites", "Disable failed"),

    # E3xxx - EXTERNAL
    "E3001": ("Editor", "Editor exited with an error"),
    "E3002": ("Service", "Nginx command failed"),
}

KNOWN_ISSUES = {
    "permission": {
        "patterns": ["Permission denied", "EACCES", "Operation not permitted"],
        "suggestions": [
            "Run with sudo: sudo ngx",
            "Check file ownership: ls -la <path>",
        ]
    },
    "missing": {
        "patterns": ["No such file or directory", "ENOENT"],
        "suggestions": [
            "Check the paths in ~/.ngx/ngx.yaml",
            "Is nginx installed? Try: nginx -v",
        ]
    },
    "nginx_test": {
        "patterns": ["test failed", "emerg", "invalid number of arguments"],
        "suggestions": [
            "Check syntax: sudo nginx -t",
            "View logs: sudo journalctl -u nginx -n 50",
        ]
    },
}


class NgxError(Exception):
    """Base exception for ngx with error codes and suggestions."""

    code = "E0000"

    def __init__(
        self,
        message: str,
        details: Optional[str] = None,
        suggestions: Optional[List[str]] = None,
        code: Optional[str] = None,
    ):
        if code:
            self.code = code
        self.message = message
        self.details = details
        self.suggestions = list(suggestions or [])
        self.module = self._get_module_from_code(self.code)
        self.timestamp = datetime.now()

        if details:
            self._auto_detect_suggestions(details)

        super().__init__(f"[{self.code}] {message}")

    def _get_module_from_code(self, code: str) -> str:
        if code in ERROR_CODES:
            return ERROR_CODES[code][0]
        return "Unknown"

    def _auto_detect_suggestions(self, text: str) -> None:
        text_lower = text.lower()
        for issue_data in KNOWN_ISSUES.values():
            for pattern in issue_data["patterns"]:
                if pattern.lower() in text_lower:
                    for suggestion in issue_data["suggestions"]:
                        if suggestion not in self.suggestions:
                            self.suggestions.append(suggestion)
                    break

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp.isoformat(),
            "code": self.code,
            "module": self.module,
            "level": "ERROR",
            "message": self.message,
            "details": self.details,
            "suggestions": self.suggestions,
            "context": {
                "user": os.environ.get("USER", "unknown"),
                "cwd": os.getcwd(),
            }
        }


class ConfigIOError(NgxError):
    code = "E1001"


class ConfigWriteError(NgxError):
    code = "E1002"


class DiscoveryError(NgxError):
    code = "E1003"


class PrivilegeError(NgxError):
    code = "E1004"


class ValidationError(NgxError):
    """A new-site draft is missing a required field or is not valid YAML."""

    code = "E2001"

    def __init__(self, message: str, field: Optional[str] = None, **kwargs):
        self.field = field
        super().__init__(message, **kwargs)


class AlreadyExistsError(NgxError):
    code = "E2002"


class WriteError(NgxError):
    code = "E2003"


class LinkError(NgxError):
    code = "E2004"


class UnlinkError(NgxError):
    code = "E2005"


class EditorError(NgxError):
    code = "E3001"


class ServiceError(NgxError):
    code = "E3002"


def _ensure_log_dir() -> bool:
    try:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        return True
    except OSError:
        return False


def _get_log_file() -> Path:
    date_str = datetime.now().strftime("%Y-%m-%d")
    return LOG_DIR / f"error-{date_str}.log"


def _cleanup_old_logs(keep_days: int = 7) -> None:
    if not LOG_DIR.exists():
        return

    cutoff = datetime.now() - timedelta(days=keep_days)

    for log_file in LOG_DIR.glob("error-*.log"):
        try:
            date_str = log_file.stem.replace("error-", "")
            file_date = datetime.strptime(date_str, "%Y-%m-%d")

            if file_date < cutoff:
                log_file.unlink()
        except (ValueError, OSError):
            continue


def _log_to_file(error: NgxError) -> Optional[str]:
    if not _ensure_log_dir():
        return None

    log_file = _get_log_file()

    try:
        with open(log_file, "a") as f:
            f.write(json.dumps(error.to_dict()) + "\n")
        return str(log_file)
    except OSError:
        return None


def _display_error(error: NgxError, log_path: Optional[str] = None) -> None:
    content = Text()
    content.append(f"{error.message}\n", style="bold red")

    if error.details:
        content.append("\nDetected: ", style="bold")
        content.append(f"{error.details}\n", style="yellow")

    if error.suggestions:
        content.append("\nSuggestions:\n", style="bold")
        for i, suggestion in enumerate(error.suggestions, 1):
            content.append(f"  {i}. {suggestion}\n", style="cyan")

    if log_path:
        content.append("\nLog: ", style="dim")
        content.append(f"{log_path}", style="dim blue")

    panel = Panel(
        content,
        title=f"[bold red]ERROR {error.code}[/bold red]",
        border_style="red",
        padding=(0, 1),
    )
    console.print(panel)


def handle_error(error: NgxError) -> NgxError:
    """Display an error panel and append it to the daily JSON error log."""
    log_path = _log_to_file(error)
    _display_error(error, log_path)
    return error


def init_error_handler() -> None:
    """Initialize error handler: ensure log dir and cleanup old logs."""
    _ensure_log_dir()
    _cleanup_old_logs(keep_days=LOG_CONFIG["retention_days"])
