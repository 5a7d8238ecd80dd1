"""Shell command utilities for ngx."""

import os
import logging
import subprocess

from utils.error_handler import ServiceError, PrivilegeError

logger = logging.getLogger("ngx.shell")


def run_command(command, capture_output=True, check=True):
    """
    Execute a command and return the result.

    Args:
        command: Command string or list of arguments
        capture_output: If True, capture stdout/stderr
        check: If True, raise exception on non-zero exit

    Returns:
        subprocess.CompletedProcess object with:
        - returncode: Exit code (0 = success)
        - stdout: Command output (if capture_output=True)
        - stderr: Error output (if capture_output=True)

    Raises:
        subprocess.CalledProcessError: If check=True and command fails
    """
    logger.info("run: %s", command)
    return subprocess.run(
        command,
        shell=isinstance(command, str),
        capture_output=capture_output,
        text=True,
        check=check,
    )


def service_control(service, action):
    """
    Control a systemd service (reload or restart).

    Args:
        service: Service name
        action: One of "reload", "restart"

    Raises:
        ServiceError: If the action is unknown or systemctl exits non-zero
    """
    valid_actions = ["reload", "restart"]
    if action not in valid_actions:
        raise ServiceError(f"Invalid action: {action}", details=f"Must be one of: {valid_actions}")

    try:
        run_command(["systemctl", action, service])
    except subprocess.CalledProcessError as e:
        details = e.stderr.strip() if e.stderr else f"exit status {e.returncode}"
        raise ServiceError(f"systemctl {action} {service} failed", details=details) from e
    except FileNotFoundError as e:
        raise ServiceError("systemctl not found", details=str(e)) from e


def check_root():
    """
    Check if running as root/sudo.

    Returns:
        bool: True if running as root
    """
    return os.geteuid() == 0


def require_root():
    """
    Require root privileges.

    Raises:
        PrivilegeError: If not running as root
    """
    if not check_root():
        raise PrivilegeError("You must run this program as root", suggestions=["Run with: sudo ngx"])
