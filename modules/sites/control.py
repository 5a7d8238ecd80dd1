"""Reload or restart the nginx daemon."""

from utils.shell import service_control


def reload_nginx():
    """Run systemctl reload nginx. Raises ServiceError on failure."""
    service_control("nginx", "reload")


def restart_nginx():
    """Run systemctl restart nginx. Raises ServiceError on failure."""
    service_control("nginx", "restart")
