#!/usr/bin/env python3
"""
ngx - NGINX site manager

Entry point for the application.
"""

import sys

from config import APP_NAME, APP_VERSION, APP_DESCRIPTION, CONFIG_PATH
from ui.components import clear_screen, console
from utils.error_handler import NgxError, init_error_handler
from utils.logger import log, setup_file_logging
from utils.shell import require_root

from modules import sites
from modules.sites.actions import SiteManager
from modules.sites.store import ConfigStore


def fail(message, details=None):
    """Print a fatal error on stderr and exit non-zero."""
    print(message, file=sys.stderr)
    if details:
        print(details, file=sys.stderr)
    sys.exit(1)


def start_manager():
    """Load settings and sites; any failure here is fatal."""
    manager = SiteManager(ConfigStore(CONFIG_PATH))
    log.step(f"Loading config from {CONFIG_PATH}")
    try:
        manager.start()
    except NgxError as e:
        fail(e.message, e.details)
    log.success(f"Loaded {len(manager.sites)} site(s)")
    return manager


def show_help():
    """Show help message."""
    print(f"{APP_NAME} v{APP_VERSION}")
    print(APP_DESCRIPTION)
    print()
    print("Usage:")
    print("  sudo ngx               Run ngx")
    print("  ngx --help             Show this help")
    print("  ngx --version          Show version")
    print()
    print("Environment:")
    print("  EDITOR                 Editor for site files (default: vim)")
    print("  NGX_CONFIG             Settings file (default: ~/.ngx/ngx.yaml)")


def main():
    """Main entry point."""
    if len(sys.argv) > 1:
        arg = sys.argv[1]
        if arg in ("--help", "-h"):
            show_help()
            sys.exit(0)
        elif arg in ("--version", "-v"):
            print(f"{APP_NAME} v{APP_VERSION}")
            sys.exit(0)
        else:
            print(f"Unknown argument: {arg}")
            print("Use --help for usage information.")
            sys.exit(1)

    try:
        require_root()
    except NgxError as e:
        fail(e.message)

    init_error_handler()
    setup_file_logging()

    manager = start_manager()
    try:
        sites.show_menu(manager)
    except KeyboardInterrupt:
        print("\n")
        console.print("[dim]Exiting...[/dim]")
        sys.exit(0)

    clear_screen()
    console.print(f"[cyan]Thank you for using {APP_NAME}![/cyan]")


if __name__ == "__main__":
    main()
