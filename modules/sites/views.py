"""Screens for browsing sites."""

from ui.components import (
    clear_screen, show_header, show_panel, show_table,
    show_info, press_enter_to_continue,
)
from ui.menu import run_menu_loop
from ui.styles import INDICATOR_ENABLED, INDICATOR_DISABLED
from utils.error_handler import handle_error


def site_label(site):
    # Plain text: InquirerPy does not render rich markup
    marker = "●" if site.enabled else "○"
    return f"{marker} {site.name}"


def format_details(site):
    status = "[green]Enabled[/green]" if site.enabled else "[red]Disabled[/red]"
    return "\n".join([
        f"Status: {status}",
        f"Name: {site.name}",
        f"Host: {', '.join(site.hosts)}",
        f"Port: {', '.join(str(p) for p in site.ports)}",
        f"Root: {site.root}",
    ])


def list_sites(manager):
    """Display a table of all sites, enabled first."""
    clear_screen()
    show_header()
    show_panel("NGINX Servers", title="Sites", style="cyan")

    if not manager.sites:
        show_info("No servers found.")
        press_enter_to_continue()
        return

    columns = [
        {"name": "", "justify": "center"},
        {"name": "Name", "style": "cyan"},
        {"name": "Host"},
        {"name": "Port", "justify": "right"},
        {"name": "Root", "style": "dim"},
    ]

    rows = []
    for site in manager.sites:
        rows.append([
            INDICATOR_ENABLED if site.enabled else INDICATOR_DISABLED,
            site.name,
            " ".join(site.hosts),
            ", ".join(str(p) for p in site.ports),
            site.root,
        ])

    show_table(f"Total: {len(manager.sites)} site(s)", columns, rows)
    press_enter_to_continue()


def site_menu(manager, name):
    """Details of one site with Edit and Enable/Disable actions."""
    def get_status():
        site = manager.registry.get(name)
        details = format_details(site) if site else "No server selected"
        return f"{details}\n\n{manager.status}" if manager.status else details

    def get_options():
        site = manager.registry.get(name)
        if site is None:
            return [("back", "← Back")]
        return [
            ("edit", "Edit"),
            ("toggle", "Disable" if site.enabled else "Enable"),
            ("back", "← Back"),
        ]

    def run(action):
        site = manager.registry.get(name)
        if site is None:
            return
        error = action(site)
        if error:
            handle_error(error)
            press_enter_to_continue()

    handlers = {
        "edit": lambda: run(manager.edit_site),
        "toggle": lambda: run(manager.toggle_site),
    }

    run_menu_loop(f"Site: {name}", get_options, handlers, get_status)


def select_site(manager):
    """Pick a site from the ordered list and open its menu."""
    def get_options():
        options = [(f"site:{site.name}", site_label(site)) for site in manager.sites]
        options.append(("back", "← Back"))
        return options

    def on_choice(choice):
        site_menu(manager, choice[len("site:"):])

    if not manager.sites:
        clear_screen()
        show_header()
        show_info("No servers found.")
        press_enter_to_continue()
        return

    run_menu_loop("Select a site:", get_options, on_choice, lambda: manager.status)
