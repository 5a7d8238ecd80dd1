"""NGINX site management module for ngx."""

from ui.components import show_spinner, press_enter_to_continue
from ui.menu import run_menu_loop, confirm_action
from utils.error_handler import handle_error

from modules.sites.views import list_sites, select_site


def show_menu(manager):
    """Display the main sites menu until the user exits."""
    def get_status():
        enabled = sum(1 for site in manager.sites if site.enabled)
        summary = f"Sites: [cyan]{len(manager.sites)}[/cyan] ([green]{enabled} enabled[/green])"
        if manager.status:
            return f"{summary}\n{manager.status}"
        return summary

    def get_options():
        return [
            ("list", "1. List Sites"),
            ("select", "2. Site Details"),
            ("new", "3. New Site"),
            ("config", "4. Edit Config"),
            ("reload", "5. Reload Nginx"),
            ("restart", "6. Restart Nginx"),
            ("back", "✕ Exit"),
        ]

    def report(error):
        if error:
            handle_error(error)
            press_enter_to_continue()

    def reload_nginx():
        with show_spinner("Reloading nginx..."):
            error = manager.reload_nginx()
        report(error)

    def restart_nginx():
        if not confirm_action("Restart nginx? Active connections will be dropped."):
            return
        with show_spinner("Restarting nginx..."):
            error = manager.restart_nginx()
        report(error)

    handlers = {
        "list": lambda: list_sites(manager),
        "select": lambda: select_site(manager),
        "new": lambda: report(manager.new_site()),
        "config": lambda: report(manager.edit_config()),
        "reload": reload_nginx,
        "restart": restart_nginx,
    }

    run_menu_loop("NGINX Servers", get_options, handlers, get_status)
