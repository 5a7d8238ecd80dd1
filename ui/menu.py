"""Interactive menu system for ngx using InquirerPy."""

from InquirerPy import inquirer
from InquirerPy.base.control import Choice
from InquirerPy.utils import InquirerPyStyle


# Prompt colors for the fuzzy site menus and confirmations
MENU_STYLE = InquirerPyStyle({
    "questionmark": "#00ffff bold",
    "answermark": "#00ffff bold",
    "answer": "#00ffff",
    "question": "#ffffff bold",
    "instruction": "#666666",
    "pointer": "#00ffff bold",
    "fuzzy_prompt": "#00ffff",
    "fuzzy_info": "#666666",
    "fuzzy_border": "#00ffff",
    "fuzzy_match": "#00ffff bold",
})


def show_submenu(title, options):
    """
    Fuzzy-select one entry from (key, label) pairs.

    Returns the chosen key, or None when the prompt is cancelled.
    """
    choices = [Choice(value=key, name=label) for key, label in options]

    try:
        result = inquirer.fuzzy(
            message=title,
            choices=choices,
            default=None,
            border=True,
            pointer="›",
            marker="›",
            cycle=True,
            max_height="70%",
            instruction="(↑↓ navigate, type to filter, enter to select)",
            style=MENU_STYLE,
        ).execute()
        return result
    except KeyboardInterrupt:
        return None


def confirm_action(message):
    """
    Show a yes/no confirmation prompt.

    Returns:
        bool: True if confirmed, False if cancelled
    """
    try:
        return inquirer.confirm(
            message=message,
            default=False,
            style=MENU_STYLE,
        ).execute()
    except KeyboardInterrupt:
        return False


def run_menu_loop(title, get_options, handlers, get_status=None):
    """
    Run a standard menu loop with automatic screen clearing and header.

    Args:
        title: Menu title string
        get_options: List of (key, label) tuples OR callable that returns such list
        handlers: Dict mapping choice keys to handler functions, or a
                  callable taking the chosen key (for dynamic keys)
        get_status: Optional callable that returns status string to display
    """
    from ui.components import clear_screen, show_header, console

    while True:
        clear_screen()
        show_header()

        if get_status:
            status = get_status()
            if status:
                console.print(f"[dim]{status}[/dim]")
                console.print()

        options = get_options() if callable(get_options) else get_options

        choice = show_submenu(title=title, options=options)

        if choice == "back" or choice is None:
            break

        if callable(handlers):
            handlers(choice)
            continue

        handler = handlers.get(choice)
        if handler:
            handler()
