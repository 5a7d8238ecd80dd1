"""UI components for ngx - menus, styles, and reusable widgets."""

from ui.styles import (
    PRIMARY, SUCCESS, WARNING, ERROR, INFO, MUTED,
    INDICATOR_ENABLED, INDICATOR_DISABLED,
)

from ui.components import (
    console,
    clear_screen,
    show_header,
    show_panel,
    show_table,
    show_info,
    show_spinner,
    press_enter_to_continue,
)

from ui.menu import (
    show_submenu,
    confirm_action,
    run_menu_loop,
)
