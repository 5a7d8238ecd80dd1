"""Theme and style definitions for ngx."""

# Color constants
PRIMARY = "cyan"
SUCCESS = "green"
WARNING = "yellow"
ERROR = "red"
INFO = "blue"
MUTED = "dim"


# Site state markers
INDICATOR_ENABLED = f"[white on {SUCCESS}]  [/white on {SUCCESS}]"
INDICATOR_DISABLED = f"[white on {ERROR}]  [/white on {ERROR}]"
