"""Global configuration for ngx."""

import os

# Application Info
APP_NAME = "ngx"
APP_VERSION = "1.0.0"
APP_TAGLINE = "NGINX Site Manager"
APP_DESCRIPTION = "Manage nginx virtual hosts from the terminal"

# Tool settings file (YAML). NGX_CONFIG overrides the location.
CONFIG_PATH = os.environ.get("NGX_CONFIG", os.path.expanduser("~/.ngx/ngx.yaml"))

# Defaults written to a fresh settings file
DEFAULT_NGINX_PATH = "/etc/nginx"
DEFAULT_VHOSTS = "/var/www/html"

DEFAULT_SETTINGS = {
    "nginxPath": DEFAULT_NGINX_PATH,
    "sitesAvailable": os.path.join(DEFAULT_NGINX_PATH, "sites-available"),
    "sitesEnabled": os.path.join(DEFAULT_NGINX_PATH, "sites-enabled"),
    "defaultVhosts": DEFAULT_VHOSTS,
}

# PHP-FPM
PHP_FPM_SOCKET_DIR = "/run/php"
FASTCGI_PARAMS_PATH = "/etc/nginx/fastcgi_params"

# External editor used for drafts and site files
DEFAULT_EDITOR = "vim"
TEMP_DIR = "/tmp"

# Logging Configuration
LOG_CONFIG = {
    "log_dir": "/var/log/ngx",
    "log_file": "ngx.log",
    "retention_days": 7,
    "max_log_size_mb": 5,
    "backup_count": 3,
}
