"""Render nginx site files and scaffold content for new sites."""

import os
import re

import yaml

from config import PHP_FPM_SOCKET_DIR, FASTCGI_PARAMS_PATH
from utils.error_handler import ValidationError

REQUIRED_FIELDS = ["name", "host", "port", "root"]


class SiteCreationRequest:
    """User input for a new site, as read from the YAML draft."""

    def __init__(self, name, host, port, root, index="", php=None, proxy_url=None):
        self.name = name
        self.host = host
        self.port = port
        self.root = root
        self.index = index
        self.php = php
        self.proxy_url = proxy_url

    @classmethod
    def from_dict(cls, data):
        def text(key):
            value = data.get(key)
            return "" if value is None else str(value)

        return cls(
            name=text("name"),
            host=text("host"),
            port=data.get("port"),
            root=text("root"),
            index=text("index"),
            php=text("php") or None,
            proxy_url=text("proxyUrl") or None,
        )


class RenderedSite:
    """Output of render_creation; nothing here has been written yet."""

    def __init__(self, name, root, index, config_text, files):
        self.name = name
        self.root = root
        self.index = index
        self.config_text = config_text
        self.files = files


def new_site_template(default_vhosts):
    """Commented YAML draft shown in the editor for a new site."""
    return "\n".join([
        "### Required fields",
        "# Site name",
        "name: ",
        "",
        "# Server hostname (etc: example.com www.example.com)",
        "host: ",
        "",
        "# Port to listen on",
        "port: 80",
        "",
        "# Root directory ({name}, {host} will be replaced with site name and host respectively)",
        f"root: {default_vhosts}/{{name}}",
        "",
        "",
        "### Optional fields",
        "# Index file (Default: index.html - PHP default: index.php)",
        "index: ",
        "",
        "# PHP version (php7.4, php8.0)",
        "php: ",
        "",
        "# Proxy URL (http://localhost:8080)",
        "proxyUrl: ",
        "",
    ])


def parse_request(text):
    """
    Read a YAML draft into a SiteCreationRequest.

    Raises:
        ValidationError: The draft is not YAML or not a mapping
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValidationError("Draft is not valid YAML", details=str(e)) from e

    if not isinstance(data, dict):
        raise ValidationError("Draft must be a mapping of fields")

    return SiteCreationRequest.from_dict(data)


def validate(request):
    """
    Raise ValidationError naming the first empty required field.

    The name becomes a file in sites-available, so it must be a plain
    filename: no path separators, not "." or "..".
    """
    for field in REQUIRED_FIELDS:
        value = getattr(request, field)
        if value is None or str(value).strip() == "" or value == 0:
            raise ValidationError(f"Missing required field: {field}", field=field)

    name = str(request.name)
    if name in (".", "..") or os.sep in name or (os.altsep and os.altsep in name):
        raise ValidationError(f"Invalid site name: {name}", field="name")


def resolve_root(request, path_exists=os.path.exists):
    """
    Fill {name}/{host} in the root template and replace whitespace with "_".

    An already existing directory gets the site name appended so a new
    site never lands in an unrelated directory.
    """
    root = request.root.replace("{name}", request.name).replace("{host}", request.host)
    root = re.sub(r"\s", "_", root)
    if path_exists(root):
        root = f"{root}/{request.name}"
    return root


def resolve_index(request):
    index = (request.index or "").strip()
    if index:
        return index
    return "index.php" if request.php else "index.html"


def render_scaffold(name, index, php=None):
    lines = [
        "<!DOCTYPE html>",
        "<html>",
        "<head>",
        f"  <title>{name}</title>",
        "</head>",
        "<body>",
        f"  <h1>{name}</h1>",
        "</body>",
        "</html>",
        "<?php phpinfo(); ?>" if php and index.endswith(".php") else "",
    ]
    return "\n".join(lines)


def _proxy_block(proxy_url):
    return "\n".join([
        "  location / {",
        "    proxy_set_header X-Forwarded-For $remote_addr;",
        "    proxy_set_header Host $http_host;",
        "    proxy_set_header Upgrade $http_upgrade;",
        '    proxy_set_header Connection "upgrade";',
        f"    proxy_pass       {proxy_url};",
        "  }",
        "",
    ])


def _php_block(php, index):
    fastcgi_index = index if index.endswith(".php") else "index.php"
    return "\n".join([
        "  location ~ \\.php {",
        f"    fastcgi_pass unix:{PHP_FPM_SOCKET_DIR}/{php}-fpm.sock;",
        "    fastcgi_split_path_info ^((?U).+\\.php)(/?.+)$;",
        "    fastcgi_param SCRIPT_FILENAME $document_root$fastcgi_script_name;",
        "    fastcgi_param PATH_INFO $fastcgi_path_info;",
        "    fastcgi_param PATH_TRANSLATED $document_root$fastcgi_path_info;",
        "    fastcgi_read_timeout 600s;",
        "    fastcgi_send_timeout 600s;",
        f"    fastcgi_index {fastcgi_index};",
        f"    include {FASTCGI_PARAMS_PATH};",
        "  }",
        "",
    ])


def render_config(request, root, index):
    """Server block text for a validated request."""
    parts = [
        "server {",
        f"  listen {request.port};",
        f"  server_name {request.host};",
        f"  root {root};",
        f"  index {index};",
        "",
        "  location / {",
        "    try_files $uri $uri/ =404;",
        "  }",
        "",
    ]
    if request.proxy_url:
        parts.append(_proxy_block(request.proxy_url))
    if request.php:
        parts.append(_php_block(request.php, index))
    parts.append("}")
    return "\n".join(parts)


def render_creation(request, path_exists=os.path.exists):
    """
    Turn a request into config text and scaffold files.

    Only path_exists looks at the filesystem; nothing is written.

    Raises:
        ValidationError: name, host, port or root is missing
    """
    validate(request)

    root = resolve_root(request, path_exists)
    index = resolve_index(request)

    files = {
        os.path.join(root, index): render_scaffold(request.name, index, request.php),
    }

    return RenderedSite(
        name=request.name,
        root=root,
        index=index,
        config_text=render_config(request, root, index),
        files=files,
    )
