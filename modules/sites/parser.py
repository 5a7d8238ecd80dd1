"""Extract server_name, listen and root from nginx site files.

This is not an nginx grammar parser. Everything other than the three
directives below is ignored, including comments and nesting.
"""

import re

from modules.sites.record import SiteRecord

SERVER_NAME_RE = re.compile(r"server_name\s+(.+);")
LISTEN_RE = re.compile(r"\s*listen\s+(\d+)")
ROOT_RE = re.compile(r"root\s+(.+);")


def parse_hosts(content):
    """Hostnames from the first server_name directive, or [] if none."""
    match = SERVER_NAME_RE.search(content)
    if not match:
        return []
    return match.group(1).split()


def parse_ports(content):
    """Every numeric listen port in file order, duplicates kept."""
    ports = []
    for match in LISTEN_RE.finditer(content):
        try:
            ports.append(int(match.group(1)))
        except ValueError:
            continue
    return ports


def parse_root(content):
    """Value of the first root directive, verbatim, or "" if none."""
    match = ROOT_RE.search(content)
    return match.group(1) if match else ""


def parse(name, content):
    """
    Build a SiteRecord from a site file's text.

    The enabled flag is left False; the registry fills it in.
    """
    return SiteRecord(
        name=name,
        hosts=parse_hosts(content),
        ports=parse_ports(content),
        root=parse_root(content),
    )
