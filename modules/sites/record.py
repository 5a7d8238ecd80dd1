"""In-memory view of one nginx site."""


class SiteRecord:
    """
    One file in sites-available.

    hosts, ports and root come from the file text; enabled reflects
    whether sites-enabled holds an entry of the same name and is set by
    the registry.
    """

    def __init__(self, name, hosts=None, ports=None, root="", enabled=False):
        self.name = name
        self.hosts = list(hosts or [])
        self.ports = list(ports or [])
        self.root = root
        self.enabled = enabled

    def update_from(self, other):
        """Copy the parsed fields of another record into this one."""
        self.hosts = list(other.hosts)
        self.ports = list(other.ports)
        self.root = other.root

    def __eq__(self, other):
        if not isinstance(other, SiteRecord):
            return NotImplemented
        return (
            self.name == other.name
            and self.hosts == other.hosts
            and self.ports == other.ports
            and self.root == other.root
            and self.enabled == other.enabled
        )

    def __repr__(self):
        return (
            f"SiteRecord(name={self.name!r}, hosts={self.hosts!r}, ports={self.ports!r}, "
            f"root={self.root!r}, enabled={self.enabled!r})"
        )
