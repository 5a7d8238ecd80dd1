"""The collection of known sites and the operations that change it."""

import os
import logging

from modules.sites import parser
from modules.sites.generator import render_creation, validate
from utils.error_handler import (
    DiscoveryError, AlreadyExistsError, WriteError, LinkError, UnlinkError,
)

logger = logging.getLogger("ngx.sites")


def sort_sites(sites):
    """
    Sort in place: by name, then enabled sites first.

    Two stable passes, so names stay ordered within each group.
    """
    sites.sort(key=lambda s: s.name)
    sites.sort(key=lambda s: not s.enabled)
    return sites


class SiteRegistry:
    """
    Owns the SiteRecords for one sites-available/sites-enabled pair.

    Every method runs to completion synchronously; callers serialize
    access (the menu loop handles one action at a time).
    """

    def __init__(self, config):
        self.config = config
        self.sites = []

    def available_path(self, name):
        return os.path.join(self.config.sites_available, name)

    def enabled_path(self, name):
        return os.path.join(self.config.sites_enabled, name)

    def is_enabled(self, name):
        # lexists: a dangling link still marks the site as enabled
        return os.path.lexists(self.enabled_path(name))

    def _read(self, name):
        with open(self.available_path(name), "r") as f:
            return f.read()

    def _build(self, name):
        record = parser.parse(name, self._read(name))
        record.enabled = self.is_enabled(name)
        return record

    def load(self):
        """
        Scan sites-available and replace the collection.

        Raises:
            DiscoveryError: The directory cannot be listed or a file read
        """
        directory = self.config.sites_available
        try:
            names = os.listdir(directory)
        except OSError as e:
            raise DiscoveryError(f"Error loading nginx servers from {directory}", details=str(e)) from e

        sites = []
        for name in names:
            try:
                sites.append(self._build(name))
            except (OSError, UnicodeDecodeError) as e:
                raise DiscoveryError(f"Error reading site {name}", details=str(e)) from e

        self.sites = sort_sites(sites)
        logger.info("loaded %d site(s) from %s", len(self.sites), directory)
        return self.sites

    def get(self, name):
        for site in self.sites:
            if site.name == name:
                return site
        return None

    def create(self, request):
        """
        Write a new site's scaffold and config file and add its record.

        Not transactional: if the config write fails the scaffold stays
        on disk.

        Raises:
            ValidationError: Required fields are missing
            AlreadyExistsError: sites-available already has this name
            WriteError: Scaffold or config file could not be written
        """
        validate(request)
        if os.path.lexists(self.available_path(request.name)):
            raise AlreadyExistsError(f"Site already exists: {request.name}")

        rendered = render_creation(request)

        try:
            os.makedirs(rendered.root, exist_ok=True)
            for path, content in rendered.files.items():
                with open(path, "w") as f:
                    f.write(content)
        except OSError as e:
            raise WriteError(f"Cannot create document root {rendered.root}", details=str(e)) from e

        config_path = self.available_path(rendered.name)
        try:
            with open(config_path, "w") as f:
                f.write(rendered.config_text)
        except OSError as e:
            raise WriteError(f"Cannot write {config_path}", details=str(e)) from e

        record = self._build(rendered.name)
        self.sites.append(record)
        sort_sites(self.sites)
        logger.info("created site %s (root %s)", record.name, rendered.root)
        return record

    def enable(self, record):
        """
        Link the site into sites-enabled. No-op if already enabled.

        Raises:
            LinkError: The symlink could not be created
        """
        record.enabled = self.is_enabled(record.name)
        if record.enabled:
            sort_sites(self.sites)
            return
        try:
            os.symlink(self.available_path(record.name), self.enabled_path(record.name))
        except OSError as e:
            raise LinkError(f"Cannot enable {record.name}", details=str(e)) from e
        record.enabled = True
        sort_sites(self.sites)
        logger.info("enabled %s", record.name)

    def disable(self, record):
        """
        Remove the site's link from sites-enabled. No-op if already disabled.

        Raises:
            UnlinkError: The link could not be removed
        """
        record.enabled = self.is_enabled(record.name)
        if not record.enabled:
            sort_sites(self.sites)
            return
        try:
            os.remove(self.enabled_path(record.name))
        except OSError as e:
            raise UnlinkError(f"Cannot disable {record.name}", details=str(e)) from e
        record.enabled = False
        sort_sites(self.sites)
        logger.info("disabled %s", record.name)

    def toggle(self, record):
        record.enabled = self.is_enabled(record.name)
        if record.enabled:
            self.disable(record)
        else:
            self.enable(record)

    def reload_one(self, record):
        """Re-read the site file into record, recomputing enabled."""
        fresh = self._build(record.name)
        record.update_from(fresh)
        record.enabled = fresh.enabled
        sort_sites(self.sites)

    def read_content(self, record):
        """
        Raises:
            DiscoveryError: The site file cannot be read
        """
        try:
            return self._read(record.name)
        except (OSError, UnicodeDecodeError) as e:
            raise DiscoveryError(f"Cannot read site {record.name}", details=str(e)) from e

    def write_content(self, record, content):
        """
        Replace a site file's text and reload the record.

        Raises:
            WriteError: The file could not be written or read back; the
                record keeps its previous values
        """
        path = self.available_path(record.name)
        try:
            with open(path, "w") as f:
                f.write(content)
            self.reload_one(record)
        except (OSError, UnicodeDecodeError) as e:
            raise WriteError(f"Cannot save {path}", details=str(e)) from e
        logger.info("updated %s", record.name)
