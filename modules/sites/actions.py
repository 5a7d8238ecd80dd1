"""User actions on sites, independent of how they are presented.

Each action runs to completion, records a one-line status for the
footer, and returns the NgxError it caught (or None). Prior state is
left intact on failure.
"""

import logging

from modules.sites import control
from modules.sites.generator import new_site_template, parse_request
from modules.sites.registry import SiteRegistry
from utils.editor import edit
from utils.error_handler import NgxError

logger = logging.getLogger("ngx.actions")


class SiteManager:
    """
    Application state: settings store, current configuration, registry,
    the pending new-site draft and the last status line.
    """

    def __init__(self, store, editor=edit, nginx=control):
        self.store = store
        self.editor = editor
        self.nginx = nginx
        self.config = None
        self.registry = None
        self.draft = None
        self.status = ""

    @property
    def sites(self):
        return self.registry.sites if self.registry else []

    def start(self):
        """
        Load settings and sites. Errors propagate: they are fatal at startup.
        """
        config = self.store.load()
        registry = SiteRegistry(config)
        registry.load()
        self.config = config
        self.registry = registry

    def _fail(self, error, prefix="Error"):
        self.status = f"{prefix}: {error.message}"
        logger.warning("%s: %s", prefix, error)
        return error

    def new_site(self):
        """
        Edit a YAML draft and create the site it describes.

        A failed attempt keeps the edited text so the next call reopens
        it; success clears it.
        """
        initial = self.draft if self.draft is not None else new_site_template(self.config.default_vhosts)
        try:
            text = self.editor(initial, "yaml")
        except NgxError as e:
            return self._fail(e)

        if text.strip() == initial.strip():
            self.status = "No changes made, aborting"
            return None

        try:
            request = parse_request(text)
            record = self.registry.create(request)
        except NgxError as e:
            self.draft = text
            self.status = f'Error: {e.message}. Draft saved. Choose "New site" to edit it again.'
            logger.warning("new site failed: %s", e)
            return e

        self.draft = None
        self.status = f"Site created: {record.name}"
        return None

    def edit_site(self, record):
        """Edit a site file; the record is reloaded only after a good write."""
        try:
            before = self.registry.read_content(record)
            after = self.editor(before, "conf")
        except NgxError as e:
            return self._fail(e)

        if after == before:
            self.status = "No changes made"
            return None

        try:
            self.registry.write_content(record, after)
        except NgxError as e:
            return self._fail(e)

        self.status = f"Saved {record.name}"
        return None

    def toggle_site(self, record):
        try:
            self.registry.toggle(record)
        except NgxError as e:
            return self._fail(e)
        self.status = f"{record.name} {'enabled' if record.enabled else 'disabled'}"
        return None

    def edit_config(self):
        """
        Edit the settings file. The new text must load and its sites
        directory must scan; otherwise the previous text is restored.
        """
        try:
            before = self.store.read_raw()
            after = self.editor(before, "yaml")
        except NgxError as e:
            return self._fail(e)

        if after == before:
            self.status = "Config unchanged"
            return None

        try:
            self.store.save(after)
            config = self.store.load()
            registry = SiteRegistry(config)
            registry.load()
        except NgxError as e:
            try:
                self.store.save(before)
            except NgxError as restore_error:
                logger.error("could not restore config: %s", restore_error)
                return self._fail(restore_error, prefix="Config restore failed")
            return self._fail(e, prefix="Undid changes - Config update failed")

        self.config = config
        self.registry = registry
        self.status = "Config updated"
        return None

    def reload_nginx(self):
        try:
            self.nginx.reload_nginx()
        except NgxError as e:
            return self._fail(e)
        self.status = "Nginx reloaded"
        return None

    def restart_nginx(self):
        try:
            self.nginx.restart_nginx()
        except NgxError as e:
            return self._fail(e)
        self.status = "Nginx restarted"
        return None
