import os

import pytest

from modules.sites.actions import SiteManager
from utils.error_handler import (
    AlreadyExistsError, EditorError, ServiceError, ValidationError, WriteError,
)
from fakes import FakeEditor, FakeNginx


def draft(vhosts, name="blog", host="blog.test", port=80):
    return f"name: {name}\nhost: {host}\nport: {port}\nroot: {vhosts}/{{name}}\nindex: \nphp: \nproxyUrl: \n"


@pytest.fixture
def manager(store):
    def _make(*responses, nginx=None):
        m = SiteManager(store, editor=FakeEditor(*responses), nginx=nginx or FakeNginx())
        m.start()
        return m
    return _make


def test_start_loads_config_and_sites(manager, write_site, nginx_config):
    write_site("blog", "listen 80;\n")
    m = manager()
    assert m.config.to_dict() == nginx_config.to_dict()
    assert [s.name for s in m.sites] == ["blog"]


def test_new_site_creates_and_clears_draft(manager, nginx_config):
    text = draft(nginx_config.default_vhosts)
    m = manager(text)

    assert m.new_site() is None
    assert m.status == "Site created: blog"
    assert m.draft is None
    assert m.registry.get("blog").hosts == ["blog.test"]

    initial, extension = m.editor.calls[0]
    assert extension == "yaml"
    assert "### Required fields" in initial
    assert f"root: {nginx_config.default_vhosts}/{{name}}" in initial


def test_new_site_unchanged_template_aborts(manager, nginx_config):
    m = manager(lambda content: content + "\n\n")
    assert m.new_site() is None
    assert m.status == "No changes made, aborting"
    assert m.draft is None
    assert os.listdir(nginx_config.sites_available) == []


def test_failed_new_site_keeps_draft_for_retry(manager, nginx_config):
    bad = draft(nginx_config.default_vhosts, host="")
    good = draft(nginx_config.default_vhosts)
    m = manager(bad, good)

    error = m.new_site()
    assert isinstance(error, ValidationError)
    assert m.draft == bad
    assert "Draft saved" in m.status
    assert os.listdir(nginx_config.sites_available) == []

    assert m.new_site() is None
    assert m.editor.calls[1][0] == bad
    assert m.draft is None
    assert m.registry.get("blog") is not None


def test_invalid_yaml_draft_is_kept(manager):
    m = manager("name: [broken\n")
    assert isinstance(m.new_site(), ValidationError)
    assert m.draft == "name: [broken\n"


def test_duplicate_site_keeps_draft_and_first_site(manager, write_site, nginx_config):
    write_site("blog", "listen 8080;\n")
    text = draft(nginx_config.default_vhosts)
    m = manager(text)

    assert isinstance(m.new_site(), AlreadyExistsError)
    assert m.draft == text
    with open(os.path.join(nginx_config.sites_available, "blog")) as f:
        assert f.read() == "listen 8080;\n"


def test_editor_failure_leaves_draft_untouched(manager):
    m = manager(EditorError("vim exited with status 1"))
    m.draft = "name: x\n"
    assert isinstance(m.new_site(), EditorError)
    assert m.draft == "name: x\n"


def test_edit_site_saves_and_reloads(manager, write_site):
    write_site("blog", "server {\n  listen 80;\n}\n")
    m = manager(lambda content: content.replace("80", "8081"))
    record = m.registry.get("blog")

    assert m.edit_site(record) is None
    assert record.ports == [8081]
    assert m.status == "Saved blog"
    assert m.editor.calls[0][1] == "conf"


def test_edit_site_unchanged(manager, write_site):
    write_site("blog", "listen 80;\n")
    m = manager(lambda content: content)
    assert m.edit_site(m.registry.get("blog")) is None
    assert m.status == "No changes made"


def test_edit_site_write_failure_keeps_record(manager, write_site, nginx_config):
    path = write_site("blog", "listen 80;\n")
    m = manager("listen 9000;\n")
    record = m.registry.get("blog")

    def edit_then_break(content, extension):
        os.remove(path)
        os.mkdir(path)
        return "listen 9000;\n"

    m.editor = edit_then_break
    assert isinstance(m.edit_site(record), WriteError)
    assert record.ports == [80]
    assert m.status.startswith("Error:")


def test_toggle_site_status(manager, write_site):
    write_site("blog", "listen 80;\n")
    m = manager()
    record = m.registry.get("blog")

    assert m.toggle_site(record) is None
    assert record.enabled is True
    assert m.status == "blog enabled"
    assert m.toggle_site(record) is None
    assert m.status == "blog disabled"


def test_edit_config_switches_registry(manager, config_file, tmp_path):
    other = tmp_path / "other"
    (other / "sites-available").mkdir(parents=True)
    (other / "sites-enabled").mkdir()
    (other / "sites-available" / "api").write_text("listen 3000;\n")
    new_text = f"nginxPath: {other}\n"
    m = manager(new_text)

    assert m.edit_config() is None
    assert m.status == "Config updated"
    assert m.config.sites_available == f"{other}/sites-available"
    assert [s.name for s in m.sites] == ["api"]
    assert config_file.read_text() == new_text


def test_edit_config_rolls_back_on_bad_yaml(manager, config_file, write_site):
    write_site("blog", "listen 80;\n")
    original = config_file.read_text()
    m = manager("nginxPath: [broken\n")
    config_before, registry_before = m.config, m.registry

    error = m.edit_config()

    assert error is not None
    assert m.status.startswith("Undid changes - Config update failed")
    assert config_file.read_text() == original
    assert m.config is config_before
    assert m.registry is registry_before


def test_edit_config_rolls_back_on_missing_sites_dir(manager, config_file, tmp_path):
    original = config_file.read_text()
    m = manager(f"nginxPath: {tmp_path / 'nowhere'}\n")
    assert m.edit_config() is not None
    assert config_file.read_text() == original


def test_edit_config_unchanged(manager):
    m = manager(lambda content: content)
    assert m.edit_config() is None
    assert m.status == "Config unchanged"


def test_nginx_reload_and_restart(manager):
    nginx = FakeNginx()
    m = manager(nginx=nginx)
    assert m.reload_nginx() is None
    assert m.restart_nginx() is None
    assert nginx.calls == ["reload", "restart"]
    assert m.status == "Nginx restarted"


def test_nginx_failure_is_reported(manager):
    m = manager(nginx=FakeNginx(ServiceError("systemctl reload nginx failed")))
    assert isinstance(m.reload_nginx(), ServiceError)
    assert m.status == "Error: systemctl reload nginx failed"
