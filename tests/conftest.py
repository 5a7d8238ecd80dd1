import os

import pytest

from modules.sites.registry import SiteRegistry
from modules.sites.store import Configuration, ConfigStore


@pytest.fixture
def nginx_config(tmp_path):
    nginx_path = tmp_path / "nginx"
    available = nginx_path / "sites-available"
    enabled = nginx_path / "sites-enabled"
    vhosts = tmp_path / "www"
    for directory in (available, enabled, vhosts):
        directory.mkdir(parents=True)
    return Configuration(
        nginx_path=str(nginx_path),
        sites_available=str(available),
        sites_enabled=str(enabled),
        default_vhosts=str(vhosts),
    )


@pytest.fixture
def write_site(nginx_config):
    def _write(name, content, enabled=False):
        path = os.path.join(nginx_config.sites_available, name)
        with open(path, "w") as f:
            f.write(content)
        if enabled:
            os.symlink(path, os.path.join(nginx_config.sites_enabled, name))
        return path
    return _write


@pytest.fixture
def registry(nginx_config):
    return SiteRegistry(nginx_config)


@pytest.fixture
def config_file(tmp_path, nginx_config):
    """Settings file pointing at the nginx_config directories."""
    path = tmp_path / "ngx" / "ngx.yaml"
    path.parent.mkdir()
    path.write_text(
        f"nginxPath: {nginx_config.nginx_path}\n"
        f"sitesAvailable: {nginx_config.sites_available}\n"
        f"sitesEnabled: {nginx_config.sites_enabled}\n"
        f"defaultVhosts: {nginx_config.default_vhosts}\n"
    )
    return path


@pytest.fixture
def store(config_file):
    return ConfigStore(str(config_file))
