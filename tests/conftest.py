"""Shared fixtures for cloud-config validator tests."""

import logging
import textwrap
from pathlib import Path

import pytest

from cloudconfig_validator.models import json_schema_loader
from cloudconfig_validator.models.cloud_config_schema import compile_bundled_validator


VALID_CLOUD_CONFIG = textwrap.dedent(
    """\
    #cloud-config
    hostname: web-01
    users:
      - default
      - name: alice
        groups: [sudo, docker]
        shell: /bin/bash
        ssh_authorized_keys:
          - ssh-ed25519 AAAAC3NzaC1lZDI1NTE5AAAAIExample alice@example.com
    write_files:
      - path: /etc/motd
        content: hello from cloud-init
        permissions: '0644'
    runcmd:
      - [systemctl, restart, nginx]
      - echo done
    packages: [nginx, curl]
    package_update: true
    power_state:
      mode: reboot
      delay: now
    """
)


@pytest.fixture(autouse=True)
def _clear_schema_cache():
    json_schema_loader.clear_cache()
    yield
    json_schema_loader.clear_cache()


@pytest.fixture(autouse=True)
def _restore_root_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture(name="validator")
def fixture_validator():
    return compile_bundled_validator()


@pytest.fixture(name="write_yaml")
def fixture_write_yaml(tmp_path):
    """Return a helper writing YAML text to a file under tmp_path."""

    def _write(content: str, name: str = "cloudconfig.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
