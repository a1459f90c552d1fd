"""
Pytest configuration and fixtures for upgrade commander tests.
"""

import json

import pytest

from upgrade_commander.config.settings import settings
from upgrade_commander.models.upgrade import Upgrade, UpgradeList


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Keep tests away from the host's pacman.conf and environment."""
    monkeypatch.setattr(settings, "pacman_conf", tmp_path / "missing-pacman.conf")
    monkeypatch.setattr(settings, "repo_priority", [])


@pytest.fixture
def sample_upgrades():
    """Provide upgrades spread over listed and unlisted repositories."""
    return [
        Upgrade("vim", "extra", "9.0.1", "9.0.2"),
        Upgrade("zlib", "core", "1:1.2.13-2", "1:1.3-1"),
        Upgrade("bash", "community", "5.1", "5.2"),
        Upgrade("yay", "aur", "11.3.0-1", "12.0.0-1"),
        Upgrade("linux", "core", "6.1.1.arch1-1", "6.1.2.arch1-1"),
    ]


@pytest.fixture
def sample_list(sample_upgrades):
    return UpgradeList(upgrades=list(sample_upgrades), repos=["core", "extra"])


@pytest.fixture
def pacman_conf(tmp_path):
    """Write a small pacman.conf."""
    path = tmp_path / "pacman.conf"
    path.write_text(
        "[options]\n"
        "HoldPkg = pacman glibc\n"
        "Color\n"
        "\n"
        "#[testing]\n"
        "#Include = /etc/pacman.d/mirrorlist\n"
        "\n"
        "[core]\n"
        "Include = /etc/pacman.d/mirrorlist\n"
        "\n"
        "[extra]\n"
        "Include = /etc/pacman.d/mirrorlist\n"
        "\n"
        "[multilib]\n"
        "Include = /etc/pacman.d/mirrorlist\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def upgrade_file(tmp_path):
    """Write an upgrade document in JSON format."""
    path = tmp_path / "upgrades.json"
    path.write_text(
        json.dumps(
            {
                "repos": ["core", "extra"],
                "upgrades": [
                    {"name": "vim", "repository": "extra", "local_version": "9.0", "remote_version": "9.1"},
                    {"name": "linux", "repository": "core", "local_version": "6.1.1", "remote_version": "6.1.2"},
                ],
            }
        ),
        encoding="utf-8",
    )
    return path
