"""
Tests for loading upgrade documents.
"""

import pytest

from upgrade_commander.core.upgrade_loader import (
    UpgradeFileError,
    load_upgrades,
    loads_upgrades,
    parse_upgrades,
)
from upgrade_commander.models.upgrade import Upgrade


class TestParseUpgrades:
    """Tests for building upgrade lists from decoded data."""

    def test_mapping_with_repos(self):
        result = parse_upgrades(
            {
                "repos": ["core"],
                "upgrades": [{"name": "linux", "repository": "core", "local_version": "1", "remote_version": "2"}],
            }
        )
        assert result.repos == ["core"]
        assert result.upgrades == [Upgrade("linux", "core", "1", "2")]

    def test_plain_list(self):
        result = parse_upgrades([{"name": "vim", "repo": "extra", "localVersion": "9.0", "remoteVersion": "9.1"}])
        assert result.repos == []
        assert result.upgrades == [Upgrade("vim", "extra", "9.0", "9.1")]

    def test_none_is_empty(self):
        assert len(parse_upgrades(None)) == 0

    def test_missing_name(self):
        with pytest.raises(UpgradeFileError, match="record 1"):
            parse_upgrades([{"name": "a"}, {"repository": "core"}])

    def test_null_fields_become_empty(self):
        result = loads_upgrades(
            '[{"name": "vim", "repository": null, "local_version": null, "remote_version": "1"}]',
            as_json=True,
        )
        assert result.upgrades == [Upgrade("vim", "", "", "1")]

    def test_null_name(self):
        with pytest.raises(UpgradeFileError, match="record 0"):
            parse_upgrades([{"name": None, "repository": "core"}])

    def test_bad_top_level(self):
        with pytest.raises(UpgradeFileError):
            parse_upgrades("linux")

    def test_bad_repos(self):
        with pytest.raises(UpgradeFileError, match="repos"):
            parse_upgrades({"repos": "core", "upgrades": []})


class TestLoadUpgrades:
    """Tests for reading upgrade files."""

    def test_load_json(self, upgrade_file):
        result = load_upgrades(upgrade_file)
        assert result.repos == ["core", "extra"]
        assert [u.name for u in result.upgrades] == ["vim", "linux"]

    def test_yaml_keeps_versions_verbatim(self):
        text = (
            "upgrades:\n"
            "  - name: foo\n"
            "    repository: extra\n"
            "    local_version: 1.10\n"
            "    remote_version: 2.0\n"
        )
        result = loads_upgrades(text)
        assert result.upgrades[0].local_version == "1.10"
        assert result.upgrades[0].remote_version == "2.0"

    def test_missing_file(self, tmp_path):
        with pytest.raises(UpgradeFileError):
            load_upgrades(tmp_path / "nope.yaml")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(UpgradeFileError, match="bad.json"):
            load_upgrades(path)

    def test_invalid_yaml(self):
        with pytest.raises(UpgradeFileError):
            loads_upgrades("upgrades: [unclosed")
