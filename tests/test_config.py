from __future__ import annotations

from pathlib import Path

import impresor.config as config_mod


class TestCatalogOverrideDir:
    def test_env_var_wins(self, monkeypatch, tmp_path):
        monkeypatch.setenv("IMPRESOR_CATALOG_DIR", str(tmp_path / "custom"))
        assert config_mod.get_catalog_override_dir() == tmp_path / "custom"

    def test_falls_back_to_user_config_dir(self, monkeypatch, tmp_path):
        monkeypatch.delenv("IMPRESOR_CATALOG_DIR", raising=False)
        monkeypatch.setattr(config_mod, "__file__", str(tmp_path / "src" / "impresor" / "config.py"))
        monkeypatch.setattr(
            config_mod.platformdirs, "user_config_dir", lambda name: str(tmp_path / "user" / name)
        )
        assert config_mod.get_catalog_override_dir() == tmp_path / "user" / "cfdi-impresor" / "catalogs"

    def test_dev_layout(self, monkeypatch, tmp_path):
        monkeypatch.delenv("IMPRESOR_CATALOG_DIR", raising=False)
        (tmp_path / "catalogs").mkdir()
        monkeypatch.setattr(config_mod, "__file__", str(tmp_path / "src" / "impresor" / "config.py"))
        assert config_mod.get_catalog_override_dir() == tmp_path / "catalogs"


class TestLoadYaml:
    def test_mapping(self, tmp_path: Path):
        path = tmp_path / "x.yaml"
        path.write_text('"01": Efectivo\n', encoding="utf-8")
        assert config_mod.load_yaml(path) == {"01": "Efectivo"}

    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / "x.yaml"
        path.write_text("")
        assert config_mod.load_yaml(path) == {}
