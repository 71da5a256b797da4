"""Unit tests for config.py"""

import pytest

from mdsite.config import load_config


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run every test in an empty directory with no MDSITE_* env vars set."""
    monkeypatch.chdir(tmp_path)
    for name in ("CHAPTER_PREFIX", "OUTPUT_DIR", "ASSETS_DIR", "STYLESHEET", "PARSER_CONFIG"):
        monkeypatch.delenv(f"MDSITE_{name}", raising=False)


def test_load_config_defaults():
    """Defaults reproduce the fixed Chapter*/dist/assets/style.css layout."""
    settings = load_config()
    assert settings.chapter_prefix == "Chapter"
    assert settings.output_dir == "dist"
    assert settings.assets_dir == "assets"
    assert settings.stylesheet == "style.css"
    assert settings.parser_config == "gfm-like"


def test_load_config_uses_env_output_dir(monkeypatch):
    """MDSITE_OUTPUT_DIR env var is picked up by load_config."""
    monkeypatch.setenv("MDSITE_OUTPUT_DIR", "public")
    assert load_config().output_dir == "public"


def test_load_config_reads_config_yaml(tmp_path):
    (tmp_path / "config.yaml").write_text("chapter_prefix: Part\n")
    assert load_config().chapter_prefix == "Part"


def test_load_config_env_overrides_config_yaml(tmp_path, monkeypatch):
    """MDSITE_STYLESHEET takes precedence over config.yaml stylesheet."""
    (tmp_path / "config.yaml").write_text("stylesheet: 'book.css'\n")
    monkeypatch.setenv("MDSITE_STYLESHEET", "env.css")
    assert load_config().stylesheet == "env.css"


def test_load_config_cli_overrides_env(monkeypatch):
    """A non-None CLI override beats the env var."""
    monkeypatch.setenv("MDSITE_OUTPUT_DIR", "env")
    settings = load_config(overrides={"output_dir": "cli"})
    assert settings.output_dir == "cli"


def test_load_config_none_override_ignored(monkeypatch):
    monkeypatch.setenv("MDSITE_PARSER_CONFIG", "commonmark")
    settings = load_config(overrides={"parser_config": None})
    assert settings.parser_config == "commonmark"


def test_load_config_invalid_yaml(tmp_path):
    """load_config raises ValueError when config.yaml contains invalid YAML."""
    (tmp_path / "config.yaml").write_text("key: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid config.yaml"):
        load_config()


def test_load_config_yaml_not_a_mapping(tmp_path):
    (tmp_path / "config.yaml").write_text("- a\n- b\n")
    with pytest.raises(ValueError, match="expected a mapping"):
        load_config()


def test_load_config_rejects_empty_prefix():
    """Validation errors surface as ValueError."""
    with pytest.raises(ValueError):
        load_config(overrides={"chapter_prefix": ""})
