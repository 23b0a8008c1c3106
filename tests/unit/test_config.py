"""Tests for configuration loading."""

from pathlib import Path

import pytest

from landing_builder.config import BuilderConfig


class TestFromYaml:
  """Tests for BuilderConfig.from_yaml."""

  def test_reads_store_section(self, tmp_path: Path) -> None:
    path = tmp_path / "builder.yaml"
    path.write_text(
      "log_level: debug\n"
      "store:\n"
      "  bucket: pages-bucket\n"
      "  prefix: pages\n"
      "  region: eu-west-1\n"
    )
    config = BuilderConfig.from_yaml(path)

    assert config.bucket == "pages-bucket"
    assert config.prefix == "pages/"
    assert config.region == "eu-west-1"
    assert config.log_level == "DEBUG"

  def test_empty_file_uses_defaults(self, tmp_path: Path) -> None:
    path = tmp_path / "builder.yaml"
    path.write_text("")
    assert BuilderConfig.from_yaml(path) == BuilderConfig()

  def test_empty_store_section(self, tmp_path: Path) -> None:
    path = tmp_path / "builder.yaml"
    path.write_text("log_level: warning\nstore:\n")
    config = BuilderConfig.from_yaml(path)

    assert config.bucket == BuilderConfig().bucket
    assert config.log_level == "WARNING"


class TestLoad:
  """Tests for BuilderConfig.load."""

  def test_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BUILDER_CONFIG", str(tmp_path / "absent.yaml"))
    monkeypatch.delenv("BUILDER_BUCKET", raising=False)
    monkeypatch.delenv("AWS_REGION", raising=False)
    assert BuilderConfig.load() == BuilderConfig()

  def test_env_overrides_file(
    self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
  ) -> None:
    path = tmp_path / "builder.yaml"
    path.write_text("store:\n  bucket: from-file\n  region: eu-west-1\n")
    monkeypatch.setenv("BUILDER_CONFIG", str(path))
    monkeypatch.setenv("BUILDER_BUCKET", "from-env")
    monkeypatch.delenv("AWS_REGION", raising=False)

    config = BuilderConfig.load()
    assert config.bucket == "from-env"
    assert config.region == "eu-west-1"
