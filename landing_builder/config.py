"""Configuration loader for the builder service."""

import os
from dataclasses import dataclass
from pathlib import Path

import yaml

DEFAULT_CONFIG_PATH = "builder.yaml"


@dataclass
class BuilderConfig:
  """Where page documents live and how the service logs."""

  bucket: str = "landing-pages"
  prefix: str = "_builder/landing-pages/"
  region: str = "us-east-1"
  log_level: str = "INFO"

  @classmethod
  def from_yaml(cls, path: Path | str = DEFAULT_CONFIG_PATH) -> "BuilderConfig":
    """Load configuration from a YAML file."""
    with open(path) as f:
      data = yaml.safe_load(f) or {}

    store = data.get("store") or {}
    prefix = store.get("prefix", cls.prefix)
    if prefix and not prefix.endswith("/"):
      prefix = prefix + "/"

    return cls(
      bucket=store.get("bucket", cls.bucket),
      prefix=prefix,
      region=store.get("region", cls.region),
      log_level=str(data.get("log_level", cls.log_level)).upper(),
    )

  @classmethod
  def load(cls) -> "BuilderConfig":
    """Load from ``BUILDER_CONFIG`` (if the file exists), then apply env overrides."""
    path = Path(os.environ.get("BUILDER_CONFIG", DEFAULT_CONFIG_PATH))
    config = cls.from_yaml(path) if path.exists() else cls()

    config.bucket = os.environ.get("BUILDER_BUCKET", config.bucket)
    config.region = os.environ.get("AWS_REGION", config.region)
    return config
