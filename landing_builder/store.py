"""Page document persistence on S3."""

import logging
import uuid
from datetime import UTC, datetime
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from .config import BuilderConfig
from .document import dump_document, load_document
from .errors import PersistenceError

logger = logging.getLogger(__name__)


class PageStore:
  """Load and save whole page documents as JSON objects in a bucket.

  A save overwrites whatever is stored for the page id; there is no merge or
  version check.
  """

  def __init__(
    self, bucket: str, s3_client: Any, prefix: str = "_builder/landing-pages/"
  ) -> None:
    self.bucket = bucket
    self.s3 = s3_client
    self.prefix = prefix

  @classmethod
  def from_config(cls, config: BuilderConfig) -> "PageStore":
    """Create a store with a boto3 client for the configured region."""
    return cls(
      config.bucket,
      boto3.client("s3", region_name=config.region),
      prefix=config.prefix,
    )

  def _key(self, page_id: str) -> str:
    return f"{self.prefix}{page_id}.json"

  def load_page(self, page_id: str) -> dict[str, Any] | None:
    """Load a page document. Returns None if the page does not exist."""
    try:
      obj = self.s3.get_object(Bucket=self.bucket, Key=self._key(page_id))
      raw = obj["Body"].read()
    except self.s3.exceptions.NoSuchKey:
      logger.info("Landing page %s not found in %s", page_id, self.bucket)
      return None
    except (ClientError, BotoCoreError) as e:
      logger.error("Failed to load landing page %s: %s", page_id, e)
      raise PersistenceError(f"Failed to load landing page {page_id}") from e

    try:
      return load_document(raw)
    except ValueError as e:
      logger.error("Stored landing page %s is not a valid document: %s", page_id, e)
      raise PersistenceError(f"Landing page {page_id} is corrupt") from e

  def save_page(
    self, page_id: str | None, doc: dict[str, Any]
  ) -> tuple[str, dict[str, Any]]:
    """Store a page document, creating a new page when ``page_id`` is None.

    Returns the page id and the document as stored.
    """
    now = datetime.now(UTC).isoformat()
    stored = dict(doc)
    if page_id is None:
      page_id = uuid.uuid4().hex
      stored["createdAt"] = now
    stored["_id"] = page_id
    stored["updatedAt"] = now

    try:
      self.s3.put_object(
        Bucket=self.bucket,
        Key=self._key(page_id),
        Body=dump_document(stored).encode("utf-8"),
        ContentType="application/json",
      )
    except (ClientError, BotoCoreError) as e:
      logger.error("Failed to save landing page %s: %s", page_id, e)
      raise PersistenceError(f"Failed to save landing page {page_id}") from e

    logger.info("Saved landing page %s", page_id)
    return page_id, stored
