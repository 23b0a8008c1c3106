"""Shared pytest fixtures for the builder tests."""

import io
from typing import Any
from unittest.mock import MagicMock

import pytest

from landing_builder.document import new_page_document
from landing_builder.session import BuilderSession
from landing_builder.store import PageStore


class MockS3Client:
  """Dict-backed stand-in for a boto3 S3 client."""

  def __init__(self) -> None:
    self.objects: dict[str, bytes] = {}
    self.exceptions = MagicMock()
    self.exceptions.NoSuchKey = type("NoSuchKey", (Exception,), {})

  def get_object(self, Bucket: str, Key: str) -> dict[str, Any]:
    if Key not in self.objects:
      raise self.exceptions.NoSuchKey(f"Key {Key} not found")
    return {"Body": io.BytesIO(self.objects[Key])}

  def put_object(
    self, Bucket: str, Key: str, Body: bytes, ContentType: str = ""
  ) -> None:
    self.objects[Key] = Body


class RecordingNotifier:
  """Collects notices the way the UI shell would show toasts."""

  def __init__(self) -> None:
    self.successes: list[str] = []
    self.errors: list[str] = []

  def success(self, message: str) -> None:
    self.successes.append(message)

  def error(self, message: str) -> None:
    self.errors.append(message)


@pytest.fixture
def mock_s3() -> MockS3Client:
  """Create a mock S3 client."""
  return MockS3Client()


@pytest.fixture
def store(mock_s3: MockS3Client) -> PageStore:
  """Create a PageStore backed by the mock client."""
  return PageStore(bucket="test-bucket", s3_client=mock_s3)


@pytest.fixture
def notifier() -> RecordingNotifier:
  return RecordingNotifier()


@pytest.fixture
def session(store: PageStore, notifier: RecordingNotifier) -> BuilderSession:
  """A session on a brand-new page."""
  s = BuilderSession(store, notifier=notifier)
  s.open()
  return s


@pytest.fixture
def empty_doc() -> dict[str, Any]:
  """Default page document with no sections."""
  return new_page_document()
