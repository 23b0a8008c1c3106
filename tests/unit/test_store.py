"""Tests for the S3-backed page store."""

import json
from typing import Any
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from landing_builder.document import new_page_document
from landing_builder.errors import PersistenceError
from landing_builder.store import PageStore


def _client_error(operation: str) -> ClientError:
  return ClientError(
    {"Error": {"Code": "AccessDenied", "Message": "Access Denied"}},
    operation,
  )


class TestLoadPage:
  """Tests for PageStore.load_page."""

  def test_missing_page_returns_none(self, store: PageStore) -> None:
    assert store.load_page("nope") is None

  def test_loads_stored_json(self, store: PageStore, mock_s3: Any) -> None:
    doc = {"title": "Hi", "content": {"sections": []}, "extra": [1, 2]}
    mock_s3.objects["_builder/landing-pages/p1.json"] = json.dumps(doc).encode()

    assert store.load_page("p1") == doc

  def test_client_error_raises(self, mock_s3: Any) -> None:
    """Store failures surface as PersistenceError."""
    mock_s3.get_object = MagicMock(side_effect=_client_error("GetObject"))
    store = PageStore("test-bucket", mock_s3)

    with pytest.raises(PersistenceError):
      store.load_page("p1")

  def test_corrupt_json_raises(self, store: PageStore, mock_s3: Any) -> None:
    mock_s3.objects["_builder/landing-pages/p1.json"] = b"{not json"
    with pytest.raises(PersistenceError):
      store.load_page("p1")


class TestSavePage:
  """Tests for PageStore.save_page."""

  def test_create_assigns_id(self, store: PageStore, mock_s3: Any) -> None:
    """Saving without an id creates a new page."""
    page_id, stored = store.save_page(None, new_page_document())

    assert page_id
    assert stored["_id"] == page_id
    assert "createdAt" in stored
    assert "updatedAt" in stored
    assert f"_builder/landing-pages/{page_id}.json" in mock_s3.objects

  def test_new_ids_differ(self, store: PageStore) -> None:
    first, _ = store.save_page(None, new_page_document())
    second, _ = store.save_page(None, new_page_document())
    assert first != second

  def test_update_overwrites(self, store: PageStore) -> None:
    """A save replaces whatever was stored before."""
    page_id, stored = store.save_page(None, new_page_document())
    store.save_page(page_id, {**stored, "title": "Changed"})

    loaded = store.load_page(page_id)
    assert loaded is not None
    assert loaded["title"] == "Changed"
    assert loaded["createdAt"] == stored["createdAt"]

  def test_does_not_mutate_input(self, store: PageStore) -> None:
    doc = new_page_document()
    store.save_page(None, doc)
    assert "_id" not in doc

  def test_round_trip(self, store: PageStore) -> None:
    """What is saved is what is loaded."""
    page_id, stored = store.save_page(None, new_page_document())
    assert store.load_page(page_id) == stored

  def test_put_failure_raises(self, mock_s3: Any) -> None:
    mock_s3.put_object = MagicMock(side_effect=_client_error("PutObject"))
    store = PageStore("test-bucket", mock_s3)

    with pytest.raises(PersistenceError):
      store.save_page("p1", new_page_document())

  def test_custom_prefix(self, mock_s3: Any) -> None:
    store = PageStore("test-bucket", mock_s3, prefix="pages/")
    store.save_page("home", new_page_document())
    assert "pages/home.json" in mock_s3.objects
