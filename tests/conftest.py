"""Pytest configuration and fixtures for folder-cascade tests."""

import pytest
from unittest.mock import AsyncMock

from folder_cascade.config.settings import CascadeSettings
from folder_cascade.ownership.core.entities import Document, Folder
from folder_cascade.ownership.core.value_objects import OwnershipAssignment, PermissionLevel
from folder_cascade.ownership.infrastructure.repositories import InMemoryDocumentStore


def make_folder(folder_id: str, item_count: int, kind: str = "Item") -> Folder:
    """Folder holding ``item_count`` documents named after the folder."""
    folder = Folder(id=folder_id, name=folder_id.title(), document_kind=kind)
    for index in range(item_count):
        folder.add_document(Document(id=f"{folder_id}-doc-{index}", kind=kind, name=f"Doc {index}"))
    return folder


@pytest.fixture
def sample_tree():
    """Root with 2 documents, a sub-folder with 3, a sub-sub-folder with 0."""
    root = make_folder("root", 2)
    sub = root.add_subfolder(make_folder("sub", 3))
    sub.add_subfolder(make_folder("subsub", 0))
    return root


@pytest.fixture
def empty_tree():
    """Three nested folders without any documents."""
    root = make_folder("root", 0)
    sub = root.add_subfolder(make_folder("sub", 0))
    sub.add_subfolder(make_folder("subsub", 0))
    return root


@pytest.fixture
def owner_assignment():
    """Assignment granting everyone Owner."""
    return OwnershipAssignment({"default": PermissionLevel.OWNER})


@pytest.fixture
def memory_store(sample_tree):
    """In-memory store loaded with the sample tree."""
    return InMemoryDocumentStore([sample_tree])


@pytest.fixture
def mock_store():
    """Mock document store for counting batch calls."""
    store = AsyncMock()
    store.update_documents = AsyncMock(return_value=None)
    return store


@pytest.fixture
def test_settings():
    """Settings with no settling delay."""
    return CascadeSettings(settle_delay_seconds=0, save_signal_timeout_seconds=0.2)
