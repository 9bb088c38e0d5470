"""Tests for the in-memory and PostgreSQL stores."""

import json
from unittest.mock import AsyncMock, MagicMock

import asyncpg
import pytest

from folder_cascade.ownership.core.entities import Document, Folder
from folder_cascade.ownership.core.exceptions import DocumentUpdateFailed
from folder_cascade.ownership.core.value_objects import (
    OwnershipAssignment,
    PermissionLevel,
    UpdateOperation,
)
from folder_cascade.ownership.infrastructure.repositories import (
    InMemoryDocumentStore,
    PostgresDocumentStore,
    PostgresFolderRepository,
    build_folder_tree,
    validate_schema_name,
)

OBSERVER = OwnershipAssignment({"default": PermissionLevel.OBSERVER})


class TestInMemoryDocumentStore:
    """Test in-memory store behaviour."""

    @pytest.mark.asyncio
    async def test_get_nested_folder(self, memory_store):
        folder = await memory_store.get_folder("subsub")

        assert folder is not None
        assert folder.name == "Subsub"
        assert await memory_store.get_folder("nope") is None

    @pytest.mark.asyncio
    async def test_merges_ownership(self, memory_store):
        document = memory_store.get_document("root-doc-0")
        document.ownership = {"default": 0, "user1": 3}

        await memory_store.update_documents("Item", [UpdateOperation("root-doc-0", OBSERVER)])

        assert document.ownership == {"default": 2, "user1": 3}

    @pytest.mark.asyncio
    async def test_unknown_document_rejects_whole_batch(self, memory_store):
        operations = [UpdateOperation("root-doc-0", OBSERVER), UpdateOperation("ghost", OBSERVER)]

        with pytest.raises(DocumentUpdateFailed) as exc_info:
            await memory_store.update_documents("Item", operations)

        assert exc_info.value.document_ids == ["ghost"]
        assert memory_store.get_document("root-doc-0").ownership == {}

    @pytest.mark.asyncio
    async def test_kind_mismatch_rejected(self, memory_store):
        with pytest.raises(DocumentUpdateFailed):
            await memory_store.update_documents("JournalEntry", [UpdateOperation("root-doc-0", OBSERVER)])

    def test_folder_rejects_mixed_kinds(self):
        folder = Folder(id="f", name="F", document_kind="Item")

        with pytest.raises(ValueError):
            folder.add_document(Document(id="j", kind="JournalEntry"))
        with pytest.raises(ValueError):
            folder.add_subfolder(Folder(id="g", name="G", document_kind="Actor"))


class TestBuildFolderTree:
    """Test assembling subtree rows."""

    def test_builds_tree(self):
        folder_rows = [
            {"id": "root", "name": "Root", "parent_id": "outer", "document_kind": "Item"},
            {"id": "sub", "name": "Sub", "parent_id": "root", "document_kind": "Item"},
            {"id": "subsub", "name": "SubSub", "parent_id": "sub", "document_kind": "Item"},
        ]
        document_rows = [
            {"id": "d1", "folder_id": "root", "kind": "Item", "name": "A", "ownership": '{"default": 1}'},
            {"id": "d2", "folder_id": "sub", "kind": "Item", "name": "B", "ownership": {"u1": 3}},
        ]

        root = build_folder_tree(folder_rows, document_rows, "root")

        assert root.id == "root"
        assert root.parent is None
        assert [f.id for f in root.get_subfolders(recursive=True)] == ["sub", "subsub"]
        assert root.contents[0].ownership == {"default": 1}
        assert root.children[0].contents[0].ownership == {"u1": 3}

    def test_missing_root(self):
        assert build_folder_tree([], [], "root") is None


def make_pool(conn):
    """asyncpg-like pool whose acquire() yields ``conn``."""
    pool = MagicMock()
    acquire = MagicMock()
    acquire.__aenter__ = AsyncMock(return_value=conn)
    acquire.__aexit__ = AsyncMock(return_value=False)
    pool.acquire.return_value = acquire
    return pool


def make_connection():
    conn = MagicMock()
    transaction = MagicMock()
    transaction.__aenter__ = AsyncMock(return_value=None)
    transaction.__aexit__ = AsyncMock(return_value=False)
    conn.transaction.return_value = transaction
    conn.executemany = AsyncMock()
    conn.fetch = AsyncMock()
    return conn


class TestPostgresStores:
    """Test asyncpg adapters against a mocked pool."""

    @pytest.mark.asyncio
    async def test_update_documents_single_transaction(self):
        conn = make_connection()
        store = PostgresDocumentStore(make_pool(conn), schema="cascade")

        count = await store.update_documents(
            "Item",
            [UpdateOperation("d1", OBSERVER), UpdateOperation("d2", OBSERVER)]
        )

        assert count == 2
        conn.transaction.assert_called_once()
        conn.executemany.assert_awaited_once()
        query, args = conn.executemany.await_args.args
        assert "cascade.documents" in query
        assert args == [
            ("d1", json.dumps({"default": 2}), "Item"),
            ("d2", json.dumps({"default": 2}), "Item"),
        ]

    @pytest.mark.asyncio
    async def test_update_documents_wraps_database_errors(self):
        conn = make_connection()
        conn.executemany.side_effect = asyncpg.PostgresError("deadlock detected")
        store = PostgresDocumentStore(make_pool(conn))

        with pytest.raises(DocumentUpdateFailed) as exc_info:
            await store.update_documents("Item", [UpdateOperation("d1", OBSERVER)])

        assert exc_info.value.details["operation_count"] == 1

    @pytest.mark.asyncio
    async def test_get_folder_loads_subtree(self):
        conn = make_connection()
        conn.fetch.side_effect = [
            [
                {"id": "root", "name": "Root", "parent_id": None, "document_kind": "Item"},
                {"id": "sub", "name": "Sub", "parent_id": "root", "document_kind": "Item"},
            ],
            [
                {"id": "d1", "folder_id": "sub", "kind": "Item", "name": "A", "ownership": {}},
            ],
        ]
        repository = PostgresFolderRepository(make_pool(conn))

        folder = await repository.get_folder("root")

        assert folder.id == "root"
        assert folder.children[0].contents[0].id == "d1"
        assert conn.fetch.await_args_list[1].args[1] == ["root", "sub"]

    @pytest.mark.asyncio
    async def test_get_folder_missing(self):
        conn = make_connection()
        conn.fetch.return_value = []
        repository = PostgresFolderRepository(make_pool(conn))

        assert await repository.get_folder("missing") is None
        assert conn.fetch.await_count == 1

    @pytest.mark.parametrize("schema", ["public; DROP TABLE x", "1abc", "", "a-b"])
    def test_invalid_schema_names(self, schema):
        with pytest.raises(ValueError):
            validate_schema_name(schema)
