"""AsyncPG folder repository and document store.

Folders and documents live in two tables of one schema; ownership is a
jsonb object keyed by subject.
"""

import json
import logging
import re
from typing import Dict, List, Optional, Sequence

import asyncpg

from ...core.entities import Document, Folder
from ...core.exceptions import DocumentUpdateFailed
from ...core.value_objects import UpdateOperation

logger = logging.getLogger(__name__)


SCHEMA_SQL = """
    CREATE TABLE IF NOT EXISTS {schema}.folders (
        id TEXT PRIMARY KEY,
        name TEXT NOT NULL DEFAULT '',
        parent_id TEXT REFERENCES {schema}.folders(id) ON DELETE CASCADE,
        document_kind TEXT NOT NULL
    );
    CREATE TABLE IF NOT EXISTS {schema}.documents (
        id TEXT PRIMARY KEY,
        folder_id TEXT REFERENCES {schema}.folders(id) ON DELETE SET NULL,
        kind TEXT NOT NULL,
        name TEXT NOT NULL DEFAULT '',
        ownership JSONB NOT NULL DEFAULT '{{}}'::jsonb
    );
    CREATE INDEX IF NOT EXISTS idx_folders_parent_id ON {schema}.folders(parent_id);
    CREATE INDEX IF NOT EXISTS idx_documents_folder_id ON {schema}.documents(folder_id);
"""

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]{0,62}$")


def validate_schema_name(schema: str) -> str:
    """Return ``schema`` if it is a plain SQL identifier."""
    if not _IDENTIFIER.match(schema or ""):
        raise ValueError(f"Invalid schema name: {schema!r}")
    return schema


async def ensure_schema(connection_pool: asyncpg.Pool, schema: str = "public") -> None:
    """Create the folder and document tables if missing."""
    schema = validate_schema_name(schema)
    async with connection_pool.acquire() as conn:
        await conn.execute(SCHEMA_SQL.format(schema=schema))


def build_folder_tree(folder_rows: Sequence, document_rows: Sequence, root_id: str) -> Optional[Folder]:
    """Assemble Folder entities from subtree rows.

    Rows are mappings with the table's columns; ``ownership`` may be a
    decoded dict or its JSON text.
    """
    folders: Dict[str, Folder] = {}
    for row in folder_rows:
        folders[row["id"]] = Folder(
            id=row["id"],
            name=row["name"],
            document_kind=row["document_kind"]
        )

    if root_id not in folders:
        return None

    for row in folder_rows:
        parent_id = row["parent_id"]
        if row["id"] != root_id and parent_id in folders:
            folders[parent_id].add_subfolder(folders[row["id"]])

    for row in document_rows:
        folder = folders.get(row["folder_id"])
        if folder is None:
            continue
        ownership = row["ownership"]
        if isinstance(ownership, str):
            ownership = json.loads(ownership)
        folder.add_document(Document(
            id=row["id"],
            kind=row["kind"],
            name=row["name"],
            ownership=dict(ownership or {})
        ))

    return folders[root_id]


class PostgresFolderRepository:
    """PostgreSQL folder repository using asyncpg."""

    def __init__(self, connection_pool: asyncpg.Pool, schema: str = "public"):
        self.connection_pool = connection_pool
        self.schema = validate_schema_name(schema)

    async def get_folder(self, folder_id: str) -> Optional[Folder]:
        """Load a folder with its whole subtree in one round trip per table."""
        folder_query = f"""
            WITH RECURSIVE subtree AS (
                SELECT id, name, parent_id, document_kind
                FROM {self.schema}.folders
                WHERE id = $1
                UNION
                SELECT f.id, f.name, f.parent_id, f.document_kind
                FROM {self.schema}.folders f
                JOIN subtree s ON f.parent_id = s.id
            )
            SELECT id, name, parent_id, document_kind FROM subtree
        """
        document_query = f"""
            SELECT id, folder_id, kind, name, ownership
            FROM {self.schema}.documents
            WHERE folder_id = ANY($1::text[])
            ORDER BY folder_id, name, id
        """

        async with self.connection_pool.acquire() as conn:
            folder_rows = await conn.fetch(folder_query, folder_id)
            if not folder_rows:
                return None
            document_rows = await conn.fetch(document_query, [row["id"] for row in folder_rows])

        return build_folder_tree(folder_rows, document_rows, folder_id)


class PostgresDocumentStore:
    """PostgreSQL document store using asyncpg.

    A batch runs as one ``executemany`` inside one transaction, so it
    applies entirely or not at all.
    """

    def __init__(self, connection_pool: asyncpg.Pool, schema: str = "public"):
        self.connection_pool = connection_pool
        self.schema = validate_schema_name(schema)

    async def update_documents(
        self,
        document_kind: str,
        operations: Sequence[UpdateOperation]
    ) -> int:
        """Merge each operation's ownership into its document row."""
        query = f"""
            UPDATE {self.schema}.documents
            SET ownership = ownership || $2::jsonb
            WHERE id = $1 AND kind = $3
        """
        args: List[tuple] = [
            (op.document_id, json.dumps(op.ownership.to_dict()), document_kind)
            for op in operations
        ]

        try:
            async with self.connection_pool.acquire() as conn:
                async with conn.transaction():
                    await conn.executemany(query, args)
        except (asyncpg.PostgresError, OSError) as e:
            raise DocumentUpdateFailed(
                f"Batch ownership update failed: {e}",
                document_kind=document_kind,
                details={"operation_count": len(operations)}
            ) from e

        logger.debug(f"Updated ownership of {len(args)} {document_kind} document(s)")
        return len(args)


async def create_connection_pool(dsn: str, min_size: int = 1, max_size: int = 10) -> asyncpg.Pool:
    """Create the asyncpg pool used by the PostgreSQL stores."""
    return await asyncpg.create_pool(dsn=dsn, min_size=min_size, max_size=max_size)
