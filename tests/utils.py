"""Test utilities and helper functions for MCP DocDB tests."""

import re
from types import SimpleNamespace
from typing import Any, Callable, Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock

from bson import ObjectId
from pymongo.errors import OperationFailure

from mcp_docdb.models.documentation import Record


def get_path(document: Dict[str, Any], path: str) -> Any:
    """Resolve a dotted path inside a document, ``None`` when missing."""
    value: Any = document
    for part in path.split("."):
        if not isinstance(value, dict) or part not in value:
            return None
        value = value[part]
    return value


class FakeCursor:
    """Chainable stand-in for an async MongoDB cursor."""

    def __init__(self, documents: List[Dict[str, Any]]):
        self.documents = list(documents)
        self.sort_spec = None
        self.limit_value = None

    def sort(self, spec):
        self.sort_spec = spec
        if spec and isinstance(spec[0][1], dict) and spec[0][1].get("$meta") == "textScore":
            self.documents.sort(key=lambda doc: doc.get("score", 0.0), reverse=True)
        return self

    def limit(self, value: int):
        self.limit_value = value
        self.documents = self.documents[:value]
        return self

    async def to_list(self, length: Optional[int] = None):
        return list(self.documents if length is None else self.documents[:length])


class FakeCollection:
    """In-memory collection supporting the queries the store issues."""

    TEXT_FIELDS = ("technology", "content.title", "content.description")

    def __init__(self, name: str = "documentations"):
        self.name = name
        self.documents: List[Dict[str, Any]] = []
        self.text_index: Optional[str] = None

    # Writes

    async def insert_one(self, document: Dict[str, Any]):
        stored = dict(document)
        stored.setdefault("_id", ObjectId())
        self.documents.append(stored)
        return SimpleNamespace(inserted_id=stored["_id"])

    async def create_index(self, keys, name: Optional[str] = None):
        self.text_index = name or "_".join(f"{field}_text" for field, _ in keys)
        return self.text_index

    # Reads

    def _matches(self, document: Dict[str, Any], query: Dict[str, Any]) -> bool:
        for key, expected in query.items():
            if key == "$text":
                continue
            if key == "$and":
                if not all(self._matches(document, part) for part in expected):
                    return False
                continue
            value = get_path(document, key)
            if isinstance(expected, dict) and "$regex" in expected:
                flags = re.IGNORECASE if "i" in expected.get("$options", "") else 0
                if not isinstance(value, str) or not re.search(expected["$regex"], value, flags):
                    return False
            elif value != expected:
                return False
        return True

    def _text_score(self, document: Dict[str, Any], search: str) -> float:
        words = search.lower().split()
        score = 0.0
        for field in self.TEXT_FIELDS:
            value = get_path(document, field)
            if isinstance(value, str):
                tokens = value.lower().split()
                score += sum(tokens.count(word) for word in words)
        return score

    def find(self, query: Optional[Dict[str, Any]] = None, projection: Optional[Dict[str, Any]] = None):
        query = query or {}
        matched = [dict(doc) for doc in self.documents if self._matches(doc, query)]

        if "$text" in query:
            if not self.text_index:
                raise OperationFailure("text index required for $text query", code=27)
            search = query["$text"]["$search"]
            scored = []
            for doc in matched:
                score = self._text_score(doc, search)
                if score > 0:
                    if projection and "score" in projection:
                        doc["score"] = score
                    scored.append(doc)
            matched = scored

        return FakeCursor(matched)

    async def find_one(self, query: Optional[Dict[str, Any]] = None):
        for document in self.documents:
            if self._matches(document, query or {}):
                return dict(document)
        return None

    async def aggregate(self, pipeline: List[Dict[str, Any]]):
        rows = [dict(doc) for doc in self.documents]
        for stage in pipeline:
            if "$match" in stage:
                rows = [row for row in rows if self._matches(row, stage["$match"])]
            elif "$group" in stage:
                key_expr = stage["$group"]["_id"]
                counts: Dict[Any, int] = {}
                for row in rows:
                    key = get_path(row, key_expr[1:])
                    counts[key] = counts.get(key, 0) + 1
                rows = [{"_id": key, "count": count} for key, count in counts.items()]
            elif "$sort" in stage:
                for field, direction in reversed(list(stage["$sort"].items())):
                    rows.sort(key=lambda row: str(row.get(field)) if field == "_id" else row.get(field),
                              reverse=direction < 0)
        return FakeCursor(rows)


class FakeDatabase:
    """In-memory database holding fake collections."""

    def __init__(self):
        self.collections: Dict[str, FakeCollection] = {}

    def __getitem__(self, name: str) -> FakeCollection:
        if name not in self.collections:
            self.collections[name] = FakeCollection(name)
        return self.collections[name]

    async def list_collection_names(self) -> List[str]:
        return list(self.collections)


class FakeMongoClient:
    """In-memory replacement for an AsyncMongoClient in tests."""

    def __init__(self):
        self.databases: Dict[str, FakeDatabase] = {}
        self.admin = SimpleNamespace(command=AsyncMock(return_value={"ok": 1.0}))
        self.closed = False

    def __getitem__(self, name: str) -> FakeDatabase:
        if name not in self.databases:
            self.databases[name] = FakeDatabase()
        return self.databases[name]

    async def close(self) -> None:
        self.closed = True


class MockCursorHelper:
    """Helpers for MagicMock-based collections."""

    @staticmethod
    def cursor(documents: List[Dict[str, Any]]) -> MagicMock:
        """A chainable mock cursor returning ``documents``."""
        cursor = MagicMock()
        cursor.sort.return_value = cursor
        cursor.limit.return_value = cursor
        cursor.to_list = AsyncMock(return_value=documents)
        return cursor

    @staticmethod
    def collection(documents: Optional[List[Dict[str, Any]]] = None) -> MagicMock:
        """A mock collection whose ``find`` yields ``documents``."""
        collection = MagicMock()
        collection.find.return_value = MockCursorHelper.cursor(documents or [])
        collection.find_one = AsyncMock(return_value=None)
        collection.insert_one = AsyncMock()
        collection.aggregate = AsyncMock(return_value=MockCursorHelper.cursor([]))
        return collection


class RecordTestHelper:
    """Helper class for record-related testing."""

    @staticmethod
    def document(
        technology: str = "python",
        version: str = "3.12",
        title: str = "Python docs",
        description: str = "Reference documentation",
        **extra: Any,
    ) -> Dict[str, Any]:
        """A raw store document as MongoDB would return it."""
        record = Record.create(
            technology,
            {"title": title, "description": description},
            version,
        )
        document = record.to_document()
        document["_id"] = ObjectId()
        document.update(extra)
        return document


class FakeMCP:
    """Captures functions registered through FastMCP decorators."""

    def __init__(self):
        self.tools: Dict[str, Callable] = {}
        self.resources: Dict[str, Callable] = {}

    def tool(self, name: Optional[str] = None, **kwargs):
        def decorator(fn):
            self.tools[name or fn.__name__] = fn
            return fn
        return decorator

    def resource(self, uri: str, **kwargs):
        def decorator(fn):
            self.resources[uri] = fn
            return fn
        return decorator
