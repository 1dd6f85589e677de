"""JSON-file document store.

Each collection (``Tags``, ``Users``, ``Posts``, ``Teams``) lives in its own
``<collection>.json`` file holding ``{doc_id: document}``. Writes go through a
temp file and ``Path.replace`` so a reader sees either the old or the new
file, never a partial one.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
import threading
from typing import Any
import uuid


logger = logging.getLogger(__name__)

_DEFAULT_DIR = "data"


class StoreError(Exception):
    """The backing file could not be read or written."""


class DocumentNotFound(StoreError):
    """An update targeted a document that does not exist."""


class DocumentStore:
    """Thread-safe persistence layer for raw documents."""

    def __init__(self, data_dir: str | Path = _DEFAULT_DIR) -> None:
        self._dir = Path(data_dir)
        self._lock = threading.Lock()

    @property
    def data_dir(self) -> Path:
        return self._dir

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def get(self, collection: str, doc_id: str) -> dict[str, Any] | None:
        """Return a copy of the document, or ``None`` when absent."""
        with self._lock:
            doc = self._read(collection).get(doc_id)
            return dict(doc) if doc is not None else None

    def list_all(self, collection: str) -> list[tuple[str, dict[str, Any]]]:
        """Return every ``(doc_id, document)`` pair in file order."""
        with self._lock:
            return [(doc_id, dict(doc)) for doc_id, doc in self._read(collection).items()]

    def add(self, collection: str, document: dict[str, Any]) -> str:
        """Insert *document* under a fresh id and return the id."""
        doc_id = uuid.uuid4().hex
        with self._lock:
            docs = self._read(collection)
            docs[doc_id] = dict(document)
            self._atomic_write(collection, docs)
        logger.debug("Added %s/%s", collection, doc_id)
        return doc_id

    def set(self, collection: str, doc_id: str, document: dict[str, Any]) -> None:
        """Create or replace the document stored under *doc_id*."""
        with self._lock:
            docs = self._read(collection)
            docs[doc_id] = dict(document)
            self._atomic_write(collection, docs)

    def update(self, collection: str, doc_id: str, fields: dict[str, Any]) -> None:
        """Merge *fields* into an existing document in a single write."""
        with self._lock:
            docs = self._read(collection)
            if doc_id not in docs:
                raise DocumentNotFound(f"{collection}/{doc_id} does not exist")
            docs[doc_id] = {**docs[doc_id], **fields}
            self._atomic_write(collection, docs)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _path(self, collection: str) -> Path:
        return self._dir / f"{collection}.json"

    def _read(self, collection: str) -> dict[str, dict[str, Any]]:
        path = self._path(collection)
        if not path.exists():
            return {}
        try:
            with open(path, encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, ValueError) as exc:
            raise StoreError(f"Failed to load {collection}: {exc}") from exc
        if not isinstance(data, dict):
            raise StoreError(f"Failed to load {collection}: expected an object of documents")
        return data

    def _atomic_write(self, collection: str, docs: dict[str, dict[str, Any]]) -> None:
        path = self._path(collection)
        tmp = path.with_suffix(".tmp")
        try:
            self._dir.mkdir(parents=True, exist_ok=True)
            with open(tmp, "w", encoding="utf-8") as fh:
                json.dump(docs, fh, indent=2, ensure_ascii=False)
            tmp.replace(path)
        except (OSError, TypeError, ValueError) as exc:
            if tmp.exists():
                tmp.unlink()
            raise StoreError(f"Failed to save {collection}: {exc}") from exc
