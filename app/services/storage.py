"""
Collection Storage
Each collection lives in one JSON document that is read in full and
rewritten in full on every mutation
"""
import json
import os
import tempfile
from typing import List, Optional

from app.errors import StorageError
from app.log import get_logger
from app.models.drink_choice import DEFAULT_DRINK_CHOICES

logger = get_logger(__name__)


class Document:
    """Backing document for a collection"""

    name = "document"

    def read(self) -> Optional[str]:
        raise NotImplementedError

    def write(self, text: str) -> None:
        raise NotImplementedError


class JsonFileDocument(Document):
    """Document on disk, replaced atomically through a sibling temp file"""

    def __init__(self, path: str):
        self.path = path
        self.name = path

    def read(self) -> Optional[str]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                return f.read()
        except FileNotFoundError:
            return None

    def write(self, text: str) -> None:
        directory = os.path.dirname(self.path) or "."
        os.makedirs(directory, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".tmp-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise


class MemoryDocument(Document):
    """In-memory document, used in place of a file in tests"""

    name = "memory"

    def __init__(self, text: Optional[str] = None):
        self.text = text
        self.writes = 0

    def read(self) -> Optional[str]:
        return self.text

    def write(self, text: str) -> None:
        self.text = text
        self.writes += 1


class CollectionStore:
    """Load and save a whole collection as a JSON list"""

    seed_on_empty = False

    def __init__(self, document: Document):
        self.document = document

    def initial_records(self) -> List[dict]:
        return []

    def load(self) -> List[dict]:
        try:
            text = self.document.read()
        except OSError as e:
            logger.warning("document_unreadable", document=self.document.name, error=str(e))
            text = None

        if text is None or not text.strip():
            records = self.initial_records()
            if self.seed_on_empty:
                logger.info("collection_seeded", document=self.document.name, count=len(records))
                self.save(records)
            return records

        try:
            records = json.loads(text)
        except ValueError as e:
            raise StorageError(f"Could not parse {self.document.name}", details=str(e)) from e
        if not isinstance(records, list):
            raise StorageError(f"Expected a list in {self.document.name}")
        return records

    def save(self, records: List[dict]) -> None:
        try:
            self.document.write(json.dumps(records, indent=2, ensure_ascii=False))
        except OSError as e:
            raise StorageError(f"Could not write {self.document.name}", details=str(e)) from e


class OrderStore(CollectionStore):
    pass


class ChoiceStore(CollectionStore):
    seed_on_empty = True

    def initial_records(self) -> List[dict]:
        return [choice.model_dump(exclude_unset=True) for choice in DEFAULT_DRINK_CHOICES]
