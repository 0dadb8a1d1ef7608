"""
Local JSON persistence task for processed documents.

Writes one {"metadata": ..., "chunks": [...]} file per document and reads it
back by document id.

Dependencies: json, pathlib, tempfile
System role: Final stage of document ingestion pipeline
"""

import json
import logging
import os
import tempfile
import uuid
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from pdf_embedder.core.exceptions import RecordNotFoundError

from ..models import DocumentRecord

logger = logging.getLogger(__name__)


class SavingTask:
    """Save processed document records to local JSON files."""

    def __init__(self, output_directory: str) -> None:
        """
        Initialize saving task with output directory.

        Args:
            output_directory: Directory path for JSON output

        Creates directory if it does not exist.
        """
        self._output_dir = Path(output_directory)
        self._output_dir.mkdir(parents=True, exist_ok=True)

    @property
    def output_directory(self) -> Path:
        return self._output_dir

    def save(self, record: DocumentRecord, document_id: str) -> str:
        """
        Save a record under the output directory.

        Args:
            record: Processed document record
            document_id: Unique document identifier for filename

        Returns:
            str: Path to saved JSON file

        Raises:
            OSError: When file writing fails
        """
        return self.save_to_path(record, self._output_dir / f"{document_id}.json")

    def save_to_path(self, record: DocumentRecord, output_path: str | Path) -> str:
        """
        Save a record to an explicit path.

        The file is written next to its destination and renamed into place so
        readers never see a partial document.

        Args:
            record: Processed document record
            output_path: Destination JSON path

        Returns:
            str: Path to saved JSON file

        Raises:
            OSError: When file writing fails
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        fd, temp_path = tempfile.mkstemp(
            dir=output_path.parent, prefix=f".{output_path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(record.to_json_dict(), f, indent=2, ensure_ascii=False)
            os.replace(temp_path, output_path)
        except BaseException:
            Path(temp_path).unlink(missing_ok=True)
            raise

        logger.info(
            "Saved document record",
            extra={"output_path": str(output_path), "chunk_count": len(record.chunks)},
        )
        return str(output_path)

    def load(self, document_id: str) -> DocumentRecord:
        """
        Load a previously saved record.

        Args:
            document_id: Identifier returned when the document was processed

        Returns:
            DocumentRecord: Parsed record

        Raises:
            RecordNotFoundError: When the id is malformed or no readable record exists
        """
        try:
            uuid.UUID(document_id)
        except ValueError as e:
            raise RecordNotFoundError(document_id, details={"reason": "invalid id"}) from e

        path = self._output_dir / f"{document_id}.json"
        if not path.is_file():
            raise RecordNotFoundError(document_id)

        try:
            with open(path, encoding="utf-8") as f:
                return DocumentRecord.model_validate(json.load(f))
        except (json.JSONDecodeError, PydanticValidationError) as e:
            logger.error(
                "Stored record is unreadable",
                extra={"document_id": document_id, "error_type": type(e).__name__},
            )
            raise RecordNotFoundError(document_id, details={"reason": "unreadable record"}) from e
