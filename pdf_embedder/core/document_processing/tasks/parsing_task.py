"""
Document parsing task with primary and fallback text extractors.

The primary extractor uses LangChain PyPDFLoader; the fallback shells out to
poppler's pdftotext/pdfinfo. Both receive the same PDF bytes.

Dependencies: langchain_community.document_loaders, subprocess, tempfile
System role: First stage of document ingestion pipeline
"""

import logging
import re
import shutil
import subprocess
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Protocol, runtime_checkable

from langchain_community.document_loaders import PyPDFLoader

from pdf_embedder.core.exceptions import ExtractionError

from ..models import ExtractedText

logger = logging.getLogger(__name__)

PAGE_SEPARATOR = "\n\n"
_PDFINFO_PAGES = re.compile(r"^Pages:\s+(\d+)", re.MULTILINE)


@runtime_checkable
class TextExtractor(Protocol):
    """Turns PDF bytes into page-ordered text."""

    name: str

    def extract(self, data: bytes) -> ExtractedText:
        """
        Extract text from PDF bytes.

        Raises:
            ExtractionError: When the document cannot be parsed
        """
        ...


@contextmanager
def _spooled_pdf(data: bytes) -> Iterator[str]:
    """Write PDF bytes to a temporary file for path-based tools."""
    with tempfile.TemporaryDirectory(prefix="pdf_embedder_") as temp_dir:
        path = Path(temp_dir) / "document.pdf"
        path.write_bytes(data)
        yield str(path)


class PyPDFExtractor:
    """Extract text with LangChain PyPDFLoader (pypdf)."""

    name = "pypdf"

    def extract(self, data: bytes) -> ExtractedText:
        """
        Extract text from PDF bytes.

        Args:
            data: Raw PDF bytes

        Returns:
            ExtractedText: Pages joined by blank lines plus page count

        Raises:
            ExtractionError: When loading fails or no text is extractable
        """
        with _spooled_pdf(data) as file_path:
            try:
                documents = PyPDFLoader(file_path).load()
            except Exception as e:
                raise ExtractionError(f"Failed to parse PDF: {e}", backend=self.name) from e

        if not documents:
            raise ExtractionError("PDF document contains no pages", backend=self.name)

        text = PAGE_SEPARATOR.join(doc.page_content for doc in documents)
        if not text.strip():
            raise ExtractionError("PDF document contains no extractable text", backend=self.name)

        num_pages = documents[0].metadata.get("total_pages", len(documents))
        return ExtractedText(text=text, num_pages=num_pages, backend=self.name)


class PdftotextExtractor:
    """Extract text with poppler's pdftotext command-line tool."""

    name = "pdftotext"

    def __init__(self, timeout: float = 60.0) -> None:
        """
        Initialize extractor.

        Args:
            timeout: Seconds allowed for each subprocess call
        """
        self._timeout = timeout

    def extract(self, data: bytes) -> ExtractedText:
        """
        Extract text from PDF bytes via pdftotext -layout.

        Args:
            data: Raw PDF bytes

        Returns:
            ExtractedText: Extracted text plus page count from pdfinfo

        Raises:
            ExtractionError: When pdftotext is unavailable, fails, or yields no text
        """
        if shutil.which("pdftotext") is None:
            raise ExtractionError(
                "pdftotext not found. Please install poppler-utils package.",
                backend=self.name,
            )

        with _spooled_pdf(data) as file_path:
            try:
                result = subprocess.run(
                    ["pdftotext", "-layout", file_path, "-"],
                    capture_output=True,
                    check=True,
                    timeout=self._timeout,
                )
            except subprocess.CalledProcessError as e:
                stderr = e.stderr.decode("utf-8", errors="replace").strip()
                raise ExtractionError(
                    f"pdftotext exited with status {e.returncode}: {stderr}",
                    backend=self.name,
                ) from e
            except subprocess.TimeoutExpired as e:
                raise ExtractionError("pdftotext timed out", backend=self.name) from e

            text = result.stdout.decode("utf-8", errors="replace")
            if not text.strip():
                raise ExtractionError("PDF document contains no extractable text", backend=self.name)

            num_pages = self._count_pages(file_path)

        return ExtractedText(text=text, num_pages=num_pages, backend=self.name)

    def _count_pages(self, file_path: str) -> int:
        """Read the page count from pdfinfo, defaulting to 1."""
        if shutil.which("pdfinfo") is None:
            return 1
        try:
            result = subprocess.run(
                ["pdfinfo", file_path],
                capture_output=True,
                check=True,
                timeout=self._timeout,
            )
        except (subprocess.CalledProcessError, subprocess.TimeoutExpired) as e:
            logger.warning("pdfinfo failed, assuming one page", extra={"error": str(e)})
            return 1

        match = _PDFINFO_PAGES.search(result.stdout.decode("utf-8", errors="replace"))
        return int(match.group(1)) if match else 1


class ParsingTask:
    """Extract PDF text with a primary extractor and an optional fallback."""

    def __init__(
        self,
        primary: TextExtractor | None = None,
        fallback: TextExtractor | None = None,
    ) -> None:
        """
        Initialize parsing task.

        Args:
            primary: Extractor tried first (PyPDFExtractor if None)
            fallback: Extractor tried when the primary fails
        """
        self._extractors: list[TextExtractor] = [primary or PyPDFExtractor()]
        if fallback is not None:
            self._extractors.append(fallback)

    @property
    def extractor_names(self) -> list[str]:
        return [extractor.name for extractor in self._extractors]

    def parse(self, data: bytes, file_name: str | None = None) -> ExtractedText:
        """
        Extract text, trying each extractor in turn with the same bytes.

        Args:
            data: Raw PDF bytes
            file_name: Original file name (for logging)

        Returns:
            ExtractedText: Output of the first extractor that succeeded

        Raises:
            ExtractionError: When every extractor fails
        """
        failures: dict[str, str] = {}

        for extractor in self._extractors:
            try:
                extracted = extractor.extract(data)
            except ExtractionError as e:
                failures[extractor.name] = e.message
                logger.warning(
                    "Text extraction failed",
                    extra={"file_name": file_name, "backend": extractor.name, "error": e.message},
                )
                continue

            logger.info(
                "Text extracted",
                extra={
                    "file_name": file_name,
                    "backend": extractor.name,
                    "num_pages": extracted.num_pages,
                    "characters": len(extracted.text),
                },
            )
            return extracted

        summary = "; ".join(f"{name}: {message}" for name, message in failures.items())
        raise ExtractionError(
            f"PDF text extraction failed: {summary}",
            details={"file_name": file_name, "backends": list(failures)},
        )
