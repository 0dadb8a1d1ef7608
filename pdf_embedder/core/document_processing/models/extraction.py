"""
Extraction result model.

Dependencies: pydantic
System role: Return type of TextExtractor implementations
"""

from pydantic import BaseModel, Field


class ExtractedText(BaseModel):
    """Raw page-ordered text of a document."""

    text: str = Field(description="Page-ordered raw text")
    num_pages: int = Field(ge=0, description="Number of pages in the document")
    backend: str = Field(default="", description="Extractor that produced the text")
