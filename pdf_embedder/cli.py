"""
Command-line interface.

Commands:
- process: extract, chunk, and embed one PDF into a JSON file
- serve: run the HTTP API with uvicorn

Dependencies: typer, rich, uvicorn
System role: Local entry point over DocumentPipeline
"""

import asyncio
import logging
from pathlib import Path

import typer
import uvicorn
from rich.console import Console

from pdf_embedder.configs import get_settings
from pdf_embedder.core.document_processing import DocumentPipeline, PipelineResult
from pdf_embedder.core.exceptions import PdfEmbedderException
from pdf_embedder.observability.log_utils import log_with_context
from pdf_embedder.observability.logger import configure_logging

logger = logging.getLogger(__name__)

app = typer.Typer(help="PDF Embedder: chunk PDF text and embed it with a local model")
console = Console()


async def _run_pipeline(
    data: bytes,
    file_name: str,
    output: Path,
    chunk_size: int,
    overlap: int,
    model: str | None,
) -> PipelineResult:
    pipeline = DocumentPipeline(settings=get_settings().pipeline)
    try:
        return await pipeline.process(
            data,
            file_name,
            chunk_size=chunk_size,
            overlap=overlap,
            model=model,
            output_path=str(output),
        )
    finally:
        await pipeline.aclose()


@app.command()
def process(
    input_path: Path = typer.Option(
        ...,
        "--input",
        "-i",
        exists=True,
        dir_okay=False,
        readable=True,
        help="Path to the PDF file",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Path to save the output JSON file (defaults to input filename with .json extension)",
    ),
    chunk_size: int = typer.Option(1000, "--chunk-size", "-c", help="Size of text chunks in characters"),
    overlap: int = typer.Option(200, "--overlap", "-v", help="Overlap between chunks in characters"),
    model: str | None = typer.Option(None, "--model", "-m", help="Embedding model name"),
):
    """Process one PDF into a JSON file of chunks and embeddings."""
    configure_logging(get_settings().log_level)
    output = output or input_path.with_suffix(".json")

    console.print(f"Processing PDF: [bold]{input_path}[/]")
    log_with_context(logger, logging.INFO, "CLI process started", input=input_path, output=output)

    try:
        result = asyncio.run(
            _run_pipeline(
                input_path.read_bytes(),
                input_path.name,
                output,
                chunk_size,
                overlap,
                model,
            )
        )
    except PdfEmbedderException as e:
        console.print(f"[bold red]Error processing PDF:[/] {e.message}")
        raise typer.Exit(code=1)

    console.print(f"Extracted text from {result.num_pages} pages")
    console.print(f"Created {result.chunk_count} chunks")
    console.print(f"Generated {result.embedded_count}/{result.chunk_count} embeddings")
    if result.embedded_count < result.chunk_count:
        console.print(
            f"[yellow]{result.chunk_count - result.embedded_count} chunks failed to embed; see the error field in the output[/]"
        )
    console.print(f"Output saved to: [bold]{result.output_path}[/]")


@app.command()
def serve(
    host: str | None = typer.Option(None, "--host", help="Bind address (settings default if omitted)"),
    port: int | None = typer.Option(None, "--port", help="Port (settings default if omitted)"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
):
    """Run the HTTP API."""
    settings = get_settings()
    uvicorn.run(
        "pdf_embedder.api.main:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
    )


if __name__ == "__main__":
    app()
