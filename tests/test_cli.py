"""Tests for the typer command-line interface."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from typer.testing import CliRunner

from pdf_embedder.cli import app
from pdf_embedder.core.document_processing.models import PipelineResult
from pdf_embedder.core.exceptions import ExtractionError

runner = CliRunner()


@pytest.fixture(autouse=True)
def quiet_logging():
    with patch("pdf_embedder.cli.configure_logging"):
        yield


@pytest.fixture
def mock_pipeline():
    with patch("pdf_embedder.cli.DocumentPipeline") as pipeline_class:
        pipeline = MagicMock()
        pipeline.aclose = AsyncMock()
        pipeline_class.return_value = pipeline
        yield pipeline


def _result(output_path: str, chunk_count: int = 4, embedded_count: int = 4) -> PipelineResult:
    return PipelineResult(
        document_id="doc-1",
        file_name="sample.pdf",
        num_pages=2,
        chunk_count=chunk_count,
        embedded_count=embedded_count,
        output_path=output_path,
        processing_time_ms=5.0,
    )


def test_process_defaults_output_next_to_input(mock_pipeline, temp_pdf_file):
    expected_output = temp_pdf_file.with_suffix(".json")
    mock_pipeline.process = AsyncMock(return_value=_result(str(expected_output)))

    result = runner.invoke(app, ["process", "--input", str(temp_pdf_file)])

    assert result.exit_code == 0, result.output
    kwargs = mock_pipeline.process.call_args.kwargs
    assert kwargs["output_path"] == str(expected_output)
    assert kwargs["chunk_size"] == 1000
    assert kwargs["overlap"] == 200
    assert "Created 4 chunks" in result.output
    mock_pipeline.aclose.assert_awaited_once()


def test_process_short_options(mock_pipeline, temp_pdf_file, temp_dir):
    output = temp_dir / "out.json"
    mock_pipeline.process = AsyncMock(return_value=_result(str(output), embedded_count=3))

    result = runner.invoke(
        app,
        ["process", "-i", str(temp_pdf_file), "-o", str(output), "-c", "500", "-v", "50", "-m", "nomic-embed-text"],
    )

    assert result.exit_code == 0, result.output
    args = mock_pipeline.process.call_args
    assert args.args[1] == "sample.pdf"
    assert args.kwargs["chunk_size"] == 500
    assert args.kwargs["overlap"] == 50
    assert args.kwargs["model"] == "nomic-embed-text"
    assert "1 chunks failed to embed" in result.output


def test_process_failure_exits_with_error(mock_pipeline, temp_pdf_file):
    mock_pipeline.process = AsyncMock(side_effect=ExtractionError("PDF text extraction failed: pypdf: bad"))

    result = runner.invoke(app, ["process", "--input", str(temp_pdf_file)])

    assert result.exit_code == 1
    assert "PDF text extraction failed" in result.output
    mock_pipeline.aclose.assert_awaited_once()


def test_process_missing_input(temp_dir):
    result = runner.invoke(app, ["process", "--input", str(temp_dir / "missing.pdf")])

    assert result.exit_code != 0


def test_serve_runs_uvicorn():
    with patch("pdf_embedder.cli.uvicorn.run") as mock_run:
        result = runner.invoke(app, ["serve", "--host", "0.0.0.0", "--port", "9000"])

    assert result.exit_code == 0, result.output
    mock_run.assert_called_once()
    assert mock_run.call_args.args[0] == "pdf_embedder.api.main:app"
    assert mock_run.call_args.kwargs["host"] == "0.0.0.0"
    assert mock_run.call_args.kwargs["port"] == 9000
