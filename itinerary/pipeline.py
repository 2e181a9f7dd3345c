"""High-level pipeline helpers for the itinerary prettifier.

The pipeline is organized in several stages:

1. Store loading (airport reference table, style settings).
2. Document reading.
3. Token substitution and normalisation (ItineraryService).
4. Writing the result and reporting diagnostics.

This module wires these stages together for front-ends such as the
command line. The processing itself lives in the services and text
packages.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from .config import AppConfig, get_config
from .container import Container
from .domain.errors import InputNotFoundError, OutputWriteError
from .domain.models import ProcessingResult
from .services import ItineraryService
from .text.diagnostics import DiagnosticCollector

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _build_config(
    lookup_path: Optional[PathLike],
    settings_path: Optional[PathLike],
    config: Optional[AppConfig],
) -> AppConfig:
    config = config or get_config()
    if lookup_path is None and settings_path is None:
        return config

    overrides = {}
    if lookup_path is not None:
        overrides["lookup_file"] = str(Path(lookup_path).resolve())
    if settings_path is not None:
        overrides["settings_file"] = str(Path(settings_path).resolve())
    data = config.data.model_copy(update=overrides)
    return config.model_copy(update={"data": data})


def build_service(
    lookup_path: Optional[PathLike] = None,
    settings_path: Optional[PathLike] = None,
    config: Optional[AppConfig] = None,
) -> ItineraryService:
    """Load both stores and return a ready service.

    Paths default to the configured ones. Absolute overrides win over
    ``data_dir``.

    Raises:
        InputNotFoundError: If the lookup table cannot be opened.
        ReferenceTableError: If the lookup table is malformed.
    """
    container = Container.create_default(_build_config(lookup_path, settings_path, config))
    return container.resolve(ItineraryService)


def read_document(path: PathLike, encoding: str = "utf-8") -> str:
    """Read an input document, keeping line endings untouched.

    Undecodable bytes become U+FFFD, which normalisation later strips.

    Raises:
        InputNotFoundError: If the file cannot be read.
    """
    path = Path(path)
    try:
        with path.open(encoding=encoding, errors="replace", newline="") as f:
            return f.read()
    except OSError as e:
        raise InputNotFoundError(
            "Input not found", file_path=str(path), artifact="input", cause=e
        )


def write_document(path: PathLike, text: str, encoding: str = "utf-8") -> None:
    """Write the processed document.

    Raises:
        OutputWriteError: If the file cannot be written.
    """
    path = Path(path)
    try:
        with path.open("w", encoding=encoding, newline="") as f:
            f.write(text)
    except OSError as e:
        raise OutputWriteError(
            "Error writing to output file", file_path=str(path), cause=e
        )


def prettify_text(
    text: str,
    *,
    lookup_path: Optional[PathLike] = None,
    settings_path: Optional[PathLike] = None,
    styled: bool = False,
    config: Optional[AppConfig] = None,
) -> ProcessingResult:
    """Run the whole pipeline on an in-memory document.

    Diagnostics are logged once, after processing, and also returned.
    """
    service = build_service(lookup_path, settings_path, config)
    diagnostics = DiagnosticCollector()
    result = service.process(text, styled=styled, diagnostics=diagnostics)
    diagnostics.report()
    return result


def prettify_file(
    input_path: PathLike,
    output_path: Optional[PathLike] = None,
    *,
    lookup_path: Optional[PathLike] = None,
    settings_path: Optional[PathLike] = None,
    styled: bool = False,
    config: Optional[AppConfig] = None,
) -> ProcessingResult:
    """Run the pipeline on a file, optionally writing the result.

    The input is read and both stores are loaded before processing
    starts, so a missing input or a malformed table aborts the run
    without producing output.
    """
    config = _build_config(lookup_path, settings_path, config)
    text = read_document(input_path, encoding=config.data.encoding)
    service = Container.create_default(config).resolve(ItineraryService)

    diagnostics = DiagnosticCollector()
    result = service.process(text, styled=styled, diagnostics=diagnostics)
    diagnostics.report()

    if output_path is not None:
        write_document(output_path, result.text, encoding=config.data.encoding)
        logger.info("Output written", extra={"path": str(output_path)})
    return result

