"""CSV reference-table adapter.

Loads airport records from tabular text whose header names the six
required columns in any order. Loading is all-or-nothing: a bad header
or a single bad row aborts the whole load.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional, Sequence, Union

from ...domain.errors import (
    EmptyFieldError,
    InputNotFoundError,
    ReferenceTableError,
    RowShapeError,
    SchemaError,
)
from ...domain.models import REQUIRED_COLUMNS, AirportRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReferenceTable:
    """In-memory airport table implementing ReferenceTablePort.

    Attributes:
        records: Airport records in load order (duplicates allowed)
        source: Name of the artifact the table was loaded from
    """

    records: tuple[AirportRecord, ...] = ()
    source: str = "<memory>"
    _by_iata: dict[str, AirportRecord] = field(
        init=False, repr=False, compare=False, default_factory=dict
    )
    _by_icao: dict[str, AirportRecord] = field(
        init=False, repr=False, compare=False, default_factory=dict
    )

    def __post_init__(self) -> None:
        # setdefault keeps the first occurrence of a code
        for record in self.records:
            self._by_iata.setdefault(record.iata_code, record)
            self._by_icao.setdefault(record.icao_code, record)

    def __len__(self) -> int:
        return len(self.records)

    def find_by_iata(self, code: str) -> Optional[AirportRecord]:
        """Find the first record with the given IATA code."""
        return self._by_iata.get(code)

    def find_by_icao(self, code: str) -> Optional[AirportRecord]:
        """Find the first record with the given ICAO code."""
        return self._by_icao.get(code)

    @classmethod
    def load(cls, source: Iterable[str], source_name: str = "<memory>") -> ReferenceTable:
        """Build a table from CSV text.

        Args:
            source: Lines of CSV text (an open file works too).
            source_name: Used in error messages to identify the artifact.

        Returns:
            The loaded table.

        Raises:
            SchemaError: If required columns are missing from the header.
            RowShapeError: If a row's field count differs from the header's.
            EmptyFieldError: If a row leaves a required field empty.
            ReferenceTableError: If the CSV text itself cannot be parsed.
        """
        reader = csv.reader(source)
        try:
            header = next(reader, None)
            if header is None:
                raise SchemaError(
                    "airport lookup malformed: missing header row",
                    file_path=source_name,
                    missing_columns=REQUIRED_COLUMNS,
                )
            indices = _column_indices(header, source_name)
            records = [
                _build_record(row, header, indices, reader.line_num, source_name)
                for row in reader
                if row
            ]
        except csv.Error as e:
            raise ReferenceTableError(
                f"airport lookup malformed at line {reader.line_num}",
                file_path=source_name,
                cause=e,
            )

        logger.info(
            "Reference table loaded",
            extra={"source": source_name, "records": len(records)},
        )
        return cls(records=tuple(records), source=source_name)

    @classmethod
    def from_path(
        cls, path: Union[str, Path], encoding: str = "utf-8"
    ) -> ReferenceTable:
        """Load a table from a CSV file.

        Raises:
            InputNotFoundError: If the file cannot be opened.
            ReferenceTableError: If its content is malformed or not
                valid text in ``encoding``.
        """
        path = Path(path)
        logger.debug("Loading reference table", extra={"path": str(path)})
        try:
            with path.open(newline="", encoding=encoding) as f:
                return cls.load(f, source_name=str(path))
        except UnicodeDecodeError as e:
            raise ReferenceTableError(
                f"airport lookup malformed: {path} is not valid {encoding} text",
                file_path=str(path),
                cause=e,
            )
        except OSError as e:
            raise InputNotFoundError(
                "Airport lookup not found",
                file_path=str(path),
                artifact="airport lookup",
                cause=e,
            )


def _column_indices(header: Sequence[str], source_name: str) -> dict[str, int]:
    indices = {column: i for i, column in enumerate(header)}
    missing = tuple(column for column in REQUIRED_COLUMNS if column not in indices)
    if missing:
        raise SchemaError(
            "airport lookup malformed: missing or incorrect headers: "
            + ", ".join(missing),
            file_path=source_name,
            missing_columns=missing,
        )
    return {column: indices[column] for column in REQUIRED_COLUMNS}


def _build_record(
    row: Sequence[str],
    header: Sequence[str],
    indices: dict[str, int],
    row_number: int,
    source_name: str,
) -> AirportRecord:
    if len(row) != len(header):
        raise RowShapeError(
            f"airport lookup malformed: line {row_number} has {len(row)} "
            f"fields, expected {len(header)}",
            file_path=source_name,
            row_number=row_number,
            expected_fields=len(header),
            actual_fields=len(row),
        )

    values = {column: row[i] for column, i in indices.items()}
    empty = tuple(column for column in REQUIRED_COLUMNS if not values[column])
    if empty:
        raise EmptyFieldError(
            f"airport lookup malformed: line {row_number} has no data in "
            + ", ".join(empty),
            file_path=source_name,
            row_number=row_number,
            empty_columns=empty,
        )

    return AirportRecord(**values)
