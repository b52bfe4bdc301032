"""
CSV export of in-memory records.

Records are flat mappings or pydantic models (e.g. the rows returned by
get_income). Column headers come from the first record; every row is
written with those columns. An empty record list exports nothing.
"""

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from fastapi import Response
from pydantic import BaseModel

from fintrack.utils.logging import get_logger

logger = get_logger(__name__)

CSV_MEDIA_TYPE = "text/csv; charset=utf-8"

ExportRecord = Union[BaseModel, Mapping[str, Any]]


def _as_dict(record: ExportRecord) -> Dict[str, Any]:
    if isinstance(record, BaseModel):
        return record.model_dump(mode="json")
    return dict(record)


def _format_field(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str) and "," in value:
        return f'"{value}"'
    return str(value)


def to_csv(records: Sequence[ExportRecord]) -> str:
    """
    Serialize records to CSV text.

    Only string fields containing a comma are wrapped in double quotes.
    Quotes and line breaks inside a value are written as-is (known gap:
    such values do not survive a strict CSV parser). Missing and None
    values are empty. Rows are separated by "\\n" with no trailing
    newline. Returns "" for an empty list.

    Example:
        >>> to_csv([{"a": "1,2", "b": "x"}])
        'a,b\\n"1,2",x'
    """
    if not records:
        return ""

    rows: List[Dict[str, Any]] = [_as_dict(record) for record in records]
    headers = list(rows[0].keys())

    lines = [",".join(headers)]
    for row in rows:
        lines.append(",".join(_format_field(row.get(header)) for header in headers))

    return "\n".join(lines)


def export_to_csv(records: Sequence[ExportRecord], filename: str) -> Optional[Response]:
    """
    Build a response that makes the browser download `records` as `filename`.

    Returns:
        A FastAPI Response with a CSV attachment, or None when there is
        nothing to export
    """
    if not records:
        logger.debug(f"Nothing to export for {filename}")
        return None

    content = to_csv(records)
    logger.info(f"Exporting {len(records)} records as {filename}")

    return Response(
        content=content,
        media_type=CSV_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


def write_csv(records: Sequence[ExportRecord], path: Union[str, Path]) -> Optional[Path]:
    """
    Write `records` as CSV to `path`.

    Returns:
        The written path, or None (and no file) when records is empty
    """
    if not records:
        logger.debug(f"Nothing to write to {path}")
        return None

    target = Path(path)
    with target.open("w", encoding="utf-8", newline="") as fh:
        fh.write(to_csv(records))

    logger.info(f"Wrote {len(records)} records to {target}")
    return target
