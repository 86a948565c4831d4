"""
Salary records storage.

Each record is a JSON file under the data directory:

    <data_dir>/records/<record_id>.json
    {"meta": {"type": "salary", "created_at": "..."},
     "data": {"salary": 85000.0, "label": "Acme offer"}}

Records are the source of the salary value for `records calc` and the
calculator session's initial load. CLI and MCP tools are thin wrappers that
call these functions.
"""

import hashlib
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import get_data_path
from .salary import InvalidSalaryError, parse_salary

logger = logging.getLogger(__name__)

RECORD_TYPE = "salary"


class RecordError(Exception):
    """Raised when a record exists but cannot be read."""
    pass


class RecordNotFoundError(RecordError):
    """Raised when no record matches the requested ID."""

    def __init__(self, record_id: str):
        self.record_id = record_id
        super().__init__(f"Record not found: {record_id}")


def get_records_dir() -> Path:
    """Get the records directory.

    Returns:
        Path to records directory (~/.local/share/tax-calc/records/)
    """
    records_dir = get_data_path() / "records"
    records_dir.mkdir(parents=True, exist_ok=True)
    return records_dir


def _generate_record_id(meta: Dict[str, Any], data: Dict[str, Any]) -> str:
    """Generate an 8-char record ID from record content.

    The creation timestamp is part of the hash so that two records with the
    same salary and label still get distinct IDs.
    """
    content = f"{RECORD_TYPE}|{data.get('label') or ''}|{data['salary']:.2f}|{meta['created_at']}"
    return hashlib.sha256(content.encode()).hexdigest()[:8]


def _record_path(record_id: str) -> Path:
    """Path of a record file, confined to the records directory."""
    records_dir = get_records_dir()
    json_file = records_dir / f"{record_id}.json"
    if json_file.resolve().parent != records_dir.resolve():
        raise RecordError(f"Invalid record ID: {record_id!r}")
    return json_file


def _read_record(json_file: Path) -> Dict[str, Any]:
    try:
        with open(json_file) as f:
            record = json.load(f)
    except (json.JSONDecodeError, IOError) as e:
        raise RecordError(f"Cannot read record {json_file.stem}: {e}") from e

    if not isinstance(record, dict):
        raise RecordError(f"Cannot read record {json_file.stem}: expected a JSON object")

    record["id"] = json_file.stem
    record["_path"] = str(json_file)
    return record


def add_record(salary: Any, label: Optional[str] = None) -> str:
    """Save a salary record.

    Args:
        salary: Annual salary (number or numeric string)
        label: Optional description (e.g., job title or employer)

    Returns:
        The new record ID

    Raises:
        InvalidSalaryError: If salary is not numeric
    """
    meta = {"type": RECORD_TYPE, "created_at": datetime.now().isoformat()}
    data = {"salary": parse_salary(salary), "label": label}

    record_id = _generate_record_id(meta, data)
    record_path = get_records_dir() / f"{record_id}.json"

    with open(record_path, "w") as f:
        json.dump({"meta": meta, "data": data}, f, indent=2)

    logger.debug(f"saved record {record_id}: salary={data['salary']:.2f}")
    return record_id


def get_record(record_id: str) -> Optional[Dict[str, Any]]:
    """Get a single record by ID.

    Args:
        record_id: The 8-char record ID

    Returns:
        Record dict if found, None otherwise

    Raises:
        RecordError: If the ID is invalid or the record file is not a JSON object
    """
    json_file = _record_path(record_id)
    if not json_file.exists():
        return None
    return _read_record(json_file)


def list_records() -> List[Dict[str, Any]]:
    """List all salary records, oldest first.

    Unreadable files are skipped with a warning.
    """
    results = []
    for json_file in get_records_dir().glob("*.json"):
        try:
            record = _read_record(json_file)
        except RecordError as e:
            logger.warning(str(e))
            continue

        meta = record.get("meta")
        if not isinstance(meta, dict) or meta.get("type") != RECORD_TYPE:
            continue
        results.append(record)

    results.sort(key=lambda r: r.get("meta", {}).get("created_at", ""))
    return results


def remove_record(record_id: str) -> bool:
    """Delete a record by its ID.

    Returns:
        True if record was found and deleted, False if not found

    Raises:
        RecordError: If the ID points outside the records directory
    """
    json_file = _record_path(record_id)
    if not json_file.exists():
        return False
    json_file.unlink()
    return True


def get_salary(record_id: str) -> float:
    """Fetch the salary value stored in a record.

    A record whose salary is null yields 0.

    Raises:
        RecordNotFoundError: If no record has this ID
        RecordError: If the record is unreadable or its salary is not numeric
    """
    record = get_record(record_id)
    if record is None:
        raise RecordNotFoundError(record_id)

    raw = (record.get("data") or {}).get("salary")
    try:
        return parse_salary(raw)
    except InvalidSalaryError as e:
        raise RecordError(f"Record {record_id} has an invalid salary: {raw!r}") from e
