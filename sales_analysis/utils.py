import json
import logging
import re
from datetime import date, datetime
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def get_date_suffix_for_filename() -> str:
    """Returns the current date as a YYYY-MM-DD string for filenames."""
    return datetime.now().strftime("%Y-%m-%d")


def find_latest_report(directory: Path, prefix: str, suffix: str = ".json") -> tuple[Path, date] | None:
    """
    Finds the newest '<prefix>YYYY-MM-DD<suffix>' file in a directory.
    Returns (path, file date), or None when nothing matches.
    """
    if not directory.is_dir():
        return None

    pattern = re.compile(rf"^{re.escape(prefix)}(\d{{4}}-\d{{2}}-\d{{2}}){re.escape(suffix)}$")
    candidates = []
    for path in directory.iterdir():
        match = pattern.match(path.name)
        if not match:
            continue
        try:
            file_date = datetime.strptime(match.group(1), "%Y-%m-%d").date()
        except ValueError:
            # e.g. 2025-02-30
            continue
        candidates.append((file_date, path))

    if not candidates:
        return None
    file_date, path = max(candidates)
    return path, file_date


def load_json(file_path: Path) -> Any | None:
    """
    A JSON loader with the same encoding fallback as our CSV readers:
    1. UTF-8 with BOM support ('utf-8-sig').
    2. Latin-1, which can decode any byte.
    Returns None when the file is missing or cannot be parsed.
    """
    try:
        return json.loads(file_path.read_text(encoding="utf-8-sig"))

    except UnicodeDecodeError:
        logger.info(f"INFO: UTF-8 decoding failed for {file_path.name}. Retrying with 'latin-1'.")
        try:
            return json.loads(file_path.read_text(encoding="latin-1"))
        except json.JSONDecodeError as e_latin1:
            logger.error(f"ERROR: Could not parse {file_path.name} even with latin-1. Reason: {e_latin1}")
            return None

    except FileNotFoundError:
        logger.info(f"INFO: Dataset not found at {file_path}, skipping.")
        return None

    except json.JSONDecodeError as e_json:
        logger.error(f"ERROR: {file_path.name} is not valid JSON. Reason: {e_json}")
        return None
