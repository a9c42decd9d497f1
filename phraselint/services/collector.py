"""
Collector service.

Reads a directory of locale JSON files and runs the shape inspector for every
key of the reference locale.
"""
import json
import os
from pathlib import Path
from typing import Any, Dict, List, Union

from ..logging_setup import logger
from ..result import Err, Ok, Result
from ..schemas import (
    AppError,
    CouldNotParseJsonError,
    Issue,
    NoEntryDirError,
    NoReferenceLocaleError,
)
from .inspector import ValuePair, inspect
from .shape import object_keys
from .utils import group_by


def list_locale_files(base_dir: Path) -> List[str]:
    """
    Names of the regular *.json files directly inside base_dir, sorted by name.
    Subdirectories and symlinks are skipped. Raises OSError if the directory
    cannot be listed.
    """
    with os.scandir(base_dir) as entries:
        names = [
            entry.name
            for entry in entries
            if entry.is_file(follow_symlinks=False) and entry.name.endswith(".json")
        ]
    return sorted(names)


def reject_constant(name: str) -> Any:
    """NaN, Infinity and -Infinity are not valid JSON."""
    raise ValueError(f"Invalid JSON constant: {name}")


def load_locale_file(path: Path) -> Any:
    """Read and parse one locale file. Raises OSError or ValueError on failure."""
    with path.open("r", encoding="utf-8") as f:
        return json.load(f, parse_constant=reject_constant)


def is_blank_json(value: Any) -> bool:
    """null, false, 0 and "" parse fine but cannot serve as a reference locale."""
    if value is None or value is False:
        return True
    return not isinstance(value, (dict, list)) and not value


def collect_values(key: str, files: List[str], jsons: Dict[str, Any]) -> List[ValuePair]:
    """Build the (filename, value) list for one key across all files."""
    values: List[ValuePair] = []
    for file in files:
        data = jsons.get(file)
        value = data.get(key) if isinstance(data, dict) else None
        values.append((file, value))
    return values


def phraselint(dir: Union[str, Path], main_entry: str) -> Result[Dict[str, List[Issue]], AppError]:
    """
    Lint every locale file in dir against the reference locale main_entry.

    Args:
        dir: Directory holding the locale files, relative to the working directory or absolute
        main_entry: File name of the reference locale, e.g. 'en.json'

    Returns:
        Ok with issues grouped by key (keys without issues are left out), or
        Err with the first fatal error. No partial results are returned.
    """
    base_dir = Path.cwd() / dir

    try:
        files = list_locale_files(base_dir)
    except OSError as e:
        logger.error("entry_dir_missing", dir=str(base_dir), reason=str(e))
        return Err(NoEntryDirError(dir=str(base_dir)))

    logger.info("locale_dir_listed", dir=str(base_dir), files=files)

    jsons: Dict[str, Any] = {}
    for file in files:
        try:
            jsons[file] = load_locale_file(base_dir / file)
        except (OSError, ValueError) as e:
            # JSONDecodeError and UnicodeDecodeError are both ValueErrors
            logger.error("locale_file_unparsable", file=file, reason=str(e))
            return Err(CouldNotParseJsonError(file=file))
        logger.debug("locale_file_parsed", file=file)

    if main_entry not in jsons or is_blank_json(jsons[main_entry]):
        logger.error("reference_locale_missing", file=main_entry, files=files)
        return Err(NoReferenceLocaleError(file=main_entry))

    main_entry_json = jsons[main_entry]
    reference_keys = object_keys(main_entry_json) if isinstance(main_entry_json, dict) else []

    issues: List[Issue] = []
    for key in reference_keys:
        issues.extend(inspect(key, collect_values(key, files, jsons)))

    groups = group_by(issues, lambda it: it.key)
    logger.info("lint_finished", keys=len(reference_keys), issues=len(issues), keys_with_issues=len(groups))
    return Ok(groups)
