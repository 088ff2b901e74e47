"""
Loading lookup tables from configuration files.

Two formats are accepted:

* JSON, an object mapping each canonical name to a list of typos::

      {"previous": ["previuos", "previuous"]}

* plain text, one canonical name per line followed by its typos::

      # comments and blank lines are ignored
      previous: previuos, previuous
"""

import json
from pathlib import Path
from typing import Dict, List, Mapping

from ..errors import ConfigError
from ..logging import get_logger
from .model import CanonicalEntry, LookupTable

logger = get_logger(__name__)

# Corrections demonstrated by the original variable typo rule.
DEFAULT_TYPOS: Mapping[str, List[str]] = {
    "previous": ["previuos", "previuous"],
    "beginning": ["begining", "beginign"],
    "statement": ["statment"],
}


def default_table() -> LookupTable:
    """Build the table used when no configuration file is given."""
    return LookupTable.build(DEFAULT_TYPOS)


def parse_json_entries(text: str, source: str = "<string>") -> List[CanonicalEntry]:
    """Parse a JSON object of canonical name -> list of typos."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {source}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a JSON object in {source}, got {type(data).__name__}")

    entries = []
    for canonical_name, typos in data.items():
        if not isinstance(typos, list) or not all(isinstance(t, str) for t in typos):
            raise ConfigError(
                f"Typos for '{canonical_name}' in {source} must be a list of strings"
            )
        entries.append(CanonicalEntry.of(canonical_name, typos))
    return entries


def parse_text_entries(text: str, source: str = "<string>") -> List[CanonicalEntry]:
    """Parse 'canonical: typo, typo' lines."""
    collected: Dict[str, List[str]] = {}
    for line_no, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.split("#", 1)[0].strip()
        if not line:
            continue
        if ":" not in line:
            raise ConfigError(f"{source}:{line_no}: expected 'canonical: typo, ...', got {raw_line!r}")

        canonical_name, _, rest = line.partition(":")
        canonical_name = canonical_name.strip()
        if not canonical_name:
            raise ConfigError(f"{source}:{line_no}: missing canonical name")
        if canonical_name in collected:
            raise ConfigError(f"{source}:{line_no}: canonical name '{canonical_name}' repeated")

        collected[canonical_name] = [t.strip() for t in rest.split(",") if t.strip()]

    return [CanonicalEntry.of(name, typos) for name, typos in collected.items()]


def load_table(path: Path) -> LookupTable:
    """
    Load and validate a lookup table from a configuration file.

    Files ending in .json are parsed as JSON, anything else as text lines.

    Raises:
        ConfigError: if the file cannot be read or its entries are invalid
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read typo configuration {path}: {exc}") from exc

    if path.suffix.lower() == ".json":
        entries = parse_json_entries(text, source=str(path))
    else:
        entries = parse_text_entries(text, source=str(path))

    table = LookupTable.build(entries)
    logger.info(f"Loaded {len(table)} canonical names from {path}")
    return table
