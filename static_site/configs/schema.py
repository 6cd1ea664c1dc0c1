"""
JSON Schema validation for the ``staticsite`` context block in cdk.json.
"""

from __future__ import annotations
import json
from pathlib import Path
from typing import Any, List, Optional, Union

from jsonschema import Draft202012Validator

from static_site.configs.error_handler import ErrorHandler

SCHEMA_PATH = Path(__file__).resolve().parent / "schema" / "site.schema.json"

def load_schema(path: Optional[Union[str, Path]] = None) -> dict:
    """Load and parse a JSON schema file, the bundled one by default."""
    with open(path or SCHEMA_PATH, "r", encoding="utf-8") as f:
        return json.load(f)

def schema_errors(data: Any, schema: Optional[dict] = None) -> List[str]:
    """
    Collect schema violations as ``"<json path>: <message>"`` strings.

    Args:
        data: Parsed ``staticsite`` context block
        schema: Schema to validate against (bundled schema if None)

    Returns:
        Messages sorted by location, empty when the data is valid
    """
    validator = Draft202012Validator(schema if schema is not None else load_schema())
    errors = sorted(validator.iter_errors(data), key=lambda e: list(map(str, e.path)))
    return [f"{'/'.join(map(str, e.path)) or '(root)'}: {e.message}" for e in errors]

def validate_site_context(data: Any, source: str = "cdk.json") -> None:
    """
    Validate a ``staticsite`` context block.

    Raises:
        ValueError: If the block does not match the schema
    """
    ErrorHandler.validate_schema_errors(
        schema_errors(data),
        f"'staticsite' context in {source}",
    )

def validate_files(files, schema_path: Optional[Union[str, Path]] = None) -> bool:
    """
    Validate the ``staticsite`` block of each JSON file, printing one line per result.

    Files with a top-level ``context`` key (cdk.json) are validated on
    ``context.staticsite``; anything else is treated as the block itself.

    Returns:
        True when every file is readable and valid
    """
    schema = load_schema(schema_path)
    ok = True
    for f in files:
        try:
            with open(f, "r", encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, ValueError) as e:
            print(f"[X] {f}: unreadable JSON ({e})")
            ok = False
            continue

        if isinstance(data, dict) and "context" in data:
            data = (data["context"] or {}).get("staticsite", {})

        errs = schema_errors(data, schema)
        if errs:
            ok = False
            print(f"[X] {f}: {len(errs)} error(s)")
            for e in errs:
                print(f"  - {e}")
        else:
            print(f"[OK] {f}: OK")
    return ok
