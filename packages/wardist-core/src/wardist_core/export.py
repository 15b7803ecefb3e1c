"""JSON Schema export for wardist.yaml.

Exports a JSON Schema Draft 2020-12 document from the BuildSpec
Pydantic model for IDE autocomplete and validation.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from wardist_core.schemas import BuildSpec

SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"
BUILD_SPEC_SCHEMA_ID = "https://wardist.dev/schemas/wardist.schema.json"


def export_build_spec_schema(
    output_path: Path | str | None = None,
) -> dict[str, Any]:
    """Export BuildSpec JSON Schema.

    Args:
        output_path: Optional path to write schema file. If provided,
            creates parent directories as needed.

    Returns:
        Dictionary containing the JSON Schema.

    Example:
        >>> schema = export_build_spec_schema()
        >>> schema["$schema"]
        'https://json-schema.org/draft/2020-12/schema'
    """
    schema = BuildSpec.model_json_schema()

    schema["$schema"] = SCHEMA_DIALECT
    schema["$id"] = BUILD_SPEC_SCHEMA_ID

    if "additionalProperties" not in schema:
        schema["additionalProperties"] = False

    if output_path is not None:
        _write_schema_file(schema, output_path)

    return schema


def _write_schema_file(schema: dict[str, Any], path: Path | str) -> None:
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(schema, indent=2))
