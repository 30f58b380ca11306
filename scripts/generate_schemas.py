"""Generate JSON schemas from the Pydantic models and save them to schemas/."""

import json
from pathlib import Path

from pydantic import TypeAdapter

from framerev.kernel.record import RevisionRecord
from framerev.kernel.schema import Schema


def generate_schemas(schemas_dir: Path = Path(__file__).parent.parent / "schemas") -> list[Path]:
    """Write JSON schemas for revision records and frame schemas; return the paths written."""
    schemas_dir.mkdir(exist_ok=True)
    outputs = {
        "revision_record.schema.json": RevisionRecord.model_json_schema(by_alias=True),
        "frame_schema.schema.json": TypeAdapter(Schema).json_schema(),
    }
    written = []
    for filename, schema in outputs.items():
        path = schemas_dir / filename
        with open(path, "w", encoding="utf-8") as f:
            json.dump(schema, f, indent=2, ensure_ascii=False)
        print(f"Generated: {path}")
        written.append(path)
    return written


if __name__ == "__main__":
    generate_schemas()
