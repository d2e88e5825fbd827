"""Generate the JSON schema of the .visual format and save it to schemas/."""

import json
from pathlib import Path

from visually.api import json_schema


def generate_schemas():
    """Generate JSON schemas for all models."""
    schemas_dir = Path(__file__).parent.parent / "schemas"
    schemas_dir.mkdir(exist_ok=True)

    schema_path = schemas_dir / "visual_presentation.schema.json"
    with open(schema_path, 'w', encoding='utf-8') as f:
        json.dump(json_schema(), f, indent=2, ensure_ascii=False)
    print(f"Generated: {schema_path}")

    print("\nSchema generation complete!")


if __name__ == "__main__":
    generate_schemas()
