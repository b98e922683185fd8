"""JSON Schema validation for course settings files."""
import json
from typing import Any, Dict, List
from pathlib import Path

from jsonschema import Draft202012Validator


class SchemaValidator:
    """Checks settings documents against a JSON Schema file, loaded on first use."""

    def __init__(self, schema_path):
        self.schema_path = Path(schema_path)
        self._validator = None

    @property
    def schema(self) -> Dict[str, Any]:
        return self.validator.schema

    @property
    def validator(self) -> Draft202012Validator:
        if self._validator is None:
            if not self.schema_path.exists():
                raise FileNotFoundError(f"Schema file not found: {self.schema_path}")
            with open(self.schema_path, 'r', encoding='utf-8') as f:
                schema = json.load(f)
            Draft202012Validator.check_schema(schema)
            self._validator = Draft202012Validator(schema)
        return self._validator

    def validate(self, data: Any) -> List[str]:
        """
        Validate data against the schema.

        Returns:
            One message per violation, ordered by location (empty if valid)
        """
        errors = sorted(self.validator.iter_errors(data), key=lambda e: list(map(str, e.absolute_path)))
        return [
            f"Validation error at {' -> '.join(map(str, e.absolute_path)) or 'root'}: {e.message}"
            for e in errors
        ]


# Validator for settings files passed with --config
settings_validator = SchemaValidator(Path(__file__).with_name("settings.schema.json"))
