"""
Schema validation for edge payload attributes.

This module provides JSON schema-based validation of the free-form
``attributes`` mapping carried by edge payloads. A Graph configured with a
payload schema runs every checked edge insertion through a
PayloadSchemaValidator so that attribute dictionaries stay uniform across the
graph.
"""

from typing import TYPE_CHECKING, Any, Dict

from jsonschema import SchemaError as JsonSchemaDefinitionError
from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate as json_validate
from jsonschema.validators import validator_for

from .base import ValidationResult

if TYPE_CHECKING:
    from ...core.models import EdgePayload


class PayloadSchemaValidator:
    """
    JSON Schema-based validator for edge payload attributes.

    Attributes:
        schema (Dict[str, Any]): JSON schema the attributes must satisfy
    """

    def __init__(self, schema: Dict[str, Any]):
        """
        Initialize the validator.

        Args:
            schema: JSON schema definition as a dictionary

        Raises:
            jsonschema.SchemaError: If ``schema`` is not a valid JSON schema

        Example:
            >>> validator = PayloadSchemaValidator({
            ...     "type": "object",
            ...     "properties": {"label": {"type": "string"}},
            ...     "required": ["label"],
            ... })
        """
        validator_for(schema).check_schema(schema)
        self.schema = schema

    @staticmethod
    def is_valid_schema(schema: Dict[str, Any]) -> bool:
        """Check whether ``schema`` is itself a well-formed JSON schema."""
        try:
            validator_for(schema).check_schema(schema)
        except JsonSchemaDefinitionError:
            return False
        return True

    def validate_payload(self, payload: "EdgePayload") -> ValidationResult:
        """
        Validate a payload's attributes against the schema.

        Args:
            payload: Payload whose ``attributes`` mapping is validated

        Returns:
            ValidationResult containing validation details and any errors
        """
        errors = []

        try:
            json_validate(instance=payload.attributes, schema=self.schema)
        except JsonSchemaError as e:
            errors.append(f"Schema validation failed: {e.message}")

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=[],
            context={"payload_type": type(payload).__name__},
        )
