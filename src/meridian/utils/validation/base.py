"""
Base validation components.

This module provides the validation building blocks used by the model and
configuration dataclasses:
- ValidationResult for reporting outcomes with errors, warnings and context
- ValidationRule and RangeRule for simple value checks
- DataclassRule and the validate_dataclass decorator for runtime type
  checking of dataclass fields against their annotations
"""

from dataclasses import dataclass
from enum import Enum
from functools import wraps
from typing import (
    Any,
    Dict,
    List,
    Optional,
    Type,
    Union,
    get_args,
    get_origin,
    get_type_hints,
)


@dataclass
class ValidationResult:
    """
    Container for validation results.

    Attributes:
        is_valid (bool): Whether the validation passed successfully
        errors (List[str]): List of validation error messages
        warnings (List[str]): List of validation warning messages
        context (Optional[Dict[str, Any]]): Additional context about the validation
    """

    is_valid: bool
    errors: List[str]
    warnings: List[str]
    context: Optional[Dict[str, Any]] = None


class ValidationRule:
    """
    Base class for validation rules.

    Subclasses override validate() to implement specific validation logic.

    Attributes:
        error_message (str): Message to display when validation fails
    """

    def __init__(self, error_message: str):
        self.error_message = error_message

    def validate(self, value: Any) -> bool:
        """
        Validate a value against the rule.

        Raises:
            NotImplementedError: If the subclass doesn't implement this method
        """
        raise NotImplementedError("Validation rules must implement validate()")

    def check(self, value: Any) -> None:
        """Raise ValueError with the rule's message when ``value`` is invalid."""
        if not self.validate(value):
            raise ValueError(self.error_message)


class RangeRule(ValidationRule):
    """
    Rule for validating numeric ranges.

    Either bound may be None to create an open-ended range.

    Attributes:
        min_value (Optional[float]): Minimum allowed value
        max_value (Optional[float]): Maximum allowed value
    """

    def __init__(
        self,
        min_value: Optional[float] = None,
        max_value: Optional[float] = None,
        error_message: str = "",
    ):
        super().__init__(error_message)
        self.min_value = min_value
        self.max_value = max_value

    def validate(self, value: Any) -> bool:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return False
        if self.min_value is not None and value < self.min_value:
            return False
        if self.max_value is not None and value > self.max_value:
            return False
        return True


class DataclassRule(ValidationRule):
    """
    Rule for validating dataclass fields against their type hints.

    Integers are accepted where a float is annotated, matching Python's
    numeric tower.

    Attributes:
        dataclass_type: The dataclass type to validate against
    """

    def __init__(self, dataclass_type: Type, error_message: str = ""):
        super().__init__(error_message or f"Invalid value for {dataclass_type.__name__}")
        self.dataclass_type = dataclass_type
        self.type_hints = get_type_hints(dataclass_type)

    def _validate_type(self, value: Any, expected_type: Any) -> bool:
        """Validate a value against its expected type."""
        origin = get_origin(expected_type)

        if expected_type is Any:
            return True

        # Optional[X] and Union[X, Y]
        if origin is Union:
            args = get_args(expected_type)
            if value is None:
                return type(None) in args
            return any(
                self._validate_type(value, arg) for arg in args if arg is not type(None)
            )

        if value is None:
            return False

        if expected_type is float:
            return isinstance(value, (int, float)) and not isinstance(value, bool)

        if isinstance(expected_type, type) and issubclass(expected_type, Enum):
            return isinstance(value, expected_type)

        if origin is list:
            if not isinstance(value, list):
                return False
            args = get_args(expected_type)
            if not args:
                return True
            return all(self._validate_type(item, args[0]) for item in value)
        elif origin is dict:
            if not isinstance(value, dict):
                return False
            args = get_args(expected_type)
            if len(args) != 2:
                return True
            key_type, val_type = args
            return all(
                self._validate_type(k, key_type) and self._validate_type(v, val_type)
                for k, v in value.items()
            )
        elif origin is tuple:
            if not isinstance(value, tuple):
                return False
            args = get_args(expected_type)
            if not args:
                return True
            if len(args) != len(value):
                return False
            return all(self._validate_type(val, typ) for val, typ in zip(value, args))
        elif origin is not None:
            try:
                return isinstance(value, origin)
            except TypeError:
                return True
        else:
            try:
                return isinstance(value, expected_type)
            except TypeError:
                # ClassVar, TypeVar and other special forms
                return True

    def invalid_fields(self, value: Any) -> List[str]:
        """Return the names of fields whose values do not match their hints."""
        return [
            field_name
            for field_name, field_type in self.type_hints.items()
            if not self._validate_type(getattr(value, field_name), field_type)
        ]

    def validate(self, value: Any) -> bool:
        if not isinstance(value, self.dataclass_type):
            return False
        return not self.invalid_fields(value)


def validate_dataclass(cls: Type[Any]) -> Type[Any]:
    """
    Decorator that adds runtime type checking to dataclass fields.

    The check wraps the generated ``__init__``, so it also runs for classes
    without a ``__post_init__``. The class's own ``__post_init__`` runs first
    so that value checks report their specific message before the generic
    type check.

    Example:
        >>> @validate_dataclass
        ... @dataclass
        ... class Example:
        ...     name: str
        ...     count: int
    """
    original_init = cls.__init__

    @wraps(original_init)
    def validated_init(self, *args, **kwargs):
        original_init(self, *args, **kwargs)

        validator = DataclassRule(cls)
        invalid = validator.invalid_fields(self)
        if invalid:
            raise TypeError(f"Invalid field types in {cls.__name__}: {', '.join(invalid)}")

    cls.__init__ = validated_init
    return cls
