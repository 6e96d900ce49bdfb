"""
Base Model Components and Mixins

DynamoDBMixin is the single place where a pydantic model is turned into a
DynamoDB item and back. Todo attributes are plain strings, so no type
coercion happens on the way in or out: a task whose text is "true" stays the
string "true".
"""

import logging
from typing import Any, Dict

from pydantic import BaseModel, model_validator
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ValidationError

logger = logging.getLogger(__name__)


def _errors_by_field(error: PydanticValidationError) -> Dict[str, str]:
    return {
        ".".join(str(part) for part in err['loc']) or "__root__": err['msg']
        for err in error.errors()
    }


class DynamoDBMixin(BaseModel):
    """
    Mixin providing DynamoDB serialization and deserialization.

    - to_dynamodb_item: model -> item dictionary for put_item
    - from_dynamodb_item: item dictionary from get_item -> model
    - to_json: model -> JSON response body
    """

    def to_dynamodb_item(self) -> Dict[str, Any]:
        """
        Convert model to DynamoDB-compatible item.

        None values are dropped, DynamoDB does not store them.

        Raises:
            ValidationError: If the model cannot be dumped
        """
        try:
            return self.model_dump(exclude_none=True)
        except Exception as e:
            logger.error(f"Failed to convert {self.__class__.__name__} to DynamoDB item: {e}")
            raise ValidationError(f"Failed to convert {self.__class__.__name__} to DynamoDB item: {e}", original_error=e) from e

    @classmethod
    def from_dynamodb_item(cls, item: Dict[str, Any]):
        """
        Create model instance from DynamoDB item.

        Args:
            item: DynamoDB item dictionary

        Returns:
            Model instance

        Raises:
            ValidationError: If item data is invalid for the model
        """
        try:
            return cls.model_validate(item)
        except PydanticValidationError as e:
            logger.error(f"Failed to convert DynamoDB item to {cls.__name__}: {e}")
            raise ValidationError(
                f"Failed to convert DynamoDB item to {cls.__name__}",
                errors=_errors_by_field(e),
                original_error=e,
            ) from e

    def to_json(self) -> str:
        """
        Serialize the model for a response body.

        Raises:
            ValidationError: If the model cannot be serialized
        """
        try:
            return self.model_dump_json()
        except Exception as e:
            logger.error(f"Failed to serialize {self.__class__.__name__}: {e}")
            raise ValidationError(f"Failed to serialize {self.__class__.__name__}: {e}", original_error=e) from e


class JsonPayloadMixin(BaseModel):
    """
    Mixin for request payload models parsed from a raw JSON body.

    Bodies are read the way a lenient JSON-to-struct decoder reads them:
    - a literal ``null`` body is an empty object
    - field names match case-insensitively ("Task" sets task); when several
      spellings appear, the last one wins
    - a ``null`` value is skipped, so the field keeps its default
    """

    @model_validator(mode='before')
    @classmethod
    def _fold_payload_fields(cls, data: Any) -> Any:
        if data is None:
            return {}
        if not isinstance(data, dict):
            return data

        names = {name.lower(): name for name in cls.model_fields}
        folded: Dict[str, Any] = {}
        for key, value in data.items():
            name = names.get(key.lower())
            if name is None or value is None:
                continue
            folded[name] = value
        return folded

    @classmethod
    def from_json_body(cls, body: str):
        """
        Parse a raw request body.

        The body must be a JSON object (or null); unknown fields are dropped.

        Raises:
            ValidationError: If the body is not valid JSON or has the wrong shape
        """
        try:
            return cls.model_validate_json(body)
        except PydanticValidationError as e:
            errors = _errors_by_field(e)
            detail = "; ".join(f"{field}: {msg}" for field, msg in errors.items())
            raise ValidationError(detail, errors=errors, original_error=e) from e
