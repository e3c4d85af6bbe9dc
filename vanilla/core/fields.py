"""By-name field access for value records."""

import logging
from typing import Any, Tuple, Type

from pydantic import BaseModel

from .models.value_record import ValueRecord

logger = logging.getLogger(__name__)


class UnknownFieldError(AttributeError):
    """Raised when a name does not match any field of the model."""

    def __init__(self, model_cls: Type[BaseModel], name: str):
        self.model_cls = model_cls
        self.name = name
        super().__init__(f"{model_cls.__name__} has no field {name!r}")


def field_names(model_cls: Type[BaseModel] = ValueRecord) -> Tuple[str, ...]:
    """Attribute names of ``model_cls`` in declaration order."""
    return tuple(model_cls.model_fields)


def resolve_field(model_cls: Type[BaseModel], name: str) -> str:
    """Check that ``name`` is a field of ``model_cls`` and return it.

    Args:
        model_cls: Model class that declares the field
        name: Field name as declared on the model (``startDate``)

    Returns:
        The attribute name

    Raises:
        UnknownFieldError: If no field matches ``name``
    """
    if name in model_cls.model_fields:
        return name

    logger.warning(f"Unknown field {name!r} for {model_cls.__name__}")
    raise UnknownFieldError(model_cls, name)


def get_field(record: BaseModel, name: str) -> Any:
    """Read a field by name; raises UnknownFieldError for unknown names."""
    return getattr(record, resolve_field(type(record), name))


def set_field(record: BaseModel, name: str, value: Any) -> None:
    """Assign a field by name; the value is type-checked by the model."""
    attribute = resolve_field(type(record), name)
    logger.debug(f"Setting {type(record).__name__}.{attribute} = {value!r}")
    setattr(record, attribute, value)
