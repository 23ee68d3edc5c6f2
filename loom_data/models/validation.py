"""Predicates telling whether a value describes a valid model."""

import logging
from typing import Any

from loom_data.exceptions import ModelError
from loom_data.models.base_object import BaseObject

logger = logging.getLogger(__name__)


def is_valid_model(value: Any, model: type[BaseObject]) -> bool:
    """Tell whether `value` can be built into `model`.

    Invalid input is logged at error level and reported as `False`, never raised.

    Args:
        value (Any): A model instance or a mapping of field values.
        model (type[BaseObject]): The model to check against.

    Returns:
        bool: True when the registered builder accepts `value`.
    """
    if value is None:
        logger.error("invalid parameter: %s must be defined", model.__name__)
        return False
    try:
        model.builder(value).build()
    except (ModelError, TypeError) as err:
        logger.error("%s is not valid: %s", model.__name__, err)
        return False
    return True
