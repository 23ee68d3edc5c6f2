from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from loom_data.models.builder import ModelBuilder

B = TypeVar("B", bound="type[ModelBuilder[Any]]")  # Preserve metadata when using register decorator


class _BuilderRegistry:
    """Singleton registry mapping each model class to its builder class."""

    _instance: _BuilderRegistry | None = None
    _initialized: bool = False

    def __new__(cls) -> _BuilderRegistry:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        if _BuilderRegistry._initialized:
            return
        self.builders: dict[type[Any], type[ModelBuilder[Any]]] = {}
        _BuilderRegistry._initialized = True

    def register(self, builder_class: B) -> B:
        """Register a builder class under the model it builds.

        Args:
            builder_class (ModelBuilder-like): The builder class to register.

        Returns:
            ModelBuilder-like: The registered builder class.
        """
        self.builders[builder_class.model] = builder_class
        return builder_class

    def get(self, model_class: type[Any]) -> type[ModelBuilder[Any]]:
        """Return the builder registered for a model class.

        Raises:
            KeyError: No builder was registered for the model.
        """
        try:
            return self.builders[model_class]
        except KeyError:
            raise KeyError(f"No builder registered for {model_class.__name__}.") from None


BUILDER_REGISTRY = _BuilderRegistry()
