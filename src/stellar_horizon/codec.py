"""JSON decoding into typed response models.

A ``JsonCodec`` is owned by each fetcher instead of living in a module-level
singleton, so tests and callers can swap decoding behaviour per client.
"""

import logging
from typing import Any, TypeVar, Union

from pydantic import TypeAdapter, ValidationError

from stellar_horizon.errors import ProtocolError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class JsonCodec:
    """Decodes JSON documents into a caller-selected shape.

    The shape is any type pydantic can validate: a response model, a
    parametrised ``Page[...]`` or a plain container.
    """

    def __init__(self, strict: bool = False):
        """Initialize the codec.

        Args:
            strict: Use pydantic strict mode (no type coercion)
        """
        self.strict = strict
        self._adapters: dict[Any, TypeAdapter] = {}

    def _adapter(self, shape: Any) -> TypeAdapter:
        adapter = self._adapters.get(shape)
        if adapter is None:
            adapter = TypeAdapter(shape)
            self._adapters[shape] = adapter
        return adapter

    def decode(self, data: Union[str, bytes], shape: type[T]) -> T:
        """Decode a JSON document.

        Args:
            data: Raw JSON text or bytes
            shape: Target type

        Returns:
            The decoded value

        Raises:
            ProtocolError: If the body is not valid JSON for ``shape``
        """
        try:
            return self._adapter(shape).validate_json(data, strict=self.strict)
        except ValidationError as e:
            logger.debug(f"Failed to decode {getattr(shape, '__name__', shape)}: {e}")
            raise ProtocolError(
                f"Response could not be decoded as {getattr(shape, '__name__', shape)}: "
                f"{e.error_count()} error(s)"
            ) from e
