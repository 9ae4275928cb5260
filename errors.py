# slide_generation_service/errors.py
from typing import Optional

DEFAULT_FAILURE_MESSAGE = "No se pudo generar la presentación."


class GenerationError(Exception):
    """Base class for every failure the generate endpoint reports to a caller."""

    status_code = 500
    default_message = DEFAULT_FAILURE_MESSAGE

    def __init__(self, message: Optional[str] = None, detail: Optional[str] = None):
        self.message = message or self.default_message
        # Server-side only, never sent to the caller
        self.detail = detail
        super().__init__(self.message)

    @property
    def kind(self) -> str:
        return type(self).__name__


class MethodNotAllowed(GenerationError):
    status_code = 405
    default_message = "Método no permitido"


class MissingText(GenerationError):
    status_code = 400
    default_message = "El contenido de texto es requerido."


class ConfigurationError(GenerationError):
    default_message = "Error de configuración en el servidor."


class ProviderError(GenerationError):
    """The upstream model call failed (network, auth, quota, schema rejection)."""


class MalformedResponse(GenerationError):
    """The model answered, but not with a payload shaped like a presentation."""

    def __init__(self, detail: Optional[str] = None):
        super().__init__(None, detail=detail)
