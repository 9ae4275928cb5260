import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from pydantic import ValidationError

from config import Settings, load_settings
from errors import ConfigurationError, GenerationError, MalformedResponse, ProviderError
from models import ErrorMessage, Presentation
from prompts import build_slides_prompt


class SlideProvider(ABC):
    """Anything that turns a prompt into the model's raw text answer."""

    @abstractmethod
    async def generate(self, prompt: str) -> str:
        ...


ProviderFactory = Callable[[Settings], SlideProvider]


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of one pass through the pipeline: a presentation or an error."""

    stage: str
    presentation: Optional[Presentation] = None
    error: Optional[GenerationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, presentation: Presentation) -> "GenerationResult":
        return cls(stage="completed", presentation=presentation)

    @classmethod
    def failure(cls, stage: str, error: GenerationError) -> "GenerationResult":
        return cls(stage=stage, error=error)


def _strip_code_fence(text: str) -> str:
    if text.startswith("```json") and text.endswith("```"):
        return text[len("```json"): -len("```")].strip()
    if text.startswith("```") and text.endswith("```"):
        return text[len("```"): -len("```")].strip()
    return text


def parse_presentation(raw_text: str) -> Presentation:
    """Decodes the model output into a Presentation.

    Raises MalformedResponse when the text is not JSON, lacks a ``slides``
    array, or any slide deviates from title/content/speakerNotes.
    """
    cleaned = _strip_code_fence(raw_text.strip())
    logging.debug(f"Cleaned LLM output: {cleaned}")
    try:
        data: Any = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise MalformedResponse(f"Response is not valid JSON: {e}") from e

    if not isinstance(data, dict) or "slides" not in data:
        raise MalformedResponse("La IA devolvió un formato de datos inesperado.")

    try:
        return Presentation.model_validate(data)
    except ValidationError as e:
        raise MalformedResponse(f"Response does not match the slide schema: {e}") from e


class SlideGenerator:
    """Runs a validated text through prompt building, the model and shaping.

    Each stage either hands its value to the next or stops the run with a
    typed failure, so callers can tell a provider outage from bad output
    without inspecting exception messages.
    """

    def __init__(
        self,
        provider_factory: ProviderFactory,
        settings_loader: Callable[[], Settings] = load_settings,
    ):
        self._provider_factory = provider_factory
        self._settings_loader = settings_loader

    async def generate(self, text: str) -> GenerationResult:
        settings = self._settings_loader()
        if not settings.api_key:
            return GenerationResult.failure(
                "configuration",
                ConfigurationError(
                    detail="La variable de entorno API_KEY no está configurada en el servidor."
                ),
            )

        prompt = build_slides_prompt(text)
        logging.debug(f"Built prompt of {len(prompt)} characters.")

        try:
            provider = self._provider_factory(settings)
            raw_text = await provider.generate(prompt)
        except ProviderError as e:
            return GenerationResult.failure("provider", e)
        except Exception as e:
            return GenerationResult.failure("provider", ProviderError(str(e) or None, detail=repr(e)))
        logging.debug(f"Received raw response from LLM: {raw_text}")

        try:
            presentation = parse_presentation(raw_text)
        except MalformedResponse as e:
            return GenerationResult.failure("response", e)

        logging.info(f"Generated presentation with {len(presentation.slides)} slides.")
        return GenerationResult.success(presentation)


def error_body(error: GenerationError) -> Dict[str, str]:
    return ErrorMessage(message=error.message).model_dump()
