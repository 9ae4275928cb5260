import logging
from typing import Optional

from google import genai
from google.genai import types

from config import Settings
from errors import ProviderError
from slide_service import SlideProvider

# Mirrors models.Presentation; the model is asked to fill exactly this shape.
SLIDES_RESPONSE_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "slides": types.Schema(
            type=types.Type.ARRAY,
            description="El conjunto de diapositivas de la presentación.",
            items=types.Schema(
                type=types.Type.OBJECT,
                properties={
                    "title": types.Schema(
                        type=types.Type.STRING,
                        description="El título de la diapositiva.",
                    ),
                    "content": types.Schema(
                        type=types.Type.ARRAY,
                        description="Una lista de viñetas (bullet points) para el contenido de la diapositiva.",
                        items=types.Schema(type=types.Type.STRING),
                    ),
                    "speakerNotes": types.Schema(
                        type=types.Type.STRING,
                        description="Notas detalladas para el orador sobre el contenido de la diapositiva.",
                    ),
                },
                required=["title", "content", "speakerNotes"],
            ),
        ),
    },
    required=["slides"],
)


class GeminiSlideProvider(SlideProvider):
    """Thin async wrapper over the google-genai client for slide generation."""

    def __init__(self, client: genai.Client, model_name: str):
        self._client = client
        self.model_name = model_name

    @classmethod
    def from_settings(cls, settings: Settings) -> "GeminiSlideProvider":
        http_options: Optional[types.HttpOptions] = None
        if settings.timeout_ms:
            http_options = types.HttpOptions(timeout=settings.timeout_ms)
        client = genai.Client(api_key=settings.api_key, http_options=http_options)
        return cls(client, settings.model_name)

    async def generate(self, prompt: str) -> str:
        """Sends the prompt and returns the raw text the model produced.

        Every SDK failure is re-raised as ProviderError; no retry is attempted.
        """
        logging.info(f"Calling Gemini model '{self.model_name}' to generate slides...")
        try:
            response = await self._client.aio.models.generate_content(
                model=self.model_name,
                contents=prompt,
                config=types.GenerateContentConfig(
                    response_mime_type="application/json",
                    response_schema=SLIDES_RESPONSE_SCHEMA,
                ),
            )
        except Exception as e:
            raise ProviderError(str(e) or None, detail=repr(e)) from e

        text = response.text
        if not text:
            raise ProviderError(detail="Gemini returned an empty response.")
        return text
