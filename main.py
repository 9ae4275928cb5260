import os
from typing import Callable, Optional

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn

# Local imports
from config import Settings, load_settings
from errors import DEFAULT_FAILURE_MESSAGE, ConfigurationError, GenerationError, MethodNotAllowed
from gemini_client import GeminiSlideProvider
from models import ErrorMessage, Presentation
from slide_service import GenerationResult, ProviderFactory, SlideGenerator, error_body
from validation import extract_text, validate_method


# Logging configuration
import logging
logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO").upper())

GENERATE_PATH = "/api/generate"
# Common verbs reach the handler; anything else is answered by the 405 handler below.
ROUTED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]


def _log_failure(result: GenerationResult) -> None:
    error = result.error
    if isinstance(error, ConfigurationError):
        logging.error(error.detail)
        return
    logging.error(
        f"Slide generation failed at stage '{result.stage}' ({error.kind}): "
        f"{error.detail or error.message}"
    )


def create_app(
    provider_factory: ProviderFactory = GeminiSlideProvider.from_settings,
    settings_loader: Callable[[], Settings] = load_settings,
    generator: Optional[SlideGenerator] = None,
) -> FastAPI:
    app = FastAPI(
        title="Slide Generation Service",
        description="An API that turns a block of text into presentation slides using Gemini.",
        version="1.0.0",
    )
    app.state.generator = generator or SlideGenerator(provider_factory, settings_loader)

    @app.exception_handler(StarletteHTTPException)
    async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
        # Verbs outside ROUTED_METHODS are rejected by the router before the endpoint runs.
        if exc.status_code == 405 and request.url.path == GENERATE_PATH:
            error = MethodNotAllowed()
            logging.info(f"Rejected {request.method} {GENERATE_PATH}: {error.kind}")
            return JSONResponse(error_body(error), status_code=error.status_code)
        return await http_exception_handler(request, exc)

    # --- Main Endpoint --- #
    @app.api_route(
        GENERATE_PATH,
        methods=ROUTED_METHODS,
        summary="Generate slides from a text",
        response_model=Presentation,
        responses={
            400: {"model": ErrorMessage},
            405: {"model": ErrorMessage},
            500: {"model": ErrorMessage},
        },
    )
    async def generate_endpoint(request: Request):
        """Receives ``{"text": ...}`` and returns ``{"slides": [...]}``."""
        try:
            validate_method(request.method)
            text = extract_text(await request.body())
        except GenerationError as e:
            logging.info(f"Rejected {request.method} {GENERATE_PATH}: {e.kind}")
            return JSONResponse(error_body(e), status_code=e.status_code)

        try:
            result = await request.app.state.generator.generate(text)
        except Exception as e:
            logging.error(f"An error occurred in the generation process: {e}", exc_info=True)
            body = ErrorMessage(message=str(e) or DEFAULT_FAILURE_MESSAGE)
            return JSONResponse(body.model_dump(), status_code=500)

        if not result.ok:
            _log_failure(result)
            return JSONResponse(error_body(result.error), status_code=result.error.status_code)

        return JSONResponse(result.presentation.model_dump(), status_code=200)

    @app.get("/")
    async def root():
        return {"message": "Slide Generation API is running."}

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=int(os.environ.get("PORT", "8080")))
