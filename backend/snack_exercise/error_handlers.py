"""Maps domain exceptions to JSON error responses."""
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from snack_exercise.exceptions import SnackExerciseError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Install the domain error handler on the FastAPI app."""

    @app.exception_handler(SnackExerciseError)
    async def snack_exercise_error_handler(request: Request, exc: SnackExerciseError):
        logger.warning("%s on %s %s: %s", exc.code, request.method, request.url.path, exc.message)
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.message, "code": exc.code},
        )
