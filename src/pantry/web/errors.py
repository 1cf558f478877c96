import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from pantry.lib.errors import NotFoundError, RecipeStoreError, ValidationError

logger = logging.getLogger(__name__)

STATUS_CODES: dict[type[RecipeStoreError], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ValidationError: status.HTTP_400_BAD_REQUEST,
}


async def recipe_store_error_handler(
    request: Request, exc: RecipeStoreError
) -> JSONResponse:
    status_code = STATUS_CODES.get(type(exc), status.HTTP_400_BAD_REQUEST)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(exc.as_dict()))


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.info(f"Rejected {request.method} {request.url.path}: {len(exc.errors())} error(s)")
    error = ValidationError(errors=exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder(error.as_dict()),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RecipeStoreError, recipe_store_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
