import logging
from typing import Any
from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool
from api.dependencies import get_store
from api.models.registration import MessageResponse, RegistrationResponse
from services.exceptions import RegistrationValidationError, StoreError, ViolationKind
from services.registration_store import RegistrationStore
from services.validator import MISSING_FIELDS_MESSAGE, validate_registration

logger = logging.getLogger(__name__)

router = APIRouter(tags=["registrations"])

SUCCESS_MESSAGE = "Registration successful!"
STORE_ERROR_MESSAGE = "An error occurred while saving data. Please try again."


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=MessageResponse(message=message).model_dump())


@router.post(
    "/register",
    status_code=201,
    response_model=RegistrationResponse,
    responses={400: {"model": MessageResponse}, 500: {"model": MessageResponse}}
)
async def register_team(
    payload: Any = Body(None),
    store: RegistrationStore = Depends(get_store)
):
    """Зарегистрировать команду на событие"""
    logger.debug(f"Request received: {payload}")

    try:
        registration = validate_registration(payload)
    except RegistrationValidationError as e:
        logger.info(f"Registration rejected: {e}")
        if e.has(ViolationKind.MISSING_FIELD):
            return _message(400, MISSING_FIELDS_MESSAGE)
        return _message(400, e.violations[0].message)

    # Ответ отправляется только после подтверждения записи
    try:
        registration_id = await run_in_threadpool(store.create, registration)
    except StoreError:
        return _message(500, STORE_ERROR_MESSAGE)

    return RegistrationResponse(message=SUCCESS_MESSAGE, id=registration_id)
