import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

# ===============================
# Domain Errors
# ===============================

class DomainError(Exception):
    def __init__(self, message: str, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.message = message
        self.status_code = status_code
        super().__init__(message)

class NotFoundError(DomainError):
    def __init__(self, message: str):
        super().__init__(message, status.HTTP_404_NOT_FOUND)

class InvalidIdentifier(DomainError):
    def __init__(self, message: str = "Invalid event id"):
        super().__init__(message)

class MalformedRequestBody(DomainError):
    def __init__(self, message: str = "Invalid request body"):
        super().__init__(message)

class DuplicateInRequest(DomainError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Spot {name} was requested more than once")

class SpotUnavailable(DomainError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Spot {name} is already reserved")

class SpotNotFound(NotFoundError):
    def __init__(self, event_id: int, name: str):
        self.event_id = event_id
        self.name = name
        super().__init__(f"Spot {name} not found for event {event_id}")

class EventNotFound(NotFoundError):
    def __init__(self, event_id: int):
        self.event_id = event_id
        super().__init__(f"Event {event_id} not found")

class StartupDataError(Exception):
    """The catalog snapshot could not be loaded. Fatal to startup."""

# ===============================
# Exception Handlers
# ===============================

async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.exception(f"Domain error on {request.method} {request.url.path}: {exc.message}")
    else:
        logger.error(f"Domain error on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Path parameter failures mean the id did not parse; anything else is the body.
    errors = exc.errors()
    if any(error.get("loc", ())[:1] == ("path",) for error in errors):
        error = InvalidIdentifier()
    else:
        error = MalformedRequestBody()
    logger.error(f"Validation error on {request.method} {request.url.path}: {errors}")
    return JSONResponse(status_code=error.status_code, content={"detail": error.message})

EXCEPTION_HANDLERS = {
    DomainError: domain_error_handler,
    RequestValidationError: validation_error_handler,
}

def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
