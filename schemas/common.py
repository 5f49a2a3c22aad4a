from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

# ------------------------------- Envelope ------------------------------- #

class ApiStatus(str, Enum):
    """Value of the ``status`` key in every response body"""
    SUCCESS = "success"
    ERROR = "error"
    VALIDATION_ERROR = "validation_error"
    NOT_FOUND = "not_found"
    SERVER_ERROR = "server_error"

class BaseResponse(BaseModel):
    """
    Envelope shared by every query endpoint: {status, message, data}.
    Subclasses narrow ``data`` to their payload model.
    """
    model_config = ConfigDict(use_enum_values=True)

    status: ApiStatus = ApiStatus.SUCCESS
    message: str
    data: Any = None

# ------------------------------- Errors ------------------------------- #

def error_response(
    message: str,
    status: ApiStatus = ApiStatus.ERROR,
    error_code: Optional[str] = None,
    data: Any = None,
) -> dict:
    """Body for a failed request; same envelope plus ``error_code``"""
    return {
        "status": status.value,
        "message": message,
        "data": data,
        "error_code": error_code,
    }
