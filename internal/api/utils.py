"""
API utility functions for response formatting.
"""

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel


def json_response(
    status_code: int, body: BaseModel, exclude_none: bool = False
) -> JSONResponse:
    """
    Render a response model with an explicit status code.

    Args:
        status_code: HTTP status code
        body: Response model
        exclude_none: Drop top-level fields that are None

    Returns:
        JSONResponse carrying the model's fields
    """
    content = jsonable_encoder(body)
    if exclude_none:
        content = {name: value for name, value in content.items() if value is not None}
    return JSONResponse(status_code=status_code, content=content)
