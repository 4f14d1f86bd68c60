"""
Normalized Zillow response.
"""

from typing import Any

from pydantic import BaseModel

SUCCESS_CODE = 0
INVALID_RESPONSE_CODE = 999
INVALID_RESPONSE_MESSAGE = "Invalid response received."


class ZillowResponse(BaseModel):
    """Result of one Zillow call"""

    method: str = ""  # operation name
    code: int = 0  # service status code, 999 when the client could not read it
    message: str | None = None  # service status text
    data: Any = None  # <response> substructure, only on success

    def is_successful(self) -> bool:
        return self.code == SUCCESS_CODE

    def mark_invalid(self) -> None:
        """Flag the response as unreadable."""
        self.code = INVALID_RESPONSE_CODE
        self.message = INVALID_RESPONSE_MESSAGE
