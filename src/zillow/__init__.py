"""Zillow web service client."""

from zillow.api import ZillowClient, ZillowMethod, ZillowResponse

__version__ = "1.0.0"

__all__ = [
    "ZillowClient",
    "ZillowMethod",
    "ZillowResponse",
]
