"""
Exceptions raised by the Zillow client.
"""

from typing import Any


class ZillowError(Exception):
    """Base class of all Zillow client errors"""


class InvalidMethodError(ZillowError):
    """The requested operation is not in the allow-list"""

    def __init__(self, method: Any):
        self.method = method
        super().__init__(f"Invalid Zillow API method ({method})")


class MissingZwsIdError(ZillowError):
    """No ZWS-ID was configured for the client"""

    def __init__(self, message: str = "Missing ZWS-ID"):
        super().__init__(message)


class XmlParseError(ZillowError):
    """The response body is not well-formed XML.

    Attributes:
        client: The client that received the body, if known.
        exception: The exception raised by the XML parser.
        error: The last lxml error-log entry, or None.
    """

    def __init__(
        self,
        message: str,
        client: Any = None,
        exception: BaseException | None = None,
        error: Any = None,
    ):
        super().__init__(message)
        self.client = client
        self.exception = exception
        self.error = error


class FailedCallError(ZillowError):
    """Reported to the error logger when a call yields no usable response"""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(
            f"Failed Zillow call.  Status code: {status_code}, Response string: {body}"
        )
