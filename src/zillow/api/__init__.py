"""Zillow web service client"""

from zillow.api.base import DEFAULT_URL, ZillowClient
from zillow.api.environment import Environment, EnvironmentManager, EnvironmentType
from zillow.api.exceptions import (
    FailedCallError,
    InvalidMethodError,
    MissingZwsIdError,
    XmlParseError,
    ZillowError,
)
from zillow.api.methods import VALID_METHODS, ZillowMethod, validate_method
from zillow.api.response import (
    INVALID_RESPONSE_CODE,
    INVALID_RESPONSE_MESSAGE,
    SUCCESS_CODE,
    ZillowResponse,
)
from zillow.api.xml import parse_xml, xml_to_dict

__all__ = [
    # environment
    "EnvironmentType",
    "Environment",
    "EnvironmentManager",
    # exceptions
    "ZillowError",
    "InvalidMethodError",
    "MissingZwsIdError",
    "XmlParseError",
    "FailedCallError",
    # methods
    "ZillowMethod",
    "VALID_METHODS",
    "validate_method",
    # response
    "SUCCESS_CODE",
    "INVALID_RESPONSE_CODE",
    "INVALID_RESPONSE_MESSAGE",
    "ZillowResponse",
    # xml
    "parse_xml",
    "xml_to_dict",
    # base
    "DEFAULT_URL",
    "ZillowClient",
]
