"""
Zillow API client.

Builds the request for an operation, sends it and normalizes the XML answer
into a ZillowResponse. Remote failures never raise: they come back as a
response with code 999.
"""

from typing import Any

import httpx

from zillow.api.environment import EnvironmentManager
from zillow.api.exceptions import FailedCallError, MissingZwsIdError, XmlParseError
from zillow.api.methods import ZillowMethod, validate_method
from zillow.api.response import ZillowResponse
from zillow.api.xml import parse_xml, xml_to_dict
from zillow.util.log import get_logger

DEFAULT_URL = "http://www.zillow.com/webservice/"
ZWS_ID_PARAM = "zws-id"


class ZillowClient:
    """Zillow web service client"""

    def __init__(
        self,
        zws_id: str | None = None,
        url: str | None = None,
        client: httpx.Client | None = None,
    ):
        # Explicit arguments win over the current environment
        self._zws_id = zws_id if zws_id is not None else EnvironmentManager.get_zws_id()
        self._url = url or EnvironmentManager.get_url_prefix() or DEFAULT_URL
        self._client = client
        self._owns_client = client is None
        self._logger = None
        self._log = get_logger("ZillowClient")

    @property
    def url(self) -> str:
        return self._url

    @property
    def zws_id(self) -> str:
        return self._zws_id

    @staticmethod
    def _redact_params(params: dict[str, Any]) -> dict[str, Any]:
        return {
            key: "***" if key == ZWS_ID_PARAM else value
            for key, value in params.items()
        }

    @staticmethod
    def _truncate(value: str, *, limit: int = 2000) -> str:
        if len(value) <= limit:
            return value
        return value[:limit] + "…(truncated)"

    @property
    def client(self) -> httpx.Client:
        """Lazily created HTTP client: no redirects, cookies kept between calls"""
        if self._client is None:
            self._client = httpx.Client(follow_redirects=False, cookies=httpx.Cookies())
            self._owns_client = True
        return self._client

    def set_client(self, client: httpx.Client) -> "ZillowClient":
        """Use ``client`` for all further requests. The caller keeps ownership."""
        self.close()
        self._client = client
        self._owns_client = False
        return self

    def set_logger(self, logger: Any) -> "ZillowClient":
        """
        Attach a loguru logger that receives failed calls.

        Non-200 answers and malformed XML are reported at ERROR level with a
        FailedCallError attached; a well-formed document without a <message>
        element is not reported.
        """
        self._logger = logger
        return self

    def execute(
        self, name: str | ZillowMethod, params: dict[str, Any] | None = None
    ) -> ZillowResponse:
        """
        Call a Zillow operation.

        Args:
            name: Operation name, e.g. "GetZestimate"
            params: Query parameters of the operation, e.g. {"zpid": 48749425}

        Returns:
            ZillowResponse: always returned, failures carry code 999

        Raises:
            InvalidMethodError: ``name`` is not a supported operation
            MissingZwsIdError: no ZWS-ID is configured
            httpx.RequestError: the request could not be sent
        """
        method = validate_method(name)
        return self._do_request(method, params or {})

    def _do_request(self, method: str, params: dict[str, Any]) -> ZillowResponse:
        if not self._zws_id:
            raise MissingZwsIdError()

        url = f"{self._url}{method}.htm"
        query = {ZWS_ID_PARAM: self._zws_id, **params}

        self._log.opt(lazy=True).debug(
            "Sending request: GET {url} params={params}",
            url=lambda: url,
            params=lambda: self._redact_params(query),
        )

        raw_response = self.client.get(url, params=query)

        # Body decoding only happens when a DEBUG sink is attached
        self._log.opt(lazy=True).debug(
            "Received response: {status_code} content-type={content_type} body={body}",
            status_code=lambda: raw_response.status_code,
            content_type=lambda: raw_response.headers.get("content-type"),
            body=lambda: self._truncate(raw_response.text),
        )

        return self._parse_response(method, raw_response)

    def _parse_response(self, method: str, raw_response: httpx.Response) -> ZillowResponse:
        response = ZillowResponse()

        if raw_response.status_code != 200:
            self._fail(response, raw_response, log_error=True)
            return response

        try:
            document = xml_to_dict(parse_xml(raw_response.content, client=self))
        except XmlParseError as e:
            self._fail(response, raw_response, log_error=True, cause=e)
            return response

        response.method = method

        status = document.get("message")
        code = self._read_code(status)
        if code is None:
            self._fail(response, raw_response)
        else:
            response.code = code
            response.message = status.get("text")

        if response.is_successful() and "response" in document:
            response.data = document["response"]

        return response

    @staticmethod
    def _read_code(status: Any) -> int | None:
        """Integer code of the <message> block, None when it has none."""
        # A missing or non-numeric code is not read as 0 (success); the
        # response is reported as unreadable instead.
        if not isinstance(status, dict):
            return None
        try:
            return int(status.get("code"))
        except (TypeError, ValueError):
            return None

    def _fail(
        self,
        response: ZillowResponse,
        raw_response: httpx.Response,
        *,
        log_error: bool = False,
        cause: Exception | None = None,
    ) -> None:
        response.mark_invalid()

        if log_error and self._logger is not None:
            error = FailedCallError(raw_response.status_code, raw_response.text)
            error.__cause__ = cause
            self._logger.opt(exception=error).error(str(error))

    def close(self) -> None:
        """Close the HTTP client if this instance created it"""
        if self._client and self._owns_client:
            self._client.close()
        self._client = None
        self._owns_client = True

    def __enter__(self) -> "ZillowClient":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
