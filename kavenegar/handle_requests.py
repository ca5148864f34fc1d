"""
HTTP request handler for the Kavenegar gateway.
Posts form-encoded parameters and unwraps the {return, entries} envelope,
raising TransportError or ApiError on failure. Nothing is retried.
"""
import logging
from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry
from requests_ratelimiter import LimiterSession

from kavenegar import __version__
from kavenegar.exceptions import ApiError, TransportError
from kavenegar.models import Envelope
from kavenegar.utils import mask_api_key, wire_value

logger = logging.getLogger(__name__)

# cURL error numbers, so callers see the same codes the other Kavenegar SDKs report.
CURLE_URL_MALFORMAT = 3
CURLE_COULDNT_CONNECT = 7
CURLE_OPERATION_TIMEDOUT = 28
CURLE_PEER_FAILED_VERIFICATION = 60

HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/x-www-form-urlencoded; charset=utf-8",
    "Accept-Charset": "utf-8",
    "User-Agent": f"kavenegar-python/{__version__}",
}


def transport_error_code(exc: requests.RequestException) -> int:
    errno = getattr(exc, "errno", None)
    if isinstance(errno, int):
        return errno
    if isinstance(exc, requests.exceptions.SSLError):
        return CURLE_PEER_FAILED_VERIFICATION
    if isinstance(exc, requests.exceptions.Timeout):
        return CURLE_OPERATION_TIMEDOUT
    if isinstance(exc, requests.exceptions.ConnectionError):
        return CURLE_COULDNT_CONNECT
    if isinstance(exc, (requests.exceptions.InvalidURL, requests.exceptions.MissingSchema)):
        return CURLE_URL_MALFORMAT
    return 0


class RequestHandler:
    def __init__(
        self,
        api_key: str,
        timeout: float = 30.0,
        per_second: int | None = None,
        per_minute: int | None = None,
        session: requests.Session | None = None,
    ):
        self.api_key = api_key
        self.timeout = timeout
        if session is None:
            session = self._build_session(per_second, per_minute)
        self.session = session

    @staticmethod
    def _build_session(per_second: int | None, per_minute: int | None) -> requests.Session:
        if per_second or per_minute:
            limits = {}
            if per_second:
                limits["per_second"] = per_second
            if per_minute:
                limits["per_minute"] = per_minute
            session = LimiterSession(per_host=False, **limits)
        else:
            session = requests.Session()
        # Sending an SMS is not idempotent: never resend on our own.
        retry = Retry(total=0, connect=0, read=0, status=0, raise_on_status=False)
        adapter = HTTPAdapter(max_retries=retry)
        session.mount("https://", adapter)
        session.mount("http://", adapter)
        return session

    def close(self):
        self.session.close()

    @staticmethod
    def encode(params: dict | None) -> dict:
        """Drop None values and unwrap enums; requests does the urlencoding."""
        if not params:
            return {}
        return {k: wire_value(v) for k, v in params.items() if v is not None}

    def post_form(self, url: str, params: dict | None = None) -> Any:
        """
        POST params to url and return the envelope's 'entries'.
          - transport failure -> TransportError with a cURL-style code
          - non-JSON body -> TransportError with the HTTP status
          - return.status != 200 -> ApiError with the gateway's status/message
        """
        data = self.encode(params)
        safe_url = mask_api_key(url, self.api_key)
        logger.debug(f"POST {safe_url} fields={sorted(data)}")
        try:
            resp = self.session.post(url, data=data, headers=HEADERS, timeout=self.timeout, verify=True)
        except requests.RequestException as e:
            code = transport_error_code(e)
            logger.warning(f"Transport failure for {safe_url}: [{code}] {e}")
            raise TransportError(str(e), code) from e

        try:
            payload = resp.json()
        except ValueError:
            payload = None
        if payload is None:
            if resp.status_code != 200:
                logger.warning(f"HTTP {resp.status_code} without JSON body from {safe_url}")
                raise TransportError("Request have errors", resp.status_code)
            raise TransportError("Malformed response envelope", resp.status_code)

        try:
            envelope = Envelope.from_dict(payload)
        except (KeyError, TypeError, ValueError) as e:
            raise TransportError("Malformed response envelope", resp.status_code) from e

        if not envelope.ret.ok:
            logger.warning(f"Kavenegar error {envelope.ret.status} from {safe_url}: {envelope.ret.message}")
            raise ApiError(envelope.ret.message, envelope.ret.status)
        return envelope.entries
