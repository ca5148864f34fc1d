"""
Root Kavenegar client. Holds the API key and transport choice, builds endpoint
URLs and exposes every endpoint, grouped under sms/account/verify/call.
"""
import logging
from typing import Any

import requests

from kavenegar.account import AccountAPI
from kavenegar.call import CallAPI
from kavenegar.config import Settings
from kavenegar.enums import ApiLogs, Status
from kavenegar.handle_requests import RequestHandler
from kavenegar.sms import SmsAPI
from kavenegar.utils import parse_input
from kavenegar.verify import UNSET, VerifyAPI

logger = logging.getLogger(__name__)

API_PATH = "{scheme}://api.kavenegar.com/v1/{api_key}/{base}/{method}.json/"


class KavenegarAPI:
    """Root client that centralizes sub-APIs and holds shared HTTP/session state."""

    def __init__(
        self,
        api_key: str,
        insecure: bool = False,
        *,
        timeout: float = 30.0,
        per_second: int | None = None,
        per_minute: int | None = None,
        session: requests.Session | None = None,
    ):
        key = str(api_key).strip() if api_key is not None else ""
        if not key:
            logger.error("Kavenegar apiKey is empty")
            raise SystemExit("apiKey is empty")
        self._api_key = key
        self._insecure = bool(insecure)
        self.http = RequestHandler(key, timeout=timeout, per_second=per_second, per_minute=per_minute, session=session)
        self.sms = SmsAPI(self)
        self.account = AccountAPI(self)
        self.verify = VerifyAPI(self)
        self.call = CallAPI(self)

    @classmethod
    def from_env(cls, settings: Settings | None = None, **kwargs) -> "KavenegarAPI":
        settings = settings or Settings.from_env()
        return cls(
            settings.api_key,
            settings.insecure,
            timeout=settings.timeout,
            per_second=settings.per_second,
            per_minute=settings.per_minute,
            **kwargs,
        )

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def insecure(self) -> bool:
        return self._insecure

    def get_path(self, method: str, base: str = "sms") -> str:
        scheme = "http" if self._insecure else "https"
        return API_PATH.format(scheme=scheme, api_key=self._api_key, base=base, method=method)

    @staticmethod
    def parse_input(value: Any) -> Any:
        return parse_input(value)

    def close(self):
        self.http.close()

    def __enter__(self) -> "KavenegarAPI":
        return self

    def __exit__(self, *exc):
        self.close()

    # Flat endpoint surface; each call goes through the matching group API.

    def send(self, sender, receptor, message, date=None, type=None, localid=None, hide=0, tag=None) -> Any:
        return self.sms.send(sender, receptor, message, date, type, localid, hide, tag)

    def send_array(self, sender, receptor, message, date=None, type=None, local_message_id=None, hide=0, tag=None) -> Any:
        return self.sms.send_array(sender, receptor, message, date, type, local_message_id, hide, tag)

    def status(self, messageid) -> Any:
        return self.sms.status(messageid)

    def status_local_message_id(self, localid) -> Any:
        return self.sms.status_local_message_id(localid)

    def select(self, messageid) -> Any:
        return self.sms.select(messageid)

    def select_outbox(self, startdate, enddate, sender=None) -> Any:
        return self.sms.select_outbox(startdate, enddate, sender)

    def latest_outbox(self, pagesize=None, sender=None) -> Any:
        return self.sms.latest_outbox(pagesize, sender)

    def count_outbox(self, startdate, enddate, status=0) -> Any:
        return self.sms.count_outbox(startdate, enddate, status)

    def cancel(self, messageid) -> Any:
        return self.sms.cancel(messageid)

    def receive(self, linenumber, isread=0) -> Any:
        return self.sms.receive(linenumber, isread)

    def count_inbox(self, startdate, enddate=None, linenumber=None, isread=0) -> Any:
        return self.sms.count_inbox(startdate, enddate, linenumber, isread)

    def count_postalcode(self, *args, **kwargs):
        return self.sms.count_postalcode(*args, **kwargs)

    def send_by_postalcode(self, *args, **kwargs):
        return self.sms.send_by_postalcode(*args, **kwargs)

    def account_info(self) -> Any:
        return self.account.info()

    def account_config(
        self,
        apilogs=ApiLogs.JUST_FAULTS,
        dailyreport=Status.DISABLED,
        debug=Status.DISABLED,
        defaultsender=None,
        mincreditalarm=None,
        resendfailed=Status.ENABLED,
    ) -> Any:
        return self.account.config(apilogs, dailyreport, debug, defaultsender, mincreditalarm, resendfailed)

    def verify_lookup(
        self, receptor, token, token2, token3, template, type=None, token10=UNSET, token20=UNSET, *, tag=None
    ) -> Any:
        return self.verify.lookup(receptor, token, token2, token3, template, type, token10, token20, tag=tag)

    def call_make_tts(self, receptor, message, date=None, localid=None, tag=None) -> Any:
        return self.call.make_tts(receptor, message, date, localid, tag)
