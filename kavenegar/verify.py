"""
Verify API module for template-based OTP lookups.
"""
from typing import TYPE_CHECKING, Any

from kavenegar.enums import VerifyType

if TYPE_CHECKING:
    from kavenegar.client import KavenegarAPI


class _Unset:
    """Marks an optional token the caller did not pass at all."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "UNSET"

    def __bool__(self):
        return False


UNSET: Any = _Unset()


class VerifyAPI:
    """Verify endpoints."""

    def __init__(self, client: "KavenegarAPI"):
        self.client = client

    def lookup(
        self,
        receptor: str,
        token: str,
        token2: str | None,
        token3: str | None,
        template: str,
        type: VerifyType | str | None = None,
        token10: Any = UNSET,
        token20: Any = UNSET,
        *,
        tag: str | None = None,
    ) -> Any:
        """
        Send a templated verification message (POST verify/lookup).
        token10/token20 are encoded only when the caller supplies them.
        """
        params = {
            "receptor": receptor,
            "token": token,
            "token2": token2,
            "token3": token3,
            "template": template,
            "type": type,
            "tag": tag,
        }
        if token10 is not UNSET:
            params["token10"] = token10
        if token20 is not UNSET:
            params["token20"] = token20
        return self.client.http.post_form(self.client.get_path("lookup", "verify"), params)
