"""
Account API module for account information and settings.
"""
from typing import TYPE_CHECKING, Any

from kavenegar.enums import ApiLogs, Status

if TYPE_CHECKING:
    from kavenegar.client import KavenegarAPI


class AccountAPI:
    """Account endpoints."""

    def __init__(self, client: "KavenegarAPI"):
        self.client = client

    def info(self) -> Any:
        """Fetch remaining credit and account type (POST account/info)."""
        return self.client.http.post_form(self.client.get_path("info", "account"))

    def config(
        self,
        apilogs: ApiLogs | str = ApiLogs.JUST_FAULTS,
        dailyreport: Status | str = Status.DISABLED,
        debug: Status | str = Status.DISABLED,
        defaultsender: str | None = None,
        mincreditalarm: int | None = None,
        resendfailed: Status | str = Status.ENABLED,
    ) -> Any:
        """
        Update account settings (POST account/config).
        In debug mode the gateway accepts messages without delivering them.
        """
        params = {
            "apilogs": apilogs,
            "dailyreport": dailyreport,
            "debug": debug,
            "defaultsender": defaultsender,
            "mincreditalarm": mincreditalarm,
            "resendfailed": resendfailed,
        }
        return self.client.http.post_form(self.client.get_path("config", "account"), params)
