"""
Call API module for text-to-speech voice calls.
"""
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from kavenegar.client import KavenegarAPI


class CallAPI:
    """Call endpoints."""

    def __init__(self, client: "KavenegarAPI"):
        self.client = client

    def make_tts(self, receptor, message, date=None, localid=None, tag=None) -> Any:
        """Place a call that reads message aloud (POST call/maketts)."""
        params = {
            "receptor": receptor,
            "message": message,
            "date": date,
            "localid": localid,
            "tag": tag,
        }
        return self.client.http.post_form(self.client.get_path("maketts", "call"), params)
