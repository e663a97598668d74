"""Shared fakes and payload builders for the test suite"""

import hashlib
import hmac

from conventions_bot.core.exceptions import ServiceConnectionError


SECRET = "s3cret"
MODERATOR = "Zamiell"


class FakeGitHub:
    """Records issue calls instead of talking to GitHub"""

    def __init__(self, fail_comment=False, fail_close=False):
        self.fail_comment = fail_comment
        self.fail_close = fail_close
        self.comments = []
        self.closed = []

    def create_comment(self, owner, repo, number, body):
        if self.fail_comment:
            raise ServiceConnectionError("comment failed")
        self.comments.append((owner, repo, number, body))

    def close_issue(self, owner, repo, number):
        if self.fail_close:
            raise ServiceConnectionError("close failed")
        self.closed.append((owner, repo, number))

    @property
    def calls(self):
        return len(self.comments) + len(self.closed)


def make_payload(login=MODERATOR, body="Let's /accept this", number=42, **extra):
    payload = {
        "action": "created",
        "sender": {"login": login},
        "comment": {"body": body},
        "repository": {"owner": {"login": "hanabi"}, "name": "hanabi.github.io"},
        "issue": {"number": number},
    }
    payload.update(extra)
    return payload


def sign(body: bytes, secret: str = SECRET) -> str:
    return "sha256=" + hmac.new(secret.encode(), body, hashlib.sha256).hexdigest()
