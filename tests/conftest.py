import json

import pytest

from conventions_bot.app import create_app
from conventions_bot.config import Config

from tests.helpers import SECRET, FakeGitHub, sign


@pytest.fixture
def config():
    return Config(
        github_app_id=1,
        github_installation_id=2,
        github_private_key="unused",
        github_webhook_secret=SECRET,
    )


@pytest.fixture
def github():
    return FakeGitHub()


@pytest.fixture
def app(config, github):
    return create_app(config, github=github, TESTING=True, RATELIMIT_ENABLED=False)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def post_event(client):
    """POST a payload to the webhook route, signed unless told otherwise"""

    def _post(payload, signature=None, event="issue_comment", raw=None):
        body = raw if raw is not None else json.dumps(payload).encode()
        headers = {"Content-Type": "application/json", "X-GitHub-Delivery": "d-1"}
        if event is not None:
            headers["X-GitHub-Event"] = event
        headers["X-Hub-Signature-256"] = signature if signature is not None else sign(body)
        return client.post("/", data=body, headers=headers)

    return _post
