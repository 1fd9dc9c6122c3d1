import json

import pytest

from pagecraft import create_app
from pagecraft.extensions import db


class FakeCompletionClient:
    """Scripted stand-in for the completion service."""

    def __init__(self):
        self.responses = []
        self.calls = []

    def queue(self, *responses):
        self.responses.extend(responses)
        return self

    def complete(self, user_prompt, system_prompt=None):
        self.calls.append({"user_prompt": user_prompt, "system_prompt": system_prompt})
        if not self.responses:
            raise AssertionError("completion service called unexpectedly")

        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        if isinstance(response, str):
            return response
        return json.dumps(response)


@pytest.fixture
def fake_llm():
    return FakeCompletionClient()


@pytest.fixture
def app(fake_llm):
    app = create_app("testing", completion_client=fake_llm)

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def page(client):
    resp = client.post("/api/v1/pages", json={
        "title": "Acme",
        "slug": "acme",
        "business_context": {"name": "Acme", "description": "Landing pages for bakeries"},
    })
    assert resp.status_code == 201, resp.get_json()
    return resp.get_json()
