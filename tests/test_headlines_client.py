"""Tests for the requests-based API client"""

import json

import pytest
import requests

from headlines_client import HeadlinesClient


class FakeSession:
    """Records requests and answers with queued responses"""

    def __init__(self):
        self.calls = []
        self.responses = []

    def queue(self, status_code, body=None, raise_exc=None):
        self.responses.append((status_code, body, raise_exc))

    def request(self, method, url, json=None, timeout=None):
        self.calls.append({"method": method, "url": url, "json": json, "timeout": timeout})
        status_code, body, raise_exc = self.responses.pop(0)
        if raise_exc is not None:
            raise raise_exc
        response = requests.Response()
        response.status_code = status_code
        response.url = url
        response.reason = "Test"
        response._content = b"" if body is None else _dumps(body)
        return response


def _dumps(body):
    return json.dumps(body).encode("utf-8")


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def api(session):
    return HeadlinesClient(base_url="http://news.test/", session=session)


def test_list_headlines(api, session):
    session.queue(200, [{"id": "1", "title": "A", "url": "#"}])

    headlines, error = api.list_headlines()

    assert error is None
    assert headlines == [{"id": "1", "title": "A", "url": "#"}]
    assert session.calls[0]["method"] == "GET"
    assert session.calls[0]["url"] == "http://news.test/api/news"


def test_create_omits_image_url_unless_given(api, session):
    session.queue(201, {"id": "10", "title": "X", "url": "#"})
    session.queue(201, {"id": "11", "title": "Y", "imageUrl": None, "url": "https://y"})

    api.create_headline("X")
    api.create_headline("Y", image_url=None, url="https://y")

    assert session.calls[0]["json"] == {"title": "X"}
    assert session.calls[1]["json"] == {"title": "Y", "imageUrl": None, "url": "https://y"}


def test_update_sends_only_given_fields(api, session):
    session.queue(200, {"id": "1", "title": "A", "imageUrl": "", "url": "#"})

    headline, error = api.update_headline("1", image_url="")

    assert error is None
    assert headline["imageUrl"] == ""
    assert session.calls[0]["method"] == "PUT"
    assert session.calls[0]["url"] == "http://news.test/api/news/1"
    assert session.calls[0]["json"] == {"imageUrl": ""}


def test_error_message_comes_from_server(api, session):
    session.queue(404, {"error": "Headline not found"})

    headline, error = api.delete_headline("nope")

    assert headline is None
    assert error == {"status_code": 404, "message": "Headline not found"}


def test_list_failure_returns_empty_list(api, session):
    session.queue(500, {"error": "Something went wrong!"})

    headlines, error = api.list_headlines()

    assert headlines == []
    assert error["status_code"] == 500


def test_transport_failure(api, session):
    session.queue(0, raise_exc=requests.ConnectionError("refused"))

    headline, error = api.get_random_headline()

    assert headline is None
    assert error == {"status_code": None, "message": "refused"}
