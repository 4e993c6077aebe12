"""Unit tests for PicgoUploader."""

from unittest.mock import MagicMock

import pytest
import requests  # type: ignore

from picup.api.upload.PicgoUploader import PicgoUploader

pytestmark = pytest.mark.upload


def _response(body, status_error=None):
    response = MagicMock()
    response.json.return_value = body
    if status_error is not None:
        response.raise_for_status.side_effect = status_error
    return response


def test_posts_file_list_and_returns_urls(monkeypatch):
    post = MagicMock(return_value=_response({"success": True, "result": ["https://x/a.png", "https://x/b.png"]}))
    monkeypatch.setattr(requests, "post", post)

    urls = PicgoUploader(url="http://localhost:1/upload", timeout_secs=3).upload(["/a.png", "/b.png"])

    assert urls == ["https://x/a.png", "https://x/b.png"]
    post.assert_called_once_with("http://localhost:1/upload", json={"list": ["/a.png", "/b.png"]}, timeout=3)


def test_empty_input_makes_no_request(monkeypatch):
    post = MagicMock()
    monkeypatch.setattr(requests, "post", post)

    assert PicgoUploader().upload([]) == []
    post.assert_not_called()


@pytest.mark.parametrize(
    "body",
    [
        {"success": False, "message": "no uploader"},
        {"success": True, "result": ["https://x/a.png", "https://x/b.png"]},
        {"success": True},
        ["https://x/a.png"],
    ],
)
def test_unusable_responses_return_none(monkeypatch, body):
    monkeypatch.setattr(requests, "post", MagicMock(return_value=_response(body)))
    assert PicgoUploader().upload(["/a.png"]) is None


def test_connection_error_returns_none(monkeypatch):
    monkeypatch.setattr(requests, "post", MagicMock(side_effect=requests.ConnectionError("refused")))
    assert PicgoUploader().upload(["/a.png"]) is None


def test_http_error_returns_none(monkeypatch):
    response = _response({}, status_error=requests.HTTPError("500"))
    monkeypatch.setattr(requests, "post", MagicMock(return_value=response))
    assert PicgoUploader().upload(["/a.png"]) is None


def test_invalid_json_returns_none(monkeypatch):
    response = MagicMock()
    response.json.side_effect = ValueError("not json")
    monkeypatch.setattr(requests, "post", MagicMock(return_value=response))
    assert PicgoUploader().upload(["/a.png"]) is None
