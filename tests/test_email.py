"""Test the Brevo reminder email payload. No network calls are made."""
import pytest
import requests

from utils import email as email_util


class _FakeResponse:
    def __init__(self, status_code=201, text=""):
        self.status_code = status_code
        self.text = text


@pytest.fixture
def brevo(monkeypatch):
    calls = []

    def fake_post(url, headers=None, json=None, timeout=None):
        calls.append(json)
        return _FakeResponse()

    monkeypatch.setattr(email_util, "BREVO_API_KEY", "test-key")
    monkeypatch.setattr(email_util.requests, "post", fake_post)
    return calls


def test_message_lines_are_escaped(brevo):
    email_util.send_reminder_email(
        "jane@example.com", "Jane", "Rent <due>", "Pay <b>now</b>\n\nPaybill 123 & acc 101",
    )
    html = brevo[0]["htmlContent"]
    assert "<p>Pay &lt;b&gt;now&lt;/b&gt;</p>" in html
    assert "<p>Paybill 123 &amp; acc 101</p>" in html
    assert "<h2>Rent &lt;due&gt;</h2>" in html
    assert "<b>" not in html


def test_missing_api_key(monkeypatch):
    monkeypatch.setattr(email_util, "BREVO_API_KEY", None)
    with pytest.raises(email_util.EmailDeliveryError):
        email_util.send_reminder_email("jane@example.com", "Jane", "Subject", "Body")


def test_transport_error_is_wrapped(monkeypatch):
    def failing_post(*args, **kwargs):
        raise requests.ConnectionError("offline")

    monkeypatch.setattr(email_util, "BREVO_API_KEY", "test-key")
    monkeypatch.setattr(email_util.requests, "post", failing_post)
    with pytest.raises(email_util.EmailDeliveryError, match="Brevo request failed"):
        email_util.send_reminder_email("jane@example.com", "Jane", "Subject", "Body")
