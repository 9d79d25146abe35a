from __future__ import annotations

import pytest


def test_share_sends_to_trimmed_recipients(client, fake_mailer):
    r = client.post("/share", json={"summary": "Notes", "emails": "a@x.com, b@y.com"})
    assert r.status_code == 200
    assert r.json() == {"message": "Email(s) sent successfully"}
    assert fake_mailer.sent == [("Notes", ["a@x.com", "b@y.com"])]


def test_share_keeps_empty_tokens(client, fake_mailer):
    r = client.post("/share", json={"summary": "Notes", "emails": "a@x.com,"})
    assert r.status_code == 200
    assert fake_mailer.sent == [("Notes", ["a@x.com", ""])]


@pytest.mark.parametrize(
    "body",
    [
        {"emails": "a@x.com"},
        {"summary": "Notes"},
        {"summary": "", "emails": "a@x.com"},
        {"summary": "Notes", "emails": ""},
    ],
)
def test_summary_and_emails_required(client, fake_mailer, body):
    r = client.post("/share", json=body)
    assert r.status_code == 400
    assert r.json() == {"error": "Summary and emails are required"}
    assert fake_mailer.sent == []


def test_delivery_failure_is_generic_500(client, failing_mailer):
    from backend.app.deps import get_mailer
    from backend.app.main import app

    app.dependency_overrides[get_mailer] = lambda: failing_mailer
    r = client.post("/share", json={"summary": "Notes", "emails": "a@x.com"})
    assert r.status_code == 500
    assert r.json() == {"error": "Failed to send email"}
    assert "535" not in r.text


def test_share_without_body_gets_field_message(client, fake_mailer):
    r = client.post("/share")
    assert r.status_code == 400
    assert r.json() == {"error": "Summary and emails are required"}
    assert fake_mailer.sent == []


@pytest.mark.parametrize("emails", ["a@x.com\nBcc: evil@x.com", "a@x.com\r\nCc: spy@y.com, c@z.com"])
def test_header_injection_in_recipients_is_delivery_failure(client, monkeypatch, emails):
    from backend.app.deps import get_mailer
    from backend.app.main import app
    from backend.app.services import mailer as mailer_mod

    opened = []
    monkeypatch.setattr(mailer_mod.smtplib, "SMTP_SSL", lambda host, port: opened.append((host, port)))
    app.dependency_overrides[get_mailer] = lambda: mailer_mod.Mailer(
        host="smtp.test",
        port=465,
        username="notes@example.com",
        password="pw",
        subject="AI Meeting Notes Summary",
    )

    r = client.post("/share", json={"summary": "Notes", "emails": emails})
    assert r.status_code == 500
    assert r.json() == {"error": "Failed to send email"}
    assert opened == []
