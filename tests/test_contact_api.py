from raeesa_tours.models.email_log import EmailLog
from raeesa_tours.services import email_service
from raeesa_tours.tasks.worker_jobs import process_email_queue

MESSAGE = {
    "name": "Zoya Mir",
    "email": "zoya@example.com",
    "subject": "Houseboat availability",
    "message": "Do you have houseboats free in the first week of June?",
}


def smtp_down(*args, **kwargs):
    raise OSError("smtp down")


def test_contact_submission_stores_and_notifies(client, sent_emails):
    r = client.post("/api/contact", json=MESSAGE)
    assert r.status_code == 201
    body = r.json()
    assert body["success"] is True
    assert body["data"]["status"] == "new"
    assert body["data"]["adminNotes"] == ""

    recipients = sorted(e["to"] for e in sent_emails)
    assert recipients == ["owner@raeesatours.com", "zoya@example.com"]
    admin_mail = next(e for e in sent_emails if e["to"] == "owner@raeesatours.com")
    assert admin_mail["subject"] == "New Contact Form Submission: Houseboat availability"


def test_contact_missing_field(client):
    r = client.post("/api/contact", json={**MESSAGE, "subject": "  "})
    assert r.status_code == 400
    assert r.json() == {"success": False, "message": "Please fill in all required fields"}


def test_email_failure_does_not_fail_submission(client, db, monkeypatch):
    monkeypatch.setattr(email_service, "send_email", smtp_down)
    r = client.post("/api/contact", json=MESSAGE)
    assert r.status_code == 201
    statuses = {log.status for log in db.query(EmailLog).all()}
    assert statuses == {"failed"}


def test_worker_retries_failed_emails(client, db, monkeypatch, sent_emails):
    monkeypatch.setattr(email_service, "send_email", smtp_down)
    client.post("/api/contact", json=MESSAGE)

    monkeypatch.setattr(email_service, "send_email",
                        lambda to_email, subject, body, content_type="text/html": sent_emails.append(to_email))
    result = process_email_queue(limit=10, db=db)
    assert result == {"processed": 2, "sent": 2, "failed": 0}
    db.expire_all()
    assert {log.status for log in db.query(EmailLog).all()} == {"sent"}


def test_admin_contact_flow(client, auth_headers):
    cid = client.post("/api/contact", json=MESSAGE).json()["data"]["_id"]
    client.post("/api/contact", json={**MESSAGE, "subject": "Second"})

    assert client.get("/api/contact").status_code == 401

    listing = client.get("/api/contact", headers=auth_headers).json()
    assert listing["pagination"]["total"] == 2

    r = client.patch(f"/api/contact/{cid}", json={"status": "replied", "adminNotes": "Called back"}, headers=auth_headers)
    assert r.status_code == 200
    assert r.json()["data"]["status"] == "replied"
    assert r.json()["data"]["adminNotes"] == "Called back"

    replied = client.get("/api/contact", params={"status": "replied"}, headers=auth_headers).json()
    assert [c["_id"] for c in replied["data"]] == [cid]

    bad = client.patch(f"/api/contact/{cid}", json={"status": "archived"}, headers=auth_headers)
    assert bad.status_code == 400

    assert client.delete(f"/api/contact/{cid}", headers=auth_headers).json()["success"] is True
    assert client.delete(f"/api/contact/{cid}", headers=auth_headers).status_code == 404
    assert client.patch(f"/api/contact/{cid}", json={"status": "read"}, headers=auth_headers).status_code == 404
