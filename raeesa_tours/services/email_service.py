from datetime import datetime, timezone
import html
import logging
import smtplib
from email.message import EmailMessage
from sqlalchemy.orm import Session
import uuid
import requests

from raeesa_tours.core.config import settings
from raeesa_tours.models.contact_message import ContactMessage
from raeesa_tours.models.email_log import EmailLog

logger = logging.getLogger(__name__)


def queue_email(db: Session, to_email: str, subject: str, body: str, related_contact_id: str = "",
                content_type: str = "text/html") -> str:
    """Queue and attempt immediate send. Body is stored so the worker can retry on failure."""
    eid = str(uuid.uuid4())
    db.add(
        EmailLog(
            id=eid,
            to_email=to_email,
            subject=subject,
            body=body,
            content_type=content_type,
            status="queued",
            related_contact_id=related_contact_id,
        )
    )
    db.commit()

    log = db.get(EmailLog, eid)
    try:
        send_email(to_email, subject, body, content_type)
        log.status = "sent"
        log.sent_at = datetime.now(timezone.utc)
    except Exception:
        # Worker will retry via process_email_queue
        logger.exception("sending %r to %s failed", subject, to_email)
        log.status = "failed"
    db.commit()
    return eid


def send_email(to_email: str, subject: str, body: str, content_type: str = "text/html"):
    """Send email via SendGrid if configured, otherwise SMTP (MailHog recommended for local)."""

    if settings.SENDGRID_API_KEY:
        _send_via_sendgrid(to_email, subject, body, content_type)
        return

    msg = EmailMessage()
    msg["From"] = settings.SMTP_FROM
    msg["To"] = to_email
    msg["Subject"] = subject
    if content_type == "text/html":
        msg.set_content(body, subtype="html")
    else:
        msg.set_content(body)

    with smtplib.SMTP(settings.SMTP_HOST, settings.SMTP_PORT, timeout=10) as smtp:
        if settings.SMTP_USERNAME:
            smtp.login(settings.SMTP_USERNAME, settings.SMTP_PASSWORD)
        smtp.send_message(msg)


def _send_via_sendgrid(to_email: str, subject: str, body: str, content_type: str):
    from_email = settings.SENDGRID_FROM_EMAIL or settings.SMTP_FROM
    payload = {
        "personalizations": [{"to": [{"email": to_email}]}],
        "from": {"email": from_email},
        "subject": subject,
        "content": [{"type": content_type, "value": body}],
    }
    r = requests.post(
        "https://api.sendgrid.com/v3/mail/send",
        json=payload,
        headers={"Authorization": f"Bearer {settings.SENDGRID_API_KEY}"},
        timeout=20,
    )
    if r.status_code >= 400:
        raise RuntimeError(f"SendGrid error {r.status_code}: {r.text}")


def notify_contact_received(db: Session, contact: ContactMessage) -> list[str]:
    """Admin notification plus an auto-reply to the sender. Returns the email log ids."""
    if not settings.SEND_CONTACT_EMAILS:
        return []
    name = html.escape(contact.name)
    subject = html.escape(contact.subject)
    message = html.escape(contact.message)
    submitted = contact.created_at.strftime("%d/%m/%Y %H:%M") if contact.created_at else ""

    ids = []
    if settings.ADMIN_EMAIL:
        ids.append(queue_email(
            db,
            settings.ADMIN_EMAIL,
            f"New Contact Form Submission: {contact.subject}",
            f"<h2>New Contact Form Submission</h2>"
            f"<p><strong>From:</strong> {name} ({html.escape(contact.email)})</p>"
            f"<p><strong>Subject:</strong> {subject}</p>"
            f"<p><strong>Message:</strong></p><p>{message}</p>"
            f"<p><strong>Submitted at:</strong> {submitted}</p>"
            f"<hr><p>Login to the admin dashboard to respond to this message.</p>",
            related_contact_id=contact.id,
        ))
    ids.append(queue_email(
        db,
        contact.email,
        "Thank you for contacting Raeesa Tours",
        f"<h2>Thank you for reaching out!</h2>"
        f"<p>Dear {name},</p>"
        f"<p>We have received your message regarding \"{subject}\". Our team will review it "
        f"and get back to you as soon as possible.</p>"
        f"<p>For your reference, here's a copy of your message:</p>"
        f"<blockquote>{message}</blockquote>"
        f"<p>Best regards,<br>Raeesa Tours Team</p>",
        related_contact_id=contact.id,
    ))
    return ids


def process_pending_emails(db: Session, limit: int = 50) -> dict:
    """Process up to `limit` queued or failed emails; retry send and update status. Returns counts."""
    pending = (
        db.query(EmailLog)
        .filter(EmailLog.status.in_(["queued", "failed"]), EmailLog.body.isnot(None), EmailLog.body != "")
        .order_by(EmailLog.created_at.asc())
        .limit(limit)
        .all()
    )
    sent, failed = 0, 0
    for log in pending:
        try:
            send_email(log.to_email, log.subject, log.body, log.content_type)
            log.status = "sent"
            log.sent_at = datetime.now(timezone.utc)
            sent += 1
        except Exception:
            logger.warning("retry of email %s to %s failed", log.id, log.to_email)
            log.status = "failed"
            failed += 1
    if pending:
        db.commit()
    return {"processed": len(pending), "sent": sent, "failed": failed}
