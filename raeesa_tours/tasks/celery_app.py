from urllib.parse import urlparse, urlunparse, parse_qs, urlencode

from celery import Celery
from celery.signals import setup_logging
from raeesa_tours.core.config import settings


def _redis_url_for_celery(url: str) -> str:
    """Celery requires ssl_cert_reqs for rediss:// (e.g. Upstash TLS)."""
    if not url or not url.strip().lower().startswith("rediss://"):
        return url
    parsed = urlparse(url)
    qs = parse_qs(parsed.query)
    if "ssl_cert_reqs" not in qs:
        qs["ssl_cert_reqs"] = ["CERT_NONE"]
        new_query = urlencode(qs, doseq=True)
        return urlunparse(parsed._replace(query=new_query))
    return url


_redis_url = _redis_url_for_celery(settings.REDIS_URL)

celery = Celery(
    "raeesa_tours",
    broker=_redis_url,
    backend=_redis_url,
    include=["raeesa_tours.tasks.jobs"],
)

celery.conf.timezone = "Asia/Kolkata"


@setup_logging.connect
def _configure_worker_logging(**kwargs):
    from raeesa_tours.core.logging_config import configure_logging
    configure_logging()


celery.conf.beat_schedule = {
    "process-email-queue-every-2-minutes": {
        "task": "raeesa_tours.tasks.jobs.process_email_queue",
        "schedule": 120.0,
        "kwargs": {"limit": 50},
    },
}
