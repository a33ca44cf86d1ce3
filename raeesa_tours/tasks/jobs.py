from raeesa_tours.tasks.celery_app import celery
from raeesa_tours.tasks import worker_jobs


@celery.task(name="raeesa_tours.tasks.jobs.process_email_queue")
def process_email_queue(limit: int = 50):
    return worker_jobs.process_email_queue(limit=limit)
