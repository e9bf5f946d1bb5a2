# booking_api/worker.py
"""
ARQ worker for jobs queued by the API.

Run with: arq booking_api.worker.WorkerSettings
"""

import logging
import os

from .config import LOG_LEVEL
from .jobs.cancellation_mail import send_cancellation_mail
from .queue import get_redis_settings

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)


class WorkerSettings:
    """ARQ Worker Settings"""

    functions = [
        send_cancellation_mail,
    ]
    redis_settings = get_redis_settings()

    max_jobs = int(os.getenv("ARQ_MAX_JOBS", "10"))
    job_timeout = int(os.getenv("ARQ_JOB_TIMEOUT", "60"))
    keep_result = int(os.getenv("ARQ_KEEP_RESULT", "3600"))

    # Retry failed jobs (SMTP hiccups)
    max_tries = 3
