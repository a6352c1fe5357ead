"""Celery application for the formsite project."""

import os

from celery import Celery

# Set the default Django settings module for the 'celery' program
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "formsite_core.settings.dev")

app = Celery("formsite")

# Using a string here means the worker doesn't have to serialize
# the configuration object to child processes.
app.config_from_object("django.conf:settings", namespace="CELERY")

# Load task modules from all registered Django app configs.
app.autodiscover_tasks()

app.conf.update(
    task_time_limit=30 * 60,
    task_soft_time_limit=20 * 60,
    worker_max_tasks_per_child=1000,  # Prevent memory leaks
    worker_hijack_root_logger=False,  # Don't hijack root logger
    task_default_queue="default",
    result_expires=60 * 60 * 24,
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    enable_utc=True,
    task_acks_late=True,
    task_reject_on_worker_lost=True,
    worker_log_format="%(asctime)s [%(process)d] [%(levelname)s] %(message)s",
    worker_task_log_format=(
        "%(asctime)s [%(process)d] [%(levelname)s] "
        "[%(task_name)s(%(task_id)s)] %(message)s"
    ),
)
