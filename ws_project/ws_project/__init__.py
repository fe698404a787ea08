# Celery instance is defined in ws_project/celery.py
from .celery import celery_app

__all__ = ("celery_app",)

""" Workers run with "celery -A ws_project worker -l info":
    importing ws_project exposes celery_app to the worker. """
