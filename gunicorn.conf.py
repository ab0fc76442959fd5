"""
Gunicorn configuration for the Discipline Table server.

Env vars that override defaults:
  PORT     — TCP port to bind
"""
import os

bind = f"0.0.0.0:{os.environ.get('PORT', '8000')}"

# The habit table lives in one process: one writer, one worker.
workers = 1

# Uvicorn's ASGI event loop inside Gunicorn's process manager.
worker_class = "uvicorn.workers.UvicornWorker"

keepalive = 5
timeout = 60

# stdout only
loglevel = "info"
accesslog = "-"
errorlog = "-"
access_log_format = '%(h)s "%(r)s" %(s)s %(b)sB %(D)sµs'

graceful_timeout = 30
