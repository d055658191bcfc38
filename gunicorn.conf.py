"""Gunicorn config for container deployment: gunicorn -c gunicorn.conf.py csv_explorer.main:app"""
import os

# Bind to the platform's PORT or default 8000
bind = f"0.0.0.0:{os.environ.get('PORT', '8000')}"

# The table lives in process memory, so each worker holds its own copy and
# its own filter/sort state. Keep a single worker unless the state is moved out.
worker_class = "uvicorn.workers.UvicornWorker"
workers = int(os.environ.get("WEB_CONCURRENCY", "1"))

timeout = 60
graceful_timeout = 30
keepalive = 65

# Logging
accesslog = "-"
errorlog = "-"
loglevel = os.environ.get("CSVX_LOG_LEVEL", "info").lower()
