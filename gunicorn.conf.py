"""Gunicorn config for the console."""
import os
import threading

bind = f"0.0.0.0:{os.environ.get('PORT', '8050')}"
# Caches live in the worker process; more workers would each hold their own copy
workers = 1


def post_worker_init(worker):
    """Fill the worker's caches from the store without blocking startup."""
    console = worker.wsgi.extensions["ramen_console"]

    def _warm():
        errors = console.reload_all()
        if errors:
            worker.log.warning("Cache warm-up incomplete: %s", "; ".join(errors))
        else:
            worker.log.info("Caches warmed from %s", type(console.store).__name__)

    t = threading.Thread(target=_warm, daemon=True)
    t.start()
    return t
