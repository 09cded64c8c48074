"""WSGI entry point for the personal finance planner.

Run under a WSGI server (``gunicorn wsgi:app``) or directly for local use:
``python wsgi.py [--port PORT]``.
"""

import logging
import os
import sys

from finance_planner import create_app
from finance_planner.config import get_global_settings

settings = get_global_settings()
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = create_app(settings)


def _port_from_args(argv, default: int) -> int:
    if len(argv) > 2 and argv[1] == "--port":
        return int(argv[2])
    return default


if __name__ == "__main__":
    port = _port_from_args(sys.argv, int(os.environ.get("PORT", 5000)))
    app.run(debug=settings.app_env == "development", host="0.0.0.0", port=port)
