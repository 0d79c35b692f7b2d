"""
Entry point.

    python app.py                     dev server on $PORT (default 8051)
    gunicorn app:server               production

Environment: EMP_GRID_CONFIG_ROOT (config dir), PORT, HOST, DEBUG=1,
EMP_GRID_LOG_FORMAT, EMP_GRID_LOG_LEVEL.
"""

import logging
import os
import socket

from emp_grid.logging_config import configure_logging
from emp_grid.ui.dash_app import create_dash_app

logger = logging.getLogger("emp_grid.app")

DEFAULT_PORT = 8051
PORT_SEARCH_SPAN = 20


def port_is_free(host: str, port: int) -> bool:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        try:
            sock.bind((host, port))
        except OSError:
            return False
    return True


def pick_port(host: str, preferred: int, span: int = PORT_SEARCH_SPAN) -> int:
    """First bindable port in [preferred, preferred + span); preferred if none is."""
    for port in range(preferred, preferred + span):
        if port_is_free(host, port):
            return port
    return preferred


configure_logging()

app = create_dash_app(os.getenv("EMP_GRID_CONFIG_ROOT", "config"))
server = app.server


def main() -> None:
    host = os.getenv("HOST", "0.0.0.0")
    preferred = int(os.getenv("PORT", str(DEFAULT_PORT)))
    port = pick_port(host, preferred)
    if port != preferred:
        logger.warning("Port in use, falling back", extra={"preferred_port": preferred, "port": port})

    app.run(host=host, port=port, debug=os.getenv("DEBUG", "0") == "1")


if __name__ == "__main__":
    main()
