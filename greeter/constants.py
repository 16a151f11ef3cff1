"""Fixed values shared by the app and the server entrypoint."""

from __future__ import annotations

GREETING = "Jay Shree Krishna! Welcome to the world of DevOps!..."

# Listen on every interface; only the port is configurable.
HOST = "0.0.0.0"
DEFAULT_PORT = 80
MAX_PORT = 65535
