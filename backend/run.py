import os
import socket

from config import Config
from storefront import create_app
from storefront.log_config import configure_logging

configure_logging(Config.LOG_LEVEL)

app = create_app()


def _can_bind(port: int) -> bool:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.settimeout(0.2)
        return sock.connect_ex(("127.0.0.1", port)) != 0


if __name__ == '__main__':
    preferred_port = int(os.getenv("PORT", "5000"))
    fallback_port = int(os.getenv("PORT_FALLBACK", "5001"))
    run_port = preferred_port

    if not _can_bind(preferred_port) and fallback_port != preferred_port and _can_bind(fallback_port):
        app.logger.warning("Port %s is in use, fallback to %s", preferred_port, fallback_port)
        run_port = fallback_port

    app.run(debug=Config.FLASK_ENV == 'development', host='0.0.0.0', port=run_port)
