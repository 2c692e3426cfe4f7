"""
NewsDesk HTTPS Server
=====================

Run with:
    newsdesk
or:
    python -m newsdesk.server

Reads TLS material from SSL_CERT_FILE / SSL_KEY_FILE and listens on HOST:PORT
(0.0.0.0:3007 by default).
"""

import socket
import ssl
import sys

from . import create_app
from .core.config import Config
from .core.errors import StartupFatal
from .core.logging_service import LoggingService, configure_logging


def load_ssl_context(cert_file, key_file):
    """Server TLS context from PEM files; unreadable material is fatal"""
    context = ssl.SSLContext(ssl.PROTOCOL_TLS_SERVER)
    try:
        context.load_cert_chain(certfile=cert_file, keyfile=key_file)
    except (OSError, ssl.SSLError) as e:
        raise StartupFatal(f"Cannot load TLS material ({cert_file}, {key_file}): {e}") from e
    return context


def get_external_ip():
    """First non-loopback IPv4 address of this host, used only for the banner"""
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        # No packet is sent; connecting a UDP socket just selects a route
        sock.connect(('8.8.8.8', 80))
        address = sock.getsockname()[0]
    except OSError:
        return '127.0.0.1'
    finally:
        sock.close()
    return address if not address.startswith('127.') else '127.0.0.1'


def print_banner(port):
    external_ip = get_external_ip()
    print("\n" + "=" * 60)
    print("NewsDesk HTTPS server running on all interfaces")
    print("=" * 60)
    print(f"Local:           https://localhost:{port}")
    print(f"LAN:             https://{external_ip}:{port}")
    print(f"Admin Panel:     https://{external_ip}:{port}/admin")
    print(f"API:             https://{external_ip}:{port}/api/news")
    print("=" * 60 + "\n")


def main():
    configure_logging(Config.LOG_LEVEL)
    app = create_app()

    try:
        context = load_ssl_context(app.config['SSL_CERT_FILE'], app.config['SSL_KEY_FILE'])
    except StartupFatal as e:
        LoggingService.critical('server', e.message)
        sys.exit(1)

    mode = 'production' if app.config['IS_PRODUCTION'] else 'development'
    LoggingService.info('server', f"Starting in {mode} mode", {
        'news_file': app.config['NEWS_FILE'],
        'upload_folder': app.config['UPLOAD_FOLDER'],
    })
    print_banner(app.config['PORT'])

    app.run(host=app.config['HOST'], port=app.config['PORT'],
            ssl_context=context, threaded=True)


if __name__ == '__main__':
    main()
