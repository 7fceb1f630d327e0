import io
import threading
from http.server import BaseHTTPRequestHandler, HTTPServer

import pytest

from puredns.sponsors import show_sponsors


class _Handler(BaseHTTPRequestHandler):
    def do_GET(self):
        if self.path == "/missing":
            status, body = 404, b"missing"
        else:
            status, body = 200, b"test"
        self.send_response(status)
        self.send_header("Content-Type", "text/plain; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, *args):
        pass


@pytest.fixture
def server_url():
    httpd = HTTPServer(("127.0.0.1", 0), _Handler)
    thread = threading.Thread(target=httpd.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{httpd.server_port}"
    httpd.shutdown()
    httpd.server_close()


def test_show_ok(server_url):
    out = io.StringIO()

    show_sponsors(server_url + "/", out)

    assert out.getvalue() == "test\n"


def test_show_error_status_still_prints_body(server_url):
    out = io.StringIO()

    show_sponsors(server_url + "/missing", out)

    assert out.getvalue() == "missing\n"


def test_show_invalid_url():
    out = io.StringIO()

    with pytest.raises(ValueError):
        show_sponsors("", out)

    assert out.getvalue() == ""