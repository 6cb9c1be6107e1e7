import urllib.error
import urllib.request

import pytest

from pcfnozzle.healthcheck import start


@pytest.fixture
def server():
    srv = start(0)
    yield srv
    srv.shutdown()
    srv.server_close()


def url(srv, path):
    return f"http://127.0.0.1:{srv.server_address[1]}{path}"


def test_health_answers(server):
    with urllib.request.urlopen(url(server, "/health"), timeout=5) as resp:
        assert resp.status == 200
        assert resp.read() == b"I'm alive and well!"


def test_other_path_not_found(server):
    with pytest.raises(urllib.error.HTTPError) as info:
        urllib.request.urlopen(url(server, "/other"), timeout=5)
    assert info.value.code == 404


def test_port_as_string():
    srv = start("0")
    try:
        with urllib.request.urlopen(url(srv, "/health"), timeout=5) as resp:
            assert resp.read() == b"I'm alive and well!"
    finally:
        srv.shutdown()
        srv.server_close()