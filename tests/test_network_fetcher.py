"""
Tests for NetworkFetcher - real HTTP downloads against the local content server

Tests cover:
- A 200 response delivers the body to on_success
- Non-2xx responses, refused connections and empty bodies become TransportError
- ContentRepository end to end over HTTP
"""

import socket
import time

import pytest
from PySide6.QtCore import QByteArray, QUrl
from PySide6.QtNetwork import QNetworkProxy, QNetworkReply
from PySide6.QtTest import QTest

from iquiz.core.errors import TransportError
from iquiz.core.remote_decoder import decode_payload
from iquiz.core.seed_content import build_seed_content
from iquiz.core.services.content_fetcher import NetworkFetcher
from iquiz.core.services.content_repository import ContentRepository
from iquiz.server.content_server import start_content_server


def free_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


def wait_until(predicate, timeout_ms=5000):
    deadline = time.monotonic() + timeout_ms / 1000
    while not predicate() and time.monotonic() < deadline:
        QTest.qWait(20)
    return predicate()


@pytest.fixture(scope="module")
def server_port():
    port = free_port()
    server, thread = start_content_server(port=port)
    deadline = time.monotonic() + 10
    while not server.started and thread.is_alive() and time.monotonic() < deadline:
        time.sleep(0.02)
    if not server.started:
        pytest.fail("content server did not start")
    yield port
    server.should_exit = True
    thread.join(timeout=5)


@pytest.fixture
def direct_connection():
    previous = QNetworkProxy.applicationProxy()
    QNetworkProxy.setApplicationProxy(QNetworkProxy(QNetworkProxy.ProxyType.NoProxy))
    yield
    QNetworkProxy.setApplicationProxy(previous)


@pytest.fixture
def network_fetcher(qapp, direct_connection):
    return NetworkFetcher()


class Outcome:
    """Collects whichever callback the fetcher invokes."""

    def __init__(self):
        self.payloads = []
        self.errors = []

    def done(self):
        return bool(self.payloads or self.errors)


def run_fetch(fetcher, url):
    outcome = Outcome()
    fetcher.fetch(QUrl(url), outcome.payloads.append, outcome.errors.append)
    assert wait_until(outcome.done), f"no callback for {url}"
    return outcome


class TestNetworkFetcher:

    def test_ok_response_delivers_payload(self, network_fetcher, server_port):
        outcome = run_fetch(network_fetcher, f"http://127.0.0.1:{server_port}/questions.json")

        assert outcome.errors == []
        decoded = decode_payload(outcome.payloads[0], strict=True)
        seed_topics, _ = build_seed_content()
        assert [t.title for t in decoded.topics] == [t.title for t in seed_topics]

    def test_not_found_is_transport_error(self, network_fetcher, server_port):
        outcome = run_fetch(network_fetcher, f"http://127.0.0.1:{server_port}/missing.json")

        assert outcome.payloads == []
        assert len(outcome.errors) == 1
        assert isinstance(outcome.errors[0], TransportError)

    def test_refused_connection_is_transport_error(self, network_fetcher):
        outcome = run_fetch(network_fetcher, f"http://127.0.0.1:{free_port()}/questions.json")

        assert outcome.payloads == []
        assert isinstance(outcome.errors[0], TransportError)
        assert str(outcome.errors[0])


class StubReply:
    def __init__(self, body=b"", status=200, error=QNetworkReply.NetworkError.NoError):
        self._body = body
        self._status = status
        self._error = error
        self.deleted = False

    def error(self):
        return self._error

    def errorString(self):
        return "stub failure"

    def attribute(self, _attribute):
        return self._status

    def readAll(self):
        return QByteArray(self._body)

    def deleteLater(self):
        self.deleted = True


class TestReplyHandling:

    def test_empty_body_is_transport_error(self):
        reply = StubReply(body=b"")
        payloads, errors = [], []

        NetworkFetcher._handle_finished(reply, payloads.append, errors.append)

        assert payloads == []
        assert str(errors[0]) == "No data received"
        assert reply.deleted

    def test_non_2xx_status_without_network_error(self):
        reply = StubReply(body=b"[]", status=304)
        payloads, errors = [], []

        NetworkFetcher._handle_finished(reply, payloads.append, errors.append)

        assert payloads == []
        assert "304" in str(errors[0])
        assert reply.deleted


class TestRepositoryOverHttp:

    def test_fetch_replaces_content(self, qapp, direct_connection, server_port, preferences):
        repository = ContentRepository(preferences=preferences)
        repository.configure(f"http://127.0.0.1:{server_port}/questions.json", 0)
        changes = []
        repository.topics_changed.connect(changes.append)

        assert repository.fetch_now()
        assert wait_until(lambda: changes or repository.get_error() is not None)

        assert repository.get_error() is None
        seed_topics, _ = build_seed_content()
        assert [t.title for t in repository.get_topics()] == [t.title for t in seed_topics]

    def test_server_error_fills_error_slot(self, qapp, direct_connection, server_port, preferences):
        repository = ContentRepository(preferences=preferences)
        repository.configure(f"http://127.0.0.1:{server_port}/nothing-here", 0)
        messages = []
        repository.error_changed.connect(messages.append)

        repository.fetch_now()

        assert wait_until(lambda: messages)
        assert isinstance(repository.get_error(), TransportError)
        assert repository.get_topics() == []
