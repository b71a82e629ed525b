"""Asynchronous download of quiz payloads."""

from __future__ import annotations

import logging
from typing import Callable, Protocol

from PySide6.QtCore import QObject, QUrl
from PySide6.QtNetwork import QNetworkAccessManager, QNetworkReply, QNetworkRequest

from iquiz.core.errors import ContentError, TransportError

logger = logging.getLogger(__name__)

SuccessCallback = Callable[[bytes], None]
FailureCallback = Callable[[ContentError], None]


class ContentFetcher(Protocol):
    """Issues one GET and reports the outcome through exactly one callback."""

    def fetch(self, url: QUrl, on_success: SuccessCallback, on_failure: FailureCallback) -> None:
        ...


class NetworkFetcher(QObject):
    """``QNetworkAccessManager`` backed fetcher.

    Replies finish on the thread that owns this object, which is the GUI
    thread in the application, so callbacks can touch UI state directly.
    """

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._manager = QNetworkAccessManager(self)

    def fetch(self, url: QUrl, on_success: SuccessCallback, on_failure: FailureCallback) -> None:
        request = QNetworkRequest(url)
        request.setRawHeader(b"Accept", b"application/json")
        reply = self._manager.get(request)
        reply.finished.connect(lambda: self._handle_finished(reply, on_success, on_failure))

    @staticmethod
    def _handle_finished(
        reply: QNetworkReply,
        on_success: SuccessCallback,
        on_failure: FailureCallback,
    ) -> None:
        try:
            if reply.error() != QNetworkReply.NetworkError.NoError:
                on_failure(TransportError(reply.errorString()))
                return
            status = reply.attribute(QNetworkRequest.Attribute.HttpStatusCodeAttribute)
            if status is not None and not 200 <= int(status) < 300:
                on_failure(TransportError(f"Server responded with HTTP status {status}."))
                return
            payload = reply.readAll().data()
            if not payload:
                on_failure(TransportError("No data received"))
                return
            on_success(bytes(payload))
        finally:
            reply.deleteLater()
