"""
WhatsApp notifications for order changes.

Classes:
    SendResult: Outcome of one gateway call.
    WhatsAppGateway: Fonnte HTTP client, never raises.
    NotificationDispatcher: Runs deliveries on a thread pool.
    SynchronousDispatcher: Runs deliveries inline.

Delivery is best-effort: a failed or rejected message is logged and
discarded, it never changes the outcome of the order operation that
triggered it.

Example::

    gateway = WhatsAppGateway(token='secret')
    dispatcher = NotificationDispatcher(gateway, max_workers=2)
    dispatcher.submit('08123456789', 'Pesanan Anda status: dikirim')
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Optional

import requests

logger = logging.getLogger(__name__)

DEFAULT_API_URL = 'https://api.fonnte.com/send'


@dataclass
class SendResult:
    ok: bool
    error: Optional[str] = None
    data: dict = field(default_factory=dict)


class WhatsAppGateway:
    """
    Client for the Fonnte WhatsApp send API.

    Posts ``target`` and ``message`` as form data with the account token
    in the ``Authorization`` header. Every failure is reported through
    the returned :class:`SendResult`.
    """

    def __init__(self, token: str, api_url: str = DEFAULT_API_URL, timeout: int = 10,
                 session: Optional[requests.Session] = None):
        self.token = token
        self.api_url = api_url
        self.timeout = timeout
        self._session = session or requests.Session()

    @classmethod
    def from_settings(cls, settings) -> 'WhatsAppGateway':
        return cls(
            token=getattr(settings, 'FONNTE_TOKEN', ''),
            api_url=getattr(settings, 'FONNTE_API_URL', DEFAULT_API_URL),
            timeout=getattr(settings, 'FONNTE_TIMEOUT', 10),
        )

    def send(self, phone: str, message: str) -> SendResult:
        if not self.token:
            logger.warning("FONNTE_TOKEN is not set; WhatsApp message not sent")
            return SendResult(ok=False, error='Missing token')

        try:
            response = self._session.post(
                self.api_url,
                data={'target': phone, 'message': message},
                headers={'Authorization': self.token},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            return SendResult(ok=False, error=str(e) or 'Network error')

        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        if not response.ok:
            return SendResult(ok=False, error=data.get('detail') or 'Failed to send', data=data)
        return SendResult(ok=True, data=data)


class NotificationDispatcher:
    """Deliver messages in the background; errors are logged and dropped."""

    def __init__(self, gateway: WhatsAppGateway, max_workers: int = 2):
        self.gateway = gateway
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix='wa-notify',
        )

    def submit(self, phone: str, message: str) -> Any:
        """Queue one message. Returns the future for the delivery."""
        return self._executor.submit(self.deliver, phone, message)

    def deliver(self, phone: str, message: str) -> Optional[SendResult]:
        try:
            result = self.gateway.send(phone, message)
        except Exception:
            logger.exception("WhatsApp notification to %s crashed", phone)
            return None

        if result.ok:
            logger.info("WhatsApp notification sent to %s", phone)
        else:
            logger.warning("WhatsApp notification to %s failed: %s", phone, result.error)
        return result

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)


class SynchronousDispatcher(NotificationDispatcher):
    """Dispatcher that delivers inline on the calling thread."""

    def __init__(self, gateway: WhatsAppGateway):
        self.gateway = gateway

    def submit(self, phone: str, message: str) -> Optional[SendResult]:
        return self.deliver(phone, message)

    def shutdown(self, wait: bool = True) -> None:
        pass


def build_dispatcher(gateway: WhatsAppGateway, settings) -> NotificationDispatcher:
    """Pick the dispatcher flavour configured by ``NOTIFICATIONS_ASYNC``."""
    if getattr(settings, 'NOTIFICATIONS_ASYNC', True):
        return NotificationDispatcher(
            gateway,
            max_workers=getattr(settings, 'NOTIFICATION_WORKERS', 2),
        )
    return SynchronousDispatcher(gateway)
