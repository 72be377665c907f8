from django.apps import AppConfig
from django.conf import settings


class OrdersConfig(AppConfig):
    name = 'apps.orders'
    label = 'orders'
    verbose_name = 'Orders'

    _gateway = None
    _dispatcher = None

    def get_gateway(self):
        """WhatsApp gateway configured from settings, built on first use."""
        if self._gateway is None:
            from .notifications import WhatsAppGateway
            self._gateway = WhatsAppGateway.from_settings(settings)
        return self._gateway

    def get_dispatcher(self):
        """Notification dispatcher owned by this app, built on first use."""
        if self._dispatcher is None:
            from .notifications import build_dispatcher
            self._dispatcher = build_dispatcher(self.get_gateway(), settings)
        return self._dispatcher
