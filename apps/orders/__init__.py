"""
Orders App - Customer orders, shipment tracking and WhatsApp notices

Key Features:
- Order lifecycle: pending -> diproses -> dikirim -> selesai (free selection)
- Tracking number generated when an order is shipped without one
- Public "track my package" lookup by tracking number
- Best-effort WhatsApp notification after each create/update

Architecture:
- Models: Order, OrderStatus
- Services: order_workflow, tracking (see services/)
- Notifications: WhatsAppGateway, NotificationDispatcher
- Views: OrderViewSet, track_order, send_notification
"""
