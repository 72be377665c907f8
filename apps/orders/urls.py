from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'orders'

router = DefaultRouter()
router.register(r'', views.OrderViewSet, basename='order')

urlpatterns = [
    # Public tracking (no auth)
    # GET    /api/orders/track/{tracking_number}/
    path('track/<str:tracking_number>/', views.track_order, name='track'),

    # Order ViewSet routes
    # GET    /api/orders/            - List orders
    # POST   /api/orders/            - Create order
    # GET    /api/orders/{id}/       - Order details
    # PUT    /api/orders/{id}/       - Update order
    # PATCH  /api/orders/{id}/       - Partial update
    # DELETE /api/orders/{id}/       - Delete order
    path('', include(router.urls)),
]
