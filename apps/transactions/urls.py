from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'transactions'

router = DefaultRouter()
router.register(r'', views.TransactionViewSet, basename='transaction')

urlpatterns = [
    # GET    /api/transactions/              - List (type, date_from, date_to, search)
    # POST   /api/transactions/              - Create
    # GET    /api/transactions/summary/      - Dashboard figures
    # GET    /api/transactions/report/       - Period report
    # GET    /api/transactions/export/       - CSV download
    # GET/PUT/PATCH/DELETE /api/transactions/{id}/
    path('', include(router.urls)),
]
