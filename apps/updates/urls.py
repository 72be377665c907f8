from django.urls import path
from . import views

app_name = 'updates'

urlpatterns = [
    # Update feed (admin only)
    path('check/', views.check_updates, name='check'),
    path('releases/', views.list_releases, name='releases'),

    # Site settings (admin only)
    path('settings/', views.site_settings, name='settings'),
]
