from django.urls import path
from . import views

app_name = 'accounts'

urlpatterns = [
    # POST /api/auth/register/   - Create a tenant account (unless closed by an admin)
    # POST /api/auth/login/      - Email + password -> JWT pair
    path('register/', views.register, name='register'),
    path('login/', views.login, name='login'),

    # GET   /api/auth/me/        - Current user
    # PATCH /api/auth/me/update/ - Change display name
    path('me/', views.get_current_user, name='current-user'),
    path('me/update/', views.update_profile, name='update-profile'),
]
