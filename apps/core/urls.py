from django.urls import path
from . import views


urlpatterns = [
    path('', views.home_view, name='home'),
    path('register/', views.register_view, name='register'),
    path('register/connect-calendar/', views.connect_calendar_view, name='connect_calendar'),
    path('register/update-profile/', views.update_profile_view, name='update_profile'),
    path('api/users/', views.users_api, name='users_api'),
    path('core/google/login/', views.google_login, name='google_login'),
    path('core/google/callback/', views.google_callback, name='google_callback'),
]
