# ignite_call/urls.py
from django.contrib import admin
from django.urls import path, include


urlpatterns = [
    path('admin/', admin.site.urls),
    # Tutaj podpinamy nasze aplikacje:
    path('', include('apps.core.urls')),
    path('', include('apps.calendar_app.urls')),
]
