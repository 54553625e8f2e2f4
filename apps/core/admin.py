from django.contrib import admin
from .models import UserProfile, GoogleCredentials


@admin.register(UserProfile)
class UserProfileAdmin(admin.ModelAdmin):
    list_display = ('user', 'name', 'email')
    search_fields = ('user__username', 'name', 'email')


@admin.register(GoogleCredentials)
class GoogleCredentialsAdmin(admin.ModelAdmin):
    list_display = ('user', 'updated_at')
    exclude = ('token', 'refresh_token', 'client_secret')  # Nie pokazujemy sekretów
