from django.contrib import admin
from .models import UserTimeInterval


@admin.register(UserTimeInterval)
class UserTimeIntervalAdmin(admin.ModelAdmin):
    list_display = ('user', 'week_day', 'time_start_in_minutes', 'time_end_in_minutes')
    list_filter = ('week_day',)
    search_fields = ('user__username',)
