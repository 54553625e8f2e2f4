from django.urls import path
from . import views

urlpatterns = [
    path('schedule/<str:username>/', views.schedule_view, name='schedule'),
    path('register/time-intervals/', views.time_intervals_view, name='time_intervals'),
    path('api/users/<str:username>/blocked-dates/', views.blocked_dates_api, name='blocked_dates_api'),
    path('api/users/<str:username>/calendar/', views.calendar_api, name='calendar_api'),
]
