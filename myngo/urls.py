from django.urls import path
from . import views

urlpatterns = [
    path('api/timing', views.api_timing, name='api_timing'),
    path('api/card', views.api_card, name='api_card'),
    path('api/check', views.api_check, name='api_check'),
    path('api/room_code', views.api_room_code, name='api_room_code'),
]
