from django.urls import path
from . import views

urlpatterns = [
    path('preview/ads/', views.story_ads_preview, name='story_ads_preview'),
]
