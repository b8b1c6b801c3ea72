"""
URL Configuration for Core module.
This module handles quality gate functionality.
"""
from django.urls import path, include

app_name = 'core'

urlpatterns = [
    # Quality gates sub-app URLs
    path('quality-gates/', include('core.quality_gates.urls')),
]
