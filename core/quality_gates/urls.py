from django.urls import path
from . import views

urlpatterns = [
    path('', views.quality_gate_list, name='quality-gate-list'),
    path('default/', views.quality_gate_default, name='quality-gate-default'),
    path('<int:pk>/', views.quality_gate_detail, name='quality-gate-detail'),
    path('<int:pk>/set-default/', views.quality_gate_set_default, name='quality-gate-set-default'),
]
