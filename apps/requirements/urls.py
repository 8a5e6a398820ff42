# apps/requirements/urls.py
from django.urls import path
from . import views

urlpatterns = [
    path('', views.requirement_list_view, name='requirement_list'),
    path('new/', views.requirement_create_view, name='requirement_create'),
    path('<int:pk>/edit/', views.requirement_edit_view, name='requirement_edit'),
    path('<int:pk>/delete/', views.requirement_delete_view, name='requirement_delete'),
]
