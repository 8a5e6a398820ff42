from django.urls import path
from . import views

urlpatterns = [
    path('', views.project_list_view, name='project_list'),
    path('<int:pk>/', views.project_detail_view, name='project_detail'),
    path('<int:pk>/responsibles/', views.project_responsibles_view, name='project_responsibles'),
    path('<int:pk>/provision/', views.project_provision_view, name='project_provision'),
]
