# apps/tasks/urls.py
from django.urls import path
from . import views

urlpatterns = [
    path('project/<int:project_id>/', views.project_task_list_view, name='project_task_list'),
    path('project/<int:project_id>/<int:pk>/done/', views.task_set_done_view, name='task_set_done'),
]
