from django.urls import path
from . import views

app_name = 'notifications'

urlpatterns = [
    path('', views.notification_list, name='notification-list'),
    path('unread-count/', views.unread_count, name='unread-count'),
    path('mark-all-read/', views.mark_all_read, name='mark-all-read'),
    path('<uuid:pk>/', views.notification_delete, name='notification-delete'),
]
