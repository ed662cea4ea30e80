from django.urls import path
from . import views

app_name = 'friends'

urlpatterns = [
    path('', views.friend_list, name='friend-list'),
    path('requests/', views.friend_requests, name='request-list'),
    path('requests/sent/', views.sent_requests, name='sent-requests'),
    path('requests/<uuid:pk>/accept/', views.accept_request, name='request-accept'),
    path('requests/<uuid:pk>/reject/', views.reject_request, name='request-reject'),
    path('requests/<uuid:pk>/cancel/', views.cancel_request, name='request-cancel'),
    path('status/<uuid:user_id>/', views.friendship_status, name='friendship-status'),
    path('<uuid:pk>/', views.unfriend, name='unfriend'),
]
