"""URL Configuration

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/dev/topics/http/urls/
"""
from django.contrib import admin
from django.urls import path, include
from rest_framework.routers import DefaultRouter

from og.groups.api import GroupAdminViewSet, GroupMembershipAdminViewSet

GROUP_ADMIN_PREFIX = r'og/(?P<entity_type>[a-z0-9_]+\.[a-z0-9_]+)/(?P<entity_id>\d+)/admin'

router = DefaultRouter()

router.register(GROUP_ADMIN_PREFIX + '/members', GroupMembershipAdminViewSet, basename='og-admin-members')
router.register(GROUP_ADMIN_PREFIX, GroupAdminViewSet, basename='og-admin')

urlpatterns = [
    path('api/', include(router.urls)),
    path('api-auth/', include('rest_framework.urls', namespace='rest_framework')),
    path('admin/', admin.site.urls),
]
