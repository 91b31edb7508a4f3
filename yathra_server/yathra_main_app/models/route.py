"""Canonical route names and driver route proposals"""
from django.db import models
from django.db.models.functions import Lower
from django.contrib.auth.models import User

from ..utils.constants import RouteRequestStatus


class Route(models.Model):
    name = models.CharField(max_length=200, unique=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['name']
        constraints = [
            models.UniqueConstraint(Lower('name'), name='route_name_ci_unique'),
        ]

    def __str__(self):
        return self.name


class RouteRequest(models.Model):
    driver = models.ForeignKey(User, on_delete=models.CASCADE, related_name='route_requests')
    route_name = models.CharField(max_length=200)
    description = models.TextField(blank=True, default='')
    status = models.CharField(max_length=20, choices=RouteRequestStatus.CHOICES, default=RouteRequestStatus.PENDING)
    rejection_reason = models.TextField(blank=True, default='')
    created_at = models.DateTimeField(auto_now_add=True)
    reviewed_at = models.DateTimeField(null=True, blank=True)
    reviewed_by = models.ForeignKey(User, on_delete=models.SET_NULL, null=True, blank=True, related_name='reviewed_route_requests')

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.route_name} - {self.status}"
