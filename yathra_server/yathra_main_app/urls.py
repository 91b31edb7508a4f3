from django.urls import path,include
from rest_framework import routers

from .views import (
    FirebaseLoginView, BookingViewSet, BusViewSet, RoutineViewSet,
    HireRequestViewSet, RouteRequestViewSet, RouteViewSet,
)

router = routers.DefaultRouter()
router.register(r"auth", FirebaseLoginView, basename="auth")
router.register(r"bus", BusViewSet, basename="bus")
router.register(r"booking", BookingViewSet, basename="booking")
router.register(r"routines", RoutineViewSet, basename="routines")
router.register(r"hire-requests", HireRequestViewSet, basename="hire-requests")
router.register(r"route-requests", RouteRequestViewSet, basename="route-requests")
router.register(r"routes", RouteViewSet, basename="routes")

urlpatterns = [
    path('', include(router.urls)),
    path('api-auth/', include('rest_framework.urls')),    # to login in rest_framework
]
