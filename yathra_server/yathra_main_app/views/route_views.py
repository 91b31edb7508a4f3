"""Route request and route list views using RouteService"""
from rest_framework import viewsets, status
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from rest_framework.decorators import action

from ..permissions import IsDriver, IsAdminRole
from ..serializers import RouteRequestSerializer, RouteReviewSerializer
from ..services import RouteService


class RouteRequestViewSet(viewsets.ViewSet):
    permission_classes = [IsDriver]

    def create(self, request):
        serializer = RouteRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        route_request = RouteService().submit_route_request(request.user, **serializer.validated_data)
        return Response(RouteRequestSerializer(route_request).data, status=status.HTTP_201_CREATED)

    @action(detail=False, methods=['get'], url_path='pending', permission_classes=[IsAdminRole])
    def pending(self, request):
        return Response(RouteRequestSerializer(RouteService().get_pending_requests(), many=True).data)

    @action(detail=True, methods=['post'], url_path='approve', permission_classes=[IsAdminRole])
    def approve(self, request, pk=None):
        route = RouteService().approve_route_request(pk, reviewer=request.user)
        return Response({'route': route.name, 'message': 'Route approved'})

    @action(detail=True, methods=['post'], url_path='reject', permission_classes=[IsAdminRole])
    def reject(self, request, pk=None):
        serializer = RouteReviewSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        route_request = RouteService().reject_route_request(
            pk, serializer.validated_data.get('reason'), reviewer=request.user,
        )
        return Response(RouteRequestSerializer(route_request).data)


class RouteViewSet(viewsets.ViewSet):
    permission_classes = [IsAuthenticated]

    def list(self, request):
        return Response(RouteService().list_routes())
