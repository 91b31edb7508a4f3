"""Private hire request views using HireService"""
from rest_framework import viewsets, status
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from rest_framework.decorators import action
from rest_framework.exceptions import PermissionDenied

from ..serializers import HireRequestSerializer, HireStatusSerializer
from ..services import HireService
from ..utils.constants import HireRequestStatus, UserRole
from ..utils.exceptions import HireRequestNotFoundError


class HireRequestViewSet(viewsets.ViewSet):
    permission_classes = [IsAuthenticated]

    def create(self, request):
        serializer = HireRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        hire_request = HireService().create_hire_request(request.user, **serializer.validated_data)
        return Response(
            {'requestId': hire_request.id, 'message': 'Hire request sent successfully'},
            status=status.HTTP_201_CREATED,
        )

    def list(self, request):
        profile = getattr(request.user, 'profile', None)
        role = UserRole.DRIVER if profile and profile.role == UserRole.DRIVER else UserRole.PASSENGER
        hire_requests = HireService().get_hire_requests(request.user, role)
        return Response(HireRequestSerializer(hire_requests, many=True).data)

    @action(detail=True, methods=['patch'], url_path='status')
    def update_status(self, request, pk=None):
        """
        The bus's driver quotes, confirms, completes or rejects; the
        passenger who asked accepts the quote or rejects it.
        """
        service = HireService()
        hire_request = service.get_hire_request(pk)
        is_driver = hire_request.bus.driver_id == request.user.id
        if not is_driver and hire_request.passenger_id != request.user.id:
            raise HireRequestNotFoundError()

        serializer = HireStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        new_status = serializer.validated_data['status']

        allowed = HireRequestStatus.DRIVER_UPDATABLE if is_driver else HireRequestStatus.PASSENGER_UPDATABLE
        if new_status not in allowed:
            raise PermissionDenied(f'You cannot set a hire request to "{new_status}"')

        hire_request = service.update_hire_request_status(
            pk,
            new_status,
            serializer.validated_data.get('finalPrice') if is_driver else None,
            serializer.validated_data.get('driverNotes') if is_driver else None,
        )
        return Response(HireRequestSerializer(hire_request).data)
