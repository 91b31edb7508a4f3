"""Bus registration, seat availability, search, pricing and trip views"""
from rest_framework import viewsets, status
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from rest_framework.decorators import action

from ..models import Bus
from ..permissions import IsDriver, IsAdminRole
from ..serializers import BusSerializer, BusReviewSerializer, BusPricingSerializer, TripSerializer
from ..services import AvailabilityRepository, FleetService, SearchService
from ..utils.exceptions import BusNotFoundError, ValidationFailure


def _required_param(request, name):
    value = request.query_params.get(name)
    if not value:
        raise ValidationFailure(f'Query parameter "{name}" is required')
    return value


class BusViewSet(viewsets.ViewSet):
    permission_classes = [IsAuthenticated]

    def create(self, request):
        """Driver submits their bus for review"""
        serializer = BusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        bus = FleetService().register_bus(request.user, **serializer.validated_data)
        return Response(BusSerializer(bus).data, status=status.HTTP_201_CREATED)

    def get_permissions(self):
        if self.action == 'create':
            return [IsDriver()]
        return super().get_permissions()

    @action(detail=False, methods=['get'], url_path='pending', permission_classes=[IsAdminRole])
    def pending(self, request):
        return Response(BusSerializer(FleetService().get_pending_registrations(), many=True).data)

    @action(detail=False, methods=['post'], url_path='approve', permission_classes=[IsAdminRole])
    def approve(self, request):
        serializer = BusReviewSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        FleetService().approve_registration(serializer.validated_data['userId'])
        return Response({'message': 'Bus registration approved successfully'})

    @action(detail=False, methods=['post'], url_path='reject', permission_classes=[IsAdminRole])
    def reject(self, request):
        serializer = BusReviewSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        FleetService().reject_registration(
            serializer.validated_data['userId'], serializer.validated_data.get('reason'),
        )
        return Response({'message': 'Bus registration rejected'})

    @action(detail=False, methods=['get'], url_path='approved')
    def approved(self, request):
        return Response(BusSerializer(FleetService().get_approved_buses(), many=True).data)

    @action(detail=False, methods=['get'], url_path='search')
    def search(self, request):
        params = request.query_params
        results = SearchService().search_buses(params.get('from'), params.get('to'), params.get('date'))
        return Response(results)

    @action(detail=True, methods=['get', 'delete'], url_path='seats')
    def seats(self, request, pk=None):
        travel_date = _required_param(request, 'date')
        repository = AvailabilityRepository()

        if request.method == 'DELETE':
            if not IsAdminRole().has_permission(request, self):
                self.permission_denied(request)
            repository.clear(pk, travel_date)
            return Response(status=status.HTTP_204_NO_CONTENT)

        return Response(repository.get_availability(pk, travel_date))

    @action(detail=False, methods=['get', 'put'], url_path='pricing', permission_classes=[IsDriver])
    def pricing(self, request):
        service = FleetService()
        if request.method == 'GET':
            return Response(service.get_bus_pricing(request.user.username))

        serializer = BusPricingSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        pricing = service.update_bus_pricing(
            request.user.username,
            serializer.validated_data['defaultPricePerPerson'],
            serializer.validated_data.get('bookingCommission'),
        )
        return Response(pricing)

    @action(detail=True, methods=['get', 'post'], url_path='trips')
    def trips(self, request, pk=None):
        service = FleetService()
        if request.method == 'GET':
            trips = service.get_bus_trips(pk, request.query_params.get('date'))
            return Response(TripSerializer(trips, many=True).data)

        if not IsDriver().has_permission(request, self):
            self.permission_denied(request)
        if not Bus.objects.filter(id=pk, driver=request.user).exists():
            raise BusNotFoundError()

        serializer = TripSerializer(data={**request.data, 'busId': pk})
        serializer.is_valid(raise_exception=True)
        trip = service.create_trip(**serializer.validated_data)
        return Response(
            {'tripId': trip.id, 'message': 'Trip created successfully'},
            status=status.HTTP_201_CREATED,
        )
