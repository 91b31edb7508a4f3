"""Routine and daily schedule views using ScheduleService"""
from rest_framework import viewsets, status
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from rest_framework.decorators import action

from ..permissions import IsDriver, IsAdminRole
from ..serializers import RoutineSerializer, RoutineUpdateSerializer, RoutineStatusSerializer, DailyStatusSerializer
from ..services import ScheduleService, SearchService
from ..services.schedule_service import daily_status_document
from ..utils.exceptions import RoutineNotFoundError, ValidationFailure


class RoutineViewSet(viewsets.ViewSet):
    permission_classes = [IsAuthenticated]

    def get_permissions(self):
        if self.action in ('create', 'list', 'partial_update', 'destroy'):
            return [IsDriver()]
        return super().get_permissions()

    def create(self, request):
        serializer = RoutineSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        routine = ScheduleService().create_routine(request.user, **serializer.validated_data)
        return Response(
            {'routineId': routine.id, 'message': 'Routine created and submitted for approval'},
            status=status.HTTP_201_CREATED,
        )

    def list(self, request):
        routines = ScheduleService().get_routines_by_driver(request.user)
        return Response(RoutineSerializer(routines, many=True).data)

    def retrieve(self, request, pk=None):
        return Response(RoutineSerializer(ScheduleService().get_routine(pk)).data)

    def partial_update(self, request, pk=None):
        service = ScheduleService()
        self._own_routine(service, pk, request.user)

        serializer = RoutineUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        routine = service.update_routine(pk, **serializer.validated_data)
        return Response(RoutineSerializer(routine).data)

    def destroy(self, request, pk=None):
        service = ScheduleService()
        self._own_routine(service, pk, request.user)
        service.delete_routine(pk)
        return Response({'message': 'Routine deleted successfully'})

    @action(detail=True, methods=['patch'], url_path='status', permission_classes=[IsAdminRole])
    def update_status(self, request, pk=None):
        serializer = RoutineStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        routine = ScheduleService().update_routine_status(
            pk, serializer.validated_data['status'], serializer.validated_data.get('rejectionReason'),
        )
        return Response(RoutineSerializer(routine).data)

    @action(detail=False, methods=['get'], url_path='pending', permission_classes=[IsAdminRole])
    def pending(self, request):
        return Response(RoutineSerializer(ScheduleService().get_pending_routines(), many=True).data)

    @action(detail=False, methods=['get'], url_path=r'bus/(?P<bus_id>\d+)')
    def by_bus(self, request, bus_id=None):
        return Response(RoutineSerializer(ScheduleService().get_routines_by_bus(int(bus_id)), many=True).data)

    @action(detail=False, methods=['get'], url_path='today', permission_classes=[IsDriver])
    def today(self, request):
        date = request.query_params.get('date')
        if not date:
            raise ValidationFailure('Query parameter "date" is required')

        schedule = ScheduleService().get_today_schedule(request.user, date)
        return Response([
            {**RoutineSerializer(entry['routine']).data, 'dailyStatus': entry['dailyStatus']}
            for entry in schedule
        ])

    @action(detail=True, methods=['post'], url_path='daily-status', permission_classes=[IsDriver])
    def daily_status(self, request, pk=None):
        service = ScheduleService()
        self._own_routine(service, pk, request.user)

        serializer = DailyStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        schedule = service.update_daily_routine_status(
            pk,
            serializer.validated_data['date'],
            serializer.validated_data['availability'],
            serializer.validated_data.get('notes'),
        )
        return Response(daily_status_document(schedule))

    @action(detail=False, methods=['get'], url_path='search')
    def search(self, request):
        route = request.query_params.get('route')
        date = request.query_params.get('date')
        if not route or not date:
            raise ValidationFailure('Query parameters "route" and "date" are required')
        return Response(SearchService().search_buses_with_schedules(route, date))

    def _own_routine(self, service, routine_id, driver):
        routine = service.get_routine(routine_id)
        if routine.driver_id != driver.id:
            raise RoutineNotFoundError()
        return routine
