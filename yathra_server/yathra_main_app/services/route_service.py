"""Route service - driver route proposals and the canonical route list"""
import logging

from django.db import IntegrityError, transaction
from django.utils import timezone

from ..models import Route, RouteRequest
from ..utils.constants import BusinessRules, RouteRequestStatus
from ..utils.exceptions import RouteAlreadyExistsError, RouteRequestNotFoundError, ValidationFailure

logger = logging.getLogger(__name__)


class RouteService:
    """Service for route requests and approved routes"""

    def submit_route_request(self, driver, route_name, description=''):
        route_name = (route_name or '').strip()
        if not route_name:
            raise ValidationFailure('Route name is required')

        route_request = RouteRequest.objects.create(
            driver=driver,
            route_name=route_name,
            description=description or '',
        )
        logger.info(f'[ROUTES] Route request {route_request.id} submitted: {route_name}')
        return route_request

    def get_pending_requests(self):
        return list(RouteRequest.objects.filter(status=RouteRequestStatus.PENDING).select_related('driver'))

    @transaction.atomic
    def approve_route_request(self, request_id, reviewer=None):
        """
        Add the requested name to the canonical route list.

        Only pending requests can be reviewed. Raises RouteAlreadyExistsError
        when a route with that name exists (case-insensitive).
        """
        route_request = self._lock_pending_request(request_id)

        if self._route_exists(route_request.route_name):
            raise RouteAlreadyExistsError(f'Route "{route_request.route_name}" already exists')

        try:
            with transaction.atomic():
                route = Route.objects.create(name=route_request.route_name)
        except IntegrityError:
            # Lost a race with a concurrent approval of the same name
            raise RouteAlreadyExistsError(f'Route "{route_request.route_name}" already exists')

        route_request.status = RouteRequestStatus.APPROVED
        route_request.reviewed_at = timezone.now()
        route_request.reviewed_by = reviewer
        route_request.save(update_fields=['status', 'reviewed_at', 'reviewed_by'])

        logger.info(f'[ROUTES] Route request {request_id} approved: {route.name}')
        return route

    @transaction.atomic
    def reject_route_request(self, request_id, reason=None, reviewer=None):
        route_request = self._lock_pending_request(request_id)
        route_request.status = RouteRequestStatus.REJECTED
        route_request.rejection_reason = reason or BusinessRules.DEFAULT_REJECTION_REASON
        route_request.reviewed_at = timezone.now()
        route_request.reviewed_by = reviewer
        route_request.save(update_fields=['status', 'rejection_reason', 'reviewed_at', 'reviewed_by'])

        logger.info(f'[ROUTES] Route request {request_id} rejected')
        return route_request

    def list_routes(self):
        return list(Route.objects.order_by('name').values_list('name', flat=True))

    def _route_exists(self, name):
        return Route.objects.filter(name__iexact=name).exists()

    def _lock_pending_request(self, request_id):
        route_request = RouteRequest.objects.select_for_update().filter(id=request_id).first()
        if not route_request:
            raise RouteRequestNotFoundError()
        if route_request.status != RouteRequestStatus.PENDING:
            raise ValidationFailure(f'Route request is already {route_request.status}')
        return route_request
