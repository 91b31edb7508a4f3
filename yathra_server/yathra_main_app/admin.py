from django.contrib import admin

from .models import (
    Profile, Bus, Trip, SeatAvailability, Booking, Routine, DailySchedule,
    HireRequest, Route, RouteRequest,
)
from .services import FleetService, ScheduleService, RouteService
from .utils.constants import RoutineStatus
from .utils.exceptions import BookingEngineError

# Customize admin site
admin.site.site_header = "Yathra Administration"
admin.site.site_title = "Yathra Admin"
admin.site.index_title = "Welcome to Yathra Admin Panel"


def _run_per_object(modeladmin, request, queryset, fn, label):
    done = 0
    for obj in queryset:
        try:
            fn(obj)
            done += 1
        except BookingEngineError as e:
            modeladmin.message_user(request, f"{obj}: {e.message}", level='warning')
    modeladmin.message_user(request, f"{done} {label}.")


@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    list_display = ['id', 'user', 'display_name', 'email', 'role', 'created_at']
    list_filter = ['role']
    search_fields = ['user__username', 'email', 'display_name', 'phone_number']
    list_per_page = 50


@admin.register(Bus)
class BusAdmin(admin.ModelAdmin):
    list_display = ['id', 'bus_number', 'bus_name', 'driver', 'bus_type', 'number_of_seats', 'status', 'submitted_at']
    list_filter = ['status', 'bus_type']
    search_fields = ['bus_number', 'bus_name', 'route', 'driver__username']
    ordering = ['-submitted_at']
    readonly_fields = ['submitted_at', 'approved_at', 'rejected_at', 'pricing_updated_at']
    actions = ['approve_registrations', 'reject_registrations']

    def approve_registrations(self, request, queryset):
        service = FleetService()
        _run_per_object(self, request, queryset,
                        lambda bus: service.approve_registration(bus.driver.username), "buses approved")
    approve_registrations.short_description = "Approve selected bus registrations"

    def reject_registrations(self, request, queryset):
        service = FleetService()
        _run_per_object(self, request, queryset,
                        lambda bus: service.reject_registration(bus.driver.username), "buses rejected")
    reject_registrations.short_description = "Reject selected bus registrations"


@admin.register(Trip)
class TripAdmin(admin.ModelAdmin):
    list_display = ['id', 'bus', 'origin', 'destination', 'departure_time', 'available_seats', 'booked_seats', 'status']
    list_filter = ['status', 'departure_time']
    search_fields = ['origin', 'destination', 'bus__bus_number']
    ordering = ['-departure_time']
    date_hierarchy = 'departure_time'
    readonly_fields = ['booked_seats', 'created_at']


@admin.register(SeatAvailability)
class SeatAvailabilityAdmin(admin.ModelAdmin):
    list_display = ['id', 'bus', 'travel_date', 'route', 'is_private_hire', 'hired_by', 'last_updated']
    list_filter = ['is_private_hire', 'travel_date']
    search_fields = ['bus__bus_number', 'route']
    ordering = ['-travel_date']
    readonly_fields = ['last_updated']


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = ['id', 'user', 'bus', 'travel_date', 'total_price', 'status', 'payment_status', 'is_trip_booking', 'is_private_hire', 'booked_at']
    list_filter = ['status', 'payment_status', 'is_trip_booking', 'is_private_hire']
    search_fields = ['user__username', 'bus__bus_number', 'route']
    ordering = ['-booked_at']
    date_hierarchy = 'booked_at'
    readonly_fields = ['seats', 'booked_at', 'updated_at', 'confirmed_at', 'cancelled_at']
    list_per_page = 50


@admin.register(Routine)
class RoutineAdmin(admin.ModelAdmin):
    list_display = ['id', 'routine_name', 'route', 'start_time', 'end_time', 'driver', 'bus', 'status', 'created_at']
    list_filter = ['status']
    search_fields = ['routine_name', 'route', 'driver__username']
    ordering = ['-created_at']
    readonly_fields = ['approved_at', 'rejected_at', 'created_at', 'updated_at']
    actions = ['approve_routines']

    def approve_routines(self, request, queryset):
        service = ScheduleService()
        _run_per_object(self, request, queryset,
                        lambda routine: service.update_routine_status(routine.id, RoutineStatus.APPROVED),
                        "routines approved")
    approve_routines.short_description = "Approve selected routines"


@admin.register(DailySchedule)
class DailyScheduleAdmin(admin.ModelAdmin):
    list_display = ['id', 'routine', 'date', 'availability', 'started_at', 'completed_at']
    list_filter = ['availability', 'date']
    ordering = ['-date']


@admin.register(HireRequest)
class HireRequestAdmin(admin.ModelAdmin):
    list_display = ['id', 'passenger', 'bus', 'pickup_location', 'destination', 'hire_date', 'status', 'final_price']
    list_filter = ['status', 'hire_date']
    search_fields = ['passenger__username', 'bus__bus_number', 'pickup_location', 'destination']
    ordering = ['-created_at']


@admin.register(Route)
class RouteAdmin(admin.ModelAdmin):
    list_display = ['id', 'name', 'created_at']
    search_fields = ['name']


@admin.register(RouteRequest)
class RouteRequestAdmin(admin.ModelAdmin):
    list_display = ['id', 'route_name', 'driver', 'status', 'created_at', 'reviewed_at']
    list_filter = ['status']
    search_fields = ['route_name', 'driver__username']
    actions = ['approve_requests']

    def approve_requests(self, request, queryset):
        service = RouteService()
        _run_per_object(self, request, queryset,
                        lambda route_request: service.approve_route_request(route_request.id, reviewer=request.user),
                        "route requests approved")
    approve_requests.short_description = "Approve selected route requests"
