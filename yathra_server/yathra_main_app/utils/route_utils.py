"""Route string helpers"""
from .constants import BusinessRules


def split_route(route, separators=BusinessRules.ROUTE_SEPARATORS):
    """
    Split a route string like "Colombo to Kandy" into (origin, destination).

    Separators are tried in their fixed order and the first one present in
    the string wins; the split happens at its first occurrence, so
    "Colombo to Kandy - Express" gives ("Colombo", "Kandy - Express") and
    "Galle - Matara to Colombo" gives ("Galle - Matara", "Colombo").
    Returns None when no separator is present.
    """
    if not route:
        return None

    for separator in separators:
        if separator in route:
            origin, destination = route.split(separator, 1)
            return origin.strip(), destination.strip()
    return None


def route_matches(route, from_city=None, to_city=None):
    """Match a route string against optional origin/destination filters"""
    if not from_city and not to_city:
        return True
    if not route:
        return False

    route_lower = route.lower()

    if from_city and to_city:
        parts = split_route(route_lower)
        if not parts:
            return False
        origin, destination = parts
        if from_city.lower() in origin and to_city.lower() in destination:
            return True
        # Round-trip routes ("Colombo to Kandy return") also serve the reverse leg
        if 'return' in route_lower:
            return from_city.lower() in destination and to_city.lower() in origin
        return False

    # A single filter matches anywhere in the route, which covers both legs
    return (from_city or to_city).lower() in route_lower


def routes_overlap(routine_route, query_route):
    """Bidirectional case-insensitive partial match between two route names"""
    if not routine_route or not query_route:
        return False
    a = routine_route.lower()
    b = query_route.lower()
    return a in b or b in a
