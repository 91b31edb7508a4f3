"""Ordered listings with an explicit index capability probe"""
import logging

logger = logging.getLogger(__name__)


def _field_name(name):
    name = name.lstrip('-')
    return name[:-3] if name.endswith('_id') else name


def supports_server_ordering(model, filter_fields, order_field):
    """
    True if one of model's declared Meta.indexes starts with the equality
    filter fields (in any order) immediately followed by order_field.
    """
    wanted = {_field_name(f) for f in filter_fields}
    order_field = _field_name(order_field)

    for index in model._meta.indexes:
        fields = [_field_name(f) for f in index.fields]
        if len(fields) <= len(wanted):
            continue
        if set(fields[:len(wanted)]) == wanted and fields[len(wanted)] == order_field:
            return True
    return False


def _sort_key(order_field):
    def key(record):
        value = getattr(record, order_field)
        return (value is not None, value)
    return key


def query_ordered(model, filters, order_field, descending=False):
    """
    List model rows matching filters, ordered by order_field.

    Orders in the database when a covering index is declared, otherwise
    fetches unordered and sorts in memory (stable).
    """
    queryset = model.objects.filter(**filters)

    if supports_server_ordering(model, filters.keys(), order_field):
        return list(queryset.order_by(f'-{order_field}' if descending else order_field))

    logger.warning(
        f'[QUERY] No index on {model.__name__}({", ".join(filters)}, {order_field}), sorting in memory'
    )
    records = list(queryset.order_by())
    return sorted(records, key=_sort_key(order_field), reverse=descending)
