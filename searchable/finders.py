"""The default finder: fetch model instances through the default manager.

`find(model, selector, **options)` is what a Searchable hands its conditions
to. The selector picks what comes back:

 - 'all'    a list of matching instances (honouring limit and offset)
 - 'first'  the first matching instance, or None
 - 'last'   the last matching instance, or None
 - 'count'  the number of matching instances
 - anything else is a primary key; Model.DoesNotExist propagates if there's
   no such instance among the matches.

limit and offset only apply to 'all'; the other selectors look at every
matching instance, so 'count' is the total regardless of them.

"""

ALL = 'all'
FIRST = 'first'
LAST = 'last'
COUNT = 'count'


def _as_list(value):
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return list(value)


def get_queryset(model, conditions=None, order=None, include=None,
                 using=None):
    """Build the queryset a find() will evaluate.

    `conditions` is a (fragment, params) pair or a bare SQL fragment.

    """
    queryset = model._default_manager.all()
    if using is not None:
        queryset = queryset.using(using)
    if conditions:
        if isinstance(conditions, str):
            (fragment, params) = (conditions, [])
        else:
            (fragment, params) = conditions
        if fragment:
            queryset = queryset.extra(where=[fragment], params=list(params))
    includes = _as_list(include)
    if includes:
        queryset = queryset.select_related(*includes)
    ordering = _as_list(order)
    if ordering:
        queryset = queryset.order_by(*ordering)
    return queryset


def find(model, selector, conditions=None, order=None, limit=None,
         offset=None, include=None, using=None):
    queryset = get_queryset(model, conditions, order, include, using)

    if selector == ALL:
        start = offset or 0
        if limit is not None:
            return list(queryset[start:start + limit])
        return list(queryset[start:])
    if selector == FIRST:
        return queryset.first()
    if selector == LAST:
        return queryset.last()
    if selector == COUNT:
        return queryset.count()
    return queryset.get(pk=selector)
