"""Utility functions for searchable.

"""

import logging

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.db import connections, models, router

logger = logging.getLogger(__name__)

LIKE_OPERATORS = ('LIKE', 'ILIKE')


def get_model(model_or_instance):
    """Given a model or instance, return the model class.

    """
    if not isinstance(model_or_instance, models.base.ModelBase):
        return type(model_or_instance)
    return model_or_instance


def get_typename(model_or_instance):
    model = get_model(model_or_instance)
    return '%s.%s' % (model._meta.app_label, model._meta.object_name)


def normalise_attributes(value):
    """Turn a terms_attributes declaration into a tuple of column names.

    A single string is a one-element list. Anything we can't make sense of
    means no attributes are searched; we warn rather than fail, since a model
    with nothing to search by terms is still usable for attribute filters.

    """
    if value is None:
        return ()
    if isinstance(value, str):
        return (value, )
    try:
        entries = list(value)
    except TypeError:
        logger.warning("Ignoring terms_attributes %r: expected a string or "
                       "a list of strings", value)
        return ()

    attributes = []
    for entry in entries:
        if isinstance(entry, str):
            attributes.append(entry)
        else:
            logger.warning("Ignoring non-string terms attribute %r", entry)
    return tuple(attributes)


def get_connection(model, using=None):
    """The connection a search of `model` runs on.

    An explicit `using` alias wins over the database router.

    """
    if using is None:
        using = router.db_for_read(model)
    return connections[using]


def get_like_operator(model, searchable=None, using=None):
    """Decide whether terms are matched with LIKE or ILIKE.

    An operator set on the Searchable wins, then
    settings.SEARCHABLE_LIKE_OPERATOR. Failing both we go by the database the
    search runs on: PostgreSQL's LIKE is case sensitive, so it gets ILIKE;
    SQLite and MySQL compare case insensitively with a plain LIKE.

    """
    operator = getattr(searchable, 'like_operator', None)
    source = '%s.like_operator' % (type(searchable).__name__, )
    if operator is None:
        operator = getattr(settings, 'SEARCHABLE_LIKE_OPERATOR', None)
        source = 'settings.SEARCHABLE_LIKE_OPERATOR'
    if operator is None:
        vendor = get_connection(model, using).vendor
        return 'ILIKE' if vendor == 'postgresql' else 'LIKE'

    operator = operator.upper()
    if operator not in LIKE_OPERATORS:
        raise ImproperlyConfigured(
            "%s must be one of %s, not %r"
            % (source, ', '.join(LIKE_OPERATORS), operator))
    return operator
