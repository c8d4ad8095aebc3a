"""Build search conditions from filters, and hand them on to a finder.

With terms_attributes = ['name', 'description'], searching for
filters={'terms': ['blue', 'large']} generates:

    ((name LIKE %s OR description LIKE %s)
     AND (name LIKE %s OR description LIKE %s))

binding '%blue%', '%blue%', '%large%', '%large%'. Each term must match at
least one of the attributes; different terms may match different attributes.

Any other filter is an exact match on the attribute it names, so
filters={'verified_at': None, 'first_name': 'John'} adds
`"verified_at" IS NULL AND "first_name" = %s` (quoted for the database).

"""

import logging

from django.core.exceptions import FieldDoesNotExist

from .conditions import Comparison, Condition
from .utils import get_connection, get_like_operator

logger = logging.getLogger(__name__)

TERMS = 'terms'


def get_filter_column(model, name, connection):
    """Quoted column for an attribute filter.

    Filter names come from whoever is searching, so only concrete fields of
    the model are accepted; anything else raises FieldDoesNotExist.

    """
    field = model._meta.get_field(name)
    if not getattr(field, 'concrete', False) or field.many_to_many:
        raise FieldDoesNotExist("%s has no column for filter %r"
                                % (model.__name__, name))
    return connection.ops.quote_name(field.column)


def build_conditions(model, terms_attributes, filters, like_operator='LIKE',
                     using=None):
    """Turn a filters dictionary into a Condition tree.

    The tree is empty (and false) if there's nothing to restrict by. Terms
    attributes are used as written; attribute filter names are checked
    against the model's fields and quoted for the database given by `using`.

    """
    combined = Condition('AND')
    filters = filters or {}

    terms = filters.get(TERMS) or []
    if isinstance(terms, str):
        terms = [terms]
    if terms_attributes:
        for term in terms:
            pattern = '%%%s%%' % (term, )
            condition = Condition('OR')
            for column in terms_attributes:
                condition << Comparison.like(column, pattern, like_operator)
            combined << condition

    connection = None
    for name, value in filters.items():
        if name == TERMS:
            continue
        if connection is None:
            connection = get_connection(model, using)
        column = get_filter_column(model, name, connection)
        combined << Comparison.equals(column, value)

    return combined


def search(searchable, selector, filters=None, **options):
    """Search the searchable's model for the given filters.

    All options other than `filters` are passed on to the searchable's find();
    `conditions` is replaced by those built from the filters, unless the
    filters don't restrict anything, in which case the options go through
    untouched. A `using` option picks the database whose LIKE semantics and
    quoting are used.

    """
    using = options.get('using')
    like_operator = get_like_operator(searchable.model, searchable, using)
    condition = build_conditions(searchable.model, searchable.terms_attributes,
                                 filters, like_operator, using)
    if condition:
        options['conditions'] = condition.to_sql()
        logger.debug("Searching %s with conditions %r",
                     searchable.model.__name__, options['conditions'])
    return searchable.find(selector, **options)


def make_searcher(searchable):
    """Make the search function attached to a searchable model.

    """
    def search_model(selector, filters=None, **options):
        return search(searchable, selector, filters, **options)
    search_model.searchable = searchable
    search_model.__doc__ = search.__doc__
    return search_model
