"""
Searchable works by having a Searchable (or subclass) instance registered for
each model we want to search by attributes.

This can be set up by one of:

 - Place a nested class in the model class called `Searchable`. (A single
   instance will be created and registered for the model by autodiscover.)
 - Call `register_searchable` directly.

Registration also attaches a `search` function to the model class, so that

    Product.search('all', filters={'terms': ['blue', 'large']})

works as well as `searchable.search(Product, 'all', ...)`.

"""

import logging

from django.apps import apps
from django.conf import settings

from . import builder
from . import finders
from .utils import get_model, get_typename, normalise_attributes

logger = logging.getLogger(__name__)

# Map model -> Searchable registered for it.
_registry = {}


class Searchable(object):
    """Search configuration for a model.

    Subclass and set terms_attributes; override find() to search through
    something other than the model's default manager.

    """

    # Column names matched against each of the `terms` filter.
    terms_attributes = ()
    # Name of the search function attached to the model; None to not attach.
    attach_as = 'search'
    # 'LIKE' or 'ILIKE'; None defers to settings / the database vendor.
    like_operator = None

    def __init__(self, model, terms_attributes=None):
        self.model = model
        if terms_attributes is None:
            terms_attributes = type(self).terms_attributes
        self.terms_attributes = normalise_attributes(terms_attributes)

    def __repr__(self):
        return "<Searchable(%s, %r)>" % (get_typename(self.model),
                                         self.terms_attributes)

    def find(self, selector, **options):
        """Fetch records; this is what search() hands its conditions to.

        """
        return finders.find(self.model, selector, **options)

    def search(self, selector, filters=None, **options):
        return builder.search(self, selector, filters, **options)


def register_searchable(model, searchable=None, terms_attributes=None):
    """Make a model searchable.

    Either pass a Searchable instance, or the terms_attributes to build one
    from. Registering a model again replaces its previous configuration.

    """
    if searchable is None:
        searchable = Searchable(model, terms_attributes)
    elif terms_attributes is not None:
        searchable.terms_attributes = normalise_attributes(terms_attributes)
    searchable.model = model

    if model in _registry:
        logger.debug("Replacing searchable registration for %s",
                     get_typename(model))
        _detach(model)
    _registry[model] = searchable

    if searchable.attach_as:
        _attach(model, searchable)
    logger.info("Registered searchable model %s with terms attributes %s",
                get_typename(model), ', '.join(searchable.terms_attributes))
    return searchable


def unregister_searchable(model):
    """Forget a model's registration, removing its attached search function.

    """
    if _registry.pop(model, None) is not None:
        _detach(model)


def _attach(model, searchable):
    existing = model.__dict__.get(searchable.attach_as)
    if existing is not None and not _is_ours(existing):
        logger.warning("Not attaching search to %s: %s.%s already exists",
                       get_typename(model), model.__name__,
                       searchable.attach_as)
        return
    setattr(model, searchable.attach_as,
            staticmethod(builder.make_searcher(searchable)))


def _detach(model):
    for name, value in list(model.__dict__.items()):
        if _is_ours(value):
            delattr(model, name)


def _is_ours(value):
    return hasattr(getattr(value, '__func__', None), 'searchable')


def get_searchable(model_or_instance):
    """Given a model or instance, find the Searchable for it.

    """
    return _registry.get(get_model(model_or_instance))


def registered_models():
    return list(_registry.keys())


def search(model, selector, filters=None, **options):
    """Search a model by its attributes.

    A model that was never registered has no terms attributes, so only the
    attribute filters apply to it.

    """
    searchable = get_searchable(model)
    if searchable is None:
        searchable = Searchable(get_model(model))
    return searchable.search(selector, filters, **options)


def autodiscover(verbose=None):
    """Automatically register all models with nested Searchable classes.

    Models registered already (eg: by calling register_searchable directly)
    are left alone.

    """
    if not getattr(settings, 'SEARCHABLE_AUTODISCOVER', True):
        return

    for model in apps.get_models():
        if model in _registry or not hasattr(model, 'Searchable'):
            continue
        nested = model.Searchable
        if not issubclass(nested, Searchable):
            nested = type(nested.__name__, (nested, Searchable), {})
        if verbose:
            verbose.write("Auto-creating searchable instance for class %s\n"
                          % get_typename(model))
        register_searchable(model, nested(model))
