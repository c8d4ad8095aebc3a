import pytest
from django.core.exceptions import FieldDoesNotExist
from django.utils import timezone

import searchable
from searchable import finders
from tests.testapp.models import Maker, Person, Product

pytestmark = pytest.mark.django_db


@pytest.fixture
def products():
    acme = Maker.objects.create(title='Acme')
    return [
        Product.objects.create(name='Blue Shirt',
                               description='A LARGE blue shirt',
                               tags='cotton', maker=acme),
        Product.objects.create(name='Red Hat', description='small',
                               tags='wool'),
        Product.objects.create(name='Large Blue Mug', description='ceramic',
                               tags='kitchen', maker=acme),
    ]


@pytest.fixture
def staff(people):
    return [
        Person.objects.create(first_name='Mary', last_name='Jones',
                              email='mary@example.com', admin=True),
        Person.objects.create(first_name='John', last_name='Mary',
                              email='jm@example.com',
                              verified_at=timezone.now()),
        Person.objects.create(first_name='John', last_name='Smith',
                              email='john@example.com'),
    ]


def names(instances):
    return [instance.name for instance in instances]


def test_all_terms_must_match(products):
    found = Product.search('all', filters={'terms': ['blue', 'large']},
                           order='name')
    assert names(found) == ['Blue Shirt', 'Large Blue Mug']


def test_terms_match_any_attribute(products):
    found = searchable.search(Product, 'all', filters={'terms': ['WOOL']})
    assert names(found) == ['Red Hat']


def test_no_filters_finds_everything(products):
    assert Product.search('count') == 3
    assert Product.search('count', filters={'terms': []}) == 3


def test_first_and_last(products):
    assert Product.search('first', filters={'terms': ['blue']},
                          order='name').name == 'Blue Shirt'
    assert Product.search('last', filters={'terms': ['blue']},
                          order='name').name == 'Large Blue Mug'
    assert Product.search('first', filters={'terms': ['velvet']}) is None


def test_limit_and_offset(products):
    found = Product.search('all', order=['-name'], limit=1, offset=1)
    assert names(found) == ['Large Blue Mug']


def test_primary_key_selector(products):
    shirt = products[0]
    assert Product.search(shirt.pk, filters={'terms': ['shirt']}) == shirt
    with pytest.raises(Product.DoesNotExist):
        Product.search(shirt.pk, filters={'terms': ['hat']})


def test_include_follows_relations(products):
    found = Product.search('all', filters={'terms': ['blue']},
                           include='maker', order='name')
    assert [product.maker.title for product in found] == ['Acme', 'Acme']


def test_attribute_filters(staff):
    found = Person.search('all', filters={'first_name': 'John',
                                          'verified_at': None})
    assert [person.last_name for person in found] == ['Smith']

    admins = Person.search('all', filters={'admin': True})
    assert [person.first_name for person in admins] == ['Mary']


def test_terms_with_attribute_filters(staff):
    found = Person.search('all', filters={'terms': ['mary'],
                                          'first_name': 'John'})
    assert [person.last_name for person in found] == ['Mary']


def test_unknown_options_propagate(staff):
    with pytest.raises(TypeError):
        Person.search('all', filters={'terms': ['mary']}, sort='email')


def test_find_with_bare_fragment(products):
    found = finders.find(Product, 'all', conditions="tags = 'wool'")
    assert names(found) == ['Red Hat']


def test_find_with_caller_conditions(products):
    found = finders.find(Product, 'all', conditions=('tags = %s', ['cotton']))
    assert names(found) == ['Blue Shirt']


def test_find_with_empty_conditions(products):
    assert finders.find(Product, 'count', conditions=(None, [])) == 3


def test_limit_and_offset_only_apply_to_all(products):
    assert Product.search('count', limit=1, offset=1) == 3
    assert Product.search('first', order='name', limit=1,
                          offset=2).name == 'Blue Shirt'


def test_filter_names_cannot_widen_the_search(staff):
    assert Person.search('count', filters={'first_name': 'nobody'}) == 0
    with pytest.raises(FieldDoesNotExist):
        Person.search('count', filters={'1=1 OR first_name': 'nobody'})
    with pytest.raises(FieldDoesNotExist):
        Person.search('all', filters={"first_name = 'Mary' --": 'x'})


def test_filter_on_foreign_key(products):
    acme = products[0].maker
    found = Product.search('all', filters={'maker': acme.pk}, order='name')
    assert names(found) == ['Blue Shirt', 'Large Blue Mug']
