import pytest

from searchable import register_searchable, unregister_searchable
from tests.recording import RecordingSearchable
from tests.testapp.models import Person


@pytest.fixture
def recorder():
    return RecordingSearchable(Person, ['first_name', 'last_name'])


@pytest.fixture
def people():
    searchable = register_searchable(
        Person, terms_attributes=['first_name', 'last_name', 'email'])
    yield searchable
    unregister_searchable(Person)
