# Column names in terms_attributes are put into the SQL verbatim; they come from your code, not from users, so aren't quoted or checked. A name that isn't a real column fails when the query runs.
# Searching across a join is possible by qualifying the column (eg: 'app_maker.name') and passing include=['maker'], but then every terms attribute needs qualifying if any column name is ambiguous.
# Terms aren't escaped for LIKE, so '%' and '_' in a term act as wildcards.

from .conditions import Comparison, Condition
from .registry import (Searchable, autodiscover, get_searchable,
                       register_searchable, registered_models, search,
                       unregister_searchable)
