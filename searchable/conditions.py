"""Condition trees which render to parameterised SQL fragments.

A tree is built from `Comparison` leaves (a bit of SQL containing a single
placeholder, plus the value bound to it) grouped by `Condition` nodes, each of
which joins its children with one boolean operator.

"""

OPERATORS = ('AND', 'OR')


class Comparison(object):
    """A single comparison against a column.

    `expression` is SQL with `{placeholder}` marking where the bound value
    goes; expressions without a placeholder (eg: `IS NULL`) bind nothing.

    """

    def __init__(self, expression, value=None):
        self.expression = expression
        self.value = value

    @classmethod
    def like(cls, column, pattern, operator='LIKE'):
        return cls('%s %s {placeholder}' % (column, operator), pattern)

    @classmethod
    def equals(cls, column, value):
        if value is None:
            return cls('%s IS NULL' % (column, ))
        return cls('%s = {placeholder}' % (column, ), value)

    @property
    def binds(self):
        return '{placeholder}' in self.expression

    def __bool__(self):
        return True

    def __repr__(self):
        return "<Comparison(%r, %r)>" % (self.expression, self.value)

    def to_sql(self, placeholder='%s'):
        fragment = self.expression.replace('{placeholder}', placeholder)
        if self.binds:
            return (fragment, [self.value])
        return (fragment, [])


class Condition(object):
    """A group of comparisons (or further groups) joined by AND or OR.

    Children are rendered in the order they were appended, so the bound
    parameters come out in that order too.

    """

    def __init__(self, operator='AND', children=None):
        operator = operator.upper()
        if operator not in OPERATORS:
            raise ValueError("Unknown boolean operator %r" % (operator, ))
        self.operator = operator
        self.children = []
        for child in children or []:
            self.append(child)

    def append(self, node):
        self.children.append(node)
        return self

    __lshift__ = append

    def __bool__(self):
        return any(self.children)

    def __len__(self):
        return len([child for child in self.children if child])

    def __repr__(self):
        return "<Condition(%s, %r)>" % (self.operator, self.children)

    def to_sql(self, placeholder='%s'):
        """Render to `(fragment, params)`.

        An empty tree renders as `(None, [])`. A group holding nothing but a
        single other group renders as that group, so we don't emit doubled
        parentheses.

        """
        children = [child for child in self.children if child]
        if not children:
            return (None, [])
        if len(children) == 1 and isinstance(children[0], Condition):
            return children[0].to_sql(placeholder)

        fragments = []
        params = []
        for child in children:
            (fragment, child_params) = child.to_sql(placeholder)
            fragments.append(fragment)
            params.extend(child_params)
        joiner = ' %s ' % (self.operator, )
        return ('(%s)' % (joiner.join(fragments), ), params)
