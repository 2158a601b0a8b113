import copy

from solrcursor.constants import SORT_ORDER


# Owned by the query attributes, never by the extra params.
PAGINATION_PARAMS = ('sort', 'rows', 'start')


class SolrQuery:
    """
    A search request against a Solr collection.

    Only the pagination fields (sort, rows, start and the cursor mark) are
    touched by the iterators. Everything else is forwarded as given.

    :param q [str]: main query string.
    :param filter_queries [Sequence[str]]: filter queries (fq).
    :param fields [Sequence[str]]: fields to return (fl).
    :param sort [Tuple[str, str]]: (field, order) sort clause.
    :param rows [int]: overall number of rows wanted.
    :param start [int]: offset of the first row wanted.
    :param params [Dict[str, Any]]: extra request params passed through untouched.
    """

    def __init__(self, q='*:*', filter_queries=None, fields=None, sort=None, rows=None, start=None, **params):
        self.q = q
        self.filter_queries = list(filter_queries or [])
        self.fields = list(fields or [])
        self.sort = None
        self.rows = rows
        self.start = start
        self.params = dict(params)

        if sort:
            self.set_sort(*sort)

    def __repr__(self):
        return f'<SolrQuery q={self.q!r} rows={self.rows} start={self.start} sort={self.sort}>'

    def set_sort(self, field, order=SORT_ORDER.ASC):
        """
        Replace the sort clause.
        """
        assert order in SORT_ORDER, (
            "Invalid value for 'order': '{}'".format(order),
            "Valid values are: {}".format(list(SORT_ORDER.values()))
        )
        self.sort = (field, order)

    def add_filter_query(self, fq):
        self.filter_queries.append(fq)

    def set(self, name, value):
        """
        Set a request param. 'sort' (as "<field> <order>" or a tuple), 'rows'
        and 'start' go to their attributes so they cannot shadow them.
        """
        if name == 'sort':
            if isinstance(value, str):
                value = value.split()
            self.set_sort(*value)
        elif name in PAGINATION_PARAMS:
            setattr(self, name, value)
        else:
            self.params[name] = value

    def get(self, name, default=None):
        if name in PAGINATION_PARAMS:
            value = getattr(self, name)
            return default if value is None else value
        return self.params.get(name, default)

    def remove(self, name):
        if name in PAGINATION_PARAMS:
            setattr(self, name, None)
        else:
            self.params.pop(name, None)

    def copy(self):
        return copy.deepcopy(self)

    def to_params(self):
        params = {'q': self.q}
        if self.filter_queries:
            params['fq'] = list(self.filter_queries)
        if self.fields:
            params['fl'] = ','.join(self.fields)
        if self.sort:
            params['sort'] = '{} {}'.format(*self.sort)
        if self.rows is not None:
            params['rows'] = self.rows
        if self.start is not None:
            params['start'] = self.start
        params.update(
            (name, value) for name, value in self.params.items() if name not in PAGINATION_PARAMS
        )
        return params
