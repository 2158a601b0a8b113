import logging
from collections import deque

from solrcursor import constants
from solrcursor.exceptions import InvalidIteratorUse, SolrError


logger = logging.getLogger(__name__)

_MISSING = object()


class SearchIterator:
    """
    Forward-only, single-pass sequence of search results.

    Subclasses implement ``has_more``, ``next`` and ``total_matched``. The
    Python iterator and context manager protocols are built on top of them,
    so both styles work:

        with client.iterator('variants', query) as results:
            for record in results:
                ...

        while results.has_more():
            record = results.next()
    """

    def has_more(self):
        raise NotImplementedError

    def next(self):
        raise NotImplementedError

    def total_matched(self):
        raise NotImplementedError

    def close(self):
        pass

    def __iter__(self):
        return self

    def __next__(self):
        if not self.has_more():
            raise StopIteration
        return self.next()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()


class CursorState:
    """
    Pagination bookkeeping for one cursor iterator: the cursor mark to send
    next, the one sent before it and how many rows are still owed.
    """

    def __init__(self, remaining, current_token=constants.CURSOR_MARK_START):
        self.current_token = current_token
        self.previous_token = None
        self.remaining = max(remaining, 0)
        self.drained = False

    def __repr__(self):
        return (
            f'<CursorState current={self.current_token!r} previous={self.previous_token!r} '
            f'remaining={self.remaining}>'
        )

    @property
    def exhausted(self):
        if self.remaining <= 0 or self.drained:
            return True
        return self.previous_token is not None and self.previous_token == self.current_token

    def advance(self, next_token, returned, requested):
        """
        :param next_token [str]: next cursor mark reported by the backend.
        :param returned [int]: number of records the backend actually returned.
        :param requested [int]: rows asked for.
        """
        self.previous_token = self.current_token
        self.current_token = next_token
        self.remaining = max(self.remaining - returned, 0)
        # A short page means the backend has nothing past it.
        if returned < requested:
            self.drained = True


class CursorSearchIterator(SearchIterator):
    """
    Iterate over a query's results with cursor marks, fetching bounded batches
    on demand.

    The query is copied; the caller's instance is never modified. The copy is
    always sorted ascending by the unique key, since cursor marks are only
    meaningful over a total order. ``rows`` on the query is the overall limit
    (``DEFAULT_LIMIT`` when unset or negative) and ``start`` is emulated by
    fetching and discarding that many records here, cursor marks having no
    notion of an offset.

    :param client: anything with ``query(collection, query) -> QueryResponse``.
    :param collection [str]: collection name.
    :param query [SolrQuery]: the query.
    :param model [Callable]: type the documents are bound to, raw dicts if None.
    :param batch_size [int]: maximum rows per request.
    """

    def __init__(self, client, collection, query, model=None, batch_size=constants.BATCH_SIZE):
        assert batch_size > 0, "'batch_size' must be a positive integer"

        self.client = client
        self.collection = collection
        self.model = model
        self.batch_size = batch_size

        self.query = query.copy()
        self.query.set_sort(constants.UNIQUE_KEY, constants.SORT_ORDER.ASC)

        limit = self.query.rows
        if limit is None or limit < 0:
            limit = constants.DEFAULT_LIMIT

        # start is never forwarded; Solr rejects it alongside a cursor mark.
        skip = self.query.start if self.query.start is not None and self.query.start >= 0 else 0
        self.query.start = None

        # Skipped records are fetched too, so they are part of the budget.
        self.state = CursorState(limit + skip)
        self.fetches = 0
        self._page = deque()
        self._num_found = None
        self._finished = False
        self._closed = False

        self.skipped = self._skip(skip)

    def __repr__(self):
        return f'<CursorSearchIterator collection={self.collection!r} {self.state!r}>'

    def _skip(self, count):
        skipped = 0
        while skipped < count and self.has_more():
            self.next()
            skipped += 1
        if skipped < count:
            logger.debug("skip of %d stopped at backend exhaustion after %d records", count, skipped)
        return skipped

    def _refill(self):
        if self.state.exhausted:
            self._finished = True
            return False

        rows = min(self.state.remaining, self.batch_size)
        self.query.rows = rows
        self.query.set(constants.CURSOR_MARK_PARAM, self.state.current_token)

        try:
            response = self.client.query(self.collection, self.query)
            records = response.get_beans(self.model)
        except SolrError as exc:
            logger.warning(
                "fetch from '%s' failed at cursor mark %r: %s",
                self.collection,
                self.state.current_token,
                exc,
            )
            raise

        self.fetches += 1
        self.state.advance(response.next_cursor_mark, len(records), rows)
        self._num_found = response.num_found
        self._page = deque(records)

        logger.debug(
            "fetched %d of %d rows from '%s', next cursor mark %r, %d remaining",
            len(records),
            rows,
            self.collection,
            self.state.current_token,
            self.state.remaining,
        )

        if not self._page:
            self._finished = True
        return bool(self._page)

    def has_more(self):
        """
        Return True while a record is available, fetching the next batch when
        the current one is used up. Backend errors raised by the fetch
        propagate; they are never reported as the end of the results.
        """
        if self._page:
            return True
        if self._closed or self._finished:
            return False
        return self._refill()

    def next(self):
        if not self.has_more():
            raise InvalidIteratorUse('No more records available.')
        return self._page.popleft()

    def total_matched(self):
        """
        Total number of documents matching the query, as reported by the
        backend. Only known once the first batch has been fetched; a query
        with rows=0 never fetches, so its total stays unknown.
        """
        if self._num_found is None:
            raise InvalidIteratorUse('Total matched is unknown before the first fetch.')
        return self._num_found

    def close(self):
        # The client is shared and not owned by the iterator, so nothing is
        # released; only the pending batch is dropped.
        self._closed = True
        self._page.clear()


class SequenceSearchIterator(SearchIterator):
    """
    Expose already fetched records through the ``SearchIterator`` interface.

    :param records [Iterable]: the records, consumed lazily.
    :param total [int]: total matched; defaults to ``len(records)`` when sized.
    """

    def __init__(self, records, total=None):
        if total is None and hasattr(records, '__len__'):
            total = len(records)
        self._total = total
        self._records = iter(records)
        self._pending = _MISSING
        self._closed = False

    def has_more(self):
        if self._pending is _MISSING and not self._closed:
            self._pending = next(self._records, _MISSING)
        return self._pending is not _MISSING

    def next(self):
        if not self.has_more():
            raise InvalidIteratorUse('No more records available.')
        record, self._pending = self._pending, _MISSING
        return record

    def total_matched(self):
        if self._total is None:
            raise InvalidIteratorUse('Total matched is unknown for this sequence.')
        return self._total

    def close(self):
        self._closed = True
        self._pending = _MISSING


def cursor_iterator(client, collection, query, model=None, batch_size=constants.BATCH_SIZE):
    return CursorSearchIterator(client, collection, query, model=model, batch_size=batch_size)


def sequence_iterator(records, total=None):
    return SequenceSearchIterator(records, total=total)
