from solrcursor import constants
from solrcursor.base import RequestHandler
from solrcursor.iterators import CursorSearchIterator
from solrcursor.query import SolrQuery
from solrcursor.response import QueryResponse


class SolrClient(RequestHandler):

    def query(self, collection, query):
        """
        Run one search request and return the page of results.

        See docs: https://solr.apache.org/guide/solr/latest/query-guide/pagination-of-results.html

        :param collection [str]: Solr collection (or core) name.
        :param query [SolrQuery]: the query to send, already carrying rows and cursor mark.
        """
        assert collection, "'collection' must be a non empty string"
        assert isinstance(query, SolrQuery), "'query' must be a SolrQuery instance"

        path = f'{collection}/{constants.SELECT_HANDLER}'
        data = self._dispatcher('get', path, **query.to_params())
        return QueryResponse(data, response=self.last_response)

    def iterator(self, collection, query, model=None, batch_size=constants.BATCH_SIZE):
        """
        Iterate over every result of the query using cursor marks.

        :param collection [str]: Solr collection (or core) name.
        :param query [SolrQuery]: the query; 'rows' is the overall limit and 'start' is skipped locally.
        :param model [Callable]: type the documents are bound to, raw dicts if None.
        :param batch_size [int]: maximum rows fetched per request.
        """
        return CursorSearchIterator(self, collection, query, model=model, batch_size=batch_size)
