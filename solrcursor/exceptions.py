class ImproperlyConfigured(Exception):
    pass


class SolrError(Exception):
    default_message = 'Unknown Error.'

    def __init__(self, message=None, response=None, *args, **kwargs):
        self.message = message or self.default_message
        self.response = response
        super().__init__(self.message, *args, **kwargs)


class BackendUnavailable(SolrError):
    default_message = 'Search backend is unavailable.'


class MalformedResponse(SolrError):
    default_message = 'Search backend returned a malformed response.'


class InvalidRequest(SolrError):
    default_message = 'Invalid search request.'


class NotFound(SolrError):
    default_message = 'Collection or handler not found.'


class InvalidIteratorUse(RuntimeError):
    """
    Raised when an iterator is used out of contract: asking for the next
    record when none is available, or for the total before any fetch.
    """
