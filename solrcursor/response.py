from solrcursor import constants
from solrcursor.exceptions import MalformedResponse
from solrcursor.helpers import bind_document


class QueryResponse:
    """
    One page of results returned by the search backend.

    The body is validated when the object is built, so a page missing its
    documents, its total count or its next cursor mark never reaches an iterator.

    :param data [Dict[str, Any]]: decoded JSON body.
    :param response requests.Response: the HTTP response, when there is one.
    """

    def __init__(self, data, response=None):
        self.raw = data
        self.http_response = response

        if not isinstance(data, dict):
            raise MalformedResponse('Response body is not an object.', response=response)

        body = data.get(constants.RESPONSE_KEY)
        if not isinstance(body, dict):
            raise MalformedResponse(f"Missing '{constants.RESPONSE_KEY}' section.", response=response)

        docs = body.get(constants.DOCS_KEY)
        if not isinstance(docs, list):
            raise MalformedResponse(f"Missing '{constants.DOCS_KEY}' list.", response=response)
        if not all(isinstance(doc, dict) for doc in docs):
            raise MalformedResponse('Every document must be an object.', response=response)

        num_found = body.get(constants.NUM_FOUND_KEY)
        if not isinstance(num_found, int):
            raise MalformedResponse(f"Missing '{constants.NUM_FOUND_KEY}'.", response=response)

        next_cursor_mark = data.get(constants.NEXT_CURSOR_MARK_KEY)
        if not isinstance(next_cursor_mark, str):
            raise MalformedResponse(f"Missing '{constants.NEXT_CURSOR_MARK_KEY}'.", response=response)

        self.results = docs
        self.num_found = num_found
        self.next_cursor_mark = next_cursor_mark

    def __len__(self):
        return len(self.results)

    def __repr__(self):
        return f'<QueryResponse docs={len(self.results)} num_found={self.num_found}>'

    def get_beans(self, model=None):
        return [bind_document(model, doc) for doc in self.results]
