class Enum:
    def __init__(self, **kwargs):
        self.__dict__.update(kwargs)

    def __contains__(self, value):
        return value in self.__dict__.values()

    def __iter__(self):
        return iter(self.__dict__.values())

    def values(self):
        return iter(self.__dict__.values())


SORT_ORDER = Enum(
    ASC='asc',
    DESC='desc',
)


# Rows requested per refill, never more.
BATCH_SIZE = 100

# Overall budget when the query does not set rows.
DEFAULT_LIMIT = 100000

CURSOR_MARK_PARAM = 'cursorMark'

CURSOR_MARK_START = '*'

UNIQUE_KEY = 'id'

SELECT_HANDLER = 'select'

RESPONSE_KEY = 'response'

DOCS_KEY = 'docs'

NUM_FOUND_KEY = 'numFound'

NEXT_CURSOR_MARK_KEY = 'nextCursorMark'
