import logging

from solrcursor.client import SolrClient
from solrcursor.exceptions import ImproperlyConfigured
from solrcursor.contrib.django.settings import solr_settings


logger = logging.getLogger(__name__)


class SolrSearchManager:
    client_class = SolrClient

    def __init__(self, collection=None):
        self.collection = collection

    @classmethod
    def for_collection(cls, collection):
        return cls(collection=collection)

    def get_collection(self):
        collection = self.collection or solr_settings.DEFAULT_COLLECTION
        if not collection:
            raise ImproperlyConfigured(
                "No collection given and no 'DEFAULT_COLLECTION' in the SOLR settings."
            )
        return collection

    def get_client_class(self):
        assert self.client_class is not None, "You must set the client_class attribute"
        return self.client_class

    def get_client(self):
        if getattr(self, "_client", None) is None:
            self._client = self.get_client_class()(
                base_url=solr_settings.BASE_URL,
                timeout=solr_settings.TIMEOUT,
            )
        return self._client

    def query(self, query):
        return self.get_client().query(self.get_collection(), query)

    def search(self, query, model=None):
        collection = self.get_collection()
        logger.debug("searching '%s' with %r", collection, query)
        return self.get_client().iterator(
            collection,
            query,
            model=model,
            batch_size=solr_settings.BATCH_SIZE,
        )
