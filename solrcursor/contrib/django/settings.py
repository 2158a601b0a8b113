from django.conf import settings


DEFAULT_SETTINGS = {
    'BASE_URL': 'http://localhost:8983/solr',
    'DEFAULT_COLLECTION': None,
    'TIMEOUT': None,
    'BATCH_SIZE': 100,
}


class SolrSettings:
    def __getattr__(self, key):
        if not getattr(settings, 'SOLR', None):
            raise AttributeError('Missing Solr configuration on django settings')
        solr = settings.SOLR
        try:
            return solr.get(key, DEFAULT_SETTINGS[key])
        except KeyError:
            raise AttributeError(key)


solr_settings = SolrSettings()
