"""Shared fixtures: Django settings and an in-memory cursor-mark backend."""

import json

import django
import pytest
import requests
from django.conf import settings

from solrcursor import constants
from solrcursor.exceptions import BackendUnavailable
from solrcursor.response import QueryResponse


def pytest_configure():
    if not settings.configured:
        settings.configure(
            INSTALLED_APPS=['solrcursor.contrib.django'],
            SOLR={
                'BASE_URL': 'http://solr.test:8983/solr',
                'DEFAULT_COLLECTION': 'variants',
            },
        )
        django.setup()


class FakeSolr:
    """
    Answers cursor-mark queries over documents with integer ids.

    Like Solr, the next cursor mark points after the last returned document,
    and equals the sent mark when nothing is left.
    """

    def __init__(self, count, fail_on_call=None):
        self.docs = [{'id': i, 'name': f'variant-{i}'} for i in range(1, count + 1)]
        self.calls = []
        self.fail_on_call = fail_on_call

    @staticmethod
    def _mark(doc_id):
        return f'AoE{doc_id}'

    def query(self, collection, query):
        params = query.to_params()
        self.calls.append(params)

        if self.fail_on_call is not None and len(self.calls) == self.fail_on_call:
            raise BackendUnavailable('connection refused')

        assert 'start' not in params, 'start cannot be combined with a cursor mark'
        assert params['sort'] == 'id asc'

        cursor_mark = params[constants.CURSOR_MARK_PARAM]
        last_id = 0 if cursor_mark == constants.CURSOR_MARK_START else int(cursor_mark[3:])

        page = [doc for doc in self.docs if doc['id'] > last_id][:params['rows']]
        next_mark = self._mark(page[-1]['id']) if page else cursor_mark

        return QueryResponse({
            'responseHeader': {'status': 0},
            'response': {'numFound': len(self.docs), 'start': 0, 'docs': [dict(doc) for doc in page]},
            'nextCursorMark': next_mark,
        })

    @property
    def requested_rows(self):
        return [call['rows'] for call in self.calls]


@pytest.fixture
def fake_solr():
    return FakeSolr(250)


def make_response(status=200, data=None, body=None, url='http://solr.test:8983/solr/variants/select'):
    response = requests.Response()
    response.status_code = status
    if body is None:
        body = json.dumps(data if data is not None else {})
    response._content = body.encode('utf-8')
    response.url = url
    response.request = requests.Request('GET', url).prepare()
    return response


def solr_body(ids, num_found, next_mark):
    return {
        'responseHeader': {'status': 0},
        'response': {'numFound': num_found, 'start': 0, 'docs': [{'id': i} for i in ids]},
        'nextCursorMark': next_mark,
    }
