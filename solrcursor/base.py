import logging
from http import HTTPStatus

import requests

from solrcursor import constants
from solrcursor.exceptions import (
    ImproperlyConfigured,
    SolrError,
    BackendUnavailable,
    MalformedResponse,
    InvalidRequest,
    NotFound,
)


logger = logging.getLogger('solrcursor.client')


class RequestHandler:

    base_url: str = None
    timeout: float = None

    error_mapping = {
        HTTPStatus.BAD_REQUEST: InvalidRequest,
        HTTPStatus.NOT_FOUND: NotFound,
        HTTPStatus.INTERNAL_SERVER_ERROR: BackendUnavailable,
        HTTPStatus.BAD_GATEWAY: BackendUnavailable,
        HTTPStatus.SERVICE_UNAVAILABLE: BackendUnavailable,
        HTTPStatus.GATEWAY_TIMEOUT: BackendUnavailable,
    }

    def __init__(self, base_url=None, timeout=None, session=None):
        if base_url is not None:
            self.base_url = base_url
        if timeout is not None:
            self.timeout = timeout

        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()
        self.last_response = None

    def _build_url(self, path):
        if not self.base_url:
            raise ImproperlyConfigured("Missing the 'base_url' setting for the Solr client.")

        base_url = self.base_url
        if not base_url.startswith('http'):
            base_url = f'http://{base_url}'

        return '{}/{}'.format(base_url.rstrip('/'), path.strip('/'))

    def _dispatcher(self, method, path, **params):
        """
        :param method [str]: HTTP method.

        :param path [str]: URL path below the base URL, e.g. '<collection>/select'.

        :param params [Dict[str, Any]]: Dict of params to be passed as querystring on the request.
        """
        url = self._build_url(path)
        params.setdefault('wt', 'json')
        context = {
            'http_method': method.upper(),
            'url': url,
            'params': params,
            'cursor_mark': params.get(constants.CURSOR_MARK_PARAM),
        }

        self._before_request(context)

        kwargs = {'params': params}
        # just create arguments that exist.
        if self.timeout is not None:
            kwargs['timeout'] = self.timeout

        try:
            response = self.session.request(method.lower(), url, **kwargs)
        except (requests.ConnectionError, requests.Timeout) as exc:
            logger.warning("%s %s failed: %s", method.upper(), url, exc)
            raise BackendUnavailable(str(exc)) from exc

        self._after_request(response)

        logger.info(
            "%s %s %d",
            method.upper(),
            response.request.url if response.request is not None else url,
            response.status_code,
            extra=dict(request=response.request, response=response),
        )

        self.handle_response(response)
        self.last_response = response
        try:
            return response.json()
        except ValueError as exc:
            raise MalformedResponse('Response body is not valid JSON.', response=response) from exc

    def _before_request(self, context):
        """
        Hook called before the request to be made

        :param context [Dict[str, Any]]: the context of the request.
        """
        if hasattr(self, '_before_request_subscribers'):
            for fn in self._before_request_subscribers:
                fn(context)

    def _after_request(self, response):
        """
        Hook called after the request to be made

        :param response requests.Response: the response object.
        """
        if hasattr(self, '_after_request_subscribers'):
            for fn in self._after_request_subscribers:
                fn(response)

    def before_request_hook(self, func):
        """
        Add a callable to be called before the request be made.

        callable signature: (context) where context is a dict
        containing the request data:
            - http_method,
            - url,
            - params,
            - cursor_mark (None outside cursor pagination),

        :param func [Callable]: callable to be called before make the request
        """
        assert callable(func), "'func' must be a callable"

        if not hasattr(self, '_before_request_subscribers'):
            self._before_request_subscribers = [func]
        else:
            self._before_request_subscribers.append(func)

    def after_request_hook(self, func):
        """
        Add a callable to be called after the response is received.

        callable signature: (response) - The response object.

        :param func [Callable]: callable to be called after the request
        """
        assert callable(func), "'func' must be a callable"

        if not hasattr(self, '_after_request_subscribers'):
            self._after_request_subscribers = [func]
        else:
            self._after_request_subscribers.append(func)

    def handle_response(self, response):
        try:
            response.raise_for_status()
        except requests.HTTPError:
            exp_cls = self.error_mapping.get(response.status_code)
            if exp_cls is None:
                exp_cls = BackendUnavailable if response.status_code >= 500 else SolrError
            raise exp_cls(response=response)
        return response

    def close(self):
        # A session handed in by the caller is theirs to close.
        if self._owns_session:
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
