import logging
import urllib.parse
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Iterable, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from oxr.domain.exceptions import ApiError, DecodeError, TransportError
from oxr.domain.models import ApiErrorBody, Conversion, Rates, TimeSeries

logger = logging.getLogger(__name__)

DEFAULT_API_URL = 'openexchangerates.org/api'
DEFAULT_BASE = 'USD'

ModelT = TypeVar('ModelT', bound=BaseModel)

_currencies_adapter = TypeAdapter(dict[str, str])


class Protocol(str, Enum):
    HTTP = 'http'
    HTTPS = 'https'


class ApiClient:
    """Synchronous client for the Open Exchange Rates API.

    Every operation performs exactly one GET request. Non-200 responses are
    raised as ``ApiError``, undecodable bodies as ``DecodeError`` and network
    failures as ``TransportError``. Timeouts, proxies and connection pooling
    are whatever the supplied ``httpx.Client`` is configured with.
    """

    def __init__(
        self,
        app_id: str,
        protocol: Protocol | str = Protocol.HTTPS,
        api_url: str = DEFAULT_API_URL,
        client: httpx.Client | None = None,
    ):
        self._app_id = app_id
        self._protocol = Protocol(protocol)
        self._api_url = api_url.strip('/')
        self._owns_client = client is None
        self._client = client or httpx.Client()

    @property
    def app_id(self) -> str:
        return self._app_id

    @property
    def protocol(self) -> Protocol:
        return self._protocol

    @property
    def api_url(self) -> str:
        return self._api_url

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(protocol={self._protocol.value!r}, api_url={self._api_url!r})'

    def currencies(self) -> dict[str, str]:
        """Currency codes mapped to their full names."""
        body = self._make_request('currencies.json')
        try:
            return _currencies_adapter.validate_python(body)
        except ValidationError as e:
            raise DecodeError(f'Unexpected currencies response: {e}', 200) from e

    def latest(self, base: str = DEFAULT_BASE, symbols: Iterable[str] | None = None) -> Rates:
        params = self._rate_params(base, symbols)
        return self._decode(Rates, self._make_request('latest.json', params))

    def historical(
        self,
        on: date | str,
        base: str = DEFAULT_BASE,
        symbols: Iterable[str] | None = None,
    ) -> Rates:
        """Rates at the end of the given UTC day (``YYYY-MM-DD``)."""
        params = self._rate_params(base, symbols)
        endpoint = f'historical/{_format_date(on)}.json'
        return self._decode(Rates, self._make_request(endpoint, params))

    def time_series(
        self,
        start: date | str,
        end: date | str,
        base: str = DEFAULT_BASE,
        symbols: Iterable[str] | None = None,
    ) -> TimeSeries:
        params = {'start': _format_date(start), 'end': _format_date(end)}
        params.update(self._rate_params(base, symbols))
        return self._decode(TimeSeries, self._make_request('time-series.json', params))

    def convert(self, amount: Decimal | int | str, from_currency: str, to_currency: str) -> Conversion:
        endpoint = f'convert/{amount}/{from_currency}/{to_currency}'
        return self._decode(Conversion, self._make_request(endpoint))

    @staticmethod
    def _rate_params(base: str, symbols: Iterable[str] | None) -> dict[str, str]:
        params = {}
        # The service treats USD as the implicit base, so it is never sent.
        if base and base != DEFAULT_BASE:
            params['base'] = base
        if isinstance(symbols, str):
            symbols = [symbols]
        if symbols:
            params['symbols'] = ','.join(symbols)
        return params

    def _build_request_url(self, endpoint: str, params: dict[str, str]) -> str:
        query = urllib.parse.urlencode({'app_id': self._app_id, **params}, safe=',')
        return f'{self._protocol.value}://{self._api_url}/{endpoint}?{query}'

    def _make_request(self, endpoint: str, params: dict[str, str] | None = None) -> Any:
        """GET the endpoint and return the decoded JSON body of a 200 response."""
        start_time = datetime.now()

        try:
            response = self._client.get(self._build_request_url(endpoint, params or {}))
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.warning(
                f'Request to {endpoint} failed: {e.__class__.__name__}',
                extra={'extra_data': {'endpoint': endpoint, 'error': str(e)}},
            )
            raise TransportError(f'Request to {endpoint} failed: {e.__class__.__name__}: {e}') from e

        response_time_ms = int((datetime.now() - start_time).total_seconds() * 1000)
        context = {
            'endpoint': endpoint,
            'status_code': response.status_code,
            'response_time_ms': response_time_ms,
        }
        logger.debug(f'GET {endpoint} -> {response.status_code}', extra={'extra_data': context})

        try:
            body = response.json(parse_float=Decimal)
        except ValueError as e:
            logger.warning(f'Undecodable response body from {endpoint}', extra={'extra_data': context})
            raise DecodeError(
                f'Invalid JSON in response from {endpoint} (HTTP {response.status_code}): {e}',
                response.status_code,
            ) from e

        if response.status_code != httpx.codes.OK:
            self._raise_api_error(body, context)

        return body

    @staticmethod
    def _raise_api_error(body: Any, context: dict[str, Any]) -> None:
        endpoint = context['endpoint']
        status_code = context['status_code']
        try:
            err = ApiErrorBody.model_validate(body)
        except ValidationError as e:
            logger.warning(f'Unexpected error response from {endpoint}', extra={'extra_data': context})
            raise DecodeError(f'Unexpected error response (HTTP {status_code}): {e}', status_code) from e

        logger.warning(
            f'API error from {endpoint}: {err.message}',
            extra={'extra_data': {**context, 'message': err.message, 'description': err.description}},
        )
        raise ApiError(
            status=err.status,
            message=err.message,
            description=err.description,
            error=err.error,
        )

    @staticmethod
    def _decode(model: type[ModelT], body: Any) -> ModelT:
        try:
            return model.model_validate(body)
        except ValidationError as e:
            raise DecodeError(f'Unexpected {model.__name__} response: {e}', 200) from e

    def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> 'ApiClient':
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def _format_date(value: date | str) -> str:
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return value
