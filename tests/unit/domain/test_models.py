# nosec B101


from datetime import UTC, datetime
from decimal import Decimal

import pytest
from pydantic import ValidationError

from oxr.domain.models import ApiErrorBody, Conversion, ConversionRequest, Rates, TimeSeries


def test_rates_as_of_is_utc():
    rates = Rates(timestamp=1388620800, base='USD', rates={'EUR': Decimal('0.72')})

    assert rates.as_of == datetime(2014, 1, 2, tzinfo=UTC)


def test_rates_are_frozen():
    rates = Rates(timestamp=1000, base='USD', rates={})

    with pytest.raises(ValidationError):
        rates.base = 'EUR'


def test_rates_accept_string_and_int_values():
    rates = Rates.model_validate(
        {'timestamp': 1000, 'base': 'USD', 'rates': {'EUR': '0.900000000001', 'JPY': 110}}
    )

    assert rates.rates['EUR'] == Decimal('0.900000000001')
    assert rates.rates['JPY'] == Decimal('110')


def test_rates_require_base():
    with pytest.raises(ValidationError):
        Rates.model_validate({'timestamp': 1000, 'rates': {}})


def test_time_series_nested_rates():
    series = TimeSeries.model_validate(
        {
            'start_date': '2014-01-01',
            'end_date': '2014-01-01',
            'base': 'USD',
            'rates': {'2014-01-01': {'EUR': '0.72'}},
        }
    )

    assert series.rates['2014-01-01']['EUR'] == Decimal('0.72')


def test_conversion_request_uses_wire_aliases():
    request = ConversionRequest.model_validate(
        {'query': '/convert/1/USD/EUR', 'amount': 1, 'from': 'USD', 'to': 'EUR'}
    )

    assert request.from_currency == 'USD'
    assert request.to_currency == 'EUR'
    assert request.model_dump(by_alias=True)['from'] == 'USD'


def test_conversion_request_accepts_field_names():
    request = ConversionRequest(query='q', amount=Decimal('1'), from_currency='USD', to_currency='EUR')

    assert request.from_currency == 'USD'


def test_conversion_requires_meta():
    with pytest.raises(ValidationError):
        Conversion.model_validate(
            {
                'request': {'query': 'q', 'amount': 1, 'from': 'USD', 'to': 'EUR'},
                'response': 0.9,
            }
        )


def test_api_error_body_defaults():
    body = ApiErrorBody.model_validate({'status': 404, 'message': 'not_found'})

    assert body.error is True
    assert body.description == ''
