# nosec B101


import pytest

from oxr.domain.exceptions import ApiError, DecodeError, ErrorCode, OXRException, TransportError


def test_api_error_message_format():
    err = ApiError(status=400, message='invalid_base', description='Unsupported base currency')

    assert str(err) == 'invalid_base: Unsupported base currency'
    assert err.error is True


@pytest.mark.parametrize('code', list(ErrorCode))
def test_api_error_code_lookup(code):
    err = ApiError(status=400, message=code.value)

    assert err.code is code


def test_api_error_unknown_code():
    err = ApiError(status=418, message='teapot', description='short and stout')

    assert err.code is None
    assert err.message == 'teapot'


def test_error_codes_are_strings():
    assert ErrorCode.INVALID_APP_ID == 'invalid_app_id'
    assert ErrorCode('not_available') is ErrorCode.NOT_AVAILABLE


@pytest.mark.parametrize('exc_type', [ApiError, DecodeError, TransportError])
def test_errors_share_base(exc_type):
    assert issubclass(exc_type, OXRException)


def test_decode_error_is_not_api_error():
    err = DecodeError('Invalid JSON', status_code=200)

    assert not isinstance(err, ApiError)
    assert err.status_code == 200
