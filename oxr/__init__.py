from .domain.exceptions import ApiError, DecodeError, ErrorCode, OXRException, TransportError
from .domain.models import Conversion, ConversionMeta, ConversionRequest, Rates, TimeSeries
from .infrastructure.client import DEFAULT_API_URL, ApiClient, Protocol
from .version import __author__, __version__

__all__ = [
	'DEFAULT_API_URL',
	'ApiClient',
	'ApiError',
	'Conversion',
	'ConversionMeta',
	'ConversionRequest',
	'DecodeError',
	'ErrorCode',
	'OXRException',
	'Protocol',
	'Rates',
	'TimeSeries',
	'TransportError',
	'__author__',
	'__version__',
]
