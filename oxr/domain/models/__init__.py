from .rates import ApiErrorBody, Conversion, ConversionMeta, ConversionRequest, Rates, TimeSeries

__all__ = [
	'ApiErrorBody',
	'Conversion',
	'ConversionMeta',
	'ConversionRequest',
	'Rates',
	'TimeSeries',
]
