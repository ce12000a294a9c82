from datetime import UTC, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
	model_config = ConfigDict(frozen=True, populate_by_name=True)


class Rates(_Frozen):
	"""Exchange rates for one base currency at one point in time."""

	disclaimer: str = ''
	license: str = ''
	timestamp: int = Field(..., description='Seconds since the epoch')
	base: str
	rates: dict[str, Decimal]

	@property
	def as_of(self) -> datetime:
		return datetime.fromtimestamp(self.timestamp, tz=UTC)


class TimeSeries(_Frozen):
	disclaimer: str = ''
	license: str = ''
	start_date: str
	end_date: str
	base: str
	rates: dict[str, dict[str, Decimal]] = Field(..., description='Date -> currency code -> rate')


class ConversionRequest(_Frozen):
	query: str
	amount: Decimal
	from_currency: str = Field(..., alias='from')
	to_currency: str = Field(..., alias='to')


class ConversionMeta(_Frozen):
	timestamp: int
	rate: Decimal


class Conversion(_Frozen):
	disclaimer: str = ''
	license: str = ''
	request: ConversionRequest
	meta: ConversionMeta
	response: Decimal


class ApiErrorBody(_Frozen):
	error: bool = True
	status: int
	message: str
	description: str = ''
