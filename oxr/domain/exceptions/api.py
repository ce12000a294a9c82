from enum import Enum


class ErrorCode(str, Enum):
	NOT_FOUND = 'not_found'
	NOT_AVAILABLE = 'not_available'
	MISSING_APP_ID = 'missing_app_id'
	INVALID_APP_ID = 'invalid_app_id'
	NOT_ALLOWED = 'not_allowed'
	ACCESS_RESTRICTED = 'access_restricted'
	INVALID_BASE = 'invalid_base'


class OXRException(Exception):
	pass


class TransportError(OXRException):
	"""The HTTP request could not be completed."""


class DecodeError(OXRException):
	"""The response body could not be decoded into the expected shape."""

	def __init__(self, message: str, status_code: int | None = None):
		super().__init__(message)
		self.status_code = status_code


class ApiError(OXRException):
	"""Error reported by the remote service in a non-200 response."""

	def __init__(self, status: int, message: str, description: str = '', error: bool = True):
		super().__init__(f'{message}: {description}')
		self.error = error
		self.status = status
		self.message = message
		self.description = description

	@property
	def code(self) -> ErrorCode | None:
		try:
			return ErrorCode(self.message)
		except ValueError:
			return None
