from .api import ApiError, DecodeError, ErrorCode, OXRException, TransportError

__all__ = ['ApiError', 'DecodeError', 'ErrorCode', 'OXRException', 'TransportError']
