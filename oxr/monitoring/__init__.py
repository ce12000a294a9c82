from .logger import JSONFormatter, LogFormat, LogLevel, setup_logging

__all__ = ['JSONFormatter', 'LogFormat', 'LogLevel', 'setup_logging']
