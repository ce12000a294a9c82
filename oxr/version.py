VERSION_MAJOR = 0
VERSION_MINOR = 1
VERSION_REVISION = 0
VERSION_TAG = ''

AUTHOR_NAME = 'Martín Raúl Villalba'
AUTHOR_EMAIL = 'martin@martinvillalba.com'


def _format_version(major: int, minor: int, revision: int, tag: str = '') -> str:
	version = f'{major}.{minor}.{revision}'
	return f'{version}-{tag}' if tag else version


__version__ = _format_version(VERSION_MAJOR, VERSION_MINOR, VERSION_REVISION, VERSION_TAG)
__author__ = f'{AUTHOR_NAME} <{AUTHOR_EMAIL}>'
