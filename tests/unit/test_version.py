import oxr
from oxr import version


def test_version_string():
    assert oxr.__version__ == "0.1.0"
    assert version.__version__ == f"{version.VERSION_MAJOR}.{version.VERSION_MINOR}.{version.VERSION_REVISION}"


def test_version_tag_suffix():
    assert version._format_version(1, 2, 3, "rc1") == "1.2.3-rc1"
    assert version._format_version(1, 2, 3) == "1.2.3"


def test_author():
    assert oxr.__author__ == f"{version.AUTHOR_NAME} <{version.AUTHOR_EMAIL}>"
