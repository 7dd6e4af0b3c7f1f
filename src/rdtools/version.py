"""Version information."""

from importlib.metadata import PackageNotFoundError, version

# https://www.python.org/dev/peps/pep-0440
try:
    __version__ = version("rdtools")
except PackageNotFoundError:
    __version__ = "0.0.0"

__verbose_version__ = __version__
