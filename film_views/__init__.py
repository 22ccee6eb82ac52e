"""Film Views web app"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("film-views")
except PackageNotFoundError:
    __version__ = "dev"
