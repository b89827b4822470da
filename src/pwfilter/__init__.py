"""pwfilter package metadata."""
from importlib.metadata import version, PackageNotFoundError

from pwfilter.postprocess import classify, is_placeholder, has_foreign_unicode

try:
    __version__ = version("pwfilter")
except PackageNotFoundError:
    __version__ = "0.1.0"

__all__ = ["classify", "is_placeholder", "has_foreign_unicode", "__version__"]
