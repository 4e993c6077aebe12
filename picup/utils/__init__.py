"""picup utility functions.

Each file in this package exports exactly one function, following
the single file == function/class rule.
"""

from .get_home_dir import get_home_dir
from .get_package_version import get_package_version
from .logger import configure_logging

__all__ = [
    "configure_logging",
    "get_home_dir",
    "get_package_version",
]
