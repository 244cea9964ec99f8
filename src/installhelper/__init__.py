"""
InstallHelper - install a repository from its README with a language model
"""

__version__ = "0.1.0"

from .core import InstallHelper
from .errors import HelperError

__all__ = ["InstallHelper", "HelperError"]
