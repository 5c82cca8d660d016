"""
Bun path library.

Resolves the Bun executable for tools that spawn it from non-interactive
shells where the user's PATH may not be set up.
"""

__version__ = "1.0.0"

# Re-export main modules for convenience
from . import bun_path
from . import env_check

__all__ = [
    "bun_path",
    "env_check",
]
