# schemaslice/utils/__init__.py
from .gitignore import IgnoreRules, get_gitignore

__all__ = ["IgnoreRules", "get_gitignore"]
