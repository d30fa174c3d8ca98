"""
Exposes the version of tranmerc
"""
__version__ = 'v0.1.0'

__all__ = ["__version__"]
