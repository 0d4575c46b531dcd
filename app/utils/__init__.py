# app/utils/__init__.py
"""
Utility functions package.

This package contains reusable utility functions organized by domain:
- general.py: Upload validation, search escaping, redirects and template filters
"""

# Import commonly used utilities for convenient access
from .general import allowed_file, escape_like, is_safe_redirect, redirect_back, time_ago
from .general import LIKE_ESCAPE_CHAR, _handle_service_result

__all__ = [
    'allowed_file',
    'escape_like',
    'is_safe_redirect',
    'redirect_back',
    'time_ago',
    'LIKE_ESCAPE_CHAR',
    '_handle_service_result',
]
