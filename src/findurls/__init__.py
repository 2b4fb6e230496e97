"""
findurls - find and normalize URLs in free text.

    >>> from findurls import extract_urls
    >>> [m.normalized for m in extract_urls("See example.com.")]
    ['https://example.com/']
"""

from .config import ALLOW_ALL, DEFAULT_OPTIONS, ExtractOptions
from .core import UrlMatch, extract_urls, is_valid_hostname, remove_punctuation, resolve_protocol

__version__ = "0.3.3"

extract = extract_urls

__all__ = [
    "ALLOW_ALL",
    "DEFAULT_OPTIONS",
    "ExtractOptions",
    "UrlMatch",
    "extract",
    "extract_urls",
    "is_valid_hostname",
    "remove_punctuation",
    "resolve_protocol",
]
