"""Parsers for problem links and statement markup."""

from .html_decoder import decode
from .url_parser import URLParser, resolve_link

__all__ = ["URLParser", "decode", "resolve_link"]
