"""
HTML Parsers Package

Contains the HTML parsing manager with parser fallback detection.
"""

__all__ = ["HtmlParser"]

from .html_parser import HtmlParser
