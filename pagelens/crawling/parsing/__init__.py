"""
Parsing helpers for rendered pages.
"""

from pagelens.crawling.parsing.html_extractor import PageExtractionParser

__all__ = ["PageExtractionParser"]
