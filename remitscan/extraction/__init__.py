from remitscan.extraction.base import BaseExtractor
from remitscan.extraction.extractor import Extractor
from remitscan.extraction.factory import ExtractorFactory
from remitscan.extraction.models import StructuredRecord

__all__ = ["BaseExtractor", "Extractor", "ExtractorFactory", "StructuredRecord"]
