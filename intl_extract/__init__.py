"""
intl_extract - react-intl message extraction for TypeScript / TSX sources.

Finds message descriptors in <FormattedMessage/> elements,
defineMessages({...}) declarations and formatMessage({...}) calls.
"""

from intl_extract.extractor import MessageExtractor, extract
from intl_extract.models import ExtractorConfig, MessageDescriptor

__version__ = "0.1.0"
__author__ = "intl-extract contributors"

__all__ = ["ExtractorConfig", "MessageDescriptor", "MessageExtractor", "extract"]
