"""Response side: payload mappers."""

from .json_parser import parse_json_response
from .xml_parser import parse_xml_response

__all__ = [
    "parse_json_response",
    "parse_xml_response",
]
