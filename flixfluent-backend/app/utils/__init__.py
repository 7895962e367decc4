"""
FlixFluent 유틸리티 패키지
"""

from .parsers import (
    SubtitleParseError,
    parse_transcript_xml,
    parse_track_list_xml,
)

__all__ = [
    "SubtitleParseError",
    "parse_transcript_xml",
    "parse_track_list_xml",
]
