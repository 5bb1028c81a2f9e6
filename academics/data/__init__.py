"""
Payload extraction and parsing module.

This package handles reading typed values out of raw JSON and the public
decode operations built on top of them.
"""

from .extractors import (
    get_string,
    get_string_or,
    get_optional_string,
    get_number,
    get_optional_number,
    get_int,
    get_bool,
    get_object,
    get_array,
    get_object_items,
)
from .temporal import (
    to_local_fixed_offset,
    to_canonical_utc,
    parse_date_of_birth,
    parse_class_date,
    parse_exam_month,
)
from .parser import (
    parse_document,
    decode_status,
    try_decode_bare_user,
    decode_bare_user,
    try_decode_enrollment,
    decode_enrollment,
    try_decode_grade_history,
    decode_grade_history,
    try_decode_advisor,
    decode_advisor,
    try_decode_contributors,
    decode_contributors,
)

__all__ = [
    # Extractors
    "get_string",
    "get_string_or",
    "get_optional_string",
    "get_number",
    "get_optional_number",
    "get_int",
    "get_bool",
    "get_object",
    "get_array",
    "get_object_items",
    # Temporal
    "to_local_fixed_offset",
    "to_canonical_utc",
    "parse_date_of_birth",
    "parse_class_date",
    "parse_exam_month",
    # Decoders
    "parse_document",
    "decode_status",
    "try_decode_bare_user",
    "decode_bare_user",
    "try_decode_enrollment",
    "decode_enrollment",
    "try_decode_grade_history",
    "decode_grade_history",
    "try_decode_advisor",
    "decode_advisor",
    "try_decode_contributors",
    "decode_contributors",
]
