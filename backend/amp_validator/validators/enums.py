"""Enum codecs: name/number tables for the engine's status, severity, and code enums.

The engine speaks numbers on the wire; callers see names. Each codec is built
once at import time and never mutated, so the module-level instances are
shared freely across calls.
"""

from types import MappingProxyType
from typing import Mapping, Optional


class EnumCodec:
    """Bidirectional name <-> number table for one fixed enumeration.

    Lookups of unknown values return None rather than raising: an unknown
    number from the engine means schema skew, not a caller error.
    """

    def __init__(self, table: Mapping[str, int]):
        number_by_name = dict(table)
        name_by_number: dict[int, str] = {}
        for name, number in number_by_name.items():
            if number in name_by_number:
                raise ValueError(
                    f"Enum number {number} is assigned to both "
                    f"'{name_by_number[number]}' and '{name}'"
                )
            name_by_number[number] = name

        self.number_by_name: Mapping[str, int] = MappingProxyType(number_by_name)
        self.name_by_number: Mapping[int, str] = MappingProxyType(name_by_number)

    def name_of(self, number: Optional[int]) -> Optional[str]:
        """Return the name for a number, or None if the number is unknown."""
        return self.name_by_number.get(number)

    def number_of(self, name: Optional[str]) -> Optional[int]:
        """Return the number for a name, or None if the name is unknown."""
        return self.number_by_name.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self.number_by_name

    def __len__(self) -> int:
        return len(self.number_by_name)


SEVERITY_TABLE = {
    "UNKNOWN_SEVERITY": 0,
    "ERROR": 1,
    "WARNING": 4,
}

STATUS_TABLE = {
    "UNKNOWN": 0,
    "PASS": 1,
    "FAIL": 2,
}

# amp.validator.ValidationError.Code. Retired numbers (10, 13, 25, 115) stay unassigned.
CODE_TABLE = {
    "UNKNOWN_CODE": 0,

    # Document structure
    "INVALID_DOCTYPE_HTML": 111,
    "MANDATORY_TAG_MISSING": 1,
    "TAG_REQUIRED_BY_MISSING": 24,
    "WARNING_TAG_REQUIRED_BY_MISSING": 46,
    "TAG_EXCLUDED_BY_TAG": 101,
    "DUPLICATE_UNIQUE_TAG": 6,
    "DUPLICATE_UNIQUE_TAG_WARNING": 87,
    "WRONG_PARENT_TAG": 7,
    "DISALLOWED_TAG_ANCESTOR": 23,
    "MANDATORY_TAG_ANCESTOR": 31,
    "MANDATORY_TAG_ANCESTOR_WITH_HINT": 32,
    "MANDATORY_LAST_CHILD_TAG": 89,
    "INCORRECT_NUM_CHILD_TAGS": 56,
    "INCORRECT_MIN_NUM_CHILD_TAGS": 85,
    "DISALLOWED_CHILD_TAG_NAME": 57,
    "DISALLOWED_FIRST_CHILD_TAG_NAME": 58,
    "DISALLOWED_MANUFACTURED_BODY": 64,
    "BASE_TAG_MUST_PRECEED_ALL_URLS": 78,

    # Reference points
    "CHILD_TAG_DOES_NOT_SATISFY_REFERENCE_POINT": 66,
    "MANDATORY_REFERENCE_POINT_MISSING": 67,
    "DUPLICATE_REFERENCE_POINT": 68,
    "TAG_NOT_ALLOWED_TO_HAVE_SIBLINGS": 69,
    "TAG_REFERENCE_POINT_CONFLICT": 70,
    "CHILD_TAG_DOES_NOT_SATISFY_REFERENCE_POINT_SINGULAR": 71,

    # Tags
    "DISALLOWED_TAG": 2,
    "GENERAL_DISALLOWED_TAG": 51,
    "DISALLOWED_SCRIPT_TAG": 88,
    "DEPRECATED_TAG": 12,

    # Attributes
    "DISALLOWED_ATTR": 3,
    "DISALLOWED_STYLE_ATTR": 81,
    "INVALID_ATTR_VALUE": 4,
    "DUPLICATE_ATTRIBUTE": 94,
    "MANDATORY_ATTR_MISSING": 5,
    "MANDATORY_ONEOF_ATTR_MISSING": 28,
    "MANDATORY_ANYOF_ATTR_MISSING": 104,
    "ATTR_REQUIRED_BUT_MISSING": 61,
    "DUPLICATE_REFERENCE_ATTR_VALUE": 114,
    "DEPRECATED_ATTR": 11,
    "MUTUALLY_EXCLUSIVE_ATTRS": 17,
    "MANDATORY_PROPERTY_MISSING_FROM_ATTR_VALUE": 14,
    "INVALID_PROPERTY_VALUE_IN_ATTR_VALUE": 15,
    "DISALLOWED_PROPERTY_IN_ATTR_VALUE": 16,
    "UNESCAPED_TEMPLATE_IN_ATTR_VALUE": 18,
    "TEMPLATE_PARTIAL_IN_ATTR_VALUE": 19,
    "TEMPLATE_IN_ATTR_NAME": 20,
    "VALUE_SET_MISMATCH": 110,

    # Layout
    "ATTR_VALUE_REQUIRED_BY_LAYOUT": 27,
    "MISSING_LAYOUT_ATTRIBUTES": 105,
    "IMPLIED_LAYOUT_INVALID": 22,
    "SPECIFIED_LAYOUT_INVALID": 26,
    "ATTR_DISALLOWED_BY_IMPLIED_LAYOUT": 33,
    "ATTR_DISALLOWED_BY_SPECIFIED_LAYOUT": 34,
    "INCONSISTENT_UNITS_FOR_WIDTH_AND_HEIGHT": 21,
    "DUPLICATE_DIMENSION": 90,

    # Extensions
    "MISSING_REQUIRED_EXTENSION": 43,
    "ATTR_MISSING_REQUIRED_EXTENSION": 83,
    "WARNING_EXTENSION_UNUSED": 79,
    "EXTENSION_UNUSED": 84,
    "WARNING_EXTENSION_DEPRECATED_VERSION": 80,
    "INVALID_EXTENSION_VERSION": 120,
    "INVALID_EXTENSION_PATH": 121,
    "NON_LTS_SCRIPT_AFTER_LTS": 112,
    "LTS_SCRIPT_AFTER_NON_LTS": 113,

    # CDATA and size limits
    "STYLESHEET_TOO_LONG": 8,
    "STYLESHEET_AND_INLINE_STYLE_TOO_LONG": 102,
    "INLINE_STYLE_TOO_LONG": 103,
    "INLINE_SCRIPT_TOO_LONG": 118,
    "MANDATORY_CDATA_MISSING_OR_INCORRECT": 9,
    "CDATA_VIOLATES_DENYLIST": 30,
    "NON_WHITESPACE_CDATA_ENCOUNTERED": 82,
    "INVALID_JSON_CDATA": 106,

    # URLs
    "MISSING_URL": 35,
    "INVALID_URL": 36,
    "INVALID_URL_PROTOCOL": 37,
    "DISALLOWED_DOMAIN": 62,
    "DISALLOWED_RELATIVE_URL": 49,
    "DISALLOWED_AMP_DOMAIN": 117,

    # CSS
    "CSS_SYNTAX_INVALID_AT_RULE": 29,
    "CSS_SYNTAX_STRAY_TRAILING_BACKSLASH": 38,
    "CSS_SYNTAX_UNTERMINATED_COMMENT": 39,
    "CSS_SYNTAX_UNTERMINATED_STRING": 40,
    "CSS_SYNTAX_BAD_URL": 41,
    "CSS_SYNTAX_EOF_IN_PRELUDE_OF_QUALIFIED_RULE": 42,
    "CSS_SYNTAX_INVALID_DECLARATION": 44,
    "CSS_SYNTAX_INCOMPLETE_DECLARATION": 45,
    "CSS_SYNTAX_ERROR_IN_PSEUDO_SELECTOR": 47,
    "CSS_SYNTAX_MISSING_SELECTOR": 48,
    "CSS_SYNTAX_NOT_A_SELECTOR_START": 50,
    "CSS_SYNTAX_UNPARSED_INPUT_REMAINS_IN_SELECTOR": 52,
    "CSS_SYNTAX_MISSING_URL": 53,
    "CSS_SYNTAX_DISALLOWED_DOMAIN": 54,
    "CSS_SYNTAX_INVALID_URL": 55,
    "CSS_SYNTAX_INVALID_URL_PROTOCOL": 59,
    "CSS_SYNTAX_DISALLOWED_RELATIVE_URL": 60,
    "CSS_SYNTAX_INVALID_ATTR_SELECTOR": 63,
    "CSS_SYNTAX_INVALID_PROPERTY_NOLIST": 65,
    "CSS_SYNTAX_QUALIFIED_RULE_HAS_NO_DECLARATIONS": 72,
    "CSS_SYNTAX_DISALLOWED_QUALIFIED_RULE_MUST_BE_INSIDE_KEYFRAME": 73,
    "CSS_SYNTAX_DISALLOWED_KEYFRAME_INSIDE_KEYFRAME": 74,
    "CSS_SYNTAX_MALFORMED_MEDIA_QUERY": 75,
    "CSS_SYNTAX_DISALLOWED_MEDIA_TYPE": 76,
    "CSS_SYNTAX_DISALLOWED_MEDIA_FEATURE": 77,
    "CSS_SYNTAX_DISALLOWED_PROPERTY_VALUE": 91,
    "CSS_SYNTAX_DISALLOWED_PROPERTY_VALUE_WITH_HINT": 92,
    "CSS_SYNTAX_PROPERTY_DISALLOWED_WITHIN_AT_RULE": 93,
    "CSS_SYNTAX_INVALID_PROPERTY": 95,
    "CSS_SYNTAX_PROPERTY_DISALLOWED_TOGETHER_WITH": 97,
    "CSS_SYNTAX_PROPERTY_REQUIRES_QUALIFICATION": 98,
    "CSS_SYNTAX_DISALLOWED_PSEUDO_CLASS": 99,
    "CSS_SYNTAX_DISALLOWED_PSEUDO_ELEMENT": 100,
    "CSS_SYNTAX_DISALLOWED_IMPORTANT": 107,
    "CSS_EXCESSIVELY_NESTED": 116,
    "AMP_EMAIL_MISSING_STRICT_CSS_ATTR": 119,

    # Document limits
    "DOCUMENT_TOO_COMPLEX": 86,
    "DOCUMENT_SIZE_LIMIT_EXCEEDED": 108,
    "INVALID_UTF8": 96,
    "DEV_MODE_ONLY": 109,
}


SEVERITY = EnumCodec(SEVERITY_TABLE)
CODE = EnumCodec(CODE_TABLE)
STATUS = EnumCodec(STATUS_TABLE)
