"""
Common constants and mappings used across the jsonhealer library.
"""

# Python and JavaScript tokens that have a JSON spelling.
# Order matters only for readability; every token is matched word-bounded.
LITERAL_REPLACEMENTS = (
    ("True", "true"),
    ("False", "false"),
    ("None", "null"),
    ("undefined", "null"),
    ("NaN", "null"),
    ("Infinity", "null"),
    ("-Infinity", "null"),
)

JSON_LITERALS = ("true", "false", "null")

# Short escapes for control characters; everything else below 0x20 uses \u00XX
CONTROL_CHAR_ESCAPES = {
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\f": "\\f",
    "\r": "\\r",
}

CLOSER_FOR = {"{": "}", "[": "]"}
OPENER_FOR = {"}": "{", "]": "["}

# Name used in reports when the aggressive fallback produced the result
FALLBACK_NAME = "fallback"
