"""
Reusable schema fragments.

Use them directly or merge them into a larger descriptor:

    schema = {"type": "object", "data": {"price": common.positive_number}}
    schema = {**common.not_empty_string, "pattern": re.compile(r"^[A-Z]")}
"""


def _not_blank(value):
    # Non-strings are left to the "type" rule
    return not isinstance(value, str) or bool(value.strip())


positive_number = {
    "type": "number",
    "min": 0,
}

not_empty_string = {
    "type": "string",
    "fn": _not_blank,
}

# camelCase names for the same fragments
positiveNumber = positive_number
notEmptyString = not_empty_string
