"""Key segment normalization (snake_case to camelCase).

Operates on one segment of a dotted key at a time; splitting on ``.`` is the
path nester's job. Whether a segment names a reserved field is decided by
the field router, so ``http_request`` normalizes like any other segment.
"""

import re

_UNDERSCORE_RUN = re.compile(r"_+([^_])")


def normalize_key(segment: str) -> str:
    """Convert a key segment to camelCase.

    Every ``_x`` becomes ``X`` (runs of underscores collapse) and the first
    character is lowercased. Already-camelCase input is returned unchanged.

    Args:
        segment: One key segment, e.g. ``request_method``.

    Returns:
        The camelCase segment, e.g. ``requestMethod``.

    Examples:
        >>> normalize_key("request_method")
        'requestMethod'
        >>> normalize_key("requestMethod")
        'requestMethod'
    """
    camel = _UNDERSCORE_RUN.sub(lambda match: match.group(1).upper(), segment)
    if not camel:
        return camel
    return camel[0].lower() + camel[1:]
