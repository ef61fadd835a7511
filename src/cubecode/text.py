from __future__ import annotations
import re

# \f followed by one char, e.g. "\f3" for red; '.' does not match a newline
_COLOR_ESCAPE = re.compile("\f.")

# ASCII and Unicode Z-category spaces; \x1c-\x1f are not trimmed
_SPACE = (
    " \t\n\v\f\r\x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def sanitize(s: str, *, strip_nulls: bool = True) -> str:
    """
    Remove color escapes and surrounding whitespace from a decoded string.
    With strip_nulls (current revision) embedded NULs are dropped as well;
    the legacy revision keeps them.
    """
    s = _COLOR_ESCAPE.sub("", s)
    if strip_nulls:
        s = s.replace("\x00", "")
    return s.strip(_SPACE)
