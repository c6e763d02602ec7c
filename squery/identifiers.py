import re
from enum import Enum, auto


class SegmentKind(Enum):
    WILDCARD = auto()
    QUOTED = auto()
    WORD = auto()
    OTHER = auto()


_word_pattern = re.compile(r"\w+", re.ASCII)
_alias_separator = re.compile(r"\sas\s", re.IGNORECASE)


def classify_segment(segment, quote_char="`"):
    """Classify one dot-separated piece of an identifier."""
    if segment and not segment.strip("*"):
        return SegmentKind.WILDCARD
    if len(segment) >= 2 and segment.startswith(quote_char) and segment.endswith(quote_char):
        return SegmentKind.QUOTED
    if _word_pattern.fullmatch(segment):
        return SegmentKind.WORD
    return SegmentKind.OTHER


def _is_reference_segment(segment, quote_char):
    kind = classify_segment(segment, quote_char)
    if kind == SegmentKind.QUOTED:
        # only `word` counts, not arbitrary quoted text
        return bool(_word_pattern.fullmatch(segment[1:-1]))
    return kind in (SegmentKind.WILDCARD, SegmentKind.WORD)


def is_column_reference(expression, quote_char="`"):
    """True for `column`, `table.column` and wildcard forms such as `t.*`."""
    segments = expression.split(".")
    if len(segments) > 2:
        return False
    return all(_is_reference_segment(s, quote_char) for s in segments)


def backtick(identifier, quote_char="`"):
    """
    Quote every segment of a dotted identifier.

    Segments that are the `*` wildcard or already quoted are kept as they are,
    so applying this twice gives the same result as applying it once.
    None and empty strings are returned unchanged.
    """
    if not identifier:
        return identifier

    segments = []
    for segment in identifier.split("."):
        if classify_segment(segment, quote_char) in (SegmentKind.WILDCARD, SegmentKind.QUOTED):
            segments.append(segment)
        else:
            segments.append(f"{quote_char}{segment}{quote_char}")
    return ".".join(segments)


def alias(expression, quote_char="`"):
    """
    Format a select-list entry of the form `expr AS name`.

    Each side of the AS separator is quoted only when it looks like a plain
    column reference; expressions like COUNT(*) or a+b are left untouched.
    """
    parts = _alias_separator.split(expression.strip())
    formatted = [
        backtick(part, quote_char) if is_column_reference(part, quote_char) else part
        for part in parts
    ]
    return " AS ".join(formatted)
