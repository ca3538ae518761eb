"""HTML entity decoding and tag stripping helpers"""

import re


# Applied in order; '&amp;' runs before the quote entities so '&amp;quot;' ends as '"'.
ENTITIES = [
    ('&nbsp;',  ' '),
    ('&lt;',    '<'),
    ('&gt;',    '>'),
    ('&amp;',   '&'),
    ('&quot;',  '"'),
    ('&#39;',   "'"),
    ('&ldquo;', '“'),
    ('&rdquo;', '”'),
]

TAG_RE = re.compile(r'<[^>]*>')


def decode_entities(text: str) -> str:
    """Replace the supported HTML entities in a fixed order; unknown entities are kept."""
    for entity, char in ENTITIES:
        text = text.replace(entity, char)
    return text


def strip_tags(text: str) -> str:
    """Remove every '<...>' run. A '>' inside a quoted attribute value ends the tag early."""
    return TAG_RE.sub('', text)
