"""HTML -> Markdown conversion as an ordered list of regex rewrite passes.

Each pass is applied to the whole string before the next one runs. Later
passes assume earlier constructs are already Markdown or plain text, so the
order of PASSES matters: code blocks are fenced before inline code, headings
and links are reduced before paragraphs, and paragraphs before the final
tag sweep.
"""

import re
from typing import Callable

from postmd.core.utils.html import decode_entities, strip_tags


_FLAGS = re.IGNORECASE | re.DOTALL

PRE_CODE_RE   = re.compile(r'<pre><code[^>]*>(.*?)</code></pre>', _FLAGS)
PRE_RE        = re.compile(r'<pre[^>]*>(.*?)</pre>', _FLAGS)
CODE_RE       = re.compile(r'<code[^>]*>(.*?)</code>', _FLAGS)
HEADING_RE    = re.compile(r'<h([1-6])[^>]*>(.*?)</h\1>', _FLAGS)
IMG_ALT_SRC_RE = re.compile(r'<img[^>]*alt="([^"]*)"[^>]*src="([^"]+)"[^>]*>', _FLAGS)
IMG_SRC_ALT_RE = re.compile(r'<img[^>]*src="([^"]+)"[^>]*alt="([^"]*)"[^>]*>', _FLAGS)
IMG_SRC_RE    = re.compile(r'<img[^>]*src="([^"]+)"[^>]*>', _FLAGS)
LINK_RE       = re.compile(r'<a[^>]*href="([^"]+)"[^>]*>(.*?)</a>', _FLAGS)
UL_RE         = re.compile(r'<ul[^>]*>(.*?)</ul>', _FLAGS)
OL_RE         = re.compile(r'<ol[^>]*>(.*?)</ol>', _FLAGS)
LI_RE         = re.compile(r'<li[^>]*>(.*?)</li>', _FLAGS)
BLOCKQUOTE_RE = re.compile(r'<blockquote>(.*?)</blockquote>', _FLAGS)
PARAGRAPH_RE  = re.compile(r'<p[^>]*>(.*?)</p>', _FLAGS)
BR_RE         = re.compile(r'<br\s*/?>', _FLAGS)
BLANK_RUN_RE  = re.compile(r'\n{3,}')
NEWLINES_RE   = re.compile(r'\n+')


def _text(fragment: str) -> str:
    """Trim, strip tags, and decode entities of an inner fragment."""
    return decode_entities(strip_tags(fragment.strip()))


def _fence(code: str) -> str:
    return f"\n```\n{code}\n```\n"


def _pre_code(m: re.Match) -> str:
    return _fence(decode_entities(m.group(1).strip()))


def _pre(m: re.Match) -> str:
    return _fence(_text(m.group(1)))


def _inline_code(m: re.Match) -> str:
    return f"`{decode_entities(m.group(1).strip())}`"


def _heading(m: re.Match) -> str:
    return f"\n{'#' * int(m.group(1))} {_text(m.group(2))}\n\n"


def _image_alt_src(m: re.Match) -> str:
    return f"![{m.group(1)}]({m.group(2)})"


def _image_src_alt(m: re.Match) -> str:
    return f"![{m.group(2)}]({m.group(1)})"


def _image_src(m: re.Match) -> str:
    return f"![]({m.group(1)})"


def _link(m: re.Match) -> str:
    return f"[{_text(m.group(2))}]({m.group(1)})"


def _unordered(m: re.Match) -> str:
    items = LI_RE.sub(lambda li: f"- {_text(li.group(1))}\n", m.group(1))
    return f"\n{items}\n"


def _ordered(m: re.Match) -> str:
    counter = 0

    def _item(li: re.Match) -> str:
        nonlocal counter
        counter += 1
        return f"{counter}. {_text(li.group(1))}\n"

    return f"\n{LI_RE.sub(_item, m.group(1))}\n"


def _blockquote(m: re.Match) -> str:
    lines = NEWLINES_RE.split(_text(m.group(1)))
    return "\n" + "\n".join(f"> {line}" for line in lines) + "\n"


def _paragraph(m: re.Match) -> str:
    return f"{_text(m.group(1))}\n\n"


PASSES: list[tuple[re.Pattern, Callable[[re.Match], str] | str]] = [
    (PRE_CODE_RE,    _pre_code),
    (PRE_RE,         _pre),
    (CODE_RE,        _inline_code),
    (HEADING_RE,     _heading),
    (IMG_ALT_SRC_RE, _image_alt_src),
    (IMG_SRC_ALT_RE, _image_src_alt),
    (IMG_SRC_RE,     _image_src),
    (LINK_RE,        _link),
    (UL_RE,          _unordered),
    (OL_RE,          _ordered),
    (BLOCKQUOTE_RE,  _blockquote),
    (PARAGRAPH_RE,   _paragraph),
    (BR_RE,          '\n'),
]


def convert(html: str) -> str:
    """Convert an HTML fragment to Markdown ending in exactly one newline."""
    text = html
    for pattern, repl in PASSES:
        text = pattern.sub(repl, text)

    text = decode_entities(strip_tags(text))
    text = BLANK_RUN_RE.sub('\n\n', text)
    return text.strip() + '\n'
