"""Strip HTML markup from problem statements."""

import re

TAG_PATTERN = re.compile(r"<[^>]*>")
ENTITY_PATTERN = re.compile(r"[&#][^;]+;")

HTML_ENTITIES: dict[str, str] = {
    "&quot;": '"',
    "&apos;": "'",
    "&amp;": "&",
    "&lt;": "<",
    "&gt;": ">",
    "&#39;": "'",
    "#39;": "'",
    "#34;": '"',
    "&nbsp;": " ",
    "&copy;": "©",
    "&reg;": "®",
    "&euro;": "€",
    "&pound;": "£",
    "&yen;": "¥",
    "&cent;": "¢",
    "&sect;": "§",
    "&deg;": "°",
    "&para;": "¶",
    "&hellip;": "…",
    "&ldquo;": "“",
    "&rdquo;": "”",
    "&lsquo;": "‘",
    "&rsquo;": "’",
    "&ndash;": "–",
    "&mdash;": "—",
    "&lsaquo;": "‹",
    "&rsaquo;": "›",
    "&laquo;": "«",
    "&raquo;": "»",
    "&frac14;": "¼",
    "&frac12;": "½",
    "&frac34;": "¾",
    "&times;": "×",
    "&divide;": "÷",
}


def _replace_entity(match: re.Match[str]) -> str:
    entity = match.group(0)
    return HTML_ENTITIES.get(entity, entity)


def decode(html: str) -> str:
    """
    Remove tags and decode known entities.

    Unknown entities are kept verbatim. Decoded text is not scanned again,
    so ``&amp;lt;`` becomes ``&lt;``.
    """
    text = TAG_PATTERN.sub("", html)
    return ENTITY_PATTERN.sub(_replace_entity, text)
