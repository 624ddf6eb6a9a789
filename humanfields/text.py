"""Text humanizers: title casing, widow prevention and slugs.

Input is treated as already escaped HTML; entities such as ``&nbsp;`` are
passed through rather than decoded.
"""

import re
import string

NBSP = "&nbsp;"

SMALL_WORDS = (
    "a",
    "an",
    "and",
    "as",
    "at",
    "but",
    "by",
    "en",
    "for",
    "if",
    "in",
    "of",
    "on",
    "or",
    "the",
    "to",
    "v[.]?",
    "via",
    "vs[.]?",
)

_SMALL = "|".join(SMALL_WORDS)
_PUNCT = "[" + re.escape(string.punctuation) + "]"

# HTML entities for spaces, swapped out while words are processed
_SPACE_ENTITY = re.compile(r"&nbsp;|&#160;|&#32;")

# Sentence-ish dividers: punctuation followed by a space, or an opening quote
_DIVIDER = re.compile(r"([:.;?!][ ]|(?:[ ]|^)[\"“])")

_WORD = re.compile(r"\b([A-Za-z][a-z.'’(&#8217;)]*)\b", re.ASCII)
_DOTTED = re.compile(r"[A-Za-z][.][A-Za-z]", re.ASCII)
_SMALL_WORD = re.compile(rf"\b({_SMALL})\b", re.ASCII | re.IGNORECASE)
_LEADING_SMALL = re.compile(rf"\A({_PUNCT}*)({_SMALL})\b", re.ASCII)
_TRAILING_SMALL = re.compile(rf"\b({_SMALL})({_PUNCT}*)\Z", re.ASCII)

_VERSUS = re.compile(r" V(s?)\. ", re.IGNORECASE)
_POSSESSIVE = re.compile(r"(['’]|&#8217;)S\b", re.ASCII | re.IGNORECASE)
_ACRONYMS = re.compile(r"\b(AT&T|Q&A)\b", re.ASCII | re.IGNORECASE)
_ING = re.compile(r"-ing\b", re.ASCII | re.IGNORECASE)
_ENTITY = re.compile(r"&[A-Za-z]+?;")

_WIDONT = re.compile(r"(\S\s+\S+)\s+(\S+)\s*$")
_NON_WORD = re.compile(r"\W+")


def _ucfirst(text: str) -> str:
    return text[:1].upper() + text[1:]


def _capitalize_word(match: re.Match[str]) -> str:
    word = match.group(0)
    # Leave words with inner dots alone, like del.icio.us
    if _DOTTED.search(word):
        return word
    return _ucfirst(word)


def _title_case_segment(segment: str) -> str:
    segment = _WORD.sub(_capitalize_word, segment)
    segment = _SMALL_WORD.sub(lambda m: m.group(1).lower(), segment)
    segment = _LEADING_SMALL.sub(lambda m: m.group(1) + _ucfirst(m.group(2)), segment)
    segment = _TRAILING_SMALL.sub(lambda m: _ucfirst(m.group(1)) + m.group(2), segment)
    return segment


def _fix_oddities(text: str) -> str:
    text = _VERSUS.sub(lambda m: f" v{m.group(1).lower()}. ", text)
    text = _POSSESSIVE.sub(r"\1s", text)
    text = _ACRONYMS.sub(lambda m: m.group(1).upper(), text)
    text = _ING.sub("-ing", text)
    return _ENTITY.sub(lambda m: m.group(0).lower(), text)


def _extract_space_entities(text: str) -> tuple[str, list[tuple[str, int]]]:
    """Replace space entities with plain spaces, recording text and offset."""
    recorded = [(m.group(0), m.start()) for m in _SPACE_ENTITY.finditer(text)]
    return _SPACE_ENTITY.sub(" ", text), recorded


def _restore_space_entities(text: str, recorded: list[tuple[str, int]]) -> str:
    """Put recorded entities back, each overwriting the character at its offset.

    Offsets come from the original input and are applied in order without
    being re-derived, so they only line up when the text in between kept its
    length.
    """
    for entity, offset in recorded:
        text = text[:offset] + entity + text[offset + 1 :]
    return text


def title_case(text: str) -> str:
    """
    Capitalize a title following John Gruber's title case rules.

    Small words (a, an, the, of, ...) stay lowercase except at the start or
    end of the title or of a sub-phrase after ``:``, ``.``, ``;``, ``?``,
    ``!`` or an opening quote. Words with inner dots (del.icio.us) are left
    untouched, as are words already containing capitals after their first
    letter.

    See http://daringfireball.net/2008/05/title_case

    Example:
        >>> title_case("the lord of the rings")
        'The Lord of the Rings'
        >>> title_case("q&a with steve jobs: 'that's what happens in technology'")
        "Q&A With Steve Jobs: 'That's What Happens in Technology'"
    """
    working, recorded = _extract_space_entities(text)
    segments = _DIVIDER.split(working)
    titled = "".join(_title_case_segment(segment) for segment in segments)
    return _restore_space_entities(_fix_oddities(titled), recorded)


def widont(text: str) -> str:
    """
    Join the last two words with a non-breaking space.

    Prevents a lone final word wrapping onto its own line. Only applies when
    the text has at least three words.

    Example:
        >>> widont("one two three four")
        'one two three&nbsp;four'
    """
    return _WIDONT.sub(rf"\1{NBSP}\2", text, count=1)


def slugged(text: str) -> str:
    """
    Lowercase ``text`` and hyphenate every run of non-word characters.

    Non-ASCII letters are kept as they are, not transliterated.

    Example:
        >>> slugged("Hello, World!")
        'hello-world'
    """
    return _NON_WORD.sub("-", text.lower()).strip("-")
