"""Record search with multi-keyword and Hangul initial-consonant matching."""

from __future__ import annotations

from collections.abc import Iterable

from interview_mate.models.interview import InterviewRecord

HANGUL_SYLLABLE_START = 0xAC00
HANGUL_SYLLABLE_END = 0xD7A3
SYLLABLES_PER_INITIAL = 588  # 21 medial vowels * 28 finals

LEADING_CONSONANTS = (
    "ㄱ", "ㄲ", "ㄴ", "ㄷ", "ㄸ", "ㄹ", "ㅁ", "ㅂ", "ㅃ", "ㅅ",
    "ㅆ", "ㅇ", "ㅈ", "ㅉ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
)  # fmt: skip

TENSE_TO_PLAIN = {"ㄲ": "ㄱ", "ㄸ": "ㄷ", "ㅃ": "ㅂ", "ㅆ": "ㅅ", "ㅉ": "ㅈ"}

OTHER_INITIAL = "Other"


def name_initial(name: str) -> str:
    """
    Compute the index initial of a name.

    Hangul syllables map to their leading consonant with tense consonants
    collapsed to the plain form, ASCII letters to the uppercased letter,
    and anything else to "Other".

    Examples:
        >>> name_initial("김민수")
        'ㄱ'
        >>> name_initial("꽃님")
        'ㄱ'
        >>> name_initial("alice")
        'A'
    """
    if not name:
        return ""

    char = name[0]
    code = ord(char)

    if HANGUL_SYLLABLE_START <= code <= HANGUL_SYLLABLE_END:
        initial = LEADING_CONSONANTS[(code - HANGUL_SYLLABLE_START) // SYLLABLES_PER_INITIAL]
        return TENSE_TO_PLAIN.get(initial, initial)

    if char.isascii() and char.isalpha():
        return char.upper()

    return OTHER_INITIAL


def tokenize(query: str) -> list[str]:
    """Lowercase the query and split it into non-empty keywords."""
    return query.lower().split()


def matches_keyword(record: InterviewRecord, keyword: str) -> bool:
    """Check a single lowercased keyword against one record (OR across fields)."""
    info = record.basic_info

    if len(keyword) == 1 and name_initial(info.name).lower() == keyword:
        return True

    if any(keyword in field.lower() for field in (info.name, info.position, info.store)):
        return True

    if info.date and keyword in info.date:
        return True

    return any(keyword in answer.lower() for answer in record.answers.values())


def filter_records(records: Iterable[InterviewRecord], query: str) -> list[InterviewRecord]:
    """
    Filter records by a free-text query.

    Every keyword must match (AND across keywords); an empty query returns
    all records. Input order is preserved.
    """
    keywords = tokenize(query)
    if not keywords:
        return list(records)

    return [
        record
        for record in records
        if all(matches_keyword(record, keyword) for keyword in keywords)
    ]
