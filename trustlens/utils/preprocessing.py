import re
from typing import List

_SENTENCE_BREAK = re.compile(r"[.!?]+")


def normalize_text(text: str) -> str:
    text = text or ""
    return text.lower().strip()


def tokenize_words(text: str) -> List[str]:
    return text.split()


def split_sentences(text: str) -> List[str]:
    return [s for s in _SENTENCE_BREAK.split(text or "") if s.strip()]
