"""URL extraction and de-duplication for request inputs.

Extraction matches ``https?://`` followed by non-whitespace. A sentence
ending such as "see https://bbc.com/news." would otherwise carry the period
into the URL, so trailing punctuation is trimmed unless disabled.
"""

import re
from typing import Iterable, Optional

from truthguard.config.settings import settings

URL_PATTERN = re.compile(r"https?://\S+")
TRAILING_PUNCTUATION = ".,;:!?)]}'\""


def extract_urls(text: str, trim_punctuation: Optional[bool] = None) -> list[str]:
    """
    Return every http(s) URL in ``text`` in order of appearance.

    Args:
        text: Free text
        trim_punctuation: Strip trailing ``.,;:!?)]}'"`` from each match;
            defaults to ``settings.trim_url_punctuation``

    Returns:
        URLs as found, duplicates kept
    """
    if trim_punctuation is None:
        trim_punctuation = settings.trim_url_punctuation

    urls = []
    for match in URL_PATTERN.findall(text or ""):
        url = match.rstrip(TRAILING_PUNCTUATION) if trim_punctuation else match
        # "https://" alone is not a URL
        if URL_PATTERN.fullmatch(url):
            urls.append(url)
    return urls


def dedupe_urls(*groups: Iterable[str]) -> list[str]:
    """Concatenate URL groups, keeping the first occurrence of each URL."""
    seen: set[str] = set()
    unique = []
    for group in groups:
        for url in group:
            if url not in seen:
                seen.add(url)
                unique.append(url)
    return unique
