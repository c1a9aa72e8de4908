"""WWWJDIC example sentence lookup.

Calls the WWWJDIC "backdoor" CGI entry point, which returns the Tanaka
corpus examples for a word inside a <pre> block:

    A:猫がいる。\tThere is a cat.#ID=1234_5678
    B:猫 居る

Only the "A:" lines are used. The URL and result format are hard-coded
and will break if the service changes.
"""

import os
import re
from pathlib import Path
from typing import List, Optional

import requests
from bs4 import BeautifulSoup

from sentencer.common.cache import read_cache, write_cache
from sentencer.common.logging import log_status
from sentencer.input.records import SentencePair
from sentencer.lookup.base import SentenceLookupError


DEFAULT_WWWJDIC_URL = "http://www.csse.monash.edu.au/~jwb/cgi-bin/wwwjdic.cgi"

_ID_SUFFIX_RE = re.compile(r"#ID=.*$")

# Module-level session for connection reuse
_session = requests.Session()
_session.headers.update({
    "User-Agent": "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
})


def build_lookup_url(base_url: str, word: str) -> str:
    """Build the backdoor URL for an example-sentence search."""
    return f"{base_url}?1ZEU{requests.utils.requote_uri(word)}=1"


def extract_sentences_from_html(html: str) -> List[SentencePair]:
    """Extract (japanese, english) pairs from the <pre> block of a response.

    Returns [] if the page has no <pre> block or no "A:" lines.
    """
    soup = BeautifulSoup(html, "html.parser")
    pre = soup.find("pre")
    if pre is None:
        return []

    sentences: List[SentencePair] = []
    for line in pre.get_text().split("\n"):
        if not line.startswith("A:"):
            continue
        text = line[2:]
        text = _ID_SUFFIX_RE.sub("", text).strip()
        parts = text.split("\t")
        if len(parts) != 2:
            continue
        sentences.append((parts[0].strip(), parts[1].strip()))

    return sentences


class WWWJDICSentenceProvider:
    """Gets example sentences for a word via web call to WWWJDIC.

    Each lookup is attempted exactly once. Connection failures and
    unexpected statuses raise SentenceLookupError; a 404 counts as no match.
    With cache_dir set, results (including empty ones) are stored as
    <word>.json and reused on later runs.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = 20.0,
        cache_dir: Optional[Path] = None,
        verbose: bool = False,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url or os.environ.get("WWWJDIC_URL") or DEFAULT_WWWJDIC_URL
        self.timeout = timeout
        self.cache_dir = Path(cache_dir) if cache_dir else None
        self.verbose = verbose
        self.session = session or _session

    def _cacheable(self, word: str) -> bool:
        # An empty word would map to a hidden ".json" file
        return self.cache_dir is not None and bool(word.strip())

    def _read_cached(self, word: str) -> Optional[List[SentencePair]]:
        if not self._cacheable(word):
            return None
        data = read_cache(self.cache_dir, word)
        if not isinstance(data, list):
            return None
        log_status(self.verbose, "cache", "hit", word)
        return [(str(p[0]), str(p[1])) for p in data if isinstance(p, list) and len(p) == 2]

    def _fetch(self, word: str) -> List[SentencePair]:
        url = build_lookup_url(self.base_url, word)
        try:
            resp = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise SentenceLookupError(f"{word}: {e}") from e

        if resp.status_code == 404:
            log_status(self.verbose, "lookup", "404", f"{word}: page not found")
            return []
        if resp.status_code != 200:
            raise SentenceLookupError(f"{word}: status {resp.status_code}")

        log_status(self.verbose, "lookup", "fetch", f"{word} ({resp.elapsed.total_seconds():.1f}s)")
        return extract_sentences_from_html(resp.text)

    def get_sentences(self, word: str) -> List[SentencePair]:
        cached = self._read_cached(word)
        if cached is not None:
            return cached

        sentences = self._fetch(word)

        if self._cacheable(word):
            write_cache(self.cache_dir, word, [list(p) for p in sentences])
            log_status(self.verbose, "cache", "save", word)

        return sentences
