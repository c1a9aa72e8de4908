import datetime

import pytest
import requests

from sentencer.lookup import (
    FixtureError,
    FixtureSentenceProvider,
    SentenceLookupError,
    WWWJDICSentenceProvider,
    build_lookup_url,
    extract_sentences_from_html,
    make_provider,
)


SAMPLE_HTML = """<html><head><title>WWWJDIC: Example Sentences</title></head>
<body>
<h2>Examples</h2>
<pre>
A:猫がいる。\tThere is a cat.#ID=1234_5678
B:猫 居る{いる}
A:猫が好きです。\tI like cats.#ID=2345_6789
B:猫 好き
A:broken line without translation#ID=1
</pre>
</body></html>
"""


class FakeResponse:
    def __init__(self, status_code=200, text=""):
        self.status_code = status_code
        self.text = text
        self.elapsed = datetime.timedelta(seconds=0.25)


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.urls = []

    def get(self, url, timeout=None):
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.response


def test_fixture_provider(data_dir):
    provider = FixtureSentenceProvider(data_dir / "testdictionary.yml")
    assert provider.get_sentences("犬") == [("犬が吠えた。", "The dog barked.")]
    assert provider.get_sentences("解る") == []
    assert provider.get_sentences("unknown") == []


def test_fixture_provider_returns_copies(data_dir):
    provider = FixtureSentenceProvider(data_dir / "testdictionary.yml")
    provider.get_sentences("猫").clear()
    assert len(provider.get_sentences("猫")) == 3


def test_fixture_provider_missing_file(tmp_path):
    with pytest.raises(FixtureError):
        FixtureSentenceProvider(tmp_path / "nope.yml")


def test_fixture_provider_bad_pair(tmp_path):
    path = tmp_path / "bad.yml"
    path.write_text("cat:\n  - [only one]\n", encoding="utf-8")
    with pytest.raises(FixtureError):
        FixtureSentenceProvider(path)


def test_fixture_provider_empty_file(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")
    assert FixtureSentenceProvider(path).get_sentences("cat") == []


def test_extract_sentences_from_html():
    assert extract_sentences_from_html(SAMPLE_HTML) == [
        ("猫がいる。", "There is a cat."),
        ("猫が好きです。", "I like cats."),
    ]


def test_extract_sentences_without_pre_block():
    assert extract_sentences_from_html("<html><body>No matches</body></html>") == []


def test_build_lookup_url():
    assert build_lookup_url("http://example.org/wwwjdic.cgi", "cat") == "http://example.org/wwwjdic.cgi?1ZEUcat=1"


def test_wwwjdic_provider_fetches_once():
    session = FakeSession(FakeResponse(200, SAMPLE_HTML))
    provider = WWWJDICSentenceProvider(base_url="http://example.org/j.cgi", session=session)
    assert len(provider.get_sentences("cat")) == 2
    assert session.urls == ["http://example.org/j.cgi?1ZEUcat=1"]


def test_wwwjdic_provider_404_is_no_match():
    session = FakeSession(FakeResponse(404, "not found"))
    provider = WWWJDICSentenceProvider(base_url="http://example.org/j.cgi", session=session)
    assert provider.get_sentences("cat") == []


def test_wwwjdic_provider_bad_status_raises():
    session = FakeSession(FakeResponse(503, "busy"))
    provider = WWWJDICSentenceProvider(base_url="http://example.org/j.cgi", session=session)
    with pytest.raises(SentenceLookupError):
        provider.get_sentences("cat")
    assert len(session.urls) == 1


def test_wwwjdic_provider_connection_error_raises():
    session = FakeSession(error=requests.ConnectionError("down"))
    provider = WWWJDICSentenceProvider(base_url="http://example.org/j.cgi", session=session)
    with pytest.raises(SentenceLookupError):
        provider.get_sentences("cat")


def test_wwwjdic_provider_cache(tmp_path):
    session = FakeSession(FakeResponse(200, SAMPLE_HTML))
    provider = WWWJDICSentenceProvider(base_url="http://example.org/j.cgi", cache_dir=tmp_path, session=session)
    first = provider.get_sentences("cat")
    second = provider.get_sentences("cat")
    assert first == second
    assert len(session.urls) == 1
    assert (tmp_path / "cat.json").exists()


def test_wwwjdic_provider_does_not_cache_failures(tmp_path):
    session = FakeSession(FakeResponse(500, ""))
    provider = WWWJDICSentenceProvider(base_url="http://example.org/j.cgi", cache_dir=tmp_path, session=session)
    with pytest.raises(SentenceLookupError):
        provider.get_sentences("cat")
    assert not (tmp_path / "cat.json").exists()


def test_wwwjdic_url_from_environment(monkeypatch):
    monkeypatch.setenv("WWWJDIC_URL", "http://mirror.example.org/cgi")
    assert WWWJDICSentenceProvider().base_url == "http://mirror.example.org/cgi"


def test_make_provider(data_dir):
    assert isinstance(make_provider(str(data_dir / "testdictionary.yml")), FixtureSentenceProvider)
    assert isinstance(make_provider(None), WWWJDICSentenceProvider)


def test_extract_sentences_requires_a_tag():
    html = (
        "<pre>\n"
        "A:猫だ。\tIt's a cat.#ID=1\n"
        "And\tnot an example\n"
        "AB:猫\tcat\n"
        "</pre>"
    )
    assert extract_sentences_from_html(html) == [("猫だ。", "It's a cat.")]


def test_fixture_provider_rejects_non_list_entry(tmp_path):
    path = tmp_path / "bad.yml"
    path.write_text("cat: 3\n", encoding="utf-8")
    with pytest.raises(FixtureError):
        FixtureSentenceProvider(path)


def test_wwwjdic_provider_skips_cache_for_empty_word(tmp_path):
    session = FakeSession(FakeResponse(200, SAMPLE_HTML))
    provider = WWWJDICSentenceProvider(base_url="http://example.org/j.cgi", cache_dir=tmp_path, session=session)
    provider.get_sentences("")
    provider.get_sentences("")
    assert len(session.urls) == 2
    assert list(tmp_path.iterdir()) == []
