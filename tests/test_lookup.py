"""Tests for the jisho.org client. No network access: the session is faked."""

import pytest
import requests

from jisho_cli.config import JishoConfig
from jisho_cli.errors import FetchError, StructureError
from jisho_cli.lookup import JishoClient
from jisho_cli.models import SeeAlso


PAGE = """
<div id="primary">
  <div class="concept_light">
    <div class="concept_light-representation">
      <span class="furigana"><span>ねこ</span></span>
      <span class="text">猫</span>
    </div>
    <div class="meanings-wrapper">
      <div class="meaning-tags">Noun</div>
      <div class="meaning-wrapper">
        <span class="meaning-definition-section_divider">1. </span>
        <span class="meaning-meaning">cat</span>
        <span class="supplemental_info"><span class="sense-tag tag-see_also">See also <a href="/search/ネコ">ネコ</a></span></span>
      </div>
    </div>
  </div>
</div>
"""


class FakeResponse:
    def __init__(self, text="", status_code=200, reason="OK"):
        self.text = text
        self.status_code = status_code
        self.reason = reason

    @property
    def ok(self):
        return self.status_code < 400


class FakeSession:
    def __init__(self, response=None, error=None):
        self.headers = {}
        self.response = response
        self.error = error
        self.calls = []
        self.closed = False

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        if self.error is not None:
            raise self.error
        return self.response

    def close(self):
        self.closed = True


@pytest.fixture
def config():
    return JishoConfig(base_url="https://jisho.org", timeout=3.0, user_agent="jisho-cli test")


def test_fetch_sends_user_agent_and_timeout(config):
    session = FakeSession(FakeResponse(PAGE))
    client = JishoClient(config, session=session)

    assert client.fetch("猫") == PAGE
    assert session.headers["User-Agent"] == "jisho-cli test"
    assert session.calls == [("https://jisho.org/search/%E7%8C%AB", 3.0)]


def test_http_error_raises_fetch_error(config):
    client = JishoClient(config, session=FakeSession(FakeResponse(status_code=503, reason="Service Unavailable")))

    with pytest.raises(FetchError, match="HTTP 503: Service Unavailable") as excinfo:
        client.fetch("猫")
    assert excinfo.value.status_code == 503


def test_transport_error_raises_fetch_error(config):
    session = FakeSession(error=requests.ConnectionError("connection refused"))
    client = JishoClient(config, session=session)

    with pytest.raises(FetchError, match="connection refused"):
        client.fetch("猫")


def test_look_up_parses_and_resolves_links(config):
    client = JishoClient(config, session=FakeSession(FakeResponse(PAGE)))

    entries = client.look_up("猫")

    assert len(entries) == 1
    assert entries[0].text == "猫"
    assert entries[0].reading == "ねこ"
    meaning = entries[0].items[1]
    assert meaning.number == "1."
    assert meaning.supplemental_info == (SeeAlso("ネコ", "https://jisho.org/search/ネコ"),)


def test_look_up_propagates_structure_errors(config):
    broken = '<div id="primary"><div class="concept_light"></div></div>'
    client = JishoClient(config, session=FakeSession(FakeResponse(broken)))

    with pytest.raises(StructureError):
        client.look_up("猫")


def test_context_manager_closes_session(config):
    session = FakeSession(FakeResponse(PAGE))
    with JishoClient(config, session=session):
        pass
    assert session.closed
