"""
Unit tests for the Google Fonts provider

Tests cover query rejection, CSS2 family specs, best effort fallback and the
mapping of HTTP failures to reason codes. The HTTP session is mocked.
"""
from unittest.mock import MagicMock

import pytest
import requests

from core.font_provider import (
    FailureReason,
    GoogleFontsProvider,
    ResolvedFont,
    exact_family_spec,
    nearest_family_spec,
)
from core.query_builder import ParsedQuery

CSS_URL = "https://fonts.googleapis.com/css2"
FONT_URL = "https://fonts.gstatic.com/s/roboto/v1/roboto.ttf"
CSS_TEXT = f"""
@font-face {{
  font-family: 'Roboto';
  font-style: normal;
  font-weight: 400;
  src: url({FONT_URL}) format('truetype');
}}
"""
FONT_BYTES = b"\x00\x01\x00\x00roboto"


def make_response(status_code=200, text="", content=b"", url=CSS_URL):
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    response.content = content
    response.url = url
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error")
    return response


def run_request(provider, query):
    retrieved = []
    failed = []
    provider.request_font(query, retrieved.append, failed.append)
    return retrieved, failed


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def provider(session):
    return GoogleFontsProvider(session=session, css_api_url=CSS_URL, timeout=5)


@pytest.mark.unit
class TestFamilySpecs:

    def test_exact_spec(self):
        parsed = ParsedQuery("Roboto", width=100.0, weight=400, italic=0.0)
        assert exact_family_spec(parsed) == "Roboto:ital,wdth,wght@0,100,400"

    def test_exact_spec_italic_and_fractional_width(self):
        parsed = ParsedQuery("Roboto", width=87.5, weight=700, italic=0.8)
        assert exact_family_spec(parsed) == "Roboto:ital,wdth,wght@1,87.5,700"

    def test_exact_spec_short_form(self):
        assert exact_family_spec(ParsedQuery("Lato")) == "Lato:ital@0"

    @pytest.mark.parametrize("weight,expected", [(1, 100), (640, 600), (999, 900), (None, 400)])
    def test_nearest_spec_rounds_weight(self, weight, expected):
        parsed = ParsedQuery("Roboto", width=300.0, weight=weight, italic=0.2)
        assert nearest_family_spec(parsed) == f"Roboto:ital,wght@0,{expected}"


@pytest.mark.unit
class TestGoogleFontsProvider:

    def test_success(self, provider, session):
        session.get.side_effect = [
            make_response(text=CSS_TEXT),
            make_response(content=FONT_BYTES, url=FONT_URL),
        ]
        query = "name=Roboto&width=100&weight=400&italic=0&besteffort=false"

        retrieved, failed = run_request(provider, query)

        assert failed == []
        assert retrieved == [ResolvedFont("Roboto", query, FONT_BYTES, FONT_URL)]
        first_call = session.get.call_args_list[0]
        assert first_call.kwargs["params"] == {"family": "Roboto:ital,wdth,wght@0,100,400"}
        assert first_call.kwargs["timeout"] == 5

    def test_malformed_query_is_rejected_without_network(self, provider, session):
        retrieved, failed = run_request(provider, "name=Roboto&slant=2")

        assert retrieved == []
        assert failed == [FailureReason.MALFORMED_QUERY]
        assert failed[0] == 3
        session.get.assert_not_called()

    def test_unknown_font_without_best_effort(self, provider, session):
        session.get.return_value = make_response(status_code=400)

        retrieved, failed = run_request(provider, "name=Roboto&width=300&weight=450&italic=0&besteffort=false")

        assert retrieved == []
        assert failed == [FailureReason.FONT_NOT_FOUND]
        assert session.get.call_count == 1

    def test_best_effort_falls_back_to_nearest_instance(self, provider, session):
        session.get.side_effect = [
            make_response(status_code=400),
            make_response(text=CSS_TEXT),
            make_response(content=FONT_BYTES, url=FONT_URL),
        ]

        retrieved, failed = run_request(provider, "name=Roboto&width=300&weight=450&italic=0&besteffort=true")

        assert failed == []
        assert len(retrieved) == 1
        fallback_call = session.get.call_args_list[1]
        assert fallback_call.kwargs["params"] == {"family": "Roboto:ital,wght@0,400"}

    def test_best_effort_fallback_also_missing(self, provider, session):
        session.get.return_value = make_response(status_code=400)

        _, failed = run_request(provider, "name=Nope&weight=400&besteffort=true")

        assert failed == [FailureReason.FONT_NOT_FOUND]
        assert session.get.call_count == 2

    def test_connection_error_is_unavailable(self, provider, session):
        session.get.side_effect = requests.ConnectionError("Network unreachable")

        _, failed = run_request(provider, "Roboto")

        assert failed == [FailureReason.FONT_UNAVAILABLE]

    def test_server_error_is_unavailable(self, provider, session):
        session.get.return_value = make_response(status_code=503)

        _, failed = run_request(provider, "Roboto")

        assert failed == [FailureReason.FONT_UNAVAILABLE]

    def test_stylesheet_without_source(self, provider, session):
        session.get.return_value = make_response(text="/* nothing */")

        _, failed = run_request(provider, "Roboto")

        assert failed == [FailureReason.FONT_LOAD_ERROR]

    def test_font_download_failure(self, provider, session):
        session.get.side_effect = [
            make_response(text=CSS_TEXT),
            requests.Timeout("timed out"),
        ]

        _, failed = run_request(provider, "Roboto")

        assert failed == [FailureReason.FONT_LOAD_ERROR]

    def test_empty_font_file(self, provider, session):
        session.get.side_effect = [
            make_response(text=CSS_TEXT),
            make_response(content=b"", url=FONT_URL),
        ]

        _, failed = run_request(provider, "Roboto")

        assert failed == [FailureReason.FONT_LOAD_ERROR]

    def test_default_session_sets_user_agent(self):
        provider = GoogleFontsProvider()
        assert "downloadable-fonts" in provider.session.headers["User-Agent"]
