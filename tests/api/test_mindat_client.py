import logging
import pytest
import requests
from typing import Any, Dict, List
from mindat_api import MindatClient, DEFAULT_BASE_URL
from mindat_api.api.models import (Country, Geomaterial, Locality, LocalityAge, LocalityStatus, LocalityType,
                                   ImaMaterial, GeomaterialsQuery, LocalitiesQuery, PaginatedResponse,
                                   CursorPaginatedResponse, ProcessedResponse, ErrorResponse, MindatClientConfig)
from mindat_api.exceptions import (ErrorKind, InvalidURLException, RequestFailedException, APIParameterException)


def test_default_client():
    """A client without a token is anonymous and targets the versioned API root"""
    client = MindatClient()
    assert client.base_url == DEFAULT_BASE_URL
    assert not client.is_authenticated
    assert client.timeout == 30 and client.connect_timeout == 10


def test_invalid_base_url():
    with pytest.raises(InvalidURLException) as excinfo:
        MindatClient(base_url="not a url")
    assert str(excinfo.value) == "Invalid URL: not a url"


def test_invalid_timeout():
    with pytest.raises(APIParameterException):
        MindatClient(timeout=0)


def test_token_management(mindat_client, api_token):
    """Tokens can be replaced and cleared, and an empty token means anonymous"""
    assert mindat_client.is_authenticated
    assert mindat_client.token.get_secret_value() == api_token
    assert api_token not in repr(mindat_client) and api_token not in repr(mindat_client.config)

    mindat_client.clear_token()
    assert not mindat_client.is_authenticated

    mindat_client.set_token("another-token")
    assert mindat_client.token.get_secret_value() == "another-token"

    mindat_client.set_token("")
    assert not mindat_client.is_authenticated


def test_authorization_header(mindat_client, anonymous_client, mock_mindat, base_url, api_token):
    """The token is sent as `Token <token>` and anonymous clients send no Authorization header"""
    mock_mindat.get(f"{base_url}photo-count/", json={"count": 10})

    assert mindat_client.photocount()
    request = mock_mindat.last_request
    assert request.headers["Authorization"] == f"Token {api_token}"
    assert request.headers["Accept"] == "application/json"
    assert request.headers["User-Agent"].startswith("Mozilla/5.0")

    assert anonymous_client.photocount()
    assert "Authorization" not in mock_mindat.last_request.headers


@pytest.mark.parametrize("base, path", [("https://api.mindat.test/v1", "/countries/3/"),
                                        ("https://api.mindat.test/v1/", "countries/3/"),
                                        ("https://api.mindat.test/v1/", "/countries/3/")])
def test_path_joining(mock_mindat, base, path, country_json):
    """Paths resolve below the versioned root whether or not either side carries a slash"""
    mock_mindat.get("https://api.mindat.test/v1/countries/3/", json=country_json)
    result = MindatClient(base_url=base).execute_get(path, response_model=Country)
    assert result and result.url == "https://api.mindat.test/v1/countries/3/"


def test_query_serialization_on_the_wire(mindat_client, mock_mindat, base_url, countries_page_json):
    """Only populated filters are sent, in declaration order"""
    mock_mindat.get(f"{base_url}geomaterials/", json={"count": 0, "next": None, "previous": None, "results": []})
    mindat_client.geomaterials(GeomaterialsQuery().with_name("quartz").ima_approved(True))
    assert mock_mindat.last_request.url == f"{base_url}geomaterials/?name=quartz&ima=true"
    assert mock_mindat.call_count == 1


def test_offset_envelope_end_to_end(mindat_client, mock_mindat, base_url, countries_page_json):
    """A two-record page decodes into a typed envelope without a next page"""
    mock_mindat.get(f"{base_url}countries/", json=countries_page_json)
    result = mindat_client.countries()

    assert isinstance(result, ProcessedResponse) and result
    assert result.status_code == 200
    envelope = result.data
    assert isinstance(envelope, PaginatedResponse)
    assert len(envelope.results) == 2 and envelope.count == 2
    assert envelope.has_next() is False
    assert all(isinstance(country, Country) for country in envelope)


def test_cursor_envelope_end_to_end(mindat_client, mock_mindat, base_url, localities_page_json):
    """The locality list is cursor-paginated and the next cursor feeds the next query"""
    mock_mindat.get(f"{base_url}localities/", json=localities_page_json)
    result = mindat_client.localities(LocalitiesQuery().with_country("Norway"))

    assert result
    assert isinstance(result.data, CursorPaginatedResponse)
    assert result.data.next_cursor() == "abc123"
    assert all(isinstance(locality, Locality) for locality in result.data)

    mindat_client.localities(LocalitiesQuery().with_country("Norway").with_cursor(result.data.next_cursor()))
    assert mock_mindat.last_request.url == f"{base_url}localities/?country=Norway&cursor=abc123"


@pytest.mark.parametrize(
    "status_code, body, kind, status",
    [(401, "", ErrorKind.AUTHENTICATION_REQUIRED, 401),
     (404, "Not found.", ErrorKind.NOT_FOUND, 404),
     (429, "", ErrorKind.RATE_LIMITED, 429),
     (502, "Bad Gateway", ErrorKind.API, 502),
     (200, "this is not json", ErrorKind.DECODE, 200)],
)
def test_failures_are_returned_not_raised(mindat_client, mock_mindat, base_url, status_code, body, kind, status,
                                         caplog):
    """Every failure category is returned as a falsy ErrorResponse"""
    mock_mindat.get(f"{base_url}geomaterials/3337/", status_code=status_code, text=body)
    result = mindat_client.geomaterial(3337)

    assert isinstance(result, ErrorResponse)
    assert not result
    assert result.error is kind
    assert result.exception.kind is kind
    assert result.status_code == status
    assert result.data is None
    assert f"Request to {base_url}geomaterials/3337/ failed" in caplog.text


def test_not_found_keeps_the_body(mindat_client, mock_mindat, base_url):
    mock_mindat.get(f"{base_url}localities/1/", status_code=404, text='{"detail": "Not found."}')
    result = mindat_client.locality(1)
    assert result.message == 'Resource not found: {"detail": "Not found."}'


def test_transport_failure(mindat_client, mock_mindat, base_url, caplog):
    """Timeouts and connection failures become transport errors with diagnostics on the debug channel"""
    caplog.set_level(logging.DEBUG)
    mock_mindat.get(f"{base_url}photo-count/", exc=requests.exceptions.ConnectTimeout("timed out"))
    result = mindat_client.photocount()

    assert not result
    assert result.error is ErrorKind.TRANSPORT
    assert isinstance(result.exception, RequestFailedException)
    assert result.exception.is_timeout and result.exception.is_connect
    assert result.message.startswith("HTTP request failed: ")
    assert result.status_code is None
    assert "Transport diagnostics: timeout=True, connect=True" in caplog.text


def test_unencodable_token_is_not_sent(mock_mindat, base_url, test_masker):
    """A token that can't be a header value fails before any request is sent"""
    client = MindatClient(token="bad\ntoken", base_url=base_url, masker=test_masker)
    mock_mindat.get(f"{base_url}countries/", json={"results": []})
    result = client.countries()

    assert result.error is ErrorKind.INVALID_PARAMETER
    assert mock_mindat.call_count == 0


def test_token_never_logged(mindat_client, mock_mindat, base_url, api_token, caplog):
    caplog.set_level(logging.DEBUG)
    mock_mindat.get(f"{base_url}countries/", status_code=401)
    mindat_client.countries()
    assert api_token not in caplog.text


@pytest.mark.parametrize(
    "method, args, path, payload, expected_type",
    [
        ("countries_page", (2,), "countries/?page=2", {"count": 1, "results": [{"id": 1}]}, PaginatedResponse),
        ("country", (3,), "countries/3/", {"id": 3}, Country),
        ("geomaterial", (5,), "geomaterials/5/", {"id": 5}, Geomaterial),
        ("geomaterial_varieties", (5,), "geomaterials/5/varieties/", {"id": 5}, Geomaterial),
        ("geomaterials_search", ("qua",), "geomaterials-search/?q=qua", [{"id": 1, "name": "Quartz"}], list),
        ("locality", (7,), "localities/7/", {"id": 7}, Locality),
        ("locality_ages", (), "locality-age/", {"count": 1, "results": [{"age_id": 1}]}, PaginatedResponse),
        ("locality_age", (1,), "locality-age/1/", {"age_id": 1}, LocalityAge),
        ("locality_statuses", (2,), "locality-status/?page=2", {"results": [{"ls_id": 1}]}, PaginatedResponse),
        ("locality_status", (1,), "locality-status/1/", {"ls_id": 1, "ls_text": "Active"}, LocalityStatus),
        ("locality_types", (), "locality-type/", {"results": [{"lt_id": 1}]}, PaginatedResponse),
        ("locality_type", (1,), "locality-type/1/", {"lt_id": 1, "lt_text": "Mine"}, LocalityType),
        ("geo_regions", (1,), "locgeoregion2/?page=1", {"results": [{"id": 1, "geometry": {}}]}, PaginatedResponse),
        ("minerals_ima", (), "minerals-ima/", {"count": 1, "results": [{"id": 3337}]}, PaginatedResponse),
        ("mineral_ima", (3337,), "minerals-ima/3337/", {"id": 3337}, Geomaterial),
        ("dana8_groups", (), "dana-8/groups/", {"results": []}, dict),
        ("dana8_subgroups", (), "dana-8/subgroups/", {"results": []}, dict),
        ("dana8", (2,), "dana-8/2/", {"id": 2}, dict),
        ("strunz10_classes", (), "nickel-strunz-10/classes/", {"results": []}, dict),
        ("strunz10_subclasses", (), "nickel-strunz-10/subclasses/", {"results": []}, dict),
        ("strunz10_families", (), "nickel-strunz-10/families/", {"results": []}, dict),
        ("strunz10", (4,), "nickel-strunz-10/4/", {"id": 4}, dict),
        ("photocount", (), "photo-count/", {"count": 10}, dict),
    ],
)
def test_resource_methods(mindat_client, mock_mindat, base_url, method, args, path, payload, expected_type):
    """Each resource method targets its endpoint once and decodes into its documented type"""
    mock_mindat.get(f"{base_url}{path.split('?')[0]}", json=payload)
    result = getattr(mindat_client, method)(*args)

    assert result, result
    assert mock_mindat.call_count == 1
    assert mock_mindat.last_request.url == f"{base_url}{path}"
    assert isinstance(result.data, expected_type)


def test_ima_list_decodes_ima_materials(mindat_client, mock_mindat, base_url):
    mock_mindat.get(f"{base_url}minerals-ima/", json={"count": 1, "results": [{"id": 3337, "ima_status": "APPROVED"}]})
    result = mindat_client.minerals_ima()
    assert isinstance(result.data.results[0], ImaMaterial)
    assert result.data.results[0].ima_status == ["APPROVED"]


def test_execute_get_with_plain_parameters(mindat_client, mock_mindat, base_url):
    """execute_get accepts a plain dict of parameters and skips None values"""
    mock_mindat.get(f"{base_url}geomaterials/", json={"results": []})
    result = mindat_client.execute_get("/geomaterials/", {"ima": True, "page": None, "elements_inc": ["Cu", "S"]},
                                       PaginatedResponse[Dict[str, Any]])
    assert result
    assert mock_mindat.last_request.url == f"{base_url}geomaterials/?ima=true&elements_inc=Cu%2CS"


def test_from_config(mock_mindat, test_masker):
    config = MindatClientConfig.build(base_url="https://api.mindat.test/v2", token="cfg-token", timeout=5)
    client = MindatClient.from_config(config, masker=test_masker)
    assert client.base_url == "https://api.mindat.test/v2/"
    assert client.timeout == 5
    assert client.is_authenticated

    mock_mindat.get("https://api.mindat.test/v2/photo-count/", json={})
    assert client.photocount()
    assert mock_mindat.last_request.headers["Authorization"] == "Token cfg-token"


def test_list_results_type(mindat_client, mock_mindat, base_url):
    """The free-text search answers with a list of plain JSON objects"""
    mock_mindat.get(f"{base_url}geomaterials-search/", json=[{"id": 1}, {"id": 2}])
    result = mindat_client.geomaterials_search("quartz", size=2)
    data: List[Any] = result.data
    assert data == [{"id": 1}, {"id": 2}]
    assert mock_mindat.last_request.url == f"{base_url}geomaterials-search/?q=quartz&size=2"


def test_oversized_numbers_do_not_escape(mindat_client, mock_mindat, base_url):
    """A number too large for a float decodes as absent and the rest of the record survives"""
    mock_mindat.get(f"{base_url}geomaterials/1/", text='{"id": 1, "name": "Quartz", "hmin": 1' + "0" * 400 + "}")
    result = mindat_client.geomaterial(1)

    assert result
    assert result.data.id == 1
    assert result.data.hmin is None
    assert result.data.name == "Quartz"


def test_unexpected_decoding_failures_are_classified(mindat_client, mock_mindat, base_url, monkeypatch):
    """Errors other than validation errors raised while decoding still become DECODE failures"""

    def overflowing(*args, **kwargs):
        raise OverflowError("int too large to convert to float")

    monkeypatch.setattr("mindat_api.api.response_handler._type_adapter",
                        lambda response_model: type("Adapter", (), {"validate_python": staticmethod(overflowing)}))
    mock_mindat.get(f"{base_url}countries/3/", json={"id": 3})
    result = mindat_client.country(3)

    assert not result
    assert result.error is ErrorKind.DECODE
    assert "OverflowError" in result.message


@pytest.mark.parametrize(
    "method, args, path",
    [("countries_page", (0,), "countries/"), ("locality_ages", (-1,), "locality-age/"),
     ("locality_statuses", (0,), "locality-status/"), ("locality_types", (0,), "locality-type/"),
     ("geo_regions", (0,), "locgeoregion2/"), ("geomaterials_search", ("qua", 0), "geomaterials-search/")],
)
def test_invalid_arguments_are_returned_not_raised(mindat_client, mock_mindat, base_url, method, args, path):
    """Out-of-range arguments produce an INVALID_PARAMETER error without sending a request"""
    result = getattr(mindat_client, method)(*args)

    assert isinstance(result, ErrorResponse)
    assert result.error is ErrorKind.INVALID_PARAMETER
    assert result.url == f"{base_url}{path}"
    assert mock_mindat.call_count == 0


def test_empty_filters_are_not_sent(mindat_client, mock_mindat, base_url):
    mock_mindat.get(f"{base_url}geomaterials/", json={"count": 0, "results": []})
    mindat_client.execute_get("/geomaterials/", {"name": "", "ids": [], "ima": True}, PaginatedResponse[Geomaterial])
    assert mock_mindat.last_request.url == f"{base_url}geomaterials/?ima=true"
