import logging
import threading
import pytest
import requests
from mindat_api.commands import MindatCommands, NOT_CONFIGURED_MESSAGE, MISSING_LOCALITY_FILTER_MESSAGE
from mindat_api.exceptions import CommandError


def test_client_lifecycle(mindat_commands):
    """Setting, checking and clearing the configured client"""
    assert not mindat_commands.is_configured()
    assert mindat_commands.set_api_token("abc123") == "API token set successfully"
    assert mindat_commands.is_configured()
    assert mindat_commands.get_client().is_authenticated

    assert mindat_commands.clear_client() == "Client cleared"
    assert not mindat_commands.is_configured()


def test_empty_token_configures_an_anonymous_client(mindat_commands):
    mindat_commands.set_api_token("")
    assert mindat_commands.is_configured()
    assert not mindat_commands.get_client().is_authenticated


@pytest.mark.parametrize(
    "command, args",
    [("search_minerals", ("quartz",)), ("get_mineral", (1,)), ("list_countries", ()), ("get_country", (1,)),
     ("search_localities", ("Norway",)), ("get_locality", (1,)), ("search_by_elements", ("Cu",)),
     ("search_localities_by_gps", (59.9, 10.7, 50.0, "Norway")), ("search_localities_by_elements", ("Ag",)),
     ("get_dana8_groups", ()), ("get_strunz10_classes", ()), ("quick_search", ("qua",)), ("get_photo_count", ())],
)
def test_commands_require_a_client(mindat_commands, mock_mindat, command, args):
    """Every command except the IMA search fails with a display message when no client is configured"""
    with pytest.raises(CommandError) as excinfo:
        getattr(mindat_commands, command)(*args)
    assert excinfo.value.message == NOT_CONFIGURED_MESSAGE
    assert mock_mindat.call_count == 0


def test_search_minerals(mindat_commands, mock_mindat, base_url, geomaterial_json):
    """Results are returned as JSON-compatible values"""
    mock_mindat.get(f"{base_url}geomaterials/", json={"count": 1, "next": None, "previous": None,
                                                      "results": [geomaterial_json]})
    mindat_commands.set_api_token("abc123")
    result = mindat_commands.search_minerals("quartz", page=2, page_size=10)

    assert mock_mindat.last_request.url == f"{base_url}geomaterials/?name=quartz&page=2&page_size=10"
    assert result["count"] == 1
    assert result["results"][0]["name"] == "Quartz"
    assert result["results"][0]["elements"] == ["Si", "O"]
    assert result["results"][0]["minstats"]["ms_locentries"] == 41000


def test_search_ima_minerals_without_a_client(mindat_commands, mock_mindat, base_url):
    """The IMA list is readable anonymously, and an empty search term is not sent"""
    mock_mindat.get(f"{base_url}minerals-ima/", json={"count": 0, "results": []})
    result = mindat_commands.search_ima_minerals("", page_size=5)

    assert result["results"] == []
    assert "Authorization" not in mock_mindat.last_request.headers
    assert mock_mindat.last_request.url == f"{base_url}minerals-ima/?page_size=5"
    assert not mindat_commands.is_configured()


def test_list_countries_pages(mindat_commands, mock_mindat, base_url, countries_page_json):
    mock_mindat.get(f"{base_url}countries/", json=countries_page_json)
    mindat_commands.set_api_token("abc123")

    assert mindat_commands.list_countries()["count"] == 2
    assert mock_mindat.last_request.url == f"{base_url}countries/"

    mindat_commands.list_countries(page=3)
    assert mock_mindat.last_request.url == f"{base_url}countries/?page=3"


def test_search_by_elements(mindat_commands, mock_mindat, base_url):
    mock_mindat.get(f"{base_url}geomaterials/", json={"count": 0, "results": []})
    mindat_commands.set_api_token("abc123")
    mindat_commands.search_by_elements("Cu,S", exclude_elements="Fe", page=2)
    assert mock_mindat.last_request.url == f"{base_url}geomaterials/?elements_inc=Cu%2CS&elements_exc=Fe&page=2"


def test_gps_search_requires_a_filter(mindat_commands, mock_mindat):
    """Without a country or name filter the whole locality table would be fetched"""
    mindat_commands.set_api_token("abc123")
    with pytest.raises(CommandError) as excinfo:
        mindat_commands.search_localities_by_gps(59.9, 10.7, 50.0)
    assert str(excinfo.value) == MISSING_LOCALITY_FILTER_MESSAGE

    with pytest.raises(CommandError):
        mindat_commands.search_localities_by_gps(59.9, 10.7, 50.0, country="", name_contains="")
    assert mock_mindat.call_count == 0


def test_gps_search_filters_by_bounding_box(mindat_commands, mock_mindat, base_url, localities_page_json):
    """Only localities inside the box are kept: Kongsberg is ~70 km from Oslo, Svalbard has no coordinates"""
    mock_mindat.get(f"{base_url}localities/", json=localities_page_json)
    mindat_commands.set_api_token("abc123")

    result = mindat_commands.search_localities_by_gps(59.91, 10.75, 20.0, country="Norway", name_contains="")
    assert [locality["id"] for locality in result["results"]] == [2693]
    assert mock_mindat.last_request.url == f"{base_url}localities/?country=Norway"

    result = mindat_commands.search_localities_by_gps(59.91, 10.75, 100.0, country="Norway")
    assert [locality["id"] for locality in result["results"]] == [2692, 2693]
    assert result["next"] == localities_page_json["next"]


def test_localities_by_elements_keep_only_mapped_localities(mindat_commands, mock_mindat, base_url,
                                                            localities_page_json):
    mock_mindat.get(f"{base_url}localities/", json=localities_page_json)
    mindat_commands.set_api_token("abc123")

    result = mindat_commands.search_localities_by_elements("Ag", exclude_elements="Au")
    assert [locality["id"] for locality in result["results"]] == [2692, 2693]
    assert mock_mindat.last_request.url == f"{base_url}localities/?elements_inc=Ag&elements_exc=Au"


def test_untyped_commands(mindat_commands, mock_mindat, base_url):
    """Classification schemes, photo counts and the quick search pass the JSON through"""
    mock_mindat.get(f"{base_url}dana-8/groups/", json={"results": [{"id": 1}]})
    mock_mindat.get(f"{base_url}nickel-strunz-10/classes/", json={"results": [{"id": 2}]})
    mock_mindat.get(f"{base_url}photo-count/", json={"count": 42})
    mock_mindat.get(f"{base_url}geomaterials-search/", json=[{"id": 3337, "name": "Quartz"}])
    mindat_commands.set_api_token("abc123")

    assert mindat_commands.get_dana8_groups() == {"results": [{"id": 1}]}
    assert mindat_commands.get_strunz10_classes() == {"results": [{"id": 2}]}
    assert mindat_commands.get_photo_count() == {"count": 42}
    assert mindat_commands.quick_search("qua", size=3) == [{"id": 3337, "name": "Quartz"}]


def test_api_errors_become_command_errors(mindat_commands, mock_mindat, base_url):
    """The display message is the classified error message"""
    mock_mindat.get(f"{base_url}countries/5/", status_code=401)
    mindat_commands.set_api_token("expired")

    with pytest.raises(CommandError) as excinfo:
        mindat_commands.get_country(5)
    assert excinfo.value.message == "Authentication required: please provide a valid API token"
    assert excinfo.value.to_dict() == {"message": excinfo.value.message}


def test_transport_diagnostics_are_debug_only(mindat_commands, mock_mindat, base_url, caplog):
    caplog.set_level(logging.DEBUG)
    mock_mindat.get(f"{base_url}localities/9/", exc=requests.exceptions.ConnectionError("refused"))
    mindat_commands.set_api_token("abc123")

    with pytest.raises(CommandError) as excinfo:
        mindat_commands.get_locality(9)

    assert excinfo.value.message.startswith("HTTP request failed: ")
    diagnostics = [record for record in caplog.records if record.getMessage().startswith("Is connect")]
    assert diagnostics and all(record.levelno == logging.DEBUG for record in diagnostics)


def test_client_swap_does_not_affect_running_calls(mindat_commands, mock_mindat, base_url):
    """A command keeps using the client it started with when the client is replaced concurrently"""
    started, release = threading.Event(), threading.Event()

    def slow_response(request, context):
        started.set()
        release.wait(timeout=5)
        return {"id": 1}

    mock_mindat.get(f"{base_url}countries/1/", json=slow_response)
    mindat_commands.set_api_token("first-token")

    results = {}
    worker = threading.Thread(target=lambda: results.setdefault("country", mindat_commands.get_country(1)))
    worker.start()
    started.wait(timeout=5)

    mindat_commands.clear_client()
    release.set()
    worker.join(timeout=5)

    assert results["country"]["id"] == 1
    assert mock_mindat.request_history[0].headers["Authorization"] == "Token first-token"
    assert not mindat_commands.is_configured()


@pytest.mark.parametrize(
    "command, args, kwargs",
    [("search_minerals", ("quartz",), {"page": 0}), ("search_ima_minerals", ("",), {"page_size": 0}),
     ("search_by_elements", ("Cu",), {"page": -2})],
)
def test_invalid_arguments_become_command_errors(mindat_commands, mock_mindat, command, args, kwargs):
    """Out-of-range arguments are reported as display messages and nothing is sent"""
    mindat_commands.set_api_token("abc123")
    with pytest.raises(CommandError) as excinfo:
        getattr(mindat_commands, command)(*args, **kwargs)

    assert "greater than or equal to 1" in excinfo.value.message
    assert mock_mindat.call_count == 0


def test_invalid_client_arguments_become_command_errors(mindat_commands, mock_mindat):
    mindat_commands.set_api_token("abc123")
    with pytest.raises(CommandError) as excinfo:
        mindat_commands.list_countries(page=0)

    assert excinfo.value.message.startswith("Invalid parameter: ")
    assert mock_mindat.call_count == 0
