from unittest.mock import MagicMock, patch

import requests

from webapp_slots.probe import MAX_BODY, check_address


@patch("webapp_slots.probe.requests.get")
def test_returns_status_and_body(mock_get):
    mock_get.return_value = MagicMock(status_code=200, text="  Hello from staging\n")

    result = check_address("http://app.azurewebsites.net", timeout=5)

    assert result == "200 Hello from staging"
    mock_get.assert_called_once_with("http://app.azurewebsites.net", timeout=5)


@patch("webapp_slots.probe.requests.get")
def test_long_body_is_cut(mock_get):
    mock_get.return_value = MagicMock(status_code=200, text="x" * (MAX_BODY * 2))

    result = check_address("http://app.azurewebsites.net")

    assert result == "200 " + "x" * MAX_BODY + "…"


@patch("webapp_slots.probe.requests.get")
def test_empty_body(mock_get):
    mock_get.return_value = MagicMock(status_code=403, text="")

    assert check_address("http://app.azurewebsites.net") == "403"


@patch("webapp_slots.probe.requests.get")
def test_transport_error_returned_not_raised(mock_get):
    mock_get.side_effect = requests.ConnectionError("name resolution failed")

    result = check_address("http://gone.azurewebsites.net")

    assert result.startswith("Could not reach http://gone.azurewebsites.net")
    assert "name resolution failed" in result
