import pytest

from fbx4vrm_reporter.domain.value_objects import ApiResponse


def test_success_carries_data():
    response = ApiResponse.success({"k": 1}, 200, '{"k": 1}')

    assert response.ok is True
    assert response.data == {"k": 1}
    assert response.error is None
    assert response.status_code == 200


def test_failure_carries_error():
    response = ApiResponse.failure("HTTP error 500: Internal Server Error", 500, "oops")

    assert response.ok is False
    assert response.data is None
    assert response.error.startswith("HTTP error 500")
    assert response.raw_body == "oops"


def test_failure_defaults_to_unreached_server():
    assert ApiResponse.failure("Connection error: refused").status_code == 0


def test_success_without_data_is_rejected():
    with pytest.raises(ValueError):
        ApiResponse.success(None, 200, "")


def test_failure_without_message_is_rejected():
    with pytest.raises(ValueError):
        ApiResponse.failure("")
