import pytest
from pydantic import ValidationError

from fbx4vrm_reporter.domain.models import (
    ApiInfoResponse,
    AvatarInfo,
    AvatarListResponse,
    BugReportResponse,
    QueueStatsResponse,
    QueueSubmitResponse,
)


def test_display_name_prefers_display_name():
    avatar = AvatarInfo(name="hibikitsune_riku", display_name="響狐リク")
    assert avatar.get_display_name() == "響狐リク"


@pytest.mark.parametrize("display_name", [None, ""])
def test_display_name_falls_back_to_name(display_name):
    avatar = AvatarInfo(name="hibikitsune_riku", display_name=display_name)
    assert avatar.get_display_name() == "hibikitsune_riku"


@pytest.mark.parametrize("status,expected", [("accepted", True), ("rejected", False), (None, False)])
def test_bug_report_response_is_success(status, expected):
    assert BugReportResponse(status=status).is_success is expected


@pytest.mark.parametrize("status,expected", [("queued", True), ("accepted", False), ("rejected", False)])
def test_queue_submit_response_is_success(status, expected):
    assert QueueSubmitResponse(status=status).is_success is expected


def test_avatar_list_parses_server_payload():
    body = """
    {
        "success": true,
        "avatars": [
            {
                "id": "av-1",
                "name": "riku",
                "display_name": "Riku",
                "package_version": "2.01",
                "booth_url": "https://booth.example/items/1",
                "avatar_number": 7,
                "version_index": 2,
                "issue_number": "41",
                "github_issue_url": "https://github.example/issues/41",
                "parent_issue_number": "40",
                "parent_issue_url": "https://github.example/issues/40",
                "report_count": 3,
                "last_reported": "2024-05-01T10:00:00Z",
                "platforms": ["fbx4vrm", "arapp"],
                "result_success": null,
                "avatar_uid": "booth:1",
                "source_type": "booth",
                "unexpected_field": 1
            }
        ]
    }
    """

    response = AvatarListResponse.model_validate_json(body)

    assert response.success is True
    avatar = response.avatars[0]
    assert avatar.parent_issue_number == "40"
    assert avatar.platforms == ["fbx4vrm", "arapp"]
    assert avatar.result_success is None
    assert avatar.avatar_uid == "booth:1"


def test_missing_fields_take_defaults():
    stats = QueueStatsResponse.model_validate_json('{"pending": 2}')
    assert (stats.pending, stats.processing, stats.completed, stats.failed) == (2, 0, 0, 0)


@pytest.mark.parametrize(
    "dto",
    [
        ApiInfoResponse(api="fbx4vrm", version="1.2.0", documentation="https://x"),
        BugReportResponse(status="accepted", report_id="r1", avatar_id="a1", is_new_issue=True),
        QueueSubmitResponse(status="queued", queue_id="q-9", message="ok"),
        QueueStatsResponse(pending=1, processing=2, completed=3, failed=4),
    ],
)
def test_response_round_trip(dto):
    assert type(dto).model_validate_json(dto.model_dump_json()) == dto


def test_records_are_immutable():
    info = ApiInfoResponse(api="fbx4vrm")
    with pytest.raises(ValidationError):
        info.api = "other"


def test_null_in_defaulted_fields_reads_as_default():
    response = BugReportResponse.model_validate_json('{"status": "accepted", "is_new_issue": null}')

    assert response.is_success
    assert response.is_new_issue is False


def test_null_avatar_counters_do_not_drop_catalog():
    body = '{"success": true, "avatars": [{"id": "a1", "report_count": null, "platforms": null, "result_success": null}]}'

    response = AvatarListResponse.model_validate_json(body)

    avatar = response.avatars[0]
    assert avatar.report_count == 0
    assert avatar.platforms == []
    assert avatar.result_success is None


def test_null_avatars_list_and_queue_counters():
    assert AvatarListResponse.model_validate_json('{"success": true, "avatars": null}').avatars == []
    stats = QueueStatsResponse.model_validate_json('{"pending": null, "failed": 2}')
    assert (stats.pending, stats.failed) == (0, 2)
