import pydantic
import pytest

from timebox.api import call_api, get_api_functions
from timebox.api.models import ActivityInput
from timebox.api.registry import register_api
from timebox.services import SessionMissingError


def test_registry_lists_endpoints():
    names = {function.name for function in get_api_functions()}
    assert {"create_activity", "day_layout", "week_layout", "dashboard", "sign_in"} <= names
    assert {function.category for function in get_api_functions("calendar")} == {"calendar"}


def test_parameter_schema_uses_resolved_annotations():
    function = next(item for item in get_api_functions() if item.name == "create_activity")
    schema = function.parameter_schema
    assert schema["required"] == ["title", "date"]
    assert schema["properties"]["completed"] == {"type": "boolean", "default": False}
    assert schema["properties"]["end_time"] == {"type": "string"}


def test_duplicate_registration_fails():
    with pytest.raises(ValueError):
        register_api("dashboard", description="", category="calendar")(lambda: None)


def test_unknown_function():
    with pytest.raises(KeyError):
        call_api("nope")


def test_activity_input_defaults_end_time():
    data = ActivityInput(title="Gym", date="2024-03-01", start_time="21:00")
    assert data.end_time == "22:00"


@pytest.mark.parametrize(
    "fields",
    [{"title": "  ", "date": "2024-03-01"}, {"title": "Gym"}, {"title": "Gym", "date": "2024-03-01", "start_time": "7pm"}],
)
def test_activity_input_rejects_invalid(fields):
    with pytest.raises(pydantic.ValidationError):
        ActivityInput(**fields)


def test_create_needs_owner_or_session(api):
    with pytest.raises(SessionMissingError):
        call_api("create_activity", title="Gym", date="2024-03-01")
    call_api("sign_in", name="Ana")
    created = call_api("create_activity", title="Gym", date="2024-03-01", category="health")["activity"]
    assert created["owner"] == "Ana"
    assert created["end_time"] == "09:00"
    assert created["category"]["name"] == "Health"


def test_crud_flow(api):
    created = call_api("create_activity", title="Gym", date="2024-03-01", owner="Ana", category="mystery")
    activity_id = created["activity"]["id"]
    assert created["activity"]["category"]["id"] == "work"

    updated = call_api("update_activity", activity_id=activity_id, title="Swim", start_time="07:00")
    assert updated["activity"]["title"] == "Swim"
    assert updated["activity"]["start_time"] == "07:00"

    toggled = call_api("toggle_activity", activity_id=activity_id)
    assert toggled["activity"]["completed"] is True

    listed = call_api("list_activities", day="2024-03-01")["activities"]
    assert [item["id"] for item in listed] == [activity_id]
    assert call_api("list_activities", day="2024-03-02")["activities"] == []

    assert call_api("refresh_activities")["activity_count"] == 1
    assert call_api("delete_activity", activity_id=activity_id) == {"deleted": activity_id}


def test_layout_and_dashboard(api):
    for start, end in (("09:00", "10:00"), ("09:30", "10:30"), ("11:00", "12:00")):
        call_api("create_activity", title=start, date="2024-03-01", start_time=start, end_time=end, owner="Ana")
    call_api("create_activity", title="Urgent", date="2024-03-02", category="urgent", owner="Ana")

    day = call_api("day_layout", day="2024-03-01")
    assert day["hours"][0] == "06:00"
    assert [block["column"] for block in day["layout"]["blocks"]] == [0, 1, 0]
    assert day["layout"]["total_columns"] == 2
    assert day["layout"]["blocks"][1]["box"]["left"] == "calc(50% + 8px)"

    week = call_api("week_layout", day="2024-03-01")
    assert [item["day"] for item in week["days"]][0] == "2024-02-25"
    assert sum(len(item["blocks"]) for item in week["days"]) == 4

    summary = call_api("dashboard", today="2024-03-01", now="09:15")
    assert summary["now_minutes"] == 555
    assert [item["title"] for item in summary["upcoming"]] == ["09:30", "11:00", "Urgent"]
    assert [item["title"] for item in summary["urgent"]] == ["Urgent"]
    assert len(summary["agenda"]) == 3
    assert summary["summary"]["total"] == 4
    assert summary["summary"]["completion_percent"] == 0


def test_navigate(api):
    assert call_api("navigate", day="2024-03-01", view="day", steps=-1)["days"] == ["2024-02-29"]
    week = call_api("navigate", day="2024-03-01")
    assert week["anchor"] == "2024-03-08"
    assert week["days"][0] == "2024-03-03"
    with pytest.raises(ValueError):
        call_api("navigate", day="2024-03-01", view="month")


def test_categories_and_owner(api):
    categories = call_api("list_categories")
    assert categories["default"] == "work"
    assert len(categories["categories"]) == 7
    assert call_api("current_owner") == {"owner": None}
    call_api("sign_in", name="Luis")
    assert call_api("current_owner")["owner"] == "Luis"
    assert call_api("sign_out") == {"signed_out": True}
    assert call_api("current_owner") == {"owner": None}
