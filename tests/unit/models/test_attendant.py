"""Unit tests for the Attendant and Department models."""

from queue_dashboard.models.attendant import Attendant, AttendantStatus, Department


class TestAttendant:
    """Test Attendant validation."""

    def test_presence_from_status(self):
        assert Attendant(id="u1", status=1).presence is AttendantStatus.ONLINE
        assert Attendant(id="u1", status=2).presence is AttendantStatus.BUSY
        assert Attendant(id="u1", status=0).presence is AttendantStatus.OFFLINE

    def test_unknown_status_is_offline(self):
        assert Attendant(id="u1", status=7).presence is AttendantStatus.OFFLINE

    def test_null_fields_defaulted(self):
        attendant = Attendant.model_validate({"id": None, "status": None})
        assert attendant.id == ""
        assert attendant.status == 0
        assert attendant.name is None

    def test_profile_picture_alias(self):
        attendant = Attendant.model_validate(
            {"id": "u1", "profilePicture": {"url": "https://img.example/u1.png"}}
        )
        assert attendant.profile_picture.url == "https://img.example/u1.png"


class TestDepartment:
    """Test Department validation."""

    def test_capitalized_name_key(self):
        assert Department.model_validate({"id": "cb1", "Name": "Sales"}).name == "Sales"

    def test_lowercase_name_key(self):
        assert Department.model_validate({"id": "cb1", "name": "Sales"}).name == "Sales"

    def test_missing_name(self):
        department = Department.model_validate({"id": "cb1"})
        assert department.name is None
