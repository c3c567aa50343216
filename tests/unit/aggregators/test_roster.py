"""Unit tests for the attendant roster."""

from queue_dashboard.aggregators.roster import build_attendant_roster, is_listed_attendant
from queue_dashboard.models.attendant import Attendant


class TestIsListedAttendant:
    """Test which attendant records are shown."""

    def test_complete_record_listed(self):
        assert is_listed_attendant(Attendant(id="u1", name="Ana"))

    def test_missing_id_or_name_hidden(self):
        assert not is_listed_attendant(Attendant(id="", name="Ana"))
        assert not is_listed_attendant(Attendant(id="u1", name=None))

    def test_placeholder_name_hidden(self):
        assert not is_listed_attendant(Attendant(id="u1", name=" Atendente "))


class TestBuildAttendantRoster:
    """Test ordering and counting attendants."""

    def test_online_busy_offline_order(self, sample_attendant_payloads):
        attendants = [
            Attendant(id="u1", name="Ana", status=0),
            Attendant(id="u2", name="Bruno", status=2),
            Attendant(id="u3", name="Carla", status=1),
            Attendant(id="u4", name="Davi", status=1),
        ]

        roster = build_attendant_roster(attendants)

        assert [a.id for a in roster.attendants] == ["u3", "u4", "u2", "u1"]
        assert (roster.online, roster.busy, roster.offline, roster.total) == (2, 1, 1, 4)

    def test_placeholders_excluded_from_counts(self, sample_attendant_payloads):
        attendants = [Attendant.model_validate(item) for item in sample_attendant_payloads]

        roster = build_attendant_roster(attendants)

        assert [a.name for a in roster.attendants] == ["Ana", "Bruno"]
        assert roster.online == 1

    def test_empty(self):
        roster = build_attendant_roster([])
        assert roster.total == 0
        assert roster.attendants == ()
