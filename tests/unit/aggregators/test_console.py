"""Unit tests for console contact filtering."""

from queue_dashboard.aggregators.console import ConsoleTab, filter_console_contacts
from queue_dashboard.models.contact import Contact

DEPARTMENTS = {"cb1": "Sales", "cb2": "Support"}


def make_contact(contact_id, name, phone, department_id, user_id=None) -> Contact:
    return Contact.model_validate(
        {
            "id": contact_id,
            "name": name,
            "phone": phone,
            "lastActivity": "2024-03-04T09:00:00Z",
            "departmentId": department_id,
            "agent": {"platformUserId": user_id} if user_id else None,
        }
    )


CONTACTS = [
    make_contact("c1", "Maria Silva", "5511988887777", "cb1", "u1"),
    make_contact("c2", "João Souza", "5511977776666", "cb2", "u2"),
    make_contact("c3", "Mariana Costa", "5521966665555", "cb2", "u1"),
]


def ids(contacts):
    return [c.id for c in contacts]


class TestFilterConsoleContacts:
    """Test the console filters."""

    def test_no_filters(self):
        assert ids(filter_console_contacts(CONTACTS, DEPARTMENTS, ConsoleTab.WAITING)) == [
            "c1",
            "c2",
            "c3",
        ]

    def test_department_filter(self):
        result = filter_console_contacts(
            CONTACTS, DEPARTMENTS, ConsoleTab.WAITING, department="Support"
        )
        assert ids(result) == ["c2", "c3"]

    def test_attendant_filter_applies_to_active_tab(self):
        result = filter_console_contacts(
            CONTACTS, DEPARTMENTS, ConsoleTab.ACTIVE, attendant_id="u1"
        )
        assert ids(result) == ["c1", "c3"]

    def test_attendant_filter_ignored_for_waiting_tab(self):
        result = filter_console_contacts(
            CONTACTS, DEPARTMENTS, ConsoleTab.WAITING, attendant_id="u1"
        )
        assert ids(result) == ["c1", "c2", "c3"]

    def test_search_name_case_insensitive(self):
        result = filter_console_contacts(
            CONTACTS, DEPARTMENTS, ConsoleTab.WAITING, search="MARIA"
        )
        assert ids(result) == ["c1", "c3"]

    def test_search_phone_substring(self):
        result = filter_console_contacts(
            CONTACTS, DEPARTMENTS, ConsoleTab.WAITING, search="21966"
        )
        assert ids(result) == ["c3"]

    def test_filters_combine(self):
        result = filter_console_contacts(
            CONTACTS,
            DEPARTMENTS,
            ConsoleTab.ACTIVE,
            department="Support",
            attendant_id="u1",
            search="mari",
        )
        assert ids(result) == ["c3"]
