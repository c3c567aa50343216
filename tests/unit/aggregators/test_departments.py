"""Unit tests for department name resolution."""

from queue_dashboard.aggregators.departments import (
    DepartmentResolver,
    build_department_map,
    effective_department_id,
    list_department_names,
    normalize_department_map,
    resolve_department_name,
)
from queue_dashboard.models.attendant import Department
from queue_dashboard.models.contact import Contact


def make_contact(contact_id="c1", **fields) -> Contact:
    data = {"id": contact_id, "lastActivity": "2024-03-04T09:00:00Z"}
    data.update(fields)
    return Contact.model_validate(data)


class TestEffectiveDepartmentId:
    """Test the department id fallback chain."""

    def test_contact_department_first(self):
        contact = make_contact(
            departmentId="cb1", agent={"departmentId": "cb2"}, defaultDepartmentId="cb3"
        )
        assert effective_department_id(contact) == "cb1"

    def test_agent_department_second(self):
        contact = make_contact(
            departmentId="  ", agent={"departmentId": "cb2"}, defaultDepartmentId="cb3"
        )
        assert effective_department_id(contact) == "cb2"

    def test_default_department_last(self):
        assert effective_department_id(make_contact(defaultDepartmentId="cb3")) == "cb3"

    def test_none_when_all_blank(self):
        assert effective_department_id(make_contact(departmentId="")) is None


class TestResolveDepartmentName:
    """Test resolving display names."""

    def test_agent_department_case_insensitive(self):
        contact = make_contact(agent={"departmentId": "CB123"})
        assert resolve_department_name(contact, {"cb123": "Sales"}) == "Sales"

    def test_map_keys_normalized(self):
        contact = make_contact(departmentId="cb123")
        assert resolve_department_name(contact, {" CB123 ": "Sales"}) == "Sales"

    def test_unmapped_id_shown_raw(self):
        contact = make_contact(departmentId="CB999")
        assert resolve_department_name(contact, {"cb123": "Sales"}) == "CB999"

    def test_no_department_uses_label(self):
        assert resolve_department_name(make_contact(), {}) == "General"
        assert resolve_department_name(make_contact(), {}, "Unassigned") == "Unassigned"

    def test_empty_mapped_name_falls_back_to_id(self):
        contact = make_contact(departmentId="cb1")
        assert resolve_department_name(contact, {"cb1": ""}) == "cb1"


class TestDepartmentResolver:
    """Test the reusable resolver."""

    def test_lookup(self):
        resolver = DepartmentResolver({"CB1": "Sales"})
        assert resolver.lookup("cb1") == "Sales"
        assert resolver.lookup("cb2") == "cb2"

    def test_input_map_not_mutated(self):
        department_map = {"CB1": "Sales"}
        DepartmentResolver(department_map)
        assert department_map == {"CB1": "Sales"}


class TestDepartmentMaps:
    """Test building and listing department maps."""

    def test_normalize_drops_blank_keys(self):
        assert normalize_department_map({"": "x", " A ": "Sales"}) == {"a": "Sales"}

    def test_build_merges_fetched_over_defaults(self):
        departments = [
            Department(id="CB1", name="Sales"),
            Department(id="cb3", name="Billing"),
            Department(id="cb4", name=None),
        ]
        merged = build_department_map(departments, {"cb1": "Old", "cb2": "Support"})
        assert merged == {"cb1": "Sales", "cb2": "Support", "cb3": "Billing"}

    def test_build_without_defaults(self):
        assert build_department_map([]) == {}

    def test_list_department_names(self):
        waiting = [make_contact("c1", departmentId="cb9")]
        active = [make_contact("c2", departmentId="CB1")]
        names = list_department_names(
            waiting, active, {"cb1": "Sales", "cb2": "Internal"}, excluded_departments={"Internal"}
        )
        assert names == ["Sales", "cb9"]
