"""Tests for field definitions and dynamic module records.

Tests cover:
- data_type spelling resolution
- Per-kind value coercion and error messages
- FieldMaster validation and deactivation
- ModuleData validation against the group's fields
"""

import pytest

from migratrack.core.db import DatabaseManager, FieldMaster, LookupData, Project
from migratrack.core.services import (
    FieldKind,
    FieldMasterService,
    LookupService,
    ModuleDataService,
    coerce_field_value,
    resolve_field_kind,
)


# ── Fixtures ──────────────────────────────────────────────────────────────


def _make_db() -> DatabaseManager:
    db = DatabaseManager("sqlite://")
    db.init_db()
    return db


def _add_project(db) -> int:
    with db.get_session() as session:
        project = Project(client_name="Acme")
        session.add(project)
        session.flush()
        return project.project_id


def _field(data_type, label="Amount", required=False, **extra) -> FieldMaster:
    return FieldMaster(
        field_name=label.lower().replace(" ", "_"),
        field_label=label,
        module_group_id=3,
        data_type=data_type,
        is_required=required,
        **extra,
    )


def _field_data(**overrides):
    data = {
        "field_name": "qty",
        "field_label": "Quantity",
        "module_group_id": 5,
        "data_type": "int",
        "is_required": True,
    }
    data.update(overrides)
    return data


# ── Tests: data types ────────────────────────────────────────────────────


class TestResolveFieldKind:

    @pytest.mark.parametrize("spelling,kind", [
        ("varchar", FieldKind.TEXT),
        ("TextArea", FieldKind.TEXT),
        ("int", FieldKind.INTEGER),
        ("decimal", FieldKind.DECIMAL),
        ("number", FieldKind.DECIMAL),
        ("date", FieldKind.DATE),
        ("bit", FieldKind.BOOLEAN),
        ("dropdown", FieldKind.CHOICE),
        ("select", FieldKind.CHOICE),
        (" email ", FieldKind.EMAIL),
    ])
    def test_known_spellings(self, spelling, kind):
        assert resolve_field_kind(spelling) is kind

    def test_unknown_spelling(self):
        with pytest.raises(ValueError, match="Unknown field data type"):
            resolve_field_kind("blob")


class TestCoerceFieldValue:

    def test_required_missing(self):
        with pytest.raises(ValueError, match="Amount is required"):
            coerce_field_value(_field("int", required=True), "  ")

    def test_optional_missing_is_none(self):
        assert coerce_field_value(_field("int"), None) is None

    def test_integer(self):
        assert coerce_field_value(_field("int"), "42") == 42
        assert coerce_field_value(_field("int"), 7.0) == 7
        with pytest.raises(ValueError, match="whole number"):
            coerce_field_value(_field("int"), "4.5")
        with pytest.raises(ValueError):
            coerce_field_value(_field("int"), True)

    def test_decimal(self):
        assert coerce_field_value(_field("decimal"), "12.50") == 12.5
        with pytest.raises(ValueError, match="must be a number"):
            coerce_field_value(_field("decimal"), "twelve")

    def test_text_limits(self):
        field = _field("varchar", label="Code", max_length=3, validation_regex=r"[A-Z]+")

        assert coerce_field_value(field, "ABC") == "ABC"
        with pytest.raises(ValueError, match="exceeds 3"):
            coerce_field_value(field, "ABCD")
        with pytest.raises(ValueError, match="invalid format"):
            coerce_field_value(field, "ab")

    def test_stored_pattern_that_does_not_compile(self):
        field = _field("varchar", label="Code", validation_regex="[unclosed")

        with pytest.raises(ValueError, match="Code has an invalid validation pattern"):
            coerce_field_value(field, "abc")

    def test_date_and_datetime(self):
        assert coerce_field_value(_field("date"), "2026-05-01T10:00:00") == "2026-05-01"
        assert coerce_field_value(_field("datetime"), "2026-05-01 10:30") == "2026-05-01T10:30:00"
        with pytest.raises(ValueError, match="YYYY-MM-DD"):
            coerce_field_value(_field("date"), "01/05/2026")
        with pytest.raises(ValueError, match="YYYY-MM-DD"):
            coerce_field_value(_field("date"), "2026-05-01garbage")

    def test_boolean(self):
        assert coerce_field_value(_field("bit"), "yes") is True
        assert coerce_field_value(_field("checkbox"), "0") is False
        assert coerce_field_value(_field("bit"), False) is False
        with pytest.raises(ValueError, match="true or false"):
            coerce_field_value(_field("bit"), "maybe")

    def test_choice(self):
        field = _field("dropdown", label="Region")

        assert coerce_field_value(field, "North", {"N", "North"}) == "North"
        assert coerce_field_value(field, "Anything") == "Anything"
        with pytest.raises(ValueError, match="must be one of"):
            coerce_field_value(field, "West", {"N", "North"})

    def test_email(self):
        assert coerce_field_value(_field("email"), " a@b.co ") == "a@b.co"
        with pytest.raises(ValueError, match="email address"):
            coerce_field_value(_field("email"), "not-an-email")


# ── Tests: FieldMasterService ────────────────────────────────────────────


class TestFieldMasterService:

    def test_create_rejects_unknown_type(self):
        service = FieldMasterService(_make_db())

        with pytest.raises(ValueError):
            service.create(_field_data(data_type="blob"))

    def test_update_rejects_unknown_type(self):
        service = FieldMasterService(_make_db())
        field = service.create(_field_data())

        with pytest.raises(ValueError):
            service.update(field["field_id"], {"data_type": "blob"})

    def test_rejects_pattern_that_does_not_compile(self):
        service = FieldMasterService(_make_db())

        with pytest.raises(ValueError, match="invalid validation pattern"):
            service.create(_field_data(data_type="varchar", validation_regex="[unclosed"))

        field = service.create(_field_data(data_type="varchar", validation_regex=r"[A-Z]+"))
        with pytest.raises(ValueError, match="invalid validation pattern"):
            service.update(field["field_id"], {"validation_regex": "("})
        assert service.get(field["field_id"])["validation_regex"] == "[A-Z]+"

    def test_delete_deactivates(self):
        service = FieldMasterService(_make_db())
        field = service.create(_field_data())

        assert service.delete(field["field_id"]) is True

        assert service.list_all() == []
        assert service.list_by_group(5) == []
        assert service.get(field["field_id"])["is_active"] is False

    def test_group_listing_in_display_order(self):
        service = FieldMasterService(_make_db())
        service.create(_field_data(field_name="b", display_order=2))
        service.create(_field_data(field_name="a", display_order=1))
        service.create(_field_data(field_name="c", module_group_id=6))

        assert [f["field_name"] for f in service.list_by_group(5)] == ["a", "b"]


class TestLookupService:

    def test_active_values_by_type(self):
        db = _make_db()
        with db.get_session() as session:
            session.add(LookupData(lookup_type="region", lookup_key="N", lookup_value="North", display_order=2))
            session.add(LookupData(lookup_type="region", lookup_key="S", lookup_value="South", display_order=1))
            session.add(LookupData(lookup_type="region", lookup_key="X", lookup_value="Old", is_active=False))
            session.add(LookupData(lookup_type="status", lookup_key="A", lookup_value="Active"))

        values = LookupService(db).list_by_type("region")

        assert [v["lookup_key"] for v in values] == ["S", "N"]


# ── Tests: ModuleDataService ─────────────────────────────────────────────


class TestModuleDataService:

    def _setup(self):
        db = _make_db()
        pid = _add_project(db)
        fields = FieldMasterService(db)
        fields.create(_field_data())
        fields.create(_field_data(
            field_name="region", field_label="Region", data_type="dropdown",
            is_required=False, select_query_db="region",
        ))
        with db.get_session() as session:
            session.add(LookupData(lookup_type="region", lookup_key="N", lookup_value="North"))
        return db, pid

    def test_create_coerces_and_keeps_unknown_keys(self):
        db, pid = self._setup()

        record = ModuleDataService(db).create({
            "project_id": pid,
            "module_group_id": 5,
            "data": {"qty": "3", "region": "N", "note": "free text"},
        })

        assert record["record_id"]
        assert record["data"] == {"qty": 3, "region": "N", "note": "free text"}

    def test_create_reports_field_error(self):
        db, pid = self._setup()

        with pytest.raises(ValueError, match="Quantity is required"):
            ModuleDataService(db).create({"project_id": pid, "module_group_id": 5, "data": {}})

    def test_choice_checked_against_lookup(self):
        db, pid = self._setup()

        with pytest.raises(ValueError, match="Region must be one of"):
            ModuleDataService(db).create({
                "project_id": pid, "module_group_id": 5, "data": {"qty": 1, "region": "W"},
            })

    def test_requires_group(self):
        db, pid = self._setup()

        with pytest.raises(ValueError, match="module_group_id is required"):
            ModuleDataService(db).create({"project_id": pid, "data": {}})

    def test_update_revalidates_and_keeps_group(self):
        db, pid = self._setup()
        service = ModuleDataService(db)
        record = service.create({"project_id": pid, "module_group_id": 5, "data": {"qty": 1}})

        updated = service.update(record["record_id"], {"data": {"qty": "8"}, "module_group_id": 9})

        assert updated["data"]["qty"] == 8
        assert updated["module_group_id"] == 5
        with pytest.raises(ValueError):
            service.update(record["record_id"], {"data": {"qty": "many"}})

    def test_list_and_soft_delete(self):
        db, pid = self._setup()
        service = ModuleDataService(db)
        record = service.create({"project_id": pid, "module_group_id": 5, "data": {"qty": 1}})
        service.create({"project_id": pid, "module_group_id": 5, "data": {"qty": 2}})

        assert len(service.list_for_group(pid, 5)) == 2
        assert service.list_for_group(pid, 6) == []

        assert service.delete(record["record_id"]) is True
        assert len(service.list_for_group(pid, 5)) == 1
        assert service.get(record["record_id"]) is None

    def test_stored_bad_pattern_is_a_validation_error(self):
        db, pid = self._setup()
        with db.get_session() as session:
            session.add(FieldMaster(
                field_name="code", field_label="Code", module_group_id=5,
                data_type="varchar", validation_regex="[unclosed",
            ))

        with pytest.raises(ValueError, match="Code has an invalid validation pattern"):
            ModuleDataService(db).create({
                "project_id": pid, "module_group_id": 5, "data": {"qty": 1, "code": "abc"},
            })
