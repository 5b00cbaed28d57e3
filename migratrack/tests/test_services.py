"""Tests for the entity services.

Tests cover:
- Generic repository CRUD and soft delete
- Owning-project validation
- Issue id generation and duplicate rejection
- Transfer checklist seeding from FieldMaster
- Reference data ordering
"""

import re

import pytest

from migratrack.core.db import DatabaseManager, FieldMaster, Project
from migratrack.core.services import (
    CustomizationService,
    IssueService,
    ModuleMasterService,
    TransferCheckService,
    VerificationService,
    make_issue_id,
)


# ── Fixtures ──────────────────────────────────────────────────────────────


def _make_db() -> DatabaseManager:
    db = DatabaseManager("sqlite://")
    db.init_db()
    return db


def _add_project(db, name="Acme") -> int:
    with db.get_session() as session:
        project = Project(client_name=name)
        session.add(project)
        session.flush()
        return project.project_id


def _transfer(project_id, **overrides):
    data = {
        "project_id": project_id,
        "module_name": "Accounts",
        "table_name_desktop": "acc_master",
        "table_name_web": "accounts",
    }
    data.update(overrides)
    return data


def _add_field(db, group_id, name, label, description=None, default_value=None, active=True, order=0):
    with db.get_session() as session:
        session.add(FieldMaster(
            field_name=name,
            field_label=label,
            field_description=description,
            module_group_id=group_id,
            data_type="varchar",
            default_value=default_value,
            is_active=active,
            display_order=order,
        ))


# ── Tests: Repository CRUD ───────────────────────────────────────────────


class TestRepositoryCrud:

    def test_create_assigns_id_and_timestamps(self):
        db = _make_db()
        pid = _add_project(db)
        service = VerificationService(db)

        created = service.create({"project_id": pid, "module_name": "Sales", "field_name": "total"})

        assert created["verification_id"] > 0
        assert created["status"] == "Pending"
        assert created["created_at"] is not None
        assert created["is_deleted"] is False

    def test_create_ignores_client_id_and_flags(self):
        db = _make_db()
        pid = _add_project(db)
        service = TransferCheckService(db)

        created = service.create(_transfer(pid, transfer_id=555, is_deleted=True, bogus="x"))

        assert created["transfer_id"] != 555
        assert created["is_deleted"] is False
        assert "bogus" not in created

    def test_create_requires_existing_project(self):
        service = VerificationService(_make_db())

        with pytest.raises(ValueError, match="does not exist"):
            service.create({"project_id": 42, "module_name": "Sales", "field_name": "total"})

    def test_get_and_list_by_project(self):
        db = _make_db()
        pid = _add_project(db, "Acme")
        other = _add_project(db, "Globex")
        service = TransferCheckService(db)
        first = service.create(_transfer(pid))
        service.create(_transfer(pid, table_name_desktop="acc_detail"))
        service.create(_transfer(other))

        assert service.get(first["transfer_id"])["table_name_desktop"] == "acc_master"
        assert len(service.list_by_project(pid)) == 2
        assert len(service.list_all()) == 3

    def test_list_newest_first(self):
        db = _make_db()
        pid = _add_project(db)
        service = TransferCheckService(db)
        first = service.create(_transfer(pid))
        second = service.create(_transfer(pid))

        ids = [row["transfer_id"] for row in service.list_by_project(pid)]

        assert ids == [second["transfer_id"], first["transfer_id"]]

    def test_update_merges_fields(self):
        db = _make_db()
        pid = _add_project(db)
        service = TransferCheckService(db)
        created = service.create(_transfer(pid, comments="first pass"))

        updated = service.update(created["transfer_id"], {"is_completed": True, "status": "Completed"})

        assert updated["is_completed"] is True
        assert updated["status"] == "Completed"
        assert updated["comments"] == "first pass"

    def test_update_missing_returns_none(self):
        service = VerificationService(_make_db())

        assert service.update(123, {"status": "Correct"}) is None

    def test_update_to_unknown_project_rejected(self):
        db = _make_db()
        pid = _add_project(db)
        service = TransferCheckService(db)
        created = service.create(_transfer(pid))

        with pytest.raises(ValueError):
            service.update(created["transfer_id"], {"project_id": 999})


class TestSoftDelete:

    def test_deleted_rows_hidden_from_reads(self):
        db = _make_db()
        pid = _add_project(db)
        service = CustomizationService(db)
        created = service.create({"project_id": pid, "title": "Extra report", "type": "Report"})
        cid = created["customization_id"]

        assert service.delete(cid) is True

        assert service.get(cid) is None
        assert service.list_by_project(pid) == []
        assert service.list_all() == []
        assert service.update(cid, {"notes": "x"}) is None

    def test_second_delete_reports_missing(self):
        db = _make_db()
        pid = _add_project(db)
        service = VerificationService(db)
        created = service.create({"project_id": pid, "module_name": "Sales", "field_name": "total"})

        assert service.delete(created["verification_id"]) is True
        assert service.delete(created["verification_id"]) is False

    def test_delete_unknown(self):
        assert TransferCheckService(_make_db()).delete(77) is False


# ── Tests: Issues ────────────────────────────────────────────────────────


class TestIssueService:

    def test_make_issue_id_format(self):
        from datetime import datetime

        assert make_issue_id(12, datetime(2026, 1, 1, 7, 5, 9), 4) == "ISS-12-070509-004"

    def test_generated_id(self):
        db = _make_db()
        pid = _add_project(db)

        issue = IssueService(db).create({"project_id": pid, "title": "Totals differ"})

        assert re.match(rf"^ISS-{pid}-\d{{6}}-001$", issue["issue_id"])
        assert issue["issue_number"] == issue["issue_id"]
        assert issue["status"] == "Open"
        assert issue["priority"] == "Medium"

    def test_generated_ids_unique_within_second(self):
        db = _make_db()
        pid = _add_project(db)
        service = IssueService(db)

        ids = {service.create({"project_id": pid, "title": f"Issue {i}"})["issue_id"] for i in range(3)}

        assert len(ids) == 3

    def test_explicit_id_kept(self):
        db = _make_db()
        pid = _add_project(db)

        issue = IssueService(db).create({"issue_id": "ISS-LEGACY-1", "project_id": pid, "title": "Old"})

        assert issue["issue_id"] == "ISS-LEGACY-1"

    def test_duplicate_id_rejected(self):
        db = _make_db()
        pid = _add_project(db)
        service = IssueService(db)
        service.create({"issue_id": "ISS-1", "project_id": pid, "title": "A"})

        with pytest.raises(ValueError, match="already exists"):
            service.create({"issue_id": "ISS-1", "project_id": pid, "title": "B"})

    def test_hard_delete(self):
        db = _make_db()
        pid = _add_project(db)
        service = IssueService(db)
        issue = service.create({"project_id": pid, "title": "A"})

        assert service.delete(issue["issue_id"]) is True
        assert service.get(issue["issue_id"]) is None
        assert service.list_by_project(pid) == []


# ── Tests: Transfer seeding ──────────────────────────────────────────────


class TestTransferSeeding:

    def test_first_listing_seeds_from_group(self):
        db = _make_db()
        pid = _add_project(db)
        _add_field(db, 1, "cust_mst", "Customers", "Masters", default_value="customers", order=1)
        _add_field(db, 1, "item_mst", "Items", order=2)
        _add_field(db, 1, "old_tbl", "Retired", active=False)
        _add_field(db, 2, "other", "Other group")

        checks = TransferCheckService(db, seed_group_id=1).list_by_project(pid)

        by_desktop = {c["table_name_desktop"]: c for c in checks}
        assert set(by_desktop) == {"cust_mst", "item_mst"}
        assert by_desktop["cust_mst"]["module_name"] == "Customers"
        assert by_desktop["cust_mst"]["sub_module_name"] == "Masters"
        assert by_desktop["cust_mst"]["table_name_web"] == "customers"
        assert by_desktop["item_mst"]["table_name_web"] == "item_mst"
        assert all(c["status"] == "Not Started" for c in checks)

    def test_seeds_only_once(self):
        db = _make_db()
        pid = _add_project(db)
        _add_field(db, 1, "cust_mst", "Customers")
        service = TransferCheckService(db)

        service.list_by_project(pid)
        _add_field(db, 1, "item_mst", "Items")
        checks = service.list_by_project(pid)

        assert len(checks) == 1

    def test_deleted_checks_prevent_reseed(self):
        db = _make_db()
        pid = _add_project(db)
        _add_field(db, 1, "cust_mst", "Customers")
        service = TransferCheckService(db)
        seeded = service.list_by_project(pid)

        service.delete(seeded[0]["transfer_id"])

        assert service.list_by_project(pid) == []
        assert service.seed_from_field_master(pid) == 0

    def test_unknown_project_not_seeded(self):
        db = _make_db()
        _add_field(db, 1, "cust_mst", "Customers")

        assert TransferCheckService(db).seed_from_field_master(31) == 0


# ── Tests: Reference data ────────────────────────────────────────────────


class TestModuleMaster:

    def test_crud_without_project(self):
        service = ModuleMasterService(_make_db())

        module = service.create({"module_name": "Sales", "sub_module_name": "Invoices", "group_index": 2})
        service.create({"module_name": "Sales", "sub_module_name": "Orders", "group_index": 1})

        assert [m["sub_module_name"] for m in service.list_all()] == ["Orders", "Invoices"]
        assert service.update(module["module_id"], {"group_index": 0})["group_index"] == 0
        assert service.delete(module["module_id"]) is True
        assert service.get(module["module_id"]) is None
