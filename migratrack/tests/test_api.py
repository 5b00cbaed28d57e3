"""Route-level tests through FastAPI's TestClient.

Tests cover:
- Status codes for create/get/update/delete
- Error envelope for 400/404
- Dashboard and clone endpoints
- Multipart email and spreadsheet uploads and spreadsheet edits
- Server registry, module group, quick work and manual configuration routes
"""

import re
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from migratrack.api.app import create_app
from migratrack.core.db import DatabaseManager
from migratrack.setting import Settings


# ── Fixtures ──────────────────────────────────────────────────────────────


@pytest.fixture
def client(tmp_path):
    db = DatabaseManager("sqlite://")
    db.init_db()
    settings = Settings(database_url="sqlite://", upload_root=str(tmp_path), max_upload_mb=1)
    app = create_app(db_manager=db, settings=settings)
    with TestClient(app) as test_client:
        yield test_client
    db.dispose()


def _create_project(client, name="Acme") -> int:
    response = client.post("/api/projects", json={"client_name": name})
    assert response.status_code == 201
    return response.json()["project_id"]


def _create_transfer(client, project_id, **overrides) -> dict:
    body = {
        "project_id": project_id,
        "module_name": "Accounts",
        "table_name_desktop": "acc_master",
        "table_name_web": "accounts",
    }
    body.update(overrides)
    response = client.post("/api/DataTransfer", json=body)
    assert response.status_code == 201
    return response.json()


# ── Tests: health ────────────────────────────────────────────────────────


def test_health(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert response.json()["database"] == "ok"


# ── Tests: projects ──────────────────────────────────────────────────────


class TestProjectRoutes:

    def test_create_and_get(self, client):
        pid = _create_project(client)

        response = client.get(f"/api/projects/{pid}")

        assert response.status_code == 200
        assert response.json()["client_name"] == "Acme"

    def test_create_validation_error_is_400(self, client):
        response = client.post("/api/projects", json={"client_name": ""})

        assert response.status_code == 400
        assert response.json()["success"] is False
        assert "client_name" in response.json()["error"]

    def test_get_missing_is_404(self, client):
        response = client.get("/api/projects/999")

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Project 999 not found"}

    def test_update_id_mismatch_is_400(self, client):
        pid = _create_project(client)

        response = client.put(f"/api/projects/{pid}", json={"project_id": pid + 1, "status": "Closed"})

        assert response.status_code == 400

    def test_update(self, client):
        pid = _create_project(client)

        response = client.put(f"/api/projects/{pid}", json={"project_id": pid, "status": "On Hold"})

        assert response.status_code == 200
        assert response.json()["status"] == "On Hold"

    def test_delete_hides_from_list(self, client):
        pid = _create_project(client)

        assert client.delete(f"/api/projects/{pid}").status_code == 204
        assert client.get("/api/projects").json() == []
        assert client.delete("/api/projects/999").status_code == 404

    def test_reorder(self, client):
        a = _create_project(client, "A")
        b = _create_project(client, "B")

        response = client.put("/api/projects/reorder", json=[
            {"project_id": a, "display_order": 0},
            {"project_id": b, "display_order": 1},
        ])

        assert response.status_code == 200
        assert [p["client_name"] for p in client.get("/api/projects").json()] == ["A", "B"]


class TestDashboardRoute:

    def test_dashboard(self, client):
        pid = _create_project(client)
        for i in range(10):
            _create_transfer(client, pid, table_name_desktop=f"t{i}", is_completed=i < 6)

        response = client.get(f"/api/projects/{pid}/dashboard")

        assert response.status_code == 200
        body = response.json()
        assert body["total_transfers"] == 10
        assert body["completion_percentage"] == 60.0

    def test_unknown_project_is_404(self, client):
        assert client.get("/api/projects/999/dashboard").status_code == 404


class TestCloneRoute:

    def test_clone(self, client):
        source = _create_project(client, "Source")
        target = _create_project(client, "Target")
        _create_transfer(client, source)
        client.post("/api/Issues", json={"project_id": source, "title": "Totals differ"})

        response = client.post(f"/api/projects/{source}/clone/{target}")

        assert response.status_code == 200
        assert response.json()["success"] is True
        assert len(client.get(f"/api/DataTransfer/project/{target}").json()) == 1
        issues = client.get(f"/api/Issues/project/{target}").json()
        assert len(issues) == 1
        assert re.match(rf"^ISS-{target}-\d{{6}}-001$", issues[0]["issue_id"])

    def test_missing_project_is_404(self, client):
        source = _create_project(client)

        response = client.post(f"/api/projects/{source}/clone/999")

        assert response.status_code == 404
        assert response.json()["error"] == "Source or target project not found"

    def test_failure_is_500(self, client):
        source = _create_project(client, "Source")
        target = _create_project(client, "Target")

        with patch(
            "migratrack.core.project.cloner.ProjectCloner._clone_issues",
            side_effect=RuntimeError("boom"),
        ):
            response = client.post(f"/api/projects/{source}/clone/{target}")

        assert response.status_code == 500
        assert response.json()["error"] == "Clone failed: boom"


# ── Tests: checklist entities ────────────────────────────────────────────


class TestChecklistRoutes:

    def test_transfer_crud(self, client):
        pid = _create_project(client)
        created = _create_transfer(client, pid)
        tid = created["transfer_id"]

        assert created["status"] == "Not Started"
        assert client.get(f"/api/DataTransfer/{tid}").status_code == 200

        response = client.put(f"/api/DataTransfer/{tid}", json={"transfer_id": tid, "is_completed": True})
        assert response.status_code == 200
        assert response.json()["is_completed"] is True

        assert client.delete(f"/api/DataTransfer/{tid}").status_code == 204
        assert client.get(f"/api/DataTransfer/{tid}").status_code == 404

    def test_unknown_project_is_400(self, client):
        response = client.post("/api/Verification", json={
            "project_id": 404, "module_name": "Sales", "field_name": "total",
        })

        assert response.status_code == 400
        assert "does not exist" in response.json()["error"]

    def test_invalid_status_is_400(self, client):
        pid = _create_project(client)

        response = client.post("/api/Issues", json={"project_id": pid, "title": "x", "status": "Sleeping"})

        assert response.status_code == 400

    def test_id_mismatch_is_400(self, client):
        pid = _create_project(client)
        created = client.post("/api/Customization", json={"project_id": pid, "title": "Report"}).json()
        cid = created["customization_id"]

        response = client.put(f"/api/Customization/{cid}", json={"customization_id": cid + 1})

        assert response.status_code == 400

    def test_update_missing_is_404(self, client):
        assert client.put("/api/Issues/ISS-9", json={"title": "x"}).status_code == 404


# ── Tests: field master and module data ──────────────────────────────────


class TestFieldRoutes:

    def test_group_fields_and_module_data(self, client):
        pid = _create_project(client)
        response = client.post("/api/FieldMaster", json={
            "field_name": "qty", "field_label": "Quantity", "module_group_id": 5,
            "data_type": "int", "is_required": True,
        })
        assert response.status_code == 201
        assert len(client.get("/api/FieldMaster/group/5").json()) == 1

        bad = client.post("/api/ModuleData", json={"project_id": pid, "module_group_id": 5, "data": {}})
        assert bad.status_code == 400
        assert bad.json()["error"] == "Quantity is required"

        good = client.post("/api/ModuleData", json={
            "project_id": pid, "module_group_id": 5, "data": {"qty": "4"},
        })
        assert good.status_code == 201
        assert good.json()["data"]["qty"] == 4

        records = client.get("/api/ModuleData", params={"projectId": pid, "moduleGroupId": 5}).json()
        assert [r["record_id"] for r in records] == [good.json()["record_id"]]

    def test_unknown_data_type_is_400(self, client):
        response = client.post("/api/FieldMaster", json={
            "field_name": "x", "field_label": "X", "module_group_id": 1, "data_type": "blob",
        })

        assert response.status_code == 400

    def test_bad_validation_pattern_is_400(self, client):
        response = client.post("/api/FieldMaster", json={
            "field_name": "code", "field_label": "Code", "module_group_id": 7,
            "data_type": "varchar", "validation_regex": "[unclosed",
        })

        assert response.status_code == 400
        assert "invalid validation pattern" in response.json()["error"]
        assert client.get("/api/FieldMaster/group/7").json() == []

    def test_lookup_values(self, client):
        assert client.get("/api/FieldMaster/lookup/region").json() == []


# ── Tests: uploads ───────────────────────────────────────────────────────


class TestUploadRoutes:

    def test_email_with_attachment(self, client):
        pid = _create_project(client)

        response = client.post(
            "/api/Emails",
            data={"project_id": str(pid), "subject": "Sign-off", "sender": "pm@acme.test"},
            files={"attachment": ("signoff.pdf", b"%PDF-1.4", "application/pdf")},
        )

        assert response.status_code == 201
        email = response.json()
        assert email["attachment_path"].endswith("_signoff.pdf")

        download = client.get(f"/api/Emails/{email['email_id']}/attachment")
        assert download.status_code == 200
        assert download.content == b"%PDF-1.4"

        assert client.delete(f"/api/Emails/{email['email_id']}").status_code == 204
        assert client.get(f"/api/Emails/project/{pid}").json() == []

    def test_excel_upload_and_download(self, client):
        pid = _create_project(client)

        response = client.post(
            "/api/ExcelData/upload",
            data={"project_id": str(pid), "module_name": "Sales", "sub_module_name": "Invoices"},
            files={"file": ("inv.xlsx", b"sheet-bytes", "application/octet-stream")},
        )

        assert response.status_code == 201
        file_id = response.json()["id"]
        download = client.get(f"/api/ExcelData/download/{file_id}")
        assert download.status_code == 200
        assert download.content == b"sheet-bytes"
        assert client.delete(f"/api/ExcelData/{file_id}").status_code == 204
        assert client.get(f"/api/ExcelData/download/{file_id}").status_code == 404

    def test_empty_excel_upload_is_400(self, client):
        pid = _create_project(client)

        response = client.post(
            "/api/ExcelData/upload",
            data={"project_id": str(pid), "module_name": "Sales", "sub_module_name": "Invoices"},
            files={"file": ("inv.xlsx", b"", "application/octet-stream")},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "No file uploaded."

    def test_excel_update_metadata_and_replace_file(self, client):
        pid = _create_project(client)
        created = client.post(
            "/api/ExcelData/upload",
            data={"project_id": str(pid), "module_name": "Sales", "sub_module_name": "Invoices"},
            files={"file": ("inv.xlsx", b"old-bytes", "application/octet-stream")},
        ).json()

        renamed = client.put(
            f"/api/ExcelData/{created['id']}",
            data={"module_name": "Finance", "sub_module_name": "Ledger", "description": "Q1"},
        )
        assert renamed.status_code == 200
        assert renamed.json()["module_name"] == "Finance"
        assert renamed.json()["file_path"] == created["file_path"]

        replaced = client.put(
            f"/api/ExcelData/{created['id']}",
            data={"module_name": "Finance", "sub_module_name": "Ledger"},
            files={"file": ("q2.xlsx", b"new-bytes", "application/octet-stream")},
        )
        assert replaced.status_code == 200
        assert replaced.json()["file_name"] == "q2.xlsx"
        assert client.get(f"/api/ExcelData/download/{created['id']}").content == b"new-bytes"

    def test_excel_update_missing_is_404(self, client):
        response = client.put("/api/ExcelData/999", data={"module_name": "A", "sub_module_name": "B"})

        assert response.status_code == 404


# ── Tests: registry and catalogue routes ─────────────────────────────────


class TestRegistryRoutes:

    def test_server_databases_and_project_links(self, client):
        server = client.post("/api/ServerData", json={
            "server_name": "SQL01", "host_name": "sql01.corp", "server_index": "1",
        })
        assert server.status_code == 201
        sid = server.json()["server_id"]

        database = client.post("/api/DatabaseDetail", json={
            "database_name": "acme_live", "server_id": sid, "server_index": "1", "client_name": "Acme",
        })
        assert database.status_code == 201
        did = database.json()["database_id"]
        assert database.json()["server"]["host_name"] == "sql01.corp"
        assert [d["database_id"] for d in client.get(f"/api/DatabaseDetail/server/{sid}").json()] == [did]

        pid = _create_project(client)
        linked = client.put(f"/api/projects/{pid}", json={"server_id_web": sid, "database_id_web": did})
        assert linked.status_code == 200
        assert linked.json()["database_id_web"] == did

    def test_unknown_references_are_400(self, client):
        database = client.post("/api/DatabaseDetail", json={
            "database_name": "x", "server_id": 99, "server_index": "1", "client_name": "Acme",
        })
        assert database.status_code == 400

        project = client.post("/api/projects", json={"client_name": "Acme", "server_id_desktop": 5})
        assert project.status_code == 400
        assert project.json()["error"] == "Server 5 does not exist"

    def test_module_groups(self, client):
        created = client.post("/api/ModuleGroups", json={"module_group_name": "Masters"})
        gid = created.json()["module_group_id"]

        assert created.status_code == 201
        assert client.delete(f"/api/ModuleGroups/{gid}").status_code == 204
        assert client.get("/api/ModuleGroups").json() == []

    def test_quick_works(self, client):
        created = client.post("/api/QuickWorks", json={"table_name": "invoices", "sql_query": "SELECT 1"})
        qid = created.json()["id"]

        assert created.status_code == 201
        assert client.put(f"/api/QuickWorks/{qid}", json={"id": qid + 1}).status_code == 400
        assert client.put(f"/api/QuickWorks/{qid}", json={"description": "Smoke"}).json()["description"] == "Smoke"
        assert client.delete(f"/api/QuickWorks/{qid}").status_code == 204
        assert client.get(f"/api/QuickWorks/{qid}").status_code == 404

    def test_manual_configurations(self, client):
        pid = _create_project(client)

        created = client.post("/api/ManualConfigurations", json={
            "project_id": pid, "module_name": "Sales", "sub_module_name": "Tax",
        })

        assert created.status_code == 201
        listed = client.get(f"/api/ManualConfigurations/project/{pid}").json()
        assert [c["id"] for c in listed] == [created.json()["id"]]
        missing = client.post("/api/ManualConfigurations", json={
            "project_id": 999, "module_name": "Sales", "sub_module_name": "Tax",
        })
        assert missing.status_code == 400
