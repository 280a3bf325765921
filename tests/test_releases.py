"""Tests for release and Salesforce metadata tracking."""

from __future__ import annotations

import pytest

from releasetrack.application.use_cases.metadata_items import (
    create_metadata_item,
    list_metadata_items,
    update_metadata_item,
)
from releasetrack.application.use_cases.releases import (
    create_release,
    delete_release,
    get_release,
    update_release,
)
from releasetrack.application.use_cases.tickets import create_ticket, update_ticket


def test_release_ids_are_sequential(session) -> None:
    first = create_release(session, name="February 2024 Release")
    second = create_release(session, name="March 2024 Release", version="v1.1")
    custom = create_release(session, name="Hotfix", release_id="RELEASE-HOTFIX")
    after_custom = create_release(session, name="April 2024 Release")

    assert [first.id, second.id, custom.id, after_custom.id] == [
        "RELEASE-1",
        "RELEASE-2",
        "RELEASE-HOTFIX",
        "RELEASE-3",
    ]
    assert first.status == "Planning"
    with pytest.raises(ValueError, match="already exists"):
        create_release(session, name="Again", release_id="RELEASE-1")
    with pytest.raises(ValueError, match="name is required"):
        create_release(session, name="  ")


def test_release_lists_its_tickets(session) -> None:
    release = create_release(session, name="February 2024 Release")
    scheduled = create_ticket(session, title="Portal access", release_id=release.id)
    create_ticket(session, title="Unscheduled work")

    overview = get_release(session, release.id)

    assert overview.release.name == "February 2024 Release"
    assert [ticket.id for ticket in overview.tickets] == [scheduled.id]


def test_tickets_must_reference_a_known_release(session) -> None:
    with pytest.raises(ValueError, match="RELEASE-9 not found"):
        create_ticket(session, title="Orphan", release_id="RELEASE-9")

    ticket = create_ticket(session, title="Later")
    with pytest.raises(ValueError, match="RELEASE-9 not found"):
        update_ticket(session, ticket_id=ticket.id, changes={"release_id": "RELEASE-9"})

    release = create_release(session, name="May 2024 Release")
    moved = update_ticket(session, ticket_id=ticket.id, changes={"release_id": release.id})
    assert moved.ticket.release_id == release.id
    cleared = update_ticket(session, ticket_id=ticket.id, changes={"release_id": None})
    assert cleared.ticket.release_id is None


def test_release_update_and_delete(session) -> None:
    release = create_release(session, name="June 2024 Release")

    updated = update_release(
        session, release_id=release.id, changes={"status": "Testing", "version": "v2.0"}
    )
    assert updated.status == "Testing"
    assert updated.version == "v2.0"
    assert updated.updated_at is not None

    with pytest.raises(ValueError, match="Unsupported release fields"):
        update_release(session, release_id=release.id, changes={"tickets": []})
    with pytest.raises(ValueError, match="status cannot be empty"):
        update_release(session, release_id=release.id, changes={"status": ""})

    delete_release(session, release.id)
    with pytest.raises(ValueError, match="Release not found"):
        get_release(session, release.id)
    with pytest.raises(ValueError, match="Release not found"):
        delete_release(session, release.id)


def test_metadata_items_use_canonical_choices(session) -> None:
    ticket = create_ticket(session, title="Portal access")

    item = create_metadata_item(
        session,
        name="Customer_Portal_Access__c",
        type="custom field",
        action="CREATE",
        object="Account",
        ticket_id=ticket.id,
    )

    assert item.id == "META-00001"
    assert item.type == "Custom Field"
    assert item.action == "Create"
    assert create_metadata_item(session, name="OrderRule", type="Flow", action="Update").id == (
        "META-00002"
    )
    with pytest.raises(ValueError, match="Unsupported metadata type"):
        create_metadata_item(session, name="Widget", type="Gadget", action="Create")
    with pytest.raises(ValueError, match="Unsupported metadata action"):
        create_metadata_item(session, name="Widget", type="Flow", action="Rename")
    with pytest.raises(ValueError, match="SUP-99999 not found"):
        create_metadata_item(
            session, name="Widget", type="Flow", action="Create", ticket_id="SUP-99999"
        )


def test_metadata_items_filter_by_ticket_and_release(session) -> None:
    release = create_release(session, name="February 2024 Release")
    ticket = create_ticket(session, title="Order validation", release_id=release.id)
    linked = create_metadata_item(
        session,
        name="OrderValidationRule",
        type="Validation Rule",
        action="Update",
        ticket_id=ticket.id,
        release_id=release.id,
    )
    create_metadata_item(session, name="Unrelated", type="Report", action="Create")

    assert [item.id for item in list_metadata_items(session, ticket_id=ticket.id)] == [linked.id]
    assert [item.id for item in list_metadata_items(session, release_id=release.id)] == [linked.id]
    assert [item.id for item in list_metadata_items(session, type="validation rule")] == [
        linked.id
    ]

    moved = update_metadata_item(session, item_id=linked.id, changes={"action": "delete"})
    assert moved.action == "Delete"
    with pytest.raises(ValueError, match="RELEASE-9 not found"):
        update_metadata_item(session, item_id=linked.id, changes={"release_id": "RELEASE-9"})


def test_release_and_metadata_endpoints(client) -> None:
    created = client.post(
        "/releases/",
        json={"name": "February 2024 Release", "version": "v1.0", "target": "2024-02-28"},
    )
    assert created.status_code == 201
    release = created.json()
    assert release["id"] == "RELEASE-1"
    assert release["target"] == "2024-02-28"

    ticket = client.post("/tickets/", json={"title": "Portal", "release_id": release["id"]})
    assert ticket.status_code == 201
    orphan = client.post("/tickets/", json={"title": "X", "release_id": "RELEASE-9"})
    assert orphan.status_code == 400

    detail = client.get(f"/releases/{release['id']}").json()
    assert detail["release"]["name"] == "February 2024 Release"
    assert [item["id"] for item in detail["tickets"]] == [ticket.json()["id"]]
    assert client.get("/releases/RELEASE-9").status_code == 404

    patched = client.patch(f"/releases/{release['id']}", json={"status": "Testing"})
    assert patched.json()["status"] == "Testing"
    testing = client.get("/releases/", params={"status": "Testing"}).json()
    assert [entry["id"] for entry in testing] == [release["id"]]

    item = client.post(
        "/metadata/",
        json={
            "name": "Customer_Portal_Access__c",
            "type": "Custom Field",
            "action": "Create",
            "ticket_id": ticket.json()["id"],
        },
    )
    assert item.status_code == 201
    item_id = item.json()["id"]
    unknown_type = client.post("/metadata/", json={"name": "X", "type": "Gadget", "action": "Create"})
    assert unknown_type.status_code == 400

    listed = client.get("/metadata/", params={"ticket_id": ticket.json()["id"]}).json()
    assert [entry["id"] for entry in listed] == [item_id]
    patched_item = client.patch(f"/metadata/{item_id}", json={"object": "Account"})
    assert patched_item.json()["object"] == "Account"
    assert client.delete(f"/metadata/{item_id}").status_code == 204
    assert client.get(f"/metadata/{item_id}").status_code == 404

    assert client.delete(f"/releases/{release['id']}").status_code == 204
    assert client.delete(f"/releases/{release['id']}").status_code == 404
