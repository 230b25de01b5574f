"""Tests for Exgroup endpoints: CRUD, join codes and host-only rules.

Covers:
- Create / read / list members
- Join by code: duplicate membership → 409, full group → 409
- Host-only update, start and member removal → 403 for anyone else
- max_member_num below the current member count → 409
"""
from tests.conftest import (
    as_member,
    create_test_member,
    create_test_exgroup,
    exgroup_payload,
    join_test_exgroup,
)


def _setup(client):
    """Create a host, a member and a group with both in it."""
    host = create_test_member(client, email="host@example.com", nickname="Host")
    member = create_test_member(client, email="member@example.com", nickname="Member")
    exgroup = create_test_exgroup(client, "host@example.com")
    join_test_exgroup(client, "member@example.com", exgroup["code"])
    return host, member, exgroup


class TestExgroupCreate:

    def test_create_exgroup(self, client):
        create_test_member(client, email="host@example.com")
        resp = client.post("/api/exgroups/", json=exgroup_payload(name="Lunch Squats"),
                           headers=as_member("host@example.com"))
        assert resp.status_code == 201
        assert resp.json()["name"] == "Lunch Squats"
        assert isinstance(resp.json()["exgroup_id"], int)

    def test_creator_is_host(self, client):
        create_test_member(client, email="host@example.com", nickname="Host")
        exgroup = create_test_exgroup(client, "host@example.com")
        members = client.get(f"/api/exgroups/{exgroup['exgroup_id']}/members").json()
        assert len(members) == 1
        assert members[0]["nickname"] == "Host"
        assert members[0]["join_type"] == "HOST"
        assert members[0]["status"] == "ACTIVE"

    def test_create_exgroup_unknown_member(self, client, db):
        """No active member → 404 and nothing written."""
        from snack_exercise.models.exgroup import Exgroup
        resp = client.post("/api/exgroups/", json=exgroup_payload(), headers=as_member("ghost@example.com"))
        assert resp.status_code == 404
        assert resp.json()["code"] == "MEMBER_NOT_FOUND"
        assert db.query(Exgroup).count() == 0

    def test_create_exgroup_invalid_payload(self, client):
        create_test_member(client, email="host@example.com")
        resp = client.post("/api/exgroups/", json=exgroup_payload(max_member_num=0),
                           headers=as_member("host@example.com"))
        assert resp.status_code == 422

    def test_codes_are_distinct(self, client):
        create_test_member(client, email="host@example.com")
        first = create_test_exgroup(client, "host@example.com")
        second = create_test_exgroup(client, "host@example.com")
        assert first["code"] != second["code"]
        assert len(first["code"]) == 8


class TestExgroupRead:

    def test_get_exgroup(self, client):
        create_test_member(client, email="host@example.com")
        exgroup = create_test_exgroup(client, "host@example.com")
        assert exgroup["name"] == "Morning Relay"
        assert exgroup["start_time"] == "09:00:00"
        assert exgroup["end_time"] == "21:00:00"
        assert exgroup["started_at"] is None

    def test_get_exgroup_not_found(self, client):
        resp = client.get("/api/exgroups/9999")
        assert resp.status_code == 404
        assert resp.json()["code"] == "EXGROUP_NOT_FOUND"

    def test_get_inactive_exgroup(self, client):
        """The last member leaving deactivates the group → 404 afterwards."""
        create_test_member(client, email="host@example.com")
        exgroup = create_test_exgroup(client, "host@example.com")
        resp = client.post(f"/api/exgroups/{exgroup['exgroup_id']}/leave", headers=as_member("host@example.com"))
        assert resp.status_code == 204
        resp = client.get(f"/api/exgroups/{exgroup['exgroup_id']}")
        assert resp.status_code == 404


class TestExgroupJoin:

    def test_join(self, client):
        _, _, exgroup = _setup(client)
        members = client.get(f"/api/exgroups/{exgroup['exgroup_id']}/members").json()
        assert [(m["nickname"], m["join_type"]) for m in members] == [("Host", "HOST"), ("Member", "MEMBER")]

    def test_join_unknown_code(self, client):
        create_test_member(client, email="member@example.com")
        resp = client.post("/api/exgroups/join", json={"code": "ZZZZ9999"}, headers=as_member("member@example.com"))
        assert resp.status_code == 404

    def test_join_twice(self, client):
        _, _, exgroup = _setup(client)
        resp = client.post("/api/exgroups/join", json={"code": exgroup["code"]},
                           headers=as_member("member@example.com"))
        assert resp.status_code == 409
        assert resp.json()["code"] == "ALREADY_JOINED_EXGROUP"

    def test_host_cannot_join_own_group(self, client):
        _, _, exgroup = _setup(client)
        resp = client.post("/api/exgroups/join", json={"code": exgroup["code"]},
                           headers=as_member("host@example.com"))
        assert resp.status_code == 409

    def test_join_full_group(self, client):
        create_test_member(client, email="host@example.com")
        create_test_member(client, email="a@example.com", nickname="A")
        create_test_member(client, email="b@example.com", nickname="B")
        exgroup = create_test_exgroup(client, "host@example.com", max_member_num=2)
        join_test_exgroup(client, "a@example.com", exgroup["code"])
        resp = client.post("/api/exgroups/join", json={"code": exgroup["code"]}, headers=as_member("b@example.com"))
        assert resp.status_code == 409
        assert resp.json()["code"] == "EXGROUP_FULL"

    def test_rejoin_after_leaving(self, client):
        _, _, exgroup = _setup(client)
        client.post(f"/api/exgroups/{exgroup['exgroup_id']}/leave", headers=as_member("member@example.com"))
        join_test_exgroup(client, "member@example.com", exgroup["code"])
        members = client.get(f"/api/exgroups/{exgroup['exgroup_id']}/members").json()
        statuses = [m["status"] for m in members if m["nickname"] == "Member"]
        assert statuses == ["ACTIVE"]
        # rejoining restarts join order: the member is now listed after the host
        assert [m["nickname"] for m in members] == ["Host", "Member"]


class TestExgroupUpdate:

    def test_update_by_host(self, client):
        _, _, exgroup = _setup(client)
        resp = client.patch(f"/api/exgroups/{exgroup['exgroup_id']}", json={
            "name": "Evening Relay",
            "max_member_num": 2,
            "end_time": "22:30:00",
        }, headers=as_member("host@example.com"))
        assert resp.status_code == 200
        data = resp.json()
        assert data["name"] == "Evening Relay"
        assert data["max_member_num"] == 2
        assert data["end_time"] == "22:30:00"
        assert data["code"] == exgroup["code"]

    def test_update_by_member_forbidden(self, client):
        """Non-host → 403 and the group is unchanged."""
        _, _, exgroup = _setup(client)
        resp = client.patch(f"/api/exgroups/{exgroup['exgroup_id']}", json={"name": "Hijacked"},
                            headers=as_member("member@example.com"))
        assert resp.status_code == 403
        assert resp.json()["code"] == "NOT_EXGROUP_HOST"
        assert client.get(f"/api/exgroups/{exgroup['exgroup_id']}").json()["name"] == "Morning Relay"

    def test_update_max_member_num_below_current(self, client):
        _, _, exgroup = _setup(client)
        resp = client.patch(f"/api/exgroups/{exgroup['exgroup_id']}", json={"name": "Shrunk", "max_member_num": 1},
                            headers=as_member("host@example.com"))
        assert resp.status_code == 409
        assert resp.json()["code"] == "MAX_MEMBER_NUM_LESS_THAN_CURRENT"
        after = client.get(f"/api/exgroups/{exgroup['exgroup_id']}").json()
        assert after["max_member_num"] == 6
        assert after["name"] == "Morning Relay"


class TestExgroupRemoveMember:

    def test_host_removes_member(self, client, db):
        from snack_exercise.models.join_list import JoinList
        _, member, exgroup = _setup(client)
        resp = client.delete(f"/api/exgroups/{exgroup['exgroup_id']}/members/{member['member_id']}",
                             headers=as_member("host@example.com"))
        assert resp.status_code == 204

        join_list = db.query(JoinList).filter(JoinList.member_id == member["member_id"]).one()
        assert join_list.status.value == "INACTIVE"
        assert join_list.out_count == 1

    def test_out_count_accumulates_across_rejoins(self, client, db):
        from snack_exercise.models.join_list import JoinList
        _, member, exgroup = _setup(client)
        remove_url = f"/api/exgroups/{exgroup['exgroup_id']}/members/{member['member_id']}"

        assert client.delete(remove_url, headers=as_member("host@example.com")).status_code == 204
        join_test_exgroup(client, "member@example.com", exgroup["code"])
        assert client.delete(remove_url, headers=as_member("host@example.com")).status_code == 204

        join_list = db.query(JoinList).filter(JoinList.member_id == member["member_id"]).one()
        assert join_list.status.value == "INACTIVE"
        assert join_list.out_count == 2

    def test_member_cannot_remove(self, client):
        host, _, exgroup = _setup(client)
        resp = client.delete(f"/api/exgroups/{exgroup['exgroup_id']}/members/{host['member_id']}",
                             headers=as_member("member@example.com"))
        assert resp.status_code == 403
        assert resp.json()["code"] == "NOT_EXGROUP_HOST"

    def test_host_removes_non_member(self, client):
        _, _, exgroup = _setup(client)
        outsider = create_test_member(client, email="outsider@example.com", nickname="Outsider")
        resp = client.delete(f"/api/exgroups/{exgroup['exgroup_id']}/members/{outsider['member_id']}",
                             headers=as_member("host@example.com"))
        assert resp.status_code == 409
        assert resp.json()["code"] == "NOT_EXGROUP_MEMBER"

    def test_host_cannot_remove_self(self, client):
        host, _, exgroup = _setup(client)
        resp = client.delete(f"/api/exgroups/{exgroup['exgroup_id']}/members/{host['member_id']}",
                             headers=as_member("host@example.com"))
        assert resp.status_code == 409
        assert resp.json()["code"] == "NOT_EXGROUP_MEMBER"


class TestExgroupStart:

    def test_start_by_host(self, client):
        _, _, exgroup = _setup(client)
        resp = client.post(f"/api/exgroups/{exgroup['exgroup_id']}/start", headers=as_member("host@example.com"))
        assert resp.status_code == 200
        assert resp.json()["started_at"] is not None

    def test_start_by_member_forbidden(self, client):
        _, _, exgroup = _setup(client)
        resp = client.post(f"/api/exgroups/{exgroup['exgroup_id']}/start", headers=as_member("member@example.com"))
        assert resp.status_code == 403

    def test_start_twice(self, client):
        _, _, exgroup = _setup(client)
        client.post(f"/api/exgroups/{exgroup['exgroup_id']}/start", headers=as_member("host@example.com"))
        resp = client.post(f"/api/exgroups/{exgroup['exgroup_id']}/start", headers=as_member("host@example.com"))
        assert resp.status_code == 409
        assert resp.json()["code"] == "EXGROUP_ALREADY_STARTED"
