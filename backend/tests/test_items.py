from conftest import as_user, at


def _comment(client, user_id, item_id, text="Great drill"):
    return client.post(
        f"/items/{item_id}/comment",
        json={"text": text},
        headers=as_user(user_id),
    )


def test_comment_after_completed_rental(client, make_user, make_item, make_booking, decide):
    owner = make_user("owner")
    booker = make_user("booker")
    stranger = make_user("stranger")
    item = make_item(owner)
    booking_id = make_booking(booker, item, at(days=-2), at(days=-1))
    assert decide(owner, booking_id).status_code == 200

    res = _comment(client, booker, item)
    assert res.status_code == 200
    data = res.json()
    assert data["text"] == "Great drill"
    assert data["authorName"] == "booker"
    assert data["created"].startswith("2030-01-15T12:00")

    # repeat comments are fine
    assert _comment(client, booker, item, "Still great").status_code == 200

    res = _comment(client, stranger, item)
    assert res.status_code == 400
    assert "no completed approved booking" in res.json()["error"]


def test_no_comment_while_rental_is_running(client, make_user, make_item, make_booking, decide):
    owner = make_user("owner")
    booker = make_user("booker")
    item = make_item(owner)
    booking_id = make_booking(booker, item, at(days=-1), at(days=1))
    decide(owner, booking_id)

    assert _comment(client, booker, item).status_code == 400


def test_no_comment_for_unapproved_rental(client, make_user, make_item, make_booking, decide):
    owner = make_user("owner")
    booker = make_user("booker")
    item = make_item(owner)
    waiting_item = make_item(owner, "Ladder")

    rejected = make_booking(booker, item, at(days=-3), at(days=-2))
    decide(owner, rejected, approved=False)
    make_booking(booker, waiting_item, at(days=-3), at(days=-2))

    assert _comment(client, booker, item).status_code == 400
    assert _comment(client, booker, waiting_item).status_code == 400


def test_comment_unknown_user_or_item(client, make_user, make_item):
    owner = make_user("owner")
    item = make_item(owner)

    assert _comment(client, 999, item).status_code == 404
    assert _comment(client, owner, 999).status_code == 404


def test_last_and_next_booking_shown_to_owner_only(client, make_user, make_item, make_booking, decide):
    owner = make_user("owner")
    booker = make_user("booker")
    item = make_item(owner)

    old = make_booking(booker, item, at(days=-10), at(days=-9))
    last = make_booking(booker, item, at(days=-3), at(days=-2))
    nxt = make_booking(booker, item, at(days=2), at(days=3))
    later = make_booking(booker, item, at(days=5), at(days=6))
    unapproved = make_booking(booker, item, at(days=1), at(days=2))
    for b in (old, last, nxt, later):
        decide(owner, b)
    decide(owner, unapproved, approved=False)

    res = client.get(f"/items/{item}", headers=as_user(owner))
    assert res.status_code == 200
    data = res.json()
    assert data["lastBooking"]["id"] == last
    assert data["lastBooking"]["bookerId"] == booker
    assert data["nextBooking"]["id"] == nxt

    res = client.get(f"/items/{item}", headers=as_user(booker))
    data = res.json()
    assert data["lastBooking"] is None
    assert data["nextBooking"] is None


def test_running_booking_counts_as_last(client, make_user, make_item, make_booking, decide):
    owner = make_user("owner")
    booker = make_user("booker")
    item = make_item(owner)
    running = make_booking(booker, item, at(hours=-1), at(days=1))
    decide(owner, running)

    data = client.get(f"/items/{item}", headers=as_user(owner)).json()
    assert data["lastBooking"]["id"] == running
    assert data["nextBooking"] is None


def test_item_detail_includes_comments(client, make_user, make_item, make_booking, decide):
    owner = make_user("owner")
    booker = make_user("booker")
    item = make_item(owner)
    decide(owner, make_booking(booker, item, at(days=-2), at(days=-1)))
    _comment(client, booker, item, "Works")

    data = client.get(f"/items/{item}", headers=as_user(booker)).json()
    assert [c["text"] for c in data["comments"]] == ["Works"]


def test_owner_item_list_has_projections(client, make_user, make_item, make_booking, decide):
    owner = make_user("owner")
    booker = make_user("booker")
    drill = make_item(owner, "Drill")
    ladder = make_item(owner, "Ladder")
    make_item(booker, "Tent")
    decide(owner, make_booking(booker, drill, at(days=1), at(days=2)))

    res = client.get("/items", headers=as_user(owner))
    assert res.status_code == 200
    data = res.json()
    assert [i["id"] for i in data] == [drill, ladder]
    assert data[0]["nextBooking"] is not None
    assert data[1]["nextBooking"] is None


def test_update_item_by_owner_only(client, make_user, make_item):
    owner = make_user("owner")
    other = make_user("other")
    item = make_item(owner)

    res = client.patch(f"/items/{item}", json={"available": False}, headers=as_user(owner))
    assert res.status_code == 200
    assert res.json()["available"] is False
    assert res.json()["name"] == "Drill"

    res = client.patch(f"/items/{item}", json={"name": "Mine"}, headers=as_user(other))
    assert res.status_code == 404


def test_search_available_items(client, make_user, make_item):
    owner = make_user("owner")
    drill = make_item(owner, "Power Drill")
    make_item(owner, "Old drill", available=False)
    make_item(owner, "Ladder")

    res = client.get("/items/search", params={"text": "dRiLl"}, headers=as_user(owner))
    assert [i["id"] for i in res.json()] == [drill]

    res = client.get("/items/search", params={"text": "  "}, headers=as_user(owner))
    assert res.json() == []

    # search is open to anonymous callers
    res = client.get("/items/search", params={"text": "drill"})
    assert res.status_code == 200
    assert [i["id"] for i in res.json()] == [drill]


def test_blank_text_rejected(client, make_user, make_item, make_booking, decide):
    owner = make_user("owner")
    booker = make_user("booker")
    item = make_item(owner)
    decide(owner, make_booking(booker, item, at(days=-2), at(days=-1)))

    assert _comment(client, booker, item, "   ").status_code == 422

    res = client.post(
        "/items",
        json={"name": " ", "description": "d", "available": True},
        headers=as_user(owner),
    )
    assert res.status_code == 422

    res = client.patch(f"/items/{item}", json={"description": "\t "}, headers=as_user(owner))
    assert res.status_code == 422

    # surrounding whitespace is trimmed, not rejected
    res = client.patch(f"/items/{item}", json={"name": "  Hammer drill "}, headers=as_user(owner))
    assert res.status_code == 200
    assert res.json()["name"] == "Hammer drill"
