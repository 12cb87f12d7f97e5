"""Quotes: admin CRUD plus public like/share counters.

Invariants:
    - like/share need no token and add exactly one per call
    - likes and shares move independently
    - Unknown quote id on like/share returns 404
    - Public listing shows active quotes only, ordered by `order` then newest
"""

from uuid import uuid4

from portfolio_api.crud.quote import quote_crud
from portfolio_api.schemas.quote import QuoteCreate, QuoteCounter


async def test_like_three_times_leaves_shares_untouched(test_db):
    quote = await quote_crud.create(test_db, obj_in=QuoteCreate(text="Stay hungry"))
    assert (quote.likes, quote.shares) == (0, 0)

    for _ in range(3):
        quote = await quote_crud.increment(test_db, id=quote.id, counter=QuoteCounter.LIKES)

    assert quote.likes == 3
    assert quote.shares == 0


async def test_counters_are_independent(test_db):
    quote = await quote_crud.create(test_db, obj_in=QuoteCreate(text="Ship it"))

    await quote_crud.increment(test_db, id=quote.id, counter=QuoteCounter.SHARES)
    await quote_crud.increment(test_db, id=quote.id, counter=QuoteCounter.LIKES)
    quote = await quote_crud.increment(test_db, id=quote.id, counter=QuoteCounter.SHARES)

    assert quote.likes == 1
    assert quote.shares == 2


async def test_like_endpoint_is_public(client, test_db):
    quote = await quote_crud.create(test_db, obj_in=QuoteCreate(text="Public"))

    for _ in range(3):
        res = await client.post(f"/api/quotes/{quote.id}/like")
        assert res.status_code == 200

    body = res.json()
    assert body["likes"] == 3
    assert body["shares"] == 0


async def test_share_endpoint_is_public(client, test_db):
    quote = await quote_crud.create(test_db, obj_in=QuoteCreate(text="Share me"))

    res = await client.post(f"/api/quotes/{quote.id}/share")

    assert res.status_code == 200
    assert res.json()["shares"] == 1


async def test_like_unknown_quote_returns_404(client):
    res = await client.post(f"/api/quotes/{uuid4()}/like")
    assert res.status_code == 404


async def test_public_list_shows_active_only_in_display_order(client, test_db):
    second = await quote_crud.create(test_db, obj_in=QuoteCreate(text="second", order=2))
    first = await quote_crud.create(test_db, obj_in=QuoteCreate(text="first", order=1))
    await quote_crud.create(test_db, obj_in=QuoteCreate(text="hidden", active=False))

    res = await client.get("/api/quotes")

    assert res.status_code == 200
    assert [q["id"] for q in res.json()] == [str(first.id), str(second.id)]


async def test_admin_list_includes_inactive(client, test_db, auth_headers):
    await quote_crud.create(test_db, obj_in=QuoteCreate(text="shown"))
    await quote_crud.create(test_db, obj_in=QuoteCreate(text="hidden", active=False))

    res = await client.get("/api/quotes/all", headers=auth_headers)

    assert res.status_code == 200
    assert [q["text"] for q in res.json()] == ["hidden", "shown"]


async def test_create_quote_with_profile_image(client, auth_headers, upload_root):
    res = await client.post(
        "/api/quotes",
        data={"text": "Create things", "order": "3", "active": "true"},
        files={"profileImage": ("me.png", b"\x89PNG fake", "image/png")},
        headers=auth_headers,
    )

    assert res.status_code == 201
    body = res.json()
    assert body["text"] == "Create things"
    assert body["order"] == 3
    assert body["active"] is True
    assert body["likes"] == 0
    assert body["profile_image"].startswith("/uploads/quotes/")
    assert body["profile_image"].endswith(".png")
    stored = upload_root / "quotes" / body["profile_image"].rsplit("/", 1)[1]
    assert stored.read_bytes() == b"\x89PNG fake"


async def test_create_quote_requires_token(client):
    res = await client.post("/api/quotes", data={"text": "nope"})
    assert res.status_code == 401


async def test_update_quote_keeps_image_when_none_sent(client, test_db, auth_headers):
    quote = await quote_crud.create(
        test_db, obj_in=QuoteCreate(text="old", profile_image="/uploads/quotes/old.png"),
    )

    res = await client.put(
        f"/api/quotes/{quote.id}",
        data={"text": "new", "active": "false"},
        headers=auth_headers,
    )

    assert res.status_code == 200
    body = res.json()
    assert body["text"] == "new"
    assert body["active"] is False
    assert body["profile_image"] == "/uploads/quotes/old.png"


async def test_oversized_profile_image_rejected(client, auth_headers, upload_root):
    too_big = b"x" * (2 * 1024 * 1024 + 1)

    res = await client.post(
        "/api/quotes",
        data={"text": "big"},
        files={"profileImage": ("big.png", too_big, "image/png")},
        headers=auth_headers,
    )

    assert res.status_code == 413
    assert not any((upload_root / "quotes").iterdir())


async def test_delete_quote(client, test_db, auth_headers):
    quote = await quote_crud.create(test_db, obj_in=QuoteCreate(text="bye"))

    res = await client.delete(f"/api/quotes/{quote.id}", headers=auth_headers)

    assert res.status_code == 200
    assert res.json() == {"message": "Quote deleted"}
    assert (await client.post(f"/api/quotes/{quote.id}/like")).status_code == 404


async def test_share_unknown_quote_returns_404(client):
    res = await client.post(f"/api/quotes/{uuid4()}/share")
    assert res.status_code == 404
