"""HTTP-level tests for the seller listing flow and the live auction."""

import logging

import pytest
from httpx import AsyncClient

API = "/api/v1"


async def _login(client: AsyncClient, role: str) -> None:
    await client.post(
        f"{API}/session/login",
        json={"email": f"{role}@example.com", "password": "pw", "role": role},
    )


class TestSellerFlow:
    async def test_add_listing(self, client: AsyncClient) -> None:
        await _login(client, "seller")
        resp = await client.post(
            f"{API}/catalog",
            json={
                "name": "Night Garden",
                "price": "2500",
                "description": "Oil on canvas",
                "artist_name": "Mira Holt",
            },
        )
        assert resp.status_code == 201
        listing = resp.json()["data"]
        assert listing["id"] == 7
        assert listing["price_cents"] == 250_000
        assert listing["image_ref"].startswith("https://")
        assert resp.json()["message"] == "Art piece added successfully!"

    async def test_empty_name_rejected(self, client: AsyncClient) -> None:
        await _login(client, "seller")
        resp = await client.post(
            f"{API}/catalog",
            json={"name": "", "price": "10", "description": "d", "artist_name": "a"},
        )
        assert resp.status_code == 422
        assert resp.json()["code"] == 2001
        items = (await client.get(f"{API}/catalog")).json()["data"]["items"]
        assert len(items) == 6

    async def test_buyer_cannot_add_listing(self, client: AsyncClient) -> None:
        await _login(client, "buyer")
        resp = await client.post(
            f"{API}/catalog",
            json={"name": "n", "price": "10", "description": "d", "artist_name": "a"},
        )
        assert resp.status_code == 403

    async def test_seller_cannot_use_cart(self, client: AsyncClient) -> None:
        await _login(client, "seller")
        resp = await client.post(f"{API}/cart/items", json={"listing_id": 1})
        assert resp.status_code == 403
        assert resp.json()["code"] == 1003


class TestAuctionFlow:
    async def test_initial_state(self, client: AsyncClient) -> None:
        await _login(client, "buyer")
        auction = (await client.get(f"{API}/auction")).json()["data"]
        assert auction["current_price_cents"] == 1_500_000
        assert auction["leading_bidder_label"] == "Current Reserve"
        assert auction["suggested_minimum_cents"] == 1_510_000

    async def test_equal_then_higher_bid(self, client: AsyncClient) -> None:
        await _login(client, "buyer")
        resp = await client.post(f"{API}/auction/bids", json={"amount": "15000"})
        assert resp.status_code == 422
        assert resp.json()["message"] == "Bid must be higher than $15,000.00"

        resp = await client.post(f"{API}/auction/bids", json={"amount": "15001"})
        assert resp.status_code == 200
        auction = resp.json()["data"]
        assert auction["current_price_cents"] == 1_500_100
        assert auction["leading_bidder_label"] == "You"
        assert resp.json()["message"] == "Bid placed successfully!"

    async def test_non_numeric_bid(self, client: AsyncClient) -> None:
        await _login(client, "buyer")
        resp = await client.post(f"{API}/auction/bids", json={"amount": "lots"})
        assert resp.json()["code"] == 5001
        auction = (await client.get(f"{API}/auction")).json()["data"]
        assert auction["current_price_cents"] == 1_500_000

    async def test_error_envelope_has_request_id(self, client: AsyncClient) -> None:
        await _login(client, "buyer")
        body = (await client.post(f"{API}/auction/bids", json={"amount": "1"})).json()
        assert body["data"] is None
        assert body["request_id"].startswith("req_")


class TestRequestId:
    async def test_incoming_request_id_is_echoed(self, client: AsyncClient) -> None:
        await _login(client, "buyer")
        resp = await client.get(f"{API}/cart", headers={"X-Request-ID": "req_from_client"})
        assert resp.headers["X-Request-ID"] == "req_from_client"
        assert resp.json()["request_id"] == "req_from_client"

    async def test_minted_request_id_matches_envelope(self, client: AsyncClient) -> None:
        resp = await client.get(f"{API}/session")
        assert resp.headers["X-Request-ID"] == resp.json()["request_id"]
        assert resp.headers["X-Request-ID"].startswith("req_")

    async def test_rejection_logged_as_warning(
        self, client: AsyncClient, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger="av.request"):
            await client.get(f"{API}/cart")
        record = next(r for r in caplog.records if r.name == "av.request")
        assert record.levelno == logging.WARNING
        assert "role=anonymous" in record.getMessage()


class TestBidDraft:
    async def test_staged_draft_is_placed_without_amount(self, client: AsyncClient) -> None:
        await _login(client, "buyer")
        staged = await client.put(f"{API}/auction/bid-draft", json={"amount": "15250.50"})
        assert staged.status_code == 200
        assert staged.json()["data"]["pending_bid"] == "15250.50"
        assert staged.json()["data"]["current_price_cents"] == 1_500_000

        placed = (await client.post(f"{API}/auction/bids", json={})).json()
        assert placed["code"] == 0
        assert placed["data"]["current_price_cents"] == 1_525_050
        assert placed["data"]["pending_bid"] == ""
        assert placed["data"]["leading_bidder_label"] == "You"

    async def test_rejected_draft_stays_staged(self, client: AsyncClient) -> None:
        await _login(client, "buyer")
        await client.put(f"{API}/auction/bid-draft", json={"amount": "100"})
        resp = await client.post(f"{API}/auction/bids", json={})
        assert resp.status_code == 422
        auction = (await client.get(f"{API}/auction")).json()["data"]
        assert auction["pending_bid"] == "100"
        assert auction["current_price_cents"] == 1_500_000

    async def test_seller_cannot_stage(self, client: AsyncClient) -> None:
        await _login(client, "seller")
        resp = await client.put(f"{API}/auction/bid-draft", json={"amount": "16000"})
        assert resp.status_code == 403


class TestBidAmountLimits:
    async def test_huge_exponent_is_a_typed_rejection(self, client: AsyncClient) -> None:
        await _login(client, "buyer")
        resp = await client.post(f"{API}/auction/bids", json={"amount": "1e999999"})
        assert resp.status_code == 422
        assert resp.json()["code"] == 5001

    async def test_sub_cent_bid_is_rejected(self, client: AsyncClient) -> None:
        await _login(client, "buyer")
        resp = await client.post(f"{API}/auction/bids", json={"amount": "15000.005"})
        assert resp.status_code == 422
        assert resp.json()["message"] == "Bid must have at most 2 decimal places"
        auction = (await client.get(f"{API}/auction")).json()["data"]
        assert auction["current_price_cents"] == 1_500_000

    async def test_huge_exponent_listing_price(self, client: AsyncClient) -> None:
        await _login(client, "seller")
        resp = await client.post(
            f"{API}/catalog",
            json={
                "name": "Big Sky",
                "price": "1e999999",
                "description": "Acrylic",
                "artist_name": "R. Vale",
            },
        )
        assert resp.status_code == 422
        assert resp.json()["code"] == 2001
