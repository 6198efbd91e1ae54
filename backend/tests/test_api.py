"""HTTP contract of the list and detail endpoints."""
from fastapi.testclient import TestClient

from bap_explorer.main import create_app
from bap_explorer.sources.synthetic import SyntheticChain


class UnresolvableChain(SyntheticChain):
    """Chain where no identifier resolves, as a real backend might report."""

    def block(self, height):
        return None

    def transaction_by_hash(self, tx_hash):
        return None

    def nfx_detail(self, number):
        return None

    def asset_history(self, asset_id):
        return None


class TestBlocks:

    def test_first_page_of_bounded_source(self, api):
        response = api.get("/api/v1/blocks", params={"page": 1, "limit": 20})
        assert response.status_code == 200
        body = response.json()
        assert len(body["blocks"]) == 20
        assert body["total"] == 10000
        assert body["blocks"][0]["height"] == 10000
        heights = [b["height"] for b in body["blocks"]]
        assert heights == sorted(heights, reverse=True)

    def test_page_past_end_is_empty(self, api):
        body = api.get("/api/v1/blocks", params={"page": 501, "limit": 20}).json()
        assert body["blocks"] == []
        assert body["total"] == 10000

    def test_defaults(self, api):
        body = api.get("/api/v1/blocks").json()
        assert len(body["blocks"]) == 20

    def test_detail_by_path_and_query_agree(self, api):
        by_path = api.get("/api/v1/blocks/1234").json()
        by_query = api.get("/api/v1/blocks", params={"blockId": "1234"}).json()
        assert by_path == by_query
        assert by_path["block"]["height"] == 1234

    def test_detail_matches_list_entry(self, api):
        listed = api.get("/api/v1/blocks", params={"page": 1, "limit": 1}).json()["blocks"][0]
        detail = api.get(f"/api/v1/blocks/{listed['height']}").json()["block"]
        assert detail == listed

    def test_malformed_block_id(self, api):
        response = api.get("/api/v1/blocks", params={"blockId": "abc"})
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid block identifier"}
        assert api.get("/api/v1/blocks/0").status_code == 400

    def test_heights_above_tip_do_not_resolve(self, api):
        for response in (
            api.get("/api/v1/blocks/10001"),
            api.get("/api/v1/blocks/2000000000"),
            api.get("/api/v1/blocks", params={"blockId": "999999999999999999"}),
        ):
            assert response.status_code == 404
            assert isinstance(response.json()["error"], str)

    def test_non_numeric_page(self, api):
        response = api.get("/api/v1/blocks", params={"page": "two"})
        assert response.status_code == 400
        assert "page" in response.json()["error"]

    def test_out_of_range_pagination(self, api):
        for params in ({"page": 0}, {"limit": 0}, {"page": -3}, {"limit": 1000}):
            response = api.get("/api/v1/blocks", params=params)
            assert response.status_code == 400
            assert isinstance(response.json()["error"], str)


class TestTransactions:

    def test_list_uses_camel_case(self, api):
        body = api.get("/api/v1/transactions", params={"limit": 5}).json()
        assert body["total"] == 50000
        tx = body["transactions"][0]
        assert {"hash", "from", "to", "blockHeight", "status", "fee"} <= tx.keys()

    def test_listed_hash_resolves(self, api):
        listed = api.get("/api/v1/transactions", params={"page": 3, "limit": 5}).json()["transactions"][2]
        detail = api.get(f"/api/v1/transactions/{listed['hash']}").json()
        assert detail["transaction"] == listed
        by_query = api.get("/api/v1/transactions", params={"txHash": listed["hash"]}).json()
        assert by_query == detail

    def test_malformed_hash(self, api):
        response = api.get("/api/v1/transactions/0x123")
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid transaction hash"}


class TestPools:

    def test_unfiltered_catalog(self, api):
        body = api.get("/api/v1/pools").json()
        assert len(body["pools"]) == 12
        assert body["total"] == 12

    def test_status_filter_counts_whole_catalog(self, api):
        active = api.get("/api/v1/pools", params={"status": "active"}).json()
        inactive = api.get("/api/v1/pools", params={"status": "inactive"}).json()
        assert all(p["status"] == "active" for p in active["pools"])
        assert all(p["status"] == "inactive" for p in inactive["pools"])
        assert active["total"] + inactive["total"] == 12
        assert len(active["pools"]) == active["total"]

    def test_filtered_pages(self, api):
        first = api.get("/api/v1/pools", params={"status": "active", "limit": 2}).json()
        assert len(first["pools"]) == min(2, first["total"])

    def test_unknown_status(self, api):
        response = api.get("/api/v1/pools", params={"status": "paused"})
        assert response.status_code == 400
        assert "status" in response.json()["error"]


class TestPenalties:

    def test_estimated_total(self, api):
        body = api.get("/api/v1/penalties").json()
        assert len(body["penalties"]) == 20
        assert body["total"] == 150

    def test_type_filter(self, api):
        body = api.get("/api/v1/penalties", params={"type": "slash", "limit": 10}).json()
        assert 0 < len(body["penalties"]) <= 10
        assert all(p["type"] == "slash" for p in body["penalties"])
        assert body["total"] == 150

    def test_deep_page_is_empty_not_an_error(self, api):
        response = api.get("/api/v1/penalties", params={"page": 10000000, "limit": 20})
        assert response.status_code == 200
        assert response.json() == {"penalties": [], "total": 150}

    def test_deep_filtered_page(self, api):
        response = api.get("/api/v1/penalties", params={"page": 10000000, "limit": 100, "type": "jail"})
        assert response.status_code == 200
        assert response.json()["penalties"] == []

    def test_unknown_type(self, api):
        assert api.get("/api/v1/penalties", params={"type": "warning"}).status_code == 400


class TestNfx:

    def test_first_page_of_catalog(self, api):
        body = api.get("/api/v1/nfx", params={"page": 1, "limit": 12}).json()
        assert len(body["nfx"]) == 12
        assert body["total"] == 50
        assert body["nfx"][0]["id"] == "nfx-1"

    def test_last_partial_page(self, api):
        body = api.get("/api/v1/nfx", params={"page": 5, "limit": 12}).json()
        assert [n["id"] for n in body["nfx"]] == ["nfx-49", "nfx-50"]

    def test_detail_invariants(self, api):
        nfx = api.get("/api/v1/nfx/nfx-7").json()["nfx"]
        assert nfx["assetsCount"] == len(nfx["depositedAssets"])
        assert nfx["partners"] == len(nfx["partnersList"])
        assert nfx["subspaces"] == len(nfx["subspacesList"])
        assert {"statistics", "governance", "events"} <= nfx.keys()

    def test_list_and_detail_agree(self, api):
        listed = api.get("/api/v1/nfx", params={"page": 1, "limit": 3}).json()["nfx"][2]
        detail = api.get(f"/api/v1/nfx/{listed['id']}").json()["nfx"]
        assert {key: detail[key] for key in listed} == listed

    def test_malformed_id(self, api):
        for bad in ("garbage", "nfx-", "nfx-0", "nfx-abc"):
            response = api.get(f"/api/v1/nfx/{bad}")
            assert response.status_code == 400
            assert response.json() == {"error": "Invalid NFX ID"}


class TestSecondaryResources:

    def test_token_defaults_to_configured_contract(self, api, settings):
        body = api.get("/api/v1/tokens").json()
        assert body["token"]["address"] == settings.TOKEN_CONTRACT
        assert body["token"]["symbol"] == "BAP"
        assert len(body["transfers"]) >= 1

    def test_token_bad_address(self, api):
        response = api.get("/api/v1/tokens", params={"address": "0xnothex"})
        assert response.status_code == 400

    def test_nfts_paginated(self, api):
        body = api.get("/api/v1/nfts", params={"page": 2, "limit": 10}).json()
        assert body["total"] == 24
        assert [n["tokenId"] for n in body["nfts"]] == [str(i) for i in range(11, 21)]

    def test_contract_methods(self, api):
        body = api.get("/api/v1/contracts").json()
        assert body["contract"]["type"] == "NFT"
        assert any(m["name"] == "mint" for m in body["methods"])

    def test_history(self, api):
        body = api.get("/api/v1/history", params={"assetId": "asset-1"}).json()
        assert body["total"] == len(body["events"])
        assert body["events"][0]["eventType"] == "minted"

    def test_history_requires_asset_id(self, api):
        assert api.get("/api/v1/history").status_code == 400

    def test_metrics(self, api):
        body = api.get("/api/v1/metrics").json()
        assert body["blockHeight"] == 10000
        assert body["network"] == "testnet"

    def test_error_body_is_documented(self, api):
        schema = api.get("/api/v1/openapi.json").json()
        responses = schema["paths"]["/api/v1/nfx/{id}"]["get"]["responses"]
        assert {"400", "404"} <= responses.keys()

    def test_health(self, api):
        assert api.get("/health").json() == {"status": "ok", "service": "bap-explorer", "network": "testnet"}


class TestNotFound:

    def test_well_formed_but_unresolvable(self, settings):
        api = TestClient(create_app(settings, UnresolvableChain(settings)))
        cases = [
            "/api/v1/blocks/12",
            "/api/v1/transactions/0x" + "0" * 64,
            "/api/v1/nfx/nfx-3",
            "/api/v1/history?assetId=asset-9",
        ]
        for path in cases:
            response = api.get(path)
            assert response.status_code == 404, path
            assert isinstance(response.json()["error"], str)

    def test_invalid_still_wins_over_not_found(self, settings):
        api = TestClient(create_app(settings, UnresolvableChain(settings)))
        assert api.get("/api/v1/nfx/bad").status_code == 400
