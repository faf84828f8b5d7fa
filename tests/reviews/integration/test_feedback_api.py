"""Integration tests for the feedback endpoints via TestClient."""


class TestFeedbackAPI:
    def test_submit_and_list_for_product(self, client, make_account, make_product, auth_headers):
        product = make_product()
        response = client.post(
            "/api/feedback",
            json={"product_id": str(product.id), "rating": 5, "comment": "Great"},
            headers=auth_headers(make_account(name="Kim")),
        )
        assert response.status_code == 201

        listed = client.get(f"/api/feedback/product/{product.id}")
        assert listed.status_code == 200
        assert listed.json()[0]["author"] == "Kim"

    def test_duplicate(self, client, make_account, make_product, auth_headers):
        headers = auth_headers(make_account())
        body = {"product_id": str(make_product().id), "rating": 4}
        client.post("/api/feedback", json=body, headers=headers)
        assert client.post("/api/feedback", json=body, headers=headers).status_code == 400

    def test_rating_out_of_range(self, client, make_account, make_product, auth_headers):
        response = client.post(
            "/api/feedback",
            json={"product_id": str(make_product().id), "rating": 7},
            headers=auth_headers(make_account()),
        )
        assert response.status_code == 400

    def test_admin_lists_and_deletes(self, client, make_admin, make_account, make_product, auth_headers):
        admin_headers = auth_headers(make_admin())
        client.post(
            "/api/feedback",
            json={"product_id": str(make_product().id), "rating": 3},
            headers=auth_headers(make_account()),
        )

        entries = client.get("/api/feedback", headers=admin_headers).json()
        assert len(entries) == 1

        assert client.delete(f"/api/feedback/{entries[0]['id']}", headers=admin_headers).status_code == 200
        assert client.get("/api/feedback", headers=admin_headers).json() == []

    def test_listing_all_requires_admin(self, client, make_account, auth_headers):
        assert client.get("/api/feedback", headers=auth_headers(make_account())).status_code == 403


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"
