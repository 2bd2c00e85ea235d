def test_list_cookies(client):
    resp = client.get("/api/cookies")
    assert resp.status_code == 200
    cookies = resp.get_json()["data"]["cookies"]
    assert cookies[0] == {
        "name": "Thin Mints",
        "description": cookies[0]["description"],
        "price": 5.0,
        "image": None,
    }


def test_box_label_png(client):
    resp = client.get("/api/cookies/qr", query_string={"cookie_type": "Thin Mints", "quantity": 2, "price": "5"})
    assert resp.status_code == 200
    assert resp.mimetype == "image/png"
    assert resp.data.startswith(b"\x89PNG")


def test_box_label_rejects_bad_input(client):
    assert client.get("/api/cookies/qr", query_string={"cookie_type": "A:B", "price": "5"}).status_code == 400
    assert client.get("/api/cookies/qr", query_string={"cookie_type": "Thin Mints", "quantity": "x", "price": "5"}).status_code == 400
    assert client.get("/api/cookies/qr", query_string={"cookie_type": "Thin Mints", "price": "-1"}).status_code == 400


def test_box_label_rejects_oversized_price(client):
    resp = client.get("/api/cookies/qr", query_string={"cookie_type": "Thin Mints", "price": "1e30"})
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "price must be a positive amount"
