"""
Photoshoot route tests
"""

import pytest


@pytest.fixture
def alice(make_user):
    return make_user(email="alice@example.com")


@pytest.fixture
def bob(make_user):
    return make_user(email="bob@example.com", full_name="Bob")


@pytest.fixture
def product(db, alice):
    return db.add("products", user_id=alice["id"], name="Bag", tag="bag", image_url="https://img.example.com/bag.png")


@pytest.fixture
def model(db, alice):
    return db.add("models", user_id=alice["id"], name="Anna", tag="anna", image_url="https://img.example.com/anna.png")


def add_photoshoot(db, owner, product_id, **extra):
    extra.setdefault("status", "pending")
    return db.add("photoshoots", user_id=owner["id"], product_id=product_id, style_type="ugc",
                  scene_description="Beach at sunset", **extra)


class TestListPhotoshoots:
    def test_returns_callers_photoshoots(self, login, db, alice, bob, product):
        add_photoshoot(db, alice, product["id"])
        add_photoshoot(db, bob, "bobs-product")

        response = login(alice["id"]).get("/api/photoshoots")

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 1
        assert body["photoshoots"][0]["product_id"] == product["id"]

    def test_unlisted_status_is_passed_through(self, login, db, alice, product):
        add_photoshoot(db, alice, product["id"], status="archived")

        response = login(alice["id"]).get("/api/photoshoots")

        assert response.status_code == 200
        assert response.json()["photoshoots"][0]["status"] == "archived"


class TestGetPhotoshoot:
    def test_includes_product_and_model_summaries(self, login, db, alice, product, model):
        shoot = add_photoshoot(
            db, alice, product["id"], model_id=model["id"],
            products={"id": product["id"], "name": "Bag", "tag": "bag", "image_url": product["image_url"]},
            models={"id": model["id"], "name": "Anna", "tag": "anna", "image_url": model["image_url"]},
        )

        response = login(alice["id"]).get(f"/api/photoshoots/{shoot['id']}")

        assert response.status_code == 200
        photoshoot = response.json()["photoshoot"]
        assert photoshoot["products"]["name"] == "Bag"
        assert photoshoot["models"]["name"] == "Anna"

    def test_other_users_photoshoot_is_not_found(self, login, db, alice, bob):
        shoot = add_photoshoot(db, bob, "bobs-product")

        response = login(alice["id"]).get(f"/api/photoshoots/{shoot['id']}")

        assert response.status_code == 404
        assert response.json() == {"error": "Photoshoot not found"}

    def test_malformed_id_is_not_found(self, login, alice):
        response = login(alice["id"]).get("/api/photoshoots/anything")

        assert response.status_code == 404
        assert response.json() == {"error": "Photoshoot not found"}

    def test_requires_valid_token(self, client):
        client.cookies.set("auth-token", "not.a.jwt")

        response = client.get("/api/photoshoots/anything")

        assert response.status_code == 401
        assert response.json() == {"error": "Invalid or expired token"}


class TestCreatePhotoshoot:
    def test_with_model(self, login, db, alice, product, model):
        response = login(alice["id"]).post("/api/photoshoots", json={
            "name": "Summer campaign",
            "product_id": product["id"],
            "type": "with_model",
            "style": "professional",
            "model_id": model["id"],
            "final_prompt": "Model holding the bag on a beach"
        })

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        shoot = body["photoshoot"]
        assert shoot["user_id"] == alice["id"]
        assert shoot["model_id"] == model["id"]
        assert shoot["style_type"] == "professional"
        assert shoot["scene_description"] == "Model holding the bag on a beach"
        assert shoot["status"] == "pending"
        assert shoot["ai_suggested"] is True
        assert shoot["generation_settings"]["name"] == "Summer campaign"

    def test_product_only_drops_model_and_defaults_description(self, login, db, alice, product, model):
        response = login(alice["id"]).post("/api/photoshoots", json={
            "product_id": product["id"],
            "type": "product_only",
            "style": "casual",
            "model_id": model["id"]
        })

        assert response.status_code == 201
        shoot = response.json()["photoshoot"]
        assert shoot["model_id"] is None
        assert shoot["style_type"] == "ugc"
        assert shoot["scene_description"] == "AI-generated photoshoot"

    def test_other_users_product_rejected(self, login, db, alice, bob):
        bobs_product = db.add("products", user_id=bob["id"], name="Hat", image_url="https://img.example.com/hat.png")

        response = login(alice["id"]).post("/api/photoshoots", json={"product_id": bobs_product["id"]})

        assert response.status_code == 404
        assert response.json() == {"error": "Product not found"}
        assert db.tables["photoshoots"] == []

    def test_other_users_model_rejected(self, login, db, alice, bob, product):
        bobs_model = db.add("models", user_id=bob["id"], name="Max", tag="max")

        response = login(alice["id"]).post("/api/photoshoots", json={
            "product_id": product["id"], "type": "with_model", "model_id": bobs_model["id"]
        })

        assert response.status_code == 404
        assert response.json() == {"error": "Model not found"}

    def test_malformed_product_id_is_not_found(self, login, alice):
        response = login(alice["id"]).post("/api/photoshoots", json={"product_id": "bag-1"})

        assert response.status_code == 404
        assert response.json() == {"error": "Product not found"}

    def test_product_id_required(self, login, alice):
        response = login(alice["id"]).post("/api/photoshoots", json={"type": "product_only"})

        assert response.status_code == 400
        assert response.json() == {"error": "Product ID is required"}
