"""Unit tests for dish API endpoints."""
import pytest


class TestDishesAPI:
    """Test dish endpoints."""

    def test_list_empty(self, test_client):
        """Test GET /dishes on an empty catalog."""
        response = test_client.get("/dishes")

        assert response.status_code == 200
        assert response.json() == {"data": []}

    def test_list_seeded(self, seeded_client):
        """Test GET /dishes returns every seeded dish."""
        response = seeded_client.get("/dishes")

        assert response.status_code == 200
        names = [dish["name"] for dish in response.json()["data"]]
        assert names == ["Taco", "Burrito"]

    def test_create_dish(self, test_client, valid_dish_data):
        """Test POST /dishes creates a dish with a generated id."""
        response = test_client.post("/dishes", json={"data": valid_dish_data})

        assert response.status_code == 201
        dish = response.json()["data"]
        assert dish["id"]
        assert dish["price"] == 5
        assert dish["name"] == "Taco"
        assert dish["image_url"] == "x"

    def test_created_dish_appears_in_list(self, seeded_client, valid_dish_data):
        """Test a created dish has a fresh id and is listed afterwards."""
        existing_ids = {d["id"] for d in seeded_client.get("/dishes").json()["data"]}

        created = seeded_client.post("/dishes", json={"data": valid_dish_data}).json()["data"]

        assert created["id"] not in existing_ids
        listed_ids = [d["id"] for d in seeded_client.get("/dishes").json()["data"]]
        assert created["id"] in listed_ids

    def test_create_ignores_supplied_id(self, test_client, valid_dish_data):
        """Test the client cannot choose a dish id."""
        response = test_client.post("/dishes", json={"data": {**valid_dish_data, "id": "mine"}})

        assert response.status_code == 201
        assert response.json()["data"]["id"] != "mine"

    def test_create_empty_description(self, test_client):
        """Test an empty description is rejected."""
        response = test_client.post(
            "/dishes",
            json={"data": {"name": "Bad", "description": "", "price": 5, "image_url": "x"}},
        )

        assert response.status_code == 400
        assert "description" in response.json()["message"]

    @pytest.mark.parametrize("field", ["name", "description", "price", "image_url"])
    def test_create_missing_field(self, test_client, valid_dish_data, field):
        """Test each missing field is named in the error."""
        del valid_dish_data[field]
        response = test_client.post("/dishes", json={"data": valid_dish_data})

        assert response.status_code == 400
        assert response.json() == {"message": f"Dish must include a {field}"}

    @pytest.mark.parametrize("price", [-5, 2.5, "5"])
    def test_create_invalid_price(self, test_client, valid_dish_data, price):
        """Test negative, fractional and string prices are rejected."""
        valid_dish_data["price"] = price
        response = test_client.post("/dishes", json={"data": valid_dish_data})

        assert response.status_code == 400
        assert response.json()["message"] == (
            "Dish must have a price that is an integer greater than 0"
        )

    def test_create_zero_price_reports_presence(self, test_client, valid_dish_data):
        """Test a zero price fails the presence check first."""
        valid_dish_data["price"] = 0
        response = test_client.post("/dishes", json={"data": valid_dish_data})

        assert response.status_code == 400
        assert response.json()["message"] == "Dish must include a price"

    def test_create_non_string_name(self, test_client, valid_dish_data):
        """Test a numeric name is a validation failure, not a crash."""
        valid_dish_data["name"] = 42
        response = test_client.post("/dishes", json={"data": valid_dish_data})

        assert response.status_code == 400
        assert response.json()["message"] == "Dish must include a name"

    def test_create_without_body(self, test_client):
        """Test a request with no body reports the first missing field."""
        response = test_client.post("/dishes")

        assert response.status_code == 400
        assert response.json()["message"] == "Dish must include a name"

    def test_read_dish(self, seeded_client):
        """Test GET /dishes/{id} returns the dish."""
        response = seeded_client.get("/dishes/d1")

        assert response.status_code == 200
        assert response.json()["data"]["name"] == "Taco"

    def test_read_missing_dish(self, seeded_client):
        """Test GET for an unknown dish returns 404."""
        response = seeded_client.get("/dishes/nope")

        assert response.status_code == 404
        assert response.json() == {"message": "Dish does not exist: nope"}

    def test_update_dish(self, seeded_client):
        """Test PUT replaces every field and keeps the id."""
        payload = {
            "data": {
                "id": "d1",
                "name": "Fish Taco",
                "description": "Grilled fish",
                "price": 7,
                "image_url": "https://example.com/fish.jpg",
            }
        }
        response = seeded_client.put("/dishes/d1", json=payload)

        assert response.status_code == 200
        assert response.json()["data"] == payload["data"]
        assert seeded_client.get("/dishes/d1").json()["data"]["name"] == "Fish Taco"

    def test_update_without_body_id(self, seeded_client, valid_dish_data):
        """Test omitting the body id never fails the id check."""
        response = seeded_client.put("/dishes/d2", json={"data": valid_dish_data})

        assert response.status_code == 200
        assert response.json()["data"]["id"] == "d2"

    def test_update_id_mismatch(self, seeded_client, valid_dish_data):
        """Test a different body id is rejected."""
        response = seeded_client.put("/dishes/d1", json={"data": {**valid_dish_data, "id": "d2"}})

        assert response.status_code == 400
        assert response.json()["message"] == (
            "Dish id does not match route id. Dish: d2, Route: d1"
        )

    def test_update_missing_dish(self, seeded_client):
        """Test updating an unknown dish returns 404 before validating the body."""
        response = seeded_client.put("/dishes/nope", json={"data": {}})

        assert response.status_code == 404

    def test_update_invalid_field(self, seeded_client, valid_dish_data):
        """Test field validation applies on update."""
        valid_dish_data["image_url"] = ""
        response = seeded_client.put("/dishes/d1", json={"data": valid_dish_data})

        assert response.status_code == 400
        assert "image_url" in response.json()["message"]
        assert seeded_client.get("/dishes/d1").json()["data"]["name"] == "Taco"

    def test_delete_dish(self, seeded_client):
        """Test DELETE removes the dish with an empty 204."""
        response = seeded_client.delete("/dishes/d1")

        assert response.status_code == 204
        assert response.content == b""
        assert seeded_client.get("/dishes/d1").status_code == 404

    def test_delete_dish_referenced_by_order(self, seeded_client):
        """Test dishes delete without checking orders that reference them."""
        assert seeded_client.delete("/dishes/d1").status_code == 204

        order = seeded_client.get("/orders/o-pending").json()["data"]
        assert order["dishes"][0]["dishId"] == "d1"

    def test_delete_missing_dish(self, seeded_client):
        """Test DELETE for an unknown dish returns 404."""
        response = seeded_client.delete("/dishes/nope")

        assert response.status_code == 404

    def test_create_large_integral_price(self, test_client, valid_dish_data):
        """Test a huge integral float price is stored as an integer."""
        valid_dish_data["price"] = 1e300
        response = test_client.post("/dishes", json={"data": valid_dish_data})

        assert response.status_code == 201
        assert response.json()["data"]["price"] == int(1e300)

    def test_update_large_integral_price(self, seeded_client, valid_dish_data):
        """Test a huge integral float price is accepted on update."""
        valid_dish_data["price"] = 1e300
        response = seeded_client.put("/dishes/d1", json={"data": valid_dish_data})

        assert response.status_code == 200
        assert response.json()["data"]["price"] == int(1e300)
