"""Integration tests for Product API endpoints.

Covers:
- POST /api/product: bulk creation, conflicts, malformed input.
- GET /api/product/{id}: look-up, not found, discontinued, caching.
- GET /api/product: listing, pagination, 204 on no results.
- Field limits and exact price round-trips.
- Error payload format.
"""

from __future__ import annotations

import uuid
from decimal import Decimal

import pytest

from catalog.products.models import Product

pytestmark = pytest.mark.integration

URL = "/api/product"

CATEGORY_ID = "63d14238-8362-4242-a4a9-ef2d9b1ce7e8"
SUPPLIER_ID = "7487fb0d-09b1-4580-a470-66cc74bb3282"


# ---------------------------------------------------------------------------
# Helpers / fixtures
# ---------------------------------------------------------------------------


def _payload(**overrides) -> dict:
    payload = {
        "product_name": "Samsung Galaxy S23",
        "category_id": CATEGORY_ID,
        "supplier_id": SUPPLIER_ID,
        "unit_price": "60000",
        "units_in_stock": 100000,
        "discontinued": False,
    }
    payload.update(overrides)
    return payload


def _make_product(**overrides) -> Product:
    defaults = {
        "product_name": "Google Pixel 7 Pro (128 GB Storage, 12 GB RAM)",
        "category_id": uuid.UUID(CATEGORY_ID),
        "supplier_id": uuid.UUID("235f43c8-6202-47d1-9954-154f0607191b"),
        "unit_price": Decimal("80000.00"),
        "units_in_stock": 10000,
    }
    defaults.update(overrides)
    product = Product(**defaults)
    product.save()
    return product


@pytest.fixture()
def seeded_products():
    """Two active products and one discontinued product."""
    pixel = _make_product()
    case = _make_product(
        product_name="Spigen Liquid Case for Google Pixel 7 Pro",
        unit_price=Decimal("1000.00"),
        units_in_stock=1000,
    )
    note = _make_product(
        product_name="Samsung Galaxy Note 20",
        unit_price=Decimal("120000.00"),
        units_in_stock=0,
        discontinued=True,
    )
    return pixel, case, note


# ===========================================================================
# CREATE
# ===========================================================================


class TestProductCreate:
    def test_create_success(self, api_client):
        payload = [
            _payload(id="7487fb0d-09b1-4580-a470-66cc74bb3282"),
            _payload(
                id="a475a72e-13bf-46e8-b1f5-28f6a464235f",
                product_name="Spigen Liquid Case for Samsung Galaxy S23",
                unit_price="1600",
                units_in_stock=1000,
            ),
        ]

        response = api_client.post(URL, payload, format="json")

        assert response.status_code == 201
        assert response.content == b""
        assert Product.objects.count() == 2
        assert Product.objects.filter(
            id=uuid.UUID("a475a72e-13bf-46e8-b1f5-28f6a464235f")
        ).exists()

    def test_create_generates_missing_ids(self, api_client):
        response = api_client.post(URL, [_payload()], format="json")

        assert response.status_code == 201
        product = Product.objects.get()
        assert isinstance(product.id, uuid.UUID)

    def test_duplicate_names_in_body_return_409(self, api_client):
        payload = [_payload(), _payload()]

        response = api_client.post(URL, payload, format="json")

        assert response.status_code == 409
        assert response.json() == {
            "status_code": 409,
            "message": "Conflict",
            "description": (
                "The provided data contains duplicate product names: "
                "Samsung Galaxy S23"
            ),
        }
        assert Product.objects.count() == 0

    def test_existing_name_returns_409(self, api_client, seeded_products):
        pixel, _, _ = seeded_products
        payload = [_payload(), _payload(product_name=pixel.product_name)]

        response = api_client.post(URL, payload, format="json")

        assert response.status_code == 409
        assert response.json()["description"] == (
            f"Products with names '{pixel.product_name}' already exist"
        )
        assert not Product.objects.filter(product_name="Samsung Galaxy S23").exists()

    def test_name_of_discontinued_product_can_be_reused(
        self, api_client, seeded_products
    ):
        _, _, note = seeded_products

        response = api_client.post(
            URL, [_payload(product_name=note.product_name)], format="json"
        )

        assert response.status_code == 201
        assert Product.objects.filter(product_name=note.product_name).count() == 2

    def test_missing_fields_return_400(self, api_client):
        response = api_client.post(
            URL, [{"product_name": "Incomplete"}], format="json"
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Bad Request"
        assert Product.objects.count() == 0

    def test_negative_price_returns_400(self, api_client):
        response = api_client.post(URL, [_payload(unit_price="-5.00")], format="json")

        assert response.status_code == 400

    def test_object_body_returns_400(self, api_client):
        response = api_client.post(URL, _payload(), format="json")

        assert response.status_code == 400
        assert "JSON array" in response.json()["description"]

    def test_empty_array_returns_400(self, api_client):
        response = api_client.post(URL, [], format="json")

        assert response.status_code == 400

    def test_malformed_json_returns_400(self, api_client):
        response = api_client.post(URL, data="[{", content_type="application/json")

        assert response.status_code == 400
        assert set(response.json()) == {"status_code", "message", "description"}


# ===========================================================================
# FIELD LIMITS
# ===========================================================================


class TestProductFieldLimits:
    def test_name_at_max_length_is_accepted(self, api_client):
        response = api_client.post(
            URL, [_payload(product_name="x" * 255)], format="json"
        )

        assert response.status_code == 201

    def test_name_over_max_length_returns_400(self, api_client):
        response = api_client.post(
            URL, [_payload(product_name="x" * 256)], format="json"
        )

        assert response.status_code == 400
        assert "product_name" in response.json()["description"]
        assert Product.objects.count() == 0

    def test_stock_at_max_is_accepted(self, api_client):
        response = api_client.post(
            URL, [_payload(units_in_stock=2_147_483_647)], format="json"
        )

        assert response.status_code == 201

    def test_stock_over_32_bits_returns_400(self, api_client):
        response = api_client.post(
            URL, [_payload(units_in_stock=10**20)], format="json"
        )

        assert response.status_code == 400
        assert "units_in_stock" in response.json()["description"]
        assert Product.objects.count() == 0

    def test_price_over_max_returns_400(self, api_client):
        response = api_client.post(
            URL, [_payload(unit_price="9999999999999999.99")], format="json"
        )

        assert response.status_code == 400
        assert "unit_price" in response.json()["description"]
        assert Product.objects.count() == 0

    @pytest.mark.parametrize(
        "price", ["0.00", "0.10", "1600.50", "12345678901.57", "9999999999999.99"]
    )
    def test_price_reads_back_exactly(self, api_client, price):
        product_id = str(uuid.uuid4())
        created = api_client.post(
            URL, [_payload(id=product_id, unit_price=price)], format="json"
        )
        assert created.status_code == 201

        by_id = api_client.get(f"{URL}/{product_id}")
        listed = api_client.get(URL)

        assert by_id.status_code == 200
        assert by_id.json()["unit_price"] == price
        assert listed.status_code == 200
        assert listed.json()[0]["unit_price"] == price


# ===========================================================================
# RETRIEVE
# ===========================================================================


class TestProductRetrieve:
    def test_retrieve_success(self, api_client, seeded_products):
        pixel, _, _ = seeded_products

        response = api_client.get(f"{URL}/{pixel.id}")

        assert response.status_code == 200
        assert response.json() == {
            "id": str(pixel.id),
            "product_name": pixel.product_name,
            "category_id": str(pixel.category_id),
            "supplier_id": str(pixel.supplier_id),
            "unit_price": "80000.00",
            "units_in_stock": 10000,
            "discontinued": False,
        }

    def test_retrieve_not_found(self, api_client):
        missing = uuid.uuid4()

        response = api_client.get(f"{URL}/{missing}")

        assert response.status_code == 404
        assert response.json() == {
            "status_code": 404,
            "message": "Not found",
            "description": f"No product has been found for the ID: {missing}",
        }

    def test_retrieve_discontinued_returns_404(self, api_client, seeded_products):
        _, _, note = seeded_products

        response = api_client.get(f"{URL}/{note.id}")

        assert response.status_code == 404

    def test_retrieve_invalid_id_returns_400(self, api_client):
        response = api_client.get(f"{URL}/not-a-uuid")

        assert response.status_code == 400

    def test_retrieve_is_cached(self, api_client, seeded_products):
        pixel, _, _ = seeded_products
        api_client.get(f"{URL}/{pixel.id}")

        Product.objects.filter(id=pixel.id).update(units_in_stock=1)
        response = api_client.get(f"{URL}/{pixel.id}")

        assert response.status_code == 200
        assert response.data["units_in_stock"] == 10000


# ===========================================================================
# LIST
# ===========================================================================


class TestProductList:
    def test_list_empty_returns_204(self, api_client):
        response = api_client.get(URL)

        assert response.status_code == 204
        assert response.content == b""

    def test_list_returns_active_products(self, api_client, seeded_products):
        pixel, case, _ = seeded_products

        response = api_client.get(URL)

        assert response.status_code == 200
        ids = {str(p["id"]) for p in response.data}
        assert ids == {str(pixel.id), str(case.id)}

    def test_first_page(self, api_client, seeded_products):
        everything = api_client.get(URL).data

        response = api_client.get(URL, {"pageNumber": 1, "pageSize": 1})

        assert response.status_code == 200
        assert response.data == everything[:1]

    def test_second_page(self, api_client, seeded_products):
        everything = api_client.get(URL).data

        response = api_client.get(URL, {"pageNumber": 2, "pageSize": 1})

        assert response.status_code == 200
        assert response.data == everything[1:2]

    def test_page_past_the_end_returns_204(self, api_client, seeded_products):
        response = api_client.get(URL, {"pageNumber": 2, "pageSize": 2})

        assert response.status_code == 204

    def test_non_positive_page_returns_204(self, api_client, seeded_products):
        response = api_client.get(URL, {"pageNumber": 0, "pageSize": 10})

        assert response.status_code == 204

    def test_only_one_page_parameter_returns_everything(
        self, api_client, seeded_products
    ):
        response = api_client.get(URL, {"pageSize": 1})

        assert response.status_code == 200
        assert len(response.data) == 2

    def test_non_integer_page_returns_400(self, api_client):
        response = api_client.get(URL, {"pageNumber": "one", "pageSize": 10})

        assert response.status_code == 400
        assert "pageNumber" in response.json()["description"]

    def test_page_is_cached(self, api_client, seeded_products):
        first = api_client.get(URL, {"pageNumber": 1, "pageSize": 10})

        _make_product(product_name="Added later")
        second = api_client.get(URL, {"pageNumber": 1, "pageSize": 10})

        assert second.data == first.data
        assert len(api_client.get(URL).data) == 3
