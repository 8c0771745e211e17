from datetime import datetime, timedelta, timezone
from decimal import Decimal

from herbal_garden.data.models.product import ProductModel


def names(resp):
    return {p["name"] for p in resp.json()["data"]}


def test_list_all_products(api, seeded):
    resp = api.get("/api/products")
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["count"] == 8
    assert len(body["data"]) == 8


def test_products_use_camel_case_and_numeric_prices(api, seeded):
    tulsi = api.get("/api/products/1").json()["data"]
    assert tulsi["name"] == "Tulsi"
    assert tulsi["scientificName"] == "Ocimum sanctum"
    assert tulsi["price"] == 13.43
    assert tulsi["previousPrice"] == 15.99
    assert tulsi["rating"] == {"stars": 4.5, "reviewCount": 128}
    assert tulsi["inStock"] is True
    assert len(tulsi["_id"]) == 32


def test_filter_by_category(api, seeded):
    resp = api.get("/api/products", params={"category": "spice"})
    data = resp.json()["data"]
    assert {p["category"] for p in data} == {"spice"}
    assert names(resp) == {"Turmeric", "Ginger"}


def test_filter_by_category_and_price_range(api, seeded):
    resp = api.get("/api/products", params={"category": "spice", "minPrice": 7, "maxPrice": 9})
    assert names(resp) == {"Turmeric"}


def test_price_bounds_are_inclusive(api, seeded):
    resp = api.get("/api/products", params={"minPrice": "9.00", "maxPrice": "9.00"})
    assert names(resp) == {"Peppermint"}


def test_featured_only(api, seeded):
    resp = api.get("/api/products", params={"featured": "true"})
    assert names(resp) == {"Tulsi", "Neem", "Peppermint", "Turmeric"}


def test_search_param_is_case_insensitive_substring_on_name(api, seeded):
    assert names(api.get("/api/products", params={"search": "TUL"})) == {"Tulsi"}
    assert names(api.get("/api/products", params={"search": "ginger"})) == {"Ginger"}


def test_invalid_price_is_rejected(api, seeded):
    resp = api.get("/api/products", params={"minPrice": "cheap"})
    assert resp.status_code == 400
    assert resp.json()["success"] is False


def test_newest_products_first(api, db):
    now = datetime.now(timezone.utc)
    db.add_all([
        ProductModel(catalog_id=10, name="Old", price=Decimal("1.00"), image="old.jpg",
                     created_at=now - timedelta(days=2)),
        ProductModel(catalog_id=11, name="New", price=Decimal("1.00"), image="new.jpg",
                     created_at=now),
    ])
    db.commit()

    data = api.get("/api/products").json()["data"]
    assert [p["name"] for p in data] == ["New", "Old"]


def test_get_product_by_storage_id(api, seeded):
    storage_id = api.get("/api/products/3").json()["data"]["_id"]
    resp = api.get(f"/api/products/{storage_id}")
    assert resp.status_code == 200
    assert resp.json()["data"]["name"] == "Ashwagandha"


def test_unknown_product_is_404(api, seeded):
    for raw in ("999", "not-an-id", "ab" * 16):
        resp = api.get(f"/api/products/{raw}")
        assert resp.status_code == 404
        assert resp.json() == {"success": False, "message": "Product not found"}


def test_search_endpoint_matches_name_scientific_name_and_description(api, seeded):
    assert names(api.get("/api/products/search/holy basil")) == {"Tulsi"}
    assert names(api.get("/api/products/search/zingiber")) == {"Ginger"}
    assert names(api.get("/api/products/search/NEEM")) == {"Neem"}
    body = api.get("/api/products/search/nothing-like-this").json()
    assert body["success"] is True
    assert body["count"] == 0
