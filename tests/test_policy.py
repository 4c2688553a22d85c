import pytest
from fastapi.testclient import TestClient

from apparel_inventory.core.exceptions import ValidationError
from apparel_inventory.main import create_app
from apparel_inventory.services.policy import AllowedValues, DEFAULT_MATERIAL_TAGS

from conftest import make_settings


def test_unrestricted_policy_passes_values_through():
    policy = AllowedValues()

    assert not policy.is_restricted
    assert policy.apply(["b", "A", "b"]) == ["b", "A", "b"]


def test_restricted_policy_canonicalizes_and_dedupes():
    policy = AllowedValues(DEFAULT_MATERIAL_TAGS)

    assert policy.apply(["floral designs", " DARK", "Dark"]) == ["Floral Designs", "Dark"]


def test_restricted_policy_rejects_unknown_values():
    policy = AllowedValues({"Blanks"}, field="tags")

    with pytest.raises(ValidationError) as exc:
        policy.apply(["Blanks", "Neon"])

    assert "Neon" in exc.value.detail
    assert exc.value.status_code == 422


def test_configured_tag_policy_applies_to_material_creation(engine, material_payload):
    settings = make_settings(material_allowed_tags="Blanks, Dark")
    with TestClient(create_app(settings=settings, engine=engine)) as client:
        ok = client.post(
            "/materials", json={**material_payload, "tags": ["blanks", "DARK", "dark"]})
        rejected = client.post(
            "/materials", json={**material_payload, "tags": ["Neon"]})

    assert ok.status_code == 201
    assert ok.json()["tags"] == ["Blanks", "Dark"]
    assert rejected.status_code == 422


def test_configured_category_policy_applies_to_product_updates(engine, product_payload):
    settings = make_settings(product_allowed_categories="Outerwear,Basics")
    with TestClient(create_app(settings=settings, engine=engine)) as client:
        created = client.post("/products", json=product_payload).json()
        response = client.patch(
            f"/products/{created['id']}", json={"categories": ["Swimwear"]})

    assert response.status_code == 422
