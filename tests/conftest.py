"""Shared fixtures: in-memory database, seeded catalog, Flask test client."""

import os

os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["LOG_LEVEL"] = "INFO"

from decimal import Decimal
from pathlib import Path

import pytest

from storefront.cart import Product
from storefront.config import AppConfig
from storefront.db.session import build_engine, build_session_factory, init_db
from storefront.models import ImpactMetrics, Product as ProductRow, SupplyChainStep


def make_product_row(product_id, name, price, *, category="extract", origin="Finland", in_stock=True):
    return ProductRow(
        id=product_id,
        name=name,
        description=f"{name} long description",
        short_description=f"{name} extract",
        price=Decimal(price),
        origin=origin,
        category=category,
        rating=Decimal("4.8"),
        review_count=12,
        image_url=f"https://cdn.example.com/{product_id}.jpg",
        qr_code=f"QR-{product_id}",
        scientific_name=None,
        extraction_method="dual extraction",
        bioactive_compounds=["beta-glucans"],
        certifications=["organic"],
        in_stock=in_stock,
    )


@pytest.fixture
def engine():
    eng = build_engine("sqlite:///:memory:")
    init_db(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
def seeded(session_factory):
    with session_factory() as session:
        session.add_all(
            [
                make_product_row("chaga", "Chaga Elixir", "10.00", origin="Lapland"),
                make_product_row("reishi", "Reishi Tincture", "5.50", origin="Japan"),
                make_product_row("moringa", "Moringa Powder", "24.90", category="powder", origin="Ghana"),
                make_product_row("kava", "Kava Root", "18.00", origin="Vanuatu", in_stock=False),
            ]
        )
    return session_factory


@pytest.fixture
def app_config(tmp_path: Path):
    return AppConfig(
        database_url="sqlite:///:memory:",
        secret_key="test-secret-key",
        log_level="INFO",
        currency="EUR",
        cart_storage_key="cart-storage",
        data_dir=tmp_path,
    )


@pytest.fixture
def app(app_config, seeded):
    from app import create_app

    application = create_app(app_config, session_factory=seeded)
    application.config["TESTING"] = True
    return application


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def chaga():
    return Product(id="chaga", name="Chaga Elixir", price="10.00", image_url="/chaga.jpg", origin="Lapland")


@pytest.fixture
def reishi():
    return Product(id="reishi", name="Reishi Tincture", price="5.50", image_url="/reishi.jpg", origin="Japan")


@pytest.fixture
def impact_rows(session_factory):
    with session_factory() as session:
        session.add(
            ImpactMetrics(
                id="m1",
                schools_built=3,
                families_supported=40,
                hectares_protected=500,
                amount_reinvested=Decimal("9000.50"),
                research_papers=4,
                clinical_trials=1,
                patents=0,
            )
        )
        session.add_all(
            [
                SupplyChainStep(
                    id="s2",
                    step_number=2,
                    title="Extraction",
                    description="Hot water and alcohol",
                    image_url="/s2.jpg",
                    details="Dual extraction in small batches",
                    location="Helsinki",
                    certifications=["GMP"],
                ),
                SupplyChainStep(
                    id="s1",
                    step_number=1,
                    title="Wild harvest",
                    description="Hand picked from birch",
                    image_url="/s1.jpg",
                    details="Sustainable harvest quotas",
                ),
            ]
        )
    return session_factory


@pytest.fixture
def product_row_factory():
    return make_product_row
