import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Select the config overlay before the domain (and its logging) is imported."""
    os.environ["PROTEAN_ENV"] = session.config.option.env
    os.environ.setdefault("JWT_SECRET", "test-secret")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)
        elif "/bdd/" in test_path:
            item.add_marker(pytest.mark.bdd)


@pytest.fixture(scope="session")
def shopsmart_bed():
    from protean.integrations.pytest import DomainFixture

    from shopsmart.domain import shopsmart

    bed = DomainFixture(shopsmart)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(shopsmart_bed):
    with shopsmart_bed.domain_context():
        yield

        from protean import current_domain

        # Clear all databases
        for _, provider in current_domain.providers.items():
            provider._data_reset()

        # Drain event stores
        current_domain.event_store.store._data_reset()


# ---------------------------------------------------------------------------
# Builders shared by application, integration and bdd tests
# ---------------------------------------------------------------------------
@pytest.fixture()
def make_product():
    from protean import current_domain

    from shopsmart.catalogue.product.management import AddProduct
    from shopsmart.catalogue.product.product import Product

    def _make(name="Trail Shoe", price=10.0, stock=5, category="Footwear", **overrides):
        command = AddProduct(
            name=name,
            description=overrides.pop("description", f"{name} description"),
            price=price,
            category=category,
            stock=stock,
            **overrides,
        )
        product_id = current_domain.process(command, asynchronous=False)
        return current_domain.repository_for(Product).get(product_id)

    return _make


@pytest.fixture()
def make_account():
    from protean import current_domain

    from shopsmart.identity.account.account import Account
    from shopsmart.identity.account.registration import register_account

    counter = {"n": 0}

    def _make(name="Jane Doe", email=None, password="s3cret-pass", address="12 Market Street", phone="555-0100"):
        counter["n"] += 1
        account_id = register_account(
            name=name,
            email=email or f"shopper{counter['n']}@example.com",
            password=password,
            address=address,
            phone=phone,
        )
        return current_domain.repository_for(Account).get(account_id)

    return _make


@pytest.fixture()
def make_admin(make_account):
    from protean import current_domain

    from shopsmart.identity.account.account import Account, Role

    def _make(**kwargs):
        account = make_account(name=kwargs.pop("name", "Site Admin"), **kwargs)
        repo = current_domain.repository_for(Account)
        account.role = Role.ADMIN.value
        repo.add(account)
        return repo.get(account.id)

    return _make


# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------
@pytest.fixture()
def client():
    from fastapi.testclient import TestClient

    from shopsmart.api.application import create_app
    from shopsmart.domain import shopsmart

    return TestClient(create_app(shopsmart))


@pytest.fixture()
def auth_headers():
    from shopsmart.auth.tokens import issue_token

    def _headers(account):
        return {"Authorization": f"Bearer {issue_token(account)}"}

    return _headers
