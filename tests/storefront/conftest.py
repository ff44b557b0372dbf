import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def storefront_bed():
    from storefront.domain import storefront

    bed = DomainFixture(storefront)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(storefront_bed):
    with storefront_bed.domain_context():
        yield


@pytest.fixture()
def catalogue():
    from storefront.catalogue.catalogue import CATALOGUE

    return CATALOGUE


@pytest.fixture()
def panel(catalogue):
    """Product 1 — 4500."""
    return catalogue.get(1)


@pytest.fixture()
def macrame(catalogue):
    """Product 2 — 2800."""
    return catalogue.get(2)


@pytest.fixture()
def vase(catalogue):
    """Product 3 — 3200."""
    return catalogue.get(3)


@pytest.fixture()
def notifier():
    from storefront.notifier.memory import InMemoryNotifier

    return InMemoryNotifier()
