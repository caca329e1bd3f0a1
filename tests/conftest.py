import io
from types import SimpleNamespace

import pytest
import pytest_asyncio

import marketplace.models  # noqa: F401
from marketplace.core import database
from marketplace.core.database import Base, init_engine
from marketplace.core.session import Principal
from marketplace.models import Product, Store, User
from marketplace.utils.console import Console


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = init_engine(f"sqlite+aiosqlite:///{tmp_path / 'marketplace.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine):
    async with database.get_session() as session:
        yield session


@pytest_asyncio.fixture
async def marketplace_data(session):
    """
    Покупатель в точке (0, 0), два менеджера и администратор.
    Магазин 1 (0, 29) принадлежит bob, магазин 2 (0, 31) - carol.
    В обоих магазинах 10 единиц товара Widget.
    """
    customer = User(name="alice", password="secret", latitude=0.0, longitude=0.0, type="customer")
    manager = User(name="bob", password="bobpw", latitude=0.0, longitude=10.0, type="manager")
    other_manager = User(name="carol", password="carolpw", latitude=50.0, longitude=50.0, type="manager")
    admin = User(name="root", password="rootpw", latitude=0.0, longitude=0.0, type="admin")
    session.add_all([customer, manager, other_manager, admin])
    await session.commit()

    near_store = Store(id=1, latitude=0.0, longitude=29.0, manager_id=manager.id)
    far_store = Store(id=2, latitude=0.0, longitude=31.0, manager_id=other_manager.id)
    session.add_all([near_store, far_store])
    await session.commit()

    session.add_all(
        [
            Product(store_id=1, product_name="Widget", number_of_units=10, price_per_unit=2.5),
            Product(store_id=1, product_name="Gadget", number_of_units=3, price_per_unit=9.99),
            Product(store_id=2, product_name="Widget", number_of_units=10, price_per_unit=2.5),
        ]
    )
    await session.commit()

    return SimpleNamespace(
        customer=customer,
        manager=manager,
        other_manager=other_manager,
        admin=admin,
        near_store=near_store,
        far_store=far_store,
    )


def principal_for(user: User) -> Principal:
    return Principal(name=user.name, password=user.password)


@pytest.fixture
def principal():
    return principal_for


@pytest.fixture
def make_console():
    def _make_console(*lines: str) -> Console:
        text = "".join(f"{line}\n" for line in lines)
        return Console(stdin=io.StringIO(text), stdout=io.StringIO())

    return _make_console


@pytest.fixture
def load():
    """Читает запись в отдельной сессии, минуя identity map тестовой сессии"""

    async def _load(model, key):
        async with database.get_session() as fresh:
            return await fresh.get(model, key)

    return _load
