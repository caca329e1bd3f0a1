import datetime

import pytest

from marketplace.models import Order, ProductUpdate
from marketplace.services.sequence_service import SequenceService


async def _add_orders(session, customer_id, count):
    now = datetime.datetime.now()
    session.add_all(
        [
            Order(
                order_number=i,
                customer_id=customer_id,
                store_id=1,
                product_name="Widget",
                units_ordered=1,
                order_time=now,
            )
            for i in range(1, count + 1)
        ]
    )
    await session.commit()


@pytest.mark.asyncio
@pytest.mark.parametrize("existing", [0, 1, 100])
async def test_next_id_counts_rows(session, marketplace_data, existing):
    await _add_orders(session, marketplace_data.customer.id, existing)

    svc = SequenceService(session)
    assert await svc.next_id("Orders") == existing + 1


@pytest.mark.asyncio
async def test_next_id_resolves_table_names(session, marketplace_data):
    svc = SequenceService(session)

    assert await svc.next_id("ProductUpdates") == 1
    assert await svc.next_id("product_updates") == 1
    assert await svc.next_id("PRODUCTSUPPLYREQUESTS") == 1

    session.add(
        ProductUpdate(
            update_number=1,
            manager_id=marketplace_data.manager.id,
            store_id=1,
            product_name="Widget",
            updated_on=datetime.datetime.now(),
        )
    )
    await session.commit()
    assert await svc.next_id("ProductUpdates") == 2


def test_unknown_table_rejected():
    with pytest.raises(ValueError):
        SequenceService.resolve_table("Warehouses")
