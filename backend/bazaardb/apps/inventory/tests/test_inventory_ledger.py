from __future__ import annotations

import pytest
from sqlalchemy.dialects import postgresql

from bazaardb.apps.catalog import models as catalog_models
from bazaardb.apps.stores import models as store_models
from bazaardb.apps.inventory import errors
from bazaardb.apps.inventory import ledger
from bazaardb.apps.inventory import models as inventory_models


@pytest.fixture()
def stocked(db_session):
    db_session.add(store_models.Store(store_id=1, name="Main Street", is_active="Y"))
    db_session.add(catalog_models.ProductCategory(category_id=1, name="Dairy", is_active="Y"))
    db_session.flush()
    db_session.add(catalog_models.Product(product_id=1, name="Milk 1L", category_id=1, is_active="Y"))
    db_session.add(inventory_models.Inventory(store_id=1, product_id=1, current_quantity=10))
    db_session.commit()
    return db_session


def _add_policy(db, *, min_quantity: int, max_quantity: int) -> None:
    db.add(
        inventory_models.StoreProduct(
            store_id=1,
            product_id=1,
            min_quantity=min_quantity,
            max_quantity=max_quantity,
            is_active="Y",
        )
    )
    db.commit()


def test_predicates_are_false_without_policy_row(stocked):
    assert ledger.would_overstock(stocked, store_id=1, product_id=1, incoming_quantity=10**9) is False
    assert ledger.would_stockout(stocked, store_id=1, product_id=1, outgoing_quantity=10**9) is False


def test_predicates_are_false_without_inventory_row(stocked):
    _add_policy(stocked, min_quantity=3, max_quantity=20)

    assert ledger.would_overstock(stocked, store_id=1, product_id=2, incoming_quantity=100) is False
    assert ledger.would_stockout(stocked, store_id=1, product_id=2, outgoing_quantity=100) is False


def test_would_overstock_compares_against_max(stocked):
    _add_policy(stocked, min_quantity=3, max_quantity=20)

    assert ledger.would_overstock(stocked, store_id=1, product_id=1, incoming_quantity=10) is False
    assert ledger.would_overstock(stocked, store_id=1, product_id=1, incoming_quantity=11) is True


def test_would_stockout_compares_against_min(stocked):
    _add_policy(stocked, min_quantity=3, max_quantity=20)

    assert ledger.would_stockout(stocked, store_id=1, product_id=1, outgoing_quantity=7) is False
    assert ledger.would_stockout(stocked, store_id=1, product_id=1, outgoing_quantity=8) is True


def test_current_quantity_reads_record(stocked):
    assert ledger.current_quantity(stocked, store_id=1, product_id=1) == 10
    assert ledger.current_quantity(stocked, store_id=1, product_id=1, for_update=True) == 10


def test_current_quantity_missing_record_raises(stocked):
    with pytest.raises(errors.InventoryNotFound):
        ledger.current_quantity(stocked, store_id=1, product_id=99)


def test_locked_read_compiles_to_select_for_update(stocked):
    locked = ledger._on_hand_query(stocked, store_id=1, product_id=1, for_update=True)
    plain = ledger._on_hand_query(stocked, store_id=1, product_id=1)

    assert "FOR UPDATE" in str(locked.statement.compile(dialect=postgresql.dialect()))
    assert "FOR UPDATE" not in str(plain.statement.compile(dialect=postgresql.dialect()))


def test_apply_delta_adjusts_quantity_and_timestamp(stocked):
    item = stocked.query(inventory_models.Inventory).one()
    stocked.refresh(item)
    before = item.last_updated

    ledger.apply_delta(stocked, store_id=1, product_id=1, delta=-4)
    stocked.commit()

    stocked.refresh(item)
    assert item.current_quantity == 6
    assert item.last_updated >= before


def test_apply_delta_on_missing_record_raises(stocked):
    with pytest.raises(errors.InventoryNotFound):
        ledger.apply_delta(stocked, store_id=1, product_id=42, delta=1)


def test_append_movement_assigns_id_and_timestamp(stocked):
    entry = ledger.append_movement(
        stocked,
        store_id=1,
        product_id=1,
        quantity=3,
        movement_type=inventory_models.MovementTypeEnum.SELL,
        updated_by="till-2",
        supplier_id=None,
    )

    assert entry.transaction_id is not None
    assert entry.timestamp is not None
    assert entry.movement_type == inventory_models.MovementTypeEnum.SELL


def test_movement_timestamp_is_stamped_by_the_database(stocked):
    column = inventory_models.ProductTransaction.__table__.c.timestamp
    assert column.default is None
    assert column.server_default is not None

    entry = ledger.append_movement(
        stocked,
        store_id=1,
        product_id=1,
        quantity=1,
        movement_type=inventory_models.MovementTypeEnum.STOCK_IN,
        updated_by="dock-1",
        supplier_id=None,
    )
    stocked.commit()
    stocked.refresh(entry)
    assert entry.timestamp is not None


def test_apply_delta_stamps_an_aware_utc_time(stocked):
    item = stocked.query(inventory_models.Inventory).one()

    ledger.apply_delta(stocked, store_id=1, product_id=1, delta=1)

    assert item.current_quantity == 11
    assert item.last_updated.tzinfo is not None
    assert item.last_updated.utcoffset().total_seconds() == 0
