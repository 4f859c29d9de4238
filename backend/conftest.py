from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

ROOT = Path(__file__).resolve().parent
sys.path.append(str(ROOT))

os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"
os.environ["DATABASE_WRITE_URL"] = "sqlite+pysqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["ADMIN_USERNAME"] = "admin"
os.environ["ADMIN_PASSWORD"] = "password123"
# Cheap hashing parameters keep the suite fast.
os.environ["ARGON2_TIME_COST"] = "1"
os.environ["ARGON2_MEMORY_COST"] = "8192"
os.environ["ARGON2_PARALLELISM"] = "1"

from bazaardb.database import Base  # noqa: E402
from bazaardb.apps.stores import models as store_models  # noqa: E402
from bazaardb.apps.catalog import models as catalog_models  # noqa: E402
from bazaardb.apps.suppliers import models as supplier_models  # noqa: E402
from bazaardb.apps.pricing import models as pricing_models  # noqa: E402
from bazaardb.apps.inventory import models as inventory_models  # noqa: E402

ALL_TABLES = [
    store_models.Store.__table__,
    catalog_models.ProductCategory.__table__,
    catalog_models.Product.__table__,
    supplier_models.Supplier.__table__,
    supplier_models.SupplierOrderProduct.__table__,
    inventory_models.StoreProduct.__table__,
    inventory_models.Inventory.__table__,
    inventory_models.ProductTransaction.__table__,
    pricing_models.Pricing.__table__,
]


@pytest.fixture()
def db_session():
    engine = create_engine("sqlite+pysqlite:///:memory:")
    Base.metadata.create_all(bind=engine, tables=ALL_TABLES)
    TestingSession = sessionmaker(
        bind=engine,
        autoflush=False,
        autocommit=False,
        expire_on_commit=False,
    )
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()
