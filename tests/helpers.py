from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from cashier.database.base import Base
from cashier.models import import_all_models


def make_session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    import_all_models()
    Base.metadata.create_all(bind=engine)
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


class SteppingClock:
    """Returns ``start``, then ``start + step``, ``start + 2*step`` and so on."""

    def __init__(self, start=None, step=timedelta(seconds=1)):
        self.current = start or datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
        self.step = step

    def __call__(self):
        value = self.current
        self.current = value + self.step
        return value


class FakeTimer:
    """Stands in for threading.Timer; never fires on its own."""

    created = []

    def __init__(self, interval, function):
        self.interval = interval
        self.function = function
        self.daemon = False
        self.started = False
        self.cancelled = False
        FakeTimer.created.append(self)

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True


def product(**overrides):
    values = dict(
        id="p-1",
        barcode="",
        name="",
        description="",
        price=0,
        stock=0,
        product_type="Alimentos",
        unit_type="Unidad",
        is_active=True,
    )
    values.update(overrides)
    return SimpleNamespace(**values)
