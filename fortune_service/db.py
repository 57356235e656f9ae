from sqlalchemy import create_engine, MetaData, Table, Column, BigInteger, Text, select, func, insert
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from pydantic import BaseModel, ConfigDict, Field
import logging

metadata = MetaData()

# fortune table
fortune = Table('fortune', metadata,
    Column('id', BigInteger, primary_key=True),
    Column('text', Text, nullable=False)
)

DEFAULT_FORTUNES = [
    "People are naturally attracted to you.",
    "You learn from your mistakes... You will learn a lot today.",
    "If you have something good in your life, don't let it go!",
    "What ever you're goal is in life, embrace it visualize it, and for it will be yours.",
    "Your shoes will make you happy today.",
    "You cannot love life until you live the life you love.",
    "Be on the lookout for coming events; They cast their shadows beforehand.",
    "Land is always on the mind of a flying bird.",
    "The man or woman you desire feels the same about you.",
    "Meeting adversity well is the source of your strength.",
    "A dream you have will come true.",
    "Our deeds determine us, as much as we determine our deeds.",
    "Never give up. You're not a failure if you don't give up.",
    "You will become great if you believe in yourself.",
    "There is no greater pleasure than seeing your loved ones prosper.",
]


class Fortune(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    text: str = Field(min_length=1)


class StoreEmptyError(Exception):
    """Raised when a random fortune is requested from an empty store."""


def make_engine(url: str) -> Engine:
    # in-memory sqlite lives per connection, so pin a single one shared across threads
    if url in ("sqlite://", "sqlite:///:memory:", "sqlite+pysqlite:///:memory:"):
        return create_engine(url, poolclass=StaticPool, connect_args={"check_same_thread": False})
    if url.startswith("sqlite"):
        return create_engine(url, connect_args={"check_same_thread": False})
    return create_engine(url)


def init_db(engine: Engine, seed: bool = True) -> None:
    metadata.create_all(engine)
    if not seed:
        return
    with engine.begin() as conn:
        count = conn.execute(select(func.count()).select_from(fortune)).scalar_one()
        if count == 0:
            conn.execute(insert(fortune), [
                {"id": i, "text": text} for i, text in enumerate(DEFAULT_FORTUNES, start=1000)
            ])
            logging.info("Seeded %d fortunes", len(DEFAULT_FORTUNES))


def list_all(engine: Engine) -> list[Fortune]:
    with engine.connect() as conn:
        rows = conn.execute(select(fortune.c.id, fortune.c.text).order_by(fortune.c.id)).all()
    return [Fortune(id=row.id, text=row.text) for row in rows]


def random_fortune(engine: Engine) -> Fortune:
    """Pick one fortune uniformly at random using the database's own random ordering."""
    stmt = select(fortune.c.id, fortune.c.text).order_by(func.random()).limit(1)
    with engine.connect() as conn:
        row = conn.execute(stmt).first()
    if row is None:
        raise StoreEmptyError("No fortunes available")
    return Fortune(id=row.id, text=row.text)
