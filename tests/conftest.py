from collections.abc import Generator

from pytest import MonkeyPatch, fixture

mp = MonkeyPatch()
mp.setenv("PRODUCTION", "False")
mp.setenv("TESTING", "True")
mp.setenv("LOG_LEVEL", "debug")

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column

from nullable.db import ByteType
from nullable.types import Byte


class Base(DeclarativeBase):
    pass


class Device(Base):
    __tablename__ = "devices"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str]
    flags: Mapped[Byte | None] = mapped_column(ByteType, nullable=True)
    mode: Mapped[Byte | None] = mapped_column(ByteType, nullable=True)


@fixture(scope="session", autouse=True)
def unset_env() -> Generator[None, None, None]:
    yield
    mp.undo()


@fixture
def session() -> Generator[Session, None, None]:
    engine = create_engine("sqlite://")
    Base.metadata.create_all(engine)

    with Session(engine) as db_session:
        yield db_session

    engine.dispose()
