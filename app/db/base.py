from sqlalchemy.orm import DeclarativeBase
from sqlalchemy import MetaData


class Base(DeclarativeBase):
    """Declarative base; primary keys get stable names (`pk__<table>`)."""

    metadata = MetaData(naming_convention={"pk": "pk__%(table_name)s"})
