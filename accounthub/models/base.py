from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """
    Declarative base shared by every ORM model.
    Importing a model module registers its table on Base.metadata.
    """

    pass
