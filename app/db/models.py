# app/db/models.py

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class Customer(Base):
    __tablename__ = "Customers"

    # Ids are chosen by the caller, never generated by the database.
    id = Column(Integer, primary_key=True, autoincrement=False)

    name = Column(String, nullable=False, default="", server_default="")
    email = Column(String, nullable=False, default="", server_default="")
    phone = Column(String, nullable=False, default="", server_default="")

    def __repr__(self) -> str:
        return f"<Customer id={self.id} name={self.name!r}>"
