"""Domain entities: Contact."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Contact:
    """
    A named entry in the address book.
    Identity is the name: the book holds at most one Contact per name.
    """

    name: str
    phone: str
    email: str

    def __str__(self) -> str:
        return f"Name: {self.name}; Phone: {self.phone}; email: {self.email}"
