"""Book records with an abstract display."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class Book(ABC):
    """A book known by title and author."""

    title: str
    author: str

    @abstractmethod
    def display(self) -> str:
        """Print the book's details and return the printed text."""


@dataclass
class MyBook(Book):
    """A book with a price."""

    price: int

    def _lines(self) -> list[str]:
        return [
            f"Title: {self.title}",
            f"Author: {self.author}",
            f"Price: {self.price}",
        ]

    def display(self) -> str:
        """Print title, author and price, one per line, and return that text."""
        text = "\n".join(self._lines())
        print(text)
        return text