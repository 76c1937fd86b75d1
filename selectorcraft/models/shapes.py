"""Geometric value objects."""

from pydantic import BaseModel


class Rectangle(BaseModel):
    width: int | float
    height: int | float

    def area(self) -> int | float:
        return self.width * self.height
