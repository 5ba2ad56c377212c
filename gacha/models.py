"""Data models for the gacha package."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Item:
    """A single catalog entry."""

    name: str
    price: int  # Smallest currency unit
    extra: dict[str, str] = field(default_factory=dict, compare=False, hash=False)

    def to_dict(self) -> dict:
        return {**self.extra, "name": self.name, "price": self.price}


@dataclass
class GachaResult:
    """Items picked by one gacha run, with the budget accounting."""

    items: list[Item]
    budget: int  # 0 when the requested budget was not usable
    spent: int
    remaining: int
