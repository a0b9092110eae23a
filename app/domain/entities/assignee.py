"""Assignee entity — a named, coloured owner of department codes."""

from dataclasses import asdict, dataclass


@dataclass
class Assignee:
    id: str
    name: str
    color: str

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "Assignee":
        return cls(id=str(data["id"]), name=data["name"], color=data["color"])
