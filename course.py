from typing import Tuple

from pydantic import BaseModel, ConfigDict


class Course(BaseModel):
    """A single catalog entry. Frozen: a course never changes after it is built."""

    model_config = ConfigDict(frozen=True)

    name: str
    title: str
    prerequisites: Tuple[str, ...] = ()

    def describe(self) -> str:
        prereqs = ", ".join(self.prerequisites) if self.prerequisites else "None"
        return f"{self.name}: {self.title}; Prerequisites: {prereqs}"
