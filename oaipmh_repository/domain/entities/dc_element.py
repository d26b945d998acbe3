from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DCElement:
    """A single output element, named by its qualified ``prefix:local`` name."""

    name: str
    text: str

    @property
    def prefix(self) -> str:
        return self.name.partition(":")[0]

    @property
    def local_name(self) -> str:
        return self.name.partition(":")[2]
