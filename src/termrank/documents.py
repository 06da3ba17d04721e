from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class DocumentId:
    """Opaque document key; equality and ordering follow the wrapped string."""
    id: str

    def __str__(self) -> str:
        return self.id
