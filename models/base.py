"""
Base model for persisted dice bot data

Shared validation settings and the compact JSON form used on disk.
"""
from pydantic import BaseModel


class DiceBotBaseModel(BaseModel):
    """Base model for everything written to the data file."""

    model_config = {
        "validate_assignment": True,
    }

    def to_json(self) -> str:
        """Serialize to compact JSON (no indentation or extra whitespace)."""
        return self.model_dump_json()

    @classmethod
    def from_json(cls, content: str):
        """Create model instance from a JSON document."""
        if not content.strip():
            raise ValueError(f"Cannot create {cls.__name__} from empty data")
        return cls.model_validate_json(content)
