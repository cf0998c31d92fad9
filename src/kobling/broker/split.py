"""
Split descriptor: one topic partition offset range to consume in parallel.
"""
from typing import Any, Dict, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from kobling.utility.exceptions import InvalidInputError

TOPIC = "topic"
PARTITION = "partition"
START_OFFSET = "startOffset"
END_OFFSET = "endOffset"


class SplitDescriptor(BaseModel):
    """
    Topic, partition and ``[start_offset, end_offset)`` range.

    Produced by the planner and serialized as four string fields; this side
    only checks the shape.
    """

    model_config = ConfigDict(frozen=True)

    topic: str = Field(..., min_length=1, description="Topic name")
    partition: int = Field(..., ge=0, description="Partition number")
    start_offset: int = Field(..., ge=0, description="First offset (inclusive)")
    end_offset: int = Field(..., ge=0, description="Last offset (exclusive)")

    @model_validator(mode="after")
    def validate_range(self):
        """End offset may not precede start offset."""
        if self.end_offset < self.start_offset:
            raise ValueError(
                f"end_offset {self.end_offset} is before start_offset {self.start_offset}"
            )
        return self

    @classmethod
    def from_mapping(cls, params: Mapping[str, Any]) -> "SplitDescriptor":
        """
        Build from serialized split properties.

        Raises:
            InvalidInputError: If a field is missing or malformed
        """
        missing = [
            key
            for key in (TOPIC, PARTITION, START_OFFSET, END_OFFSET)
            if params.get(key) in (None, "")
        ]
        if missing:
            raise InvalidInputError(f"Split is missing {', '.join(missing)}")
        try:
            return cls(
                topic=params[TOPIC],
                partition=params[PARTITION],
                start_offset=params[START_OFFSET],
                end_offset=params[END_OFFSET],
            )
        except ValidationError as e:
            raise InvalidInputError(f"Invalid split: {e}") from e

    def to_mapping(self) -> Dict[str, str]:
        """Serialize as four string fields."""
        return {
            TOPIC: self.topic,
            PARTITION: str(self.partition),
            START_OFFSET: str(self.start_offset),
            END_OFFSET: str(self.end_offset),
        }

    @property
    def size(self) -> int:
        """Number of offsets covered."""
        return self.end_offset - self.start_offset
