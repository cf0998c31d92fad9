"""
Default settings for connection pools, broker consumers and certificate staging.

Each group is a small pydantic model; the module-level singletons are what the
rest of kobling reads, so a deployment can swap them out in one place.
"""
from pydantic import BaseModel, Field


class PoolDefaults(BaseModel):
    """Default relational connection pool configuration."""

    min_idle: int = Field(
        default=1, ge=0, description="Connections kept open while idle"
    )
    max_size: int = Field(
        default=10, ge=1, description="Maximum connections handed out at once"
    )
    acquire_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Seconds to wait for a free connection before failing",
    )


class ConsumerDefaults(BaseModel):
    """Default broker consumer configuration."""

    max_poll_records: int = Field(
        default=10_000, ge=1, description="Records returned by a single poll"
    )
    max_partition_fetch_bytes: int = Field(
        default=1_048_576, ge=1, description="Fetch ceiling per partition (bytes)"
    )
    auto_offset_reset: str = Field(
        default="earliest", description="Where to start without a committed offset"
    )


class StagingDefaults(BaseModel):
    """Default certificate staging locations."""

    temp_dir: str = Field(
        default="/tmp", description="Base directory for ephemeral files"
    )
    directory_name: str = Field(
        default="kobling-certs",
        description="Deterministic subdirectory holding staged certificates",
    )


POOL_DEFAULTS = PoolDefaults()
CONSUMER_DEFAULTS = ConsumerDefaults()
STAGING_DEFAULTS = StagingDefaults()
