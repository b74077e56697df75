from pydantic import BaseModel, ConfigDict, Field

from ..core import DEFAULT_BUCKET_ID, DEFAULT_LOCATION


def default_bucket_id(project: str) -> str:
    return DEFAULT_BUCKET_ID.format(project=project)


class DefaultBucketArgs(BaseModel):
    """Declared configuration of a default bucket resource."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    project: str = Field(min_length=1, description="The Firebase project ID.")
    location: str = Field(
        default=DEFAULT_LOCATION,
        min_length=1,
        description="The location of the default bucket (e.g., 'us').",
    )


class DefaultBucketState(BaseModel):
    """Locally tracked state. An empty id means the resource is not tracked."""

    model_config = ConfigDict(frozen=True)

    id: str = ""
    project: str
    bucket_name: str = Field(
        default="", description="The name of the default bucket."
    )
    location: str = DEFAULT_LOCATION

    @property
    def exists(self) -> bool:
        return bool(self.id)

    def outputs(self) -> dict[str, str]:
        return self.model_dump(exclude={"id"})


class ProbeResult(BaseModel):
    exists: bool
    remote_name: str = ""


class BucketRef(BaseModel):
    name: str


class DefaultBucketResponse(BaseModel):
    """
    Body of GET .../defaultBucket, e.g.
    {"name": "projects/p/defaultBucket", "location": "US",
     "bucket": {"name": "projects/p/buckets/p.firebasestorage.app"},
     "storageClass": "STANDARD"}
    Only `name` is consumed.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    name: str
    location: str | None = None
    bucket: BucketRef | None = None
    storage_class: str | None = Field(default=None, alias="storageClass")
