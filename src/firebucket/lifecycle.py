"""
Create/read/delete transitions for a project's default bucket.

The bucket is provisioned by Firebase itself, so create only ever adopts or
records it locally, and delete only forgets it.
"""

from .clients import FirebaseClient
from .logger import logger
from .probe import probe
from .schemas.bucket import DefaultBucketArgs, DefaultBucketState, default_bucket_id


def create(
    client: FirebaseClient, args: DefaultBucketArgs, timeout: float | None = None
) -> DefaultBucketState:
    result = probe(client, args.project, timeout=timeout)
    if result.exists:
        logger.info(f"Adopting existing default bucket for {args.project}")
        # Import-on-create: the remote name wins, the declared location is
        # kept as-is and never checked against the remote
        return DefaultBucketState(
            id=default_bucket_id(args.project),
            project=args.project,
            bucket_name=result.remote_name,
            location=args.location,
        )

    logger.warning(
        f"Default bucket for {args.project} does not exist yet, tracking it locally"
    )
    return DefaultBucketState(
        id=default_bucket_id(args.project),
        project=args.project,
        location=args.location,
    )


def read(
    client: FirebaseClient, state: DefaultBucketState, timeout: float | None = None
) -> DefaultBucketState:
    result = probe(client, state.project, timeout=timeout)
    if not result.exists:
        logger.info(f"Default bucket for {state.project} is gone, clearing id")
        return state.model_copy(update={"id": ""})

    # location is never returned by the probe, keep what we had
    return state.model_copy(
        update={
            "id": default_bucket_id(state.project),
            "bucket_name": result.remote_name,
        }
    )


def delete(state: DefaultBucketState) -> DefaultBucketState:
    # Firebase cannot delete the default bucket without deleting the project
    logger.info(f"Forgetting default bucket for {state.project} (no remote delete)")
    return state.model_copy(update={"id": ""})
