from pydantic import ValidationError

from .clients import FirebaseClient
from .core import API_HOST, API_VERSION
from .exceptions import ProbeError
from .logger import logger
from .schemas.bucket import DefaultBucketResponse, ProbeResult


def default_bucket_url(project: str) -> str:
    return f"https://{API_HOST}/{API_VERSION}/projects/{project}/defaultBucket"


def probe(
    client: FirebaseClient, project: str, timeout: float | None = None
) -> ProbeResult:
    """
    Checks whether the project's default bucket exists.

    404 is a normal "does not exist" answer; any other non-200 status, or a
    200 body without a usable `name`, raises ProbeError. Read-only.
    """
    resp = client.request("GET", default_bucket_url(project), timeout=timeout)
    if resp.status_code == 404:
        logger.debug(f"Default bucket for {project} does not exist")
        return ProbeResult(exists=False)

    if resp.status_code != 200:
        raise ProbeError(
            f"unexpected status when checking default bucket: {resp.status_code}",
            status_code=resp.status_code,
        )

    try:
        body = DefaultBucketResponse.model_validate_json(resp.content)
    except ValidationError as e:
        raise ProbeError(
            f"failed to decode default bucket response: {e}"
        ) from e

    logger.debug(f"Default bucket for {project} exists: {body.name}")
    return ProbeResult(exists=True, remote_name=body.name)
