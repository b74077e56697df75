"""
Pulumi dynamic provider for a Firebase project's default Storage bucket.

    from firebucket.provider import DefaultBucket

    bucket = DefaultBucket("default-bucket", project="demo-proj")
    pulumi.export("bucket_name", bucket.bucket_name)

project and location force replacement; there is no in-place update.
"""

from typing import Any

import pulumi
from pulumi.dynamic import (
    CheckFailure,
    CheckResult,
    CreateResult,
    DiffResult,
    ReadResult,
    Resource,
    ResourceProvider,
)

from . import lifecycle
from .clients import FirebaseClient, get_client
from .core import DEFAULT_LOCATION
from .logger import logger
from .schemas.bucket import DefaultBucketArgs, DefaultBucketState
from .schemas.config import ProviderConfig

# Inputs that force a new resource when changed
REPLACE_ON_CHANGE = ["project", "location"]
INPUT_DEFAULTS = {"location": DEFAULT_LOCATION}


class DefaultBucketProvider(ResourceProvider):
    """
    Only the credential string is kept on the instance; the provider is
    serialized into the Pulumi state and must stay picklable.
    """

    def __init__(self, credentials: str | None = None) -> None:
        self.credentials = credentials

    def _client(self) -> FirebaseClient:
        creds = self.credentials
        if creds is None:
            creds = ProviderConfig.load().credentials
        return get_client(creds)

    def check(self, _olds: dict[str, Any], news: dict[str, Any]) -> CheckResult:
        failures = []
        project = news.get("project")
        if not isinstance(project, str) or not project:
            failures.append(CheckFailure("project", "project is required"))

        location = news.get("location")
        if location is None:
            location = DEFAULT_LOCATION
        elif not isinstance(location, str) or not location:
            failures.append(CheckFailure("location", "location must be a non-empty string"))

        if news.get("bucket_name") is not None:
            failures.append(
                CheckFailure("bucket_name", "bucket_name is computed and cannot be set")
            )

        inputs = {**news, "location": location}
        return CheckResult(inputs, failures)

    def diff(
        self, _id: str, olds: dict[str, Any], news: dict[str, Any]
    ) -> DiffResult:
        replaces = [
            key
            for key in REPLACE_ON_CHANGE
            if olds.get(key, INPUT_DEFAULTS.get(key))
            != news.get(key, INPUT_DEFAULTS.get(key))
        ]
        return DiffResult(
            changes=bool(replaces),
            replaces=replaces,
            stables=[k for k in REPLACE_ON_CHANGE if k not in replaces],
            delete_before_replace=True,
        )

    def create(self, props: dict[str, Any]) -> CreateResult:
        args = DefaultBucketArgs(
            project=props["project"],
            location=props.get("location") or DEFAULT_LOCATION,
        )
        state = lifecycle.create(self._client(), args)
        return CreateResult(state.id, state.outputs())

    def read(self, id_: str, props: dict[str, Any]) -> ReadResult:
        state = _state_from_props(id_, props)
        state = lifecycle.read(self._client(), state)
        if not state.exists:
            # An empty id tells the engine the resource has been deleted
            return ReadResult("", {})
        return ReadResult(state.id, state.outputs())

    def delete(self, id_: str, props: dict[str, Any]) -> None:
        lifecycle.delete(_state_from_props(id_, props))


def _state_from_props(id_: str, props: dict[str, Any]) -> DefaultBucketState:
    project = props.get("project")
    if not project:
        # e.g. `pulumi import` with only the id: projects/{project}/defaultBucket
        project = id_.split("/")[1] if id_.startswith("projects/") else id_
    return DefaultBucketState(
        id=id_,
        project=project,
        bucket_name=props.get("bucket_name") or "",
        location=props.get("location") or DEFAULT_LOCATION,
    )


def resolve_credentials(credentials: str | None) -> str | None:
    """Explicit key material (JSON or a key file path), else provider config."""
    if credentials is None:
        return ProviderConfig.load().credentials
    return ProviderConfig(credentials=credentials).credentials


class DefaultBucket(Resource):
    project: pulumi.Output[str]
    bucket_name: pulumi.Output[str]
    location: pulumi.Output[str]

    def __init__(
        self,
        resource_name: str,
        project: pulumi.Input[str],
        location: pulumi.Input[str] = DEFAULT_LOCATION,
        credentials: str | None = None,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        credentials = resolve_credentials(credentials)
        if credentials is None:
            logger.debug(f"{resource_name}: provider will use ADC")

        super().__init__(
            DefaultBucketProvider(credentials),
            resource_name,
            {"project": project, "location": location, "bucket_name": None},
            opts,
        )
