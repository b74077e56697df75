import pytest

from firebucket.clients import FirebaseClient
from firebucket.provider import DefaultBucketProvider, resolve_credentials

FOUND = b'{"name": "projects/demo-proj/defaultBucket"}'
KEY = '{"type": "service_account"}'


@pytest.fixture
def client(mocker):
    client = mocker.Mock(spec=FirebaseClient)
    mocker.patch("firebucket.provider.get_client", return_value=client)
    return client


def respond(mocker, client, status, content=b""):
    client.request.return_value = mocker.Mock(status_code=status, content=content)


def test_create_adopts_existing(mocker, client):
    respond(mocker, client, 200, FOUND)

    result = DefaultBucketProvider(KEY).create(
        {"project": "demo-proj", "location": "us", "__provider": "..."}
    )

    assert result.id == "projects/demo-proj/defaultBucket"
    assert result.outs == {
        "project": "demo-proj",
        "bucket_name": "projects/demo-proj/defaultBucket",
        "location": "us",
    }


def test_create_when_missing(mocker, client):
    respond(mocker, client, 404)

    result = DefaultBucketProvider(KEY).create({"project": "demo-proj"})

    assert result.id == "projects/demo-proj/defaultBucket"
    assert result.outs["bucket_name"] == ""
    assert result.outs["location"] == "us"


def test_read_gone_returns_empty_id(mocker, client):
    respond(mocker, client, 404)

    result = DefaultBucketProvider(KEY).read(
        "projects/demo-proj/defaultBucket", {"project": "demo-proj", "location": "us"}
    )

    assert not result.id


def test_read_refreshes(mocker, client):
    respond(mocker, client, 200, FOUND)

    result = DefaultBucketProvider(KEY).read(
        "projects/demo-proj/defaultBucket",
        {"project": "demo-proj", "location": "eu", "bucket_name": ""},
    )

    assert result.id == "projects/demo-proj/defaultBucket"
    assert result.outs["bucket_name"] == "projects/demo-proj/defaultBucket"
    assert result.outs["location"] == "eu"


def test_read_import_by_id_only(mocker, client):
    respond(mocker, client, 200, FOUND)

    result = DefaultBucketProvider(KEY).read("projects/demo-proj/defaultBucket", {})

    assert result.outs["project"] == "demo-proj"
    assert "/projects/demo-proj/" in client.request.call_args.args[1]


def test_delete_makes_no_remote_call(client):
    DefaultBucketProvider(KEY).delete(
        "projects/demo-proj/defaultBucket", {"project": "demo-proj"}
    )

    client.request.assert_not_called()


@pytest.mark.parametrize(
    "olds,news,replaces",
    [
        ({"project": "a", "location": "us"}, {"project": "a", "location": "us"}, []),
        ({"project": "a", "location": "us"}, {"project": "b", "location": "us"}, ["project"]),
        ({"project": "a", "location": "us"}, {"project": "a", "location": "eu"}, ["location"]),
        ({"project": "a", "location": "us"}, {"project": "a"}, []),
    ],
)
def test_diff_forces_replacement(olds, news, replaces):
    olds = {**olds, "bucket_name": "projects/a/defaultBucket"}

    result = DefaultBucketProvider(KEY).diff("projects/a/defaultBucket", olds, news)

    assert result.replaces == replaces
    assert result.changes is bool(replaces)


def test_check_defaults_location():
    result = DefaultBucketProvider(KEY).check({}, {"project": "demo-proj"})

    assert result.failures == []
    assert result.inputs["location"] == "us"


def test_check_rejects_bad_inputs():
    result = DefaultBucketProvider(KEY).check(
        {}, {"project": "", "location": "", "bucket_name": "mine"}
    )

    assert sorted(f.property for f in result.failures) == [
        "bucket_name",
        "location",
        "project",
    ]


def test_client_uses_ambient_config_without_credentials(mocker, monkeypatch):
    monkeypatch.delenv("FIREBASE_CREDENTIALS", raising=False)
    mock_get = mocker.patch("firebucket.provider.get_client")
    mocker.patch(
        "firebucket.schemas.config._pulumi_config_credentials", return_value=None
    )

    DefaultBucketProvider()._client()

    mock_get.assert_called_once_with(None)


def test_adopted_bucket_keeps_declared_location_stable(mocker, client):
    respond(mocker, client, 200, FOUND)
    provider = DefaultBucketProvider(KEY)
    news = {"project": "demo-proj", "location": "eu"}

    created = provider.create(news)
    result = provider.diff(created.id, created.outs, news)

    assert created.outs["location"] == "eu"
    assert result.replaces == []
    assert result.changes is False


def test_resolve_credentials_explicit_json():
    assert resolve_credentials(KEY) == KEY


def test_resolve_credentials_from_env(mocker, monkeypatch):
    monkeypatch.setenv("FIREBASE_CREDENTIALS", KEY)
    mocker.patch(
        "firebucket.schemas.config._pulumi_config_credentials", return_value=None
    )

    assert resolve_credentials(None) == KEY
