"""Test configuration and fixtures for s3-url-handler."""

import pytest

from s3_url_handler.clients import Credentials, ResolvedClient

AWS_ENV_VARS = [
    "AWS_ACCESS_KEY_ID",
    "AWS_SECRET_ACCESS_KEY",
    "AWS_SESSION_TOKEN",
    "AWS_SECURITY_TOKEN",
    "AWS_PROFILE",
    "AWS_DEFAULT_PROFILE",
    "AWS_REGION",
    "AWS_DEFAULT_REGION",
    "AWS_CONTAINER_CREDENTIALS_RELATIVE_URI",
    "AWS_CONTAINER_CREDENTIALS_FULL_URI",
    "AWS_WEB_IDENTITY_TOKEN_FILE",
    "AWS_ROLE_ARN",
    "BOTO_CONFIG",
]


@pytest.fixture
def temp_dir(tmp_path):
    """Create a temporary directory for testing."""
    return tmp_path


@pytest.fixture
def aws_env(temp_dir, monkeypatch):
    """Isolate the AWS SDK from the machine running the tests.

    HOME and the working directory point into the temp dir, shared AWS files
    live under ``<temp>/aws`` and the instance metadata service is disabled.
    """
    for name in AWS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)

    home = temp_dir / "home"
    work = temp_dir / "work"
    aws_dir = temp_dir / "aws"
    for directory in (home, work, aws_dir):
        directory.mkdir()

    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(aws_dir / "credentials"))
    monkeypatch.setenv("AWS_CONFIG_FILE", str(aws_dir / "config"))
    monkeypatch.setenv("AWS_EC2_METADATA_DISABLED", "true")
    monkeypatch.chdir(work)

    return {"home": home, "work": work, "aws": aws_dir}


@pytest.fixture
def write_credentials_file():
    """Write a ``.s3credentials`` file into a directory."""

    def _write(directory, content, filename=".s3credentials"):
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / filename
        path.write_text(content, encoding="utf-8")
        return path

    return _write


class StubSource:
    """Credential source returning a fixed result and counting calls."""

    def __init__(self, name, client=None):
        self.name = name
        self.client = client
        self.calls = 0

    def describe(self):
        return self.name

    def try_resolve(self):
        self.calls += 1
        return self.client


def make_client(access_key_id="AKIATESTKEY00001", region="eu-west-1", source="stub"):
    """ResolvedClient with dummy credentials."""
    return ResolvedClient(
        Credentials(access_key_id, "test-secret"), region=region, source=source
    )
