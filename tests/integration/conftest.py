"""Fixtures for Pub/Sub emulator integration tests."""

import subprocess
import time
import uuid

import httpx
import pytest
import pytest_asyncio

from pubsub_rest.adapters.http import HttpClient
from pubsub_rest.config import PubSubSettings

EMULATOR_PORT = 8686  # Non-default port to avoid conflicts
EMULATOR_HOST = f"localhost:{EMULATOR_PORT}"
PROJECT = "test-project"


@pytest.fixture(scope="session")
def emulator_container():
    """Start the Pub/Sub emulator Docker container for the test session."""
    container_name = "pubsub-rest-emulator-test"

    # Clean up any existing container
    subprocess.run(["docker", "rm", "-f", container_name], capture_output=True)

    subprocess.run(
        [
            "docker",
            "run",
            "-d",
            "--name",
            container_name,
            "-p",
            f"{EMULATOR_PORT}:8085",
            "gcr.io/google.com/cloudsdktool/google-cloud-cli:emulators",
            "gcloud",
            "beta",
            "emulators",
            "pubsub",
            "start",
            "--host-port=0.0.0.0:8085",
            f"--project={PROJECT}",
        ],
        check=True,
        capture_output=True,
    )

    # Wait for the emulator to be ready
    time.sleep(10)

    yield

    # Cleanup
    subprocess.run(["docker", "stop", container_name], capture_output=True)
    subprocess.run(["docker", "rm", container_name], capture_output=True)


@pytest.fixture(scope="session")
def emulator_url(emulator_container) -> str:
    return f"http://{EMULATOR_HOST}"


@pytest.fixture
def topic(emulator_url) -> str:
    """Create a unique topic and delete it after the test."""
    name = f"projects/{PROJECT}/topics/test-topic-{uuid.uuid4()}"
    httpx.put(f"{emulator_url}/v1/{name}", json={}).raise_for_status()

    yield name

    httpx.delete(f"{emulator_url}/v1/{name}")


@pytest.fixture
def subscription_name(emulator_url, topic) -> str:
    """Create a unique subscription on the test topic."""
    name = f"projects/{PROJECT}/subscriptions/test-sub-{uuid.uuid4()}"
    httpx.put(f"{emulator_url}/v1/{name}", json={"topic": topic}).raise_for_status()

    yield name

    # Tests may already have destroyed it
    httpx.delete(f"{emulator_url}/v1/{name}")


@pytest_asyncio.fixture
async def client(emulator_container):
    """Provide an HttpClient pointed at the emulator."""
    async with HttpClient(settings=PubSubSettings(emulator_host=EMULATOR_HOST)) as client:
        yield client
