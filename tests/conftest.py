import pytest
import json
import os
import keyring
from keyring.backend import KeyringBackend
from keyring.errors import PasswordDeleteError

# Set env before importing app components
os.environ["APP_ENV"] = "testing"

from app.main import app
from app.core.config import settings
from app.services.job_store import JsonJobStore, get_job_store
from fastapi.testclient import TestClient

COMPANIES = ["Acme", "Globex", "Initech", "Umbrella", "Hooli"]


def make_job(job_id: int) -> dict:
    company = COMPANIES[(job_id - 1) % len(COMPANIES)]
    title = "Python Developer" if job_id % 4 == 0 else f"Engineer {job_id}"
    return {
        "id": job_id,
        "title": title,
        "company": company,
        "location": "Remote",
        "salary": "$100,000 - $120,000",
        "jobType": "Full-time",
        "postedDate": f"2024-03-{job_id:02d}",
        "description": f"Job number {job_id} at {company}.",
        "requirements": ["Python", "Teamwork"],
    }


@pytest.fixture(scope="function")
def jobs_data():
    """25 jobs with ids 1..25; every 4th one is a Python Developer."""
    return [make_job(i) for i in range(1, 26)]


@pytest.fixture(scope="function")
def jobs_file(tmp_path, jobs_data):
    path = tmp_path / "jobs.json"
    path.write_text(json.dumps(jobs_data), encoding="utf-8")
    return path


@pytest.fixture(scope="function")
def store(jobs_file):
    return JsonJobStore(jobs_file)


@pytest.fixture(scope="function")
def auth_headers():
    return {"Authorization": settings.demo_token}


@pytest.fixture(scope="function")
def client(store):
    """Get a TestClient whose job store reads the fixture dataset."""
    app.dependency_overrides[get_job_store] = lambda: store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


class MemoryKeyring(KeyringBackend):
    """Keyring backend that keeps secrets in a dict for the test run."""
    priority = 1

    def __init__(self):
        super().__init__()
        self.passwords = {}

    def get_password(self, service, username):
        return self.passwords.get((service, username))

    def set_password(self, service, username, password):
        self.passwords[(service, username)] = password

    def delete_password(self, service, username):
        try:
            del self.passwords[(service, username)]
        except KeyError:
            raise PasswordDeleteError("No such password")


@pytest.fixture(scope="function", autouse=True)
def memory_keyring():
    """Never touch the real OS keyring from tests."""
    backend = MemoryKeyring()
    keyring.set_keyring(backend)
    return backend
