import json
import logging
import math
from pathlib import Path
from typing import List, Union

from pydantic import TypeAdapter, ValidationError

from app.core.config import settings
from app.core.exceptions import DatasetError, JobNotFoundError
from app.schemas.job import Job, JobListResponse, Pagination

logger = logging.getLogger(__name__)

_job_list_adapter = TypeAdapter(List[Job])


def paginate(jobs: List[Job], page: int, limit: int) -> JobListResponse:
    """
    Slice an already-filtered list to one page.
    An empty list gives total_pages == 0; pages past the end give no jobs.
    """
    if page < 1 or limit < 1:
        raise ValueError("page and limit must be positive")

    total = len(jobs)
    total_pages = math.ceil(total / limit)
    start = (page - 1) * limit

    return JobListResponse(
        jobs=jobs[start:start + limit],
        pagination=Pagination(
            current_page=page,
            total_pages=total_pages,
            total_jobs=total,
            limit=limit,
            has_next_page=page < total_pages,
            has_prev_page=page > 1,
        ),
    )


def matches(job: Job, search: str) -> bool:
    needle = search.lower()
    return needle in job.title.lower() or needle in job.company.lower()


class JsonJobStore:
    """
    Read-only job collection backed by a JSON file.
    The file is re-read on every call; nothing is cached between requests.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load(self) -> List[Job]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as e:
            logger.error(f"Cannot read job data at {self.path}: {e}")
            raise DatasetError("Job data is unavailable", details={"path": str(self.path)}) from e

        try:
            jobs = _job_list_adapter.validate_python(json.loads(raw))
        except (json.JSONDecodeError, ValidationError) as e:
            logger.error(f"Invalid job data in {self.path}: {e}")
            raise DatasetError("Job data is malformed", details={"path": str(self.path)}) from e

        seen = set()
        for job in jobs:
            if job.id in seen:
                raise DatasetError("Duplicate job id in dataset", details={"job_id": job.id})
            seen.add(job.id)
        return jobs

    def list_jobs(self, page: int = 1, limit: int = 10, search: str = "") -> JobListResponse:
        jobs = self.load()
        if search:
            jobs = [job for job in jobs if matches(job, search)]
        return paginate(jobs, page, limit)

    def get_job(self, job_id: int) -> Job:
        for job in self.load():
            if job.id == job_id:
                return job
        raise JobNotFoundError(job_id)


def get_job_store() -> JsonJobStore:
    """FastAPI dependency; tests override it to point at a fixture file."""
    return JsonJobStore(settings.jobs_data_path)
