from fastapi import APIRouter, Depends, Query

from app.core.config import settings
from app.routers.auth_deps import require_token
from app.schemas.job import Job, JobListResponse
from app.services.job_store import JsonJobStore, get_job_store

router = APIRouter(
    prefix="/jobs",
    tags=["Jobs"],
    dependencies=[Depends(require_token)]
)

@router.get("", response_model=JobListResponse)
def list_jobs(
    page: int = Query(1, ge=1),
    limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    search: str = Query("", description="Case-insensitive match on title or company"),
    store: JsonJobStore = Depends(get_job_store)
):
    """
    List one page of jobs, optionally filtered by search text.
    """
    return store.list_jobs(page=page, limit=limit, search=search.strip())

@router.get("/{job_id}", response_model=Job)
def get_job(
    job_id: int,
    store: JsonJobStore = Depends(get_job_store)
):
    """
    Get job details.
    """
    return store.get_job(job_id)
