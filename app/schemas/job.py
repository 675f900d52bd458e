from typing import List
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from datetime import date

class CamelModel(BaseModel):
    """Python names internally, camelCase on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

class Job(CamelModel):
    id: int
    title: str
    company: str
    location: str
    salary: str
    job_type: str
    posted_date: date
    description: str
    requirements: List[str] = Field(default_factory=list)

class Pagination(CamelModel):
    current_page: int
    total_pages: int
    total_jobs: int
    limit: int
    has_next_page: bool
    has_prev_page: bool

class JobListResponse(CamelModel):
    jobs: List[Job]
    pagination: Pagination
