"""In-memory job store"""
from typing import Dict, List, Optional
from haulhub.core.enums import JobStatus
from haulhub.models.job import Job


class JobStore:

    def __init__(self):
        self._jobs: Dict[str, Job] = {}

    def add(self, job: Job) -> Job:
        self._jobs[job.id] = job
        return job

    def get(self, job_id: str) -> Optional[Job]:
        return self._jobs.get(job_id)

    def list(self, status: Optional[JobStatus] = None, limit: int = 20, offset: int = 0) -> List[Job]:
        jobs = [j for j in self._jobs.values() if status is None or j.status == status]
        return jobs[offset:offset + limit]

    def clear(self) -> None:
        self._jobs.clear()

    def __len__(self) -> int:
        return len(self._jobs)


job_store = JobStore()


def get_job_store() -> JobStore:
    return job_store
