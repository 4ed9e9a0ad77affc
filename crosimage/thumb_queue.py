"""The thread-safe queue of thumbnail jobs."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


class JobType(Enum):
    GENERATE_THUMB = auto()
    GENERATE_DIR_RECURSIVE = auto()
    SET_THUMB = auto()


class Job(ABC):
    """A unit of thumbnail work."""

    @property
    @abstractmethod
    def job_type(self) -> JobType:
        """The kind of this job."""

    def matches(self, other: "Job") -> bool:
        """Jobs of the same kind match unless a subclass is more specific."""
        return self.job_type is other.job_type


@dataclass
class GenerateThumb(Job):
    """Create the thumbnail of one file or folder."""

    path: str
    update_anyway: bool = False

    @property
    def job_type(self) -> JobType:
        return JobType.GENERATE_THUMB

    def matches(self, other: Job) -> bool:
        return (
            isinstance(other, GenerateThumb)
            and self.path == other.path
            and self.update_anyway == other.update_anyway
        )


@dataclass
class SetThumb(Job):
    """Store a thumbnail chosen by the user."""

    path: str
    image: Any

    @property
    def job_type(self) -> JobType:
        return JobType.SET_THUMB


class JobQueue:
    """FIFO of jobs; newly requested files jump to the front."""

    def __init__(self) -> None:
        self._jobs: deque[Job] = deque()
        self._lock = threading.Lock()

    def take_file(self, path: str, update_anyway: bool = False) -> GenerateThumb:
        """Queue thumbnail generation for path ahead of everything else."""
        job = GenerateThumb(path, update_anyway)
        with self._lock:
            self._jobs.appendleft(job)
        return job

    def make_first(self, path: str) -> bool:
        """Swap the pending plain job for path with the head of the queue.

        Returns whether such a job was found.
        """
        wanted = GenerateThumb(path)
        with self._lock:
            for index, job in enumerate(self._jobs):
                if wanted.matches(job):
                    self._jobs[0], self._jobs[index] = self._jobs[index], self._jobs[0]
                    return True
        return False

    def set_thumb(self, path: str, image: Any) -> SetThumb:
        """Queue storing image as the thumbnail of path."""
        job = SetThumb(path, image)
        self.push_back(job)
        return job

    def push_back(self, job: Job) -> None:
        with self._lock:
            self._jobs.append(job)

    def pop(self) -> Job | None:
        """Take the job at the head, or None when the queue is empty."""
        with self._lock:
            return self._jobs.popleft() if self._jobs else None

    def has_type(self, job_type: JobType) -> bool:
        with self._lock:
            return any(job.job_type is job_type for job in self._jobs)

    def __len__(self) -> int:
        with self._lock:
            return len(self._jobs)