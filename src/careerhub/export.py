"""Export the job collection to a dated JSON backup file."""

from datetime import date, datetime, timezone
from pathlib import Path

from careerhub.models import Job, jobs_to_json

EXPORT_PREFIX = "internal_jobs_backup"


def export_filename(day: date | None = None) -> str:
    """Backup file name; defaults to the current UTC date."""
    day = day or datetime.now(timezone.utc).date()
    return f"{EXPORT_PREFIX}_{day.isoformat()}.json"


def export_jobs(jobs: list[Job]) -> str:
    """Pretty-printed JSON array in the same layout as the storage slot."""
    return jobs_to_json(jobs, indent=2)


def write_export(jobs: list[Job], output_dir: str | Path, day: date | None = None) -> Path:
    """Write the backup file into ``output_dir`` and return its path."""
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / export_filename(day)
    path.write_text(export_jobs(jobs), encoding="utf-8")
    return path
