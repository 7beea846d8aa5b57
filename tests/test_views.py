"""Tests for list-view filtering and dashboard counters."""

from careerhub.models import JobStatus
from careerhub.views import STATUS_LABELS, filter_jobs, job_stats


class TestFilterJobs:
    def test_no_filters_returns_all_in_order(self, sample_jobs):
        assert [j.id for j in filter_jobs(sample_jobs)] == ["a1", "b2", "c3"]

    def test_search_title_case_insensitive(self, sample_jobs):
        assert [j.id for j in filter_jobs(sample_jobs, search="designer")] == ["b2"]

    def test_search_department(self, sample_jobs):
        assert [j.id for j in filter_jobs(sample_jobs, search="it supp")] == ["c3"]

    def test_search_matches_title_or_department(self, sample_jobs):
        # "platform" is a's department and c's title
        assert [j.id for j in filter_jobs(sample_jobs, search="PLATFORM")] == ["a1", "c3"]

    def test_search_does_not_match_location(self, sample_jobs):
        assert filter_jobs(sample_jobs, search="Remote") == []

    def test_status_tab(self, sample_jobs):
        assert [j.id for j in filter_jobs(sample_jobs, status=JobStatus.CLOSED)] == ["b2"]

    def test_search_and_status_combined(self, sample_jobs):
        assert filter_jobs(sample_jobs, search="platform", status=JobStatus.OPEN)[0].id == "a1"
        assert filter_jobs(sample_jobs, search="designer", status=JobStatus.OPEN) == []


class TestJobStats:
    def test_counts(self, sample_jobs):
        stats = job_stats(sample_jobs)
        assert stats.total == 3
        assert stats.open == 1
        assert stats.closed == 2

    def test_empty(self):
        stats = job_stats([])
        assert (stats.total, stats.open, stats.closed) == (0, 0, 0)


class TestStatusLabels:
    def test_every_status_has_a_label(self):
        assert set(STATUS_LABELS) == set(JobStatus)
