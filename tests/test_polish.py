"""Tests for job description polishing."""

from unittest.mock import MagicMock

from careerhub.polish import build_polish_prompt, polish_job_description


class TestBuildPrompt:
    def test_includes_title_and_description(self):
        prompt = build_polish_prompt("Data Analyst", "Crunch numbers.", language="en")
        assert "Job Title: Data Analyst" in prompt
        assert "Current Description: Crunch numbers." in prompt
        assert "in English" in prompt

    def test_default_language_is_thai(self):
        assert "in Thai" in build_polish_prompt("Data Analyst", "Crunch numbers.")

    def test_unknown_language_code_passed_through(self):
        assert "in ja" in build_polish_prompt("Data Analyst", "Crunch numbers.", language="ja")


class TestPolishJobDescription:
    def test_returns_polished_text(self):
        client = MagicMock()
        client.invoke.return_value = "  A much better description.\n"
        result = polish_job_description("Data Analyst", "Crunch numbers.", llm_client=client)
        assert result == "A much better description."
        client.invoke.assert_called_once()
        assert "Data Analyst" in client.invoke.call_args.args[0]

    def test_no_client_returns_original(self):
        assert polish_job_description("Data Analyst", "Crunch numbers.") == "Crunch numbers."

    def test_failure_returns_original(self):
        client = MagicMock()
        client.invoke.side_effect = RuntimeError("quota exceeded")
        result = polish_job_description("Data Analyst", "Crunch numbers.", llm_client=client)
        assert result == "Crunch numbers."

    def test_empty_response_returns_original(self):
        client = MagicMock()
        client.invoke.return_value = "   "
        assert polish_job_description("Data Analyst", "Crunch numbers.", llm_client=client) == "Crunch numbers."

    def test_missing_title_skips_call(self):
        client = MagicMock()
        assert polish_job_description("", "Crunch numbers.", llm_client=client) == "Crunch numbers."
        client.invoke.assert_not_called()

    def test_missing_description_skips_call(self):
        client = MagicMock()
        assert polish_job_description("Data Analyst", "", llm_client=client) == ""
        client.invoke.assert_not_called()

    def test_failure_leaves_store_usable(self, store):
        client = MagicMock()
        client.invoke.side_effect = TimeoutError("slow")
        job = store.get_by_id("1")
        polished = polish_job_description(job.title, job.description, llm_client=client)
        updated = store.update("1", {"description": polished})
        assert updated.description == job.description
