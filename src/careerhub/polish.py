"""LLM-based rewriting of job descriptions.

Polishing is best effort: any failure leaves the description as it was.
Nothing here reads or writes the job store.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

LANGUAGE_NAMES = {
    "th": "Thai",
    "en": "English",
}


def build_polish_prompt(title: str, description: str, language: str = "th") -> str:
    """Build the rewriting prompt for a job description."""
    language_name = LANGUAGE_NAMES.get(language, language)
    return (
        "You are an expert HR writing consultant.\n"
        f"Professionalize the following job description for an internal job board in {language_name}.\n"
        "Make it engaging and clear, use professional terminology, and highlight why "
        "an internal candidate should apply.\n"
        f"Job Title: {title}\n"
        f"Current Description: {description}\n\n"
        f"Return ONLY the improved description text in {language_name}."
    )


def polish_job_description(
    title: str,
    description: str,
    llm_client=None,
    language: str = "th",
) -> str:
    """Return an improved description, or ``description`` unchanged.

    The original text comes back when there is no client, when title or
    description is empty, when the model answers with nothing, or when the
    call fails for any reason.
    """
    if llm_client is None or not title or not description:
        return description

    prompt = build_polish_prompt(title, description, language)
    try:
        polished = llm_client.invoke(prompt)
    except Exception:
        logger.warning("Description polishing failed for '%s'", title, exc_info=True)
        return description

    if not isinstance(polished, str) or not polished.strip():
        return description
    return polished.strip()
