"""
Daily-Log Summarizer
Turns the day's activity records into a short caring health summary
"""

from datetime import datetime
from typing import Iterable, List

from parentcare.advisory.base import AdvisoryUseCase
from parentcare.advisory.normalizer import normalize_text
from parentcare.advisory.prompts import (
    DAILY_SUMMARY_PROMPT,
    DAILY_SUMMARY_SYSTEM_INSTRUCTION,
    SUMMARY_EMPTY_MESSAGE,
    SUMMARY_ERROR_MESSAGE,
    SUMMARY_NO_LOGS_MESSAGE,
)
from parentcare.gemini.config import AdvisoryTask
from parentcare.models.activity import ActivityLogEntry
from parentcare.utils.logger import get_logger
from parentcare.utils.logging_config import log_error_with_context

logger = get_logger(__name__)


def _local_time(timestamp: datetime) -> str:
    # Naive timestamps are taken as local time
    return timestamp.astimezone().strftime("%H:%M:%S")


class DailyLogSummarizer(AdvisoryUseCase):
    """Summarizes diet, hydration and elimination from an activity log"""

    task = AdvisoryTask.DAILY_SUMMARY

    @staticmethod
    def format_entry(entry: ActivityLogEntry) -> str:
        """Render one entry as ``- [time] CATEGORY: detail (note)``"""
        line = f"- [{_local_time(entry.timestamp)}] {entry.category.value}: {entry.detail}"
        if entry.note:
            line += f" ({entry.note})"
        return line

    def build_prompt(self, entries: List[ActivityLogEntry]) -> str:
        """One line per entry, in the order the caller supplied them."""
        log_text = "\n".join(self.format_entry(entry) for entry in entries)
        return DAILY_SUMMARY_PROMPT.format(log_text=log_text)

    async def summarize(self, entries: Iterable[ActivityLogEntry]) -> str:
        """
        Summarize the given entries.

        Never raises: an empty log short-circuits without a provider call and
        provider failures become a fixed retry message.
        """
        entries = list(entries)
        if not entries:
            return SUMMARY_NO_LOGS_MESSAGE

        prompt = self.build_prompt(entries)
        logger.debug(f"Summarizing {len(entries)} activity log entries")

        try:
            task_config = self.task_config()
            response = await self.provider.generate_text(
                prompt,
                system_instruction=DAILY_SUMMARY_SYSTEM_INSTRUCTION,
                model=task_config.model,
                temperature=task_config.temperature,
            )
            return normalize_text(response, SUMMARY_EMPTY_MESSAGE)
        except Exception as error:
            log_error_with_context(
                logger, error, {"use_case": "daily_summary", "entry_count": len(entries)}
            )
            return SUMMARY_ERROR_MESSAGE
