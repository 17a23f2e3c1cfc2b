"""
Example: Using the advisory service against Gemini

Set GEMINI_API_KEY (or GEMINI_API_KEYS=key1|name1,key2|name2) before running.
"""

import asyncio

from parentcare.advisory import SUGGESTED_TOPICS, AdvisoryService
from parentcare.models import ActivityCategory, ActivityLog
from parentcare.utils.errors import ParentCareException
from parentcare.utils.logging_config import setup_logging

logger = setup_logging("parentcare", log_level="INFO", json_logs=False)


async def example_daily_summary(service: AdvisoryService):
    """Example 1: Summarize today's activity log"""
    log = ActivityLog()
    log.add(ActivityCategory.MILK, "200ml", note="起床后")
    log.add(ActivityCategory.FOOD, "西兰花和米饭")
    log.add(ActivityCategory.WATER, "150ml")
    log.add(ActivityCategory.POOP, "黄色软便")

    # The shell keeps the log newest first; summarize in chronological order
    summary = await service.summarize_logs(reversed(log.entries))
    print(f"Summary: {summary}")


async def example_knowledge(service: AdvisoryService):
    """Example 2: Grounded parenting answer with sources"""
    result = await service.ask_knowledge(SUGGESTED_TOPICS[0])
    print(f"Answer: {result.text[:200]}...")
    for source in result.sources:
        print(f"  - {source.title}: {source.uri}")


async def example_illness(service: AdvisoryService):
    """Example 3: Symptom guidance"""
    try:
        await service.check_illness("   ")
    except ParentCareException as e:
        logger.warning(f"Rejected input: {e.message}")

    result = await service.check_illness("发烧超过38.5度")
    print(f"Guidance: {result.text[:200]}...")
    print(f"Sources: {len(result.sources)}")


async def example_emergency(service: AdvisoryService):
    """Example 4: First aid steps with an illustration"""
    guide = await service.emergency_guide_for("choking")
    print(f"Steps: {guide.text[:200]}...")
    if guide.has_image:
        print(f"Illustration: {guide.image_url[:60]}...")
    else:
        print("No illustration available")


async def main():
    """Run all examples"""
    service = AdvisoryService.from_env()

    try:
        logger.info("=== Example 1: Daily Summary ===")
        await example_daily_summary(service)

        logger.info("=== Example 2: Knowledge ===")
        await example_knowledge(service)

        logger.info("=== Example 3: Illness Guidance ===")
        await example_illness(service)

        logger.info("=== Example 4: Emergency Guide ===")
        await example_emergency(service)
    finally:
        service.provider.log_status()


if __name__ == "__main__":
    asyncio.run(main())
