# main.py
import logging
import asyncio
from datetime import date
from typing import Optional

import config
from models.entry import EntryKind
from models.user import UserInDB
from services.daily_summary import build_daily_summary
from services.firestore import FirestoreService
from services.store import EntryStore
from utils.exceptions import InvalidMetrics

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
)


async def process_user(store: EntryStore, user: UserInDB, day: date) -> bool:
    logging.info(f"--- Processing user: {user.uid} ({user.email}) ---")

    if user.profile is None or not user.profile.is_complete():
        logging.warning(f"User {user.uid} is missing essential profile data. Skipping.")
        return False

    food_entries = await store.fetch_entries_for_date(user.uid, day, EntryKind.FOOD)
    exercise_entries = await store.fetch_entries_for_date(
        user.uid, day, EntryKind.EXERCISE
    )
    logging.info(
        f"Found {len(food_entries)} food and {len(exercise_entries)} exercise "
        f"entries for {day.isoformat()}."
    )

    try:
        summary = build_daily_summary(
            user.uid, day, user.profile, food_entries, exercise_entries
        )
    except InvalidMetrics as e:
        logging.warning(f"User {user.uid} has unusable profile data ({e}). Skipping.")
        return False
    await store.save_daily_summary(summary)
    return True


async def run_daily_job(
    store: Optional[EntryStore] = None, day: Optional[date] = None
) -> int:
    logging.info("Starting daily summary job.")
    for message in config.CONFIG_ERRORS:
        logging.warning(f"Configuration: {message}")
    if store is None:
        store = FirestoreService()
    day = day or date.today()
    user_count = 0
    summarised = 0
    async for user in store.get_all_users():
        user_count += 1
        try:
            if await process_user(store, user, day):
                summarised += 1
        except Exception as e:
            logging.error(
                f"An unexpected error occurred while processing user {user.uid}: {e}",
                exc_info=True,
            )
    logging.info(f"Processed a total of {user_count} user(s), {summarised} summarised.")
    logging.info("Daily summary job finished.")
    return summarised


if __name__ == "__main__":
    asyncio.run(run_daily_job())
