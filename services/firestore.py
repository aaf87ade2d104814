# services/firestore.py
import logging
import os
from datetime import date, datetime, timezone
from typing import AsyncGenerator, List, Optional

import firebase_admin
from firebase_admin import credentials, firestore_async
from google.cloud.firestore_v1.async_client import AsyncClient
from google.cloud.firestore_v1.base_query import FieldFilter

import config
from models.daily_summary import DailySummary
from models.entry import EntryKind, LoggedEntry
from models.profile import UserProfile
from models.user import UserInDB

_LOG_COLLECTIONS = {
    EntryKind.FOOD: config.FOOD_LOGS_COLLECTION,
    EntryKind.EXERCISE: config.EXERCISE_LOGS_COLLECTION,
}


def initialize_firebase_app():
    if not firebase_admin._apps:
        cred_path = config.SERVICE_ACCOUNT_PATH
        if not os.path.exists(cred_path):
            raise FileNotFoundError(f"Service account key not found at {cred_path}.")
        cred = credentials.Certificate(cred_path)
        firebase_admin.initialize_app(cred)
        logging.info("Firebase Admin SDK initialized successfully.")


class FirestoreService:
    def __init__(self):
        initialize_firebase_app()
        self.db: AsyncClient = firestore_async.client()

    def _user_ref(self, uid: str):
        return self.db.collection(config.USERS_COLLECTION).document(uid)

    def _logs_ref(self, uid: str, kind: EntryKind):
        return self._user_ref(uid).collection(_LOG_COLLECTIONS[EntryKind(kind)])

    async def get_all_users(
        self, page_size: int = 1000
    ) -> AsyncGenerator[UserInDB, None]:
        users_ref = self.db.collection(config.USERS_COLLECTION)
        cursor = None
        while True:
            query = users_ref.order_by("__name__").limit(page_size)
            if cursor:
                query = query.start_after(cursor)
            docs = await query.get()
            if not docs:
                break
            for doc in docs:
                yield UserInDB(uid=doc.id, **doc.to_dict())
            cursor = docs[-1]

    async def fetch_entries_for_date(
        self, uid: str, day: date, kind: EntryKind
    ) -> List[LoggedEntry]:
        start_utc = datetime.combine(day, datetime.min.time(), tzinfo=timezone.utc)
        end_utc = datetime.combine(day, datetime.max.time(), tzinfo=timezone.utc)
        query = (
            self._logs_ref(uid, kind)
            .where(filter=FieldFilter("timestamp", ">=", start_utc))
            .where(filter=FieldFilter("timestamp", "<=", end_utc))
            .order_by("timestamp")
        )
        docs = await query.get()
        return [
            LoggedEntry.model_validate({**doc.to_dict(), "id": doc.id}) for doc in docs
        ]

    async def insert_entry(self, uid: str, entry: LoggedEntry) -> LoggedEntry:
        doc_ref = self._logs_ref(uid, entry.kind).document()
        data = entry.model_dump(by_alias=True, exclude={"id"})
        await doc_ref.set(data)
        logging.info(f"Logged {entry.kind.value} entry {doc_ref.id} for user {uid}.")
        return entry.model_copy(update={"id": doc_ref.id})

    async def delete_entry(self, uid: str, entry_id: str, kind: EntryKind):
        await self._logs_ref(uid, kind).document(entry_id).delete()
        logging.info(f"Deleted {EntryKind(kind).value} entry {entry_id} for user {uid}.")

    async def fetch_profile(self, uid: str) -> Optional[UserProfile]:
        doc = await self._user_ref(uid).get()
        if not doc.exists:
            return None
        profile_data = (doc.to_dict() or {}).get("profile")
        if profile_data is None:
            return None
        return UserProfile.model_validate(profile_data)

    async def upsert_profile(self, uid: str, profile: UserProfile):
        await self._user_ref(uid).set(
            {"profile": profile.model_dump(by_alias=True, mode="json")}, merge=True
        )

    async def save_daily_summary(self, summary: DailySummary):
        """
        Writes the summary under its ISO date, overwriting any earlier run for
        the same day.
        """
        summary_ref = self._user_ref(summary.uid).collection(
            config.DAILY_SUMMARIES_COLLECTION
        )
        await summary_ref.document(summary.date.isoformat()).set(
            summary.model_dump(by_alias=True, mode="json")
        )
        logging.info(
            f"Saved daily summary for user {summary.uid} on {summary.date.isoformat()}."
        )
