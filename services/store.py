from datetime import date
from typing import AsyncIterator, List, Optional, Protocol

from models.daily_summary import DailySummary
from models.entry import EntryKind, LoggedEntry
from models.profile import UserProfile
from models.user import UserInDB


class EntryStore(Protocol):
    """
    The backing store for users, their profiles and their daily logs.
    Implementations return already-validated models.
    """

    def get_all_users(self) -> AsyncIterator[UserInDB]: ...

    async def fetch_entries_for_date(
        self, uid: str, day: date, kind: EntryKind
    ) -> List[LoggedEntry]: ...

    async def insert_entry(self, uid: str, entry: LoggedEntry) -> LoggedEntry: ...

    async def delete_entry(self, uid: str, entry_id: str, kind: EntryKind): ...

    async def fetch_profile(self, uid: str) -> Optional[UserProfile]: ...

    async def upsert_profile(self, uid: str, profile: UserProfile): ...

    async def save_daily_summary(self, summary: DailySummary): ...
