import logging
from typing import List, Optional, Dict, Any

from sqlalchemy import select, update
from sqlalchemy.dialects import postgresql, sqlite

from core.interfaces import MatchRecordRepository
from core.matcher.models import MatchRecord, MatchFeedback
from database.models import JobMatch
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)

# Columns overwritten when a (user_id, job_id) record already exists
SCORE_FIELDS = ('match_score', 'skill_match', 'location_match', 'role_match')

_NATIVE_UPSERT = {
    'postgresql': postgresql.insert,
    'sqlite': sqlite.insert,
}


def to_record(match: JobMatch) -> MatchRecord:
    return MatchRecord(
        user_id=match.user_id,
        job_id=match.job_id,
        match_score=float(match.match_score or 0),
        skill_match=float(match.skill_match or 0),
        location_match=float(match.location_match or 0),
        role_match=float(match.role_match or 0),
        user_feedback=MatchFeedback(match.user_feedback) if match.user_feedback else None,
        created_at=match.created_at,
    )


class MatchRepository(BaseRepository, MatchRecordRepository):
    def get_existing_match(self, user_id: int, job_id: int) -> Optional[JobMatch]:
        stmt = select(JobMatch).where(
            JobMatch.user_id == user_id,
            JobMatch.job_id == job_id
        ).execution_options(populate_existing=True)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_match(self, user_id: int, job_id: int) -> Optional[MatchRecord]:
        match = self.get_existing_match(user_id, job_id)
        if match is None:
            return None
        return to_record(match)

    def upsert_match(self, record: MatchRecord) -> MatchRecord:
        values = {
            'user_id': record.user_id,
            'job_id': record.job_id,
            'match_score': float(record.match_score),
            'skill_match': float(record.skill_match),
            'location_match': float(record.location_match),
            'role_match': float(record.role_match),
        }
        dialect = self.dialect

        with self.storage_errors(f"upsert match for user {record.user_id}, job {record.job_id}"):
            # SAVEPOINT, so a failed write leaves the outer transaction usable
            with self.db.begin_nested():
                if dialect in _NATIVE_UPSERT:
                    self._native_upsert(dialect, values)
                else:
                    self._read_then_write(values)

        return self.get_match(record.user_id, record.job_id)

    def _native_upsert(self, dialect: str, values: Dict[str, Any]) -> None:
        stmt = _NATIVE_UPSERT[dialect](JobMatch).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=['user_id', 'job_id'],
            set_={field: stmt.excluded[field] for field in SCORE_FIELDS}
        )
        self.db.execute(stmt)

    def _read_then_write(self, values: Dict[str, Any]) -> None:
        existing = self.get_existing_match(values['user_id'], values['job_id'])
        if existing:
            for field in SCORE_FIELDS:
                setattr(existing, field, values[field])
        else:
            self.db.add(JobMatch(**values))
        self.db.flush()

    def update_feedback(self, user_id: int, job_id: int, feedback: MatchFeedback) -> bool:
        stmt = update(JobMatch).where(
            JobMatch.user_id == user_id,
            JobMatch.job_id == job_id
        ).values(user_feedback=MatchFeedback(feedback).value)

        with self.storage_errors(f"record feedback for user {user_id}, job {job_id}"):
            result = self.db.execute(stmt)

        return result.rowcount > 0

    def get_matches_for_user(self, user_id: int) -> List[MatchRecord]:
        stmt = select(JobMatch).where(
            JobMatch.user_id == user_id
        ).order_by(
            JobMatch.match_score.desc(),
            JobMatch.job_id
        ).execution_options(populate_existing=True)
        return [to_record(m) for m in self.db.execute(stmt).scalars().all()]
