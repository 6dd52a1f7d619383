# recruitment/services/lifecycle.py
"""Candidate status / interview lifecycle.

Every mutation that touches more than one record (history + interview, or
interviews + candidate) runs inside a single session transaction. The
candidate row is version-checked on write: if another session changed the
candidate in between, the commit raises ``StaleDataError``, the transaction is
rolled back and the operation is recomputed from a fresh read, up to
``HISTORY_WRITE_ATTEMPTS`` times.
"""
import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm.exc import StaleDataError

from recruitment.clock import utcnow, to_naive_utc
from recruitment.errors import (
    LifecycleError,
    NotFound,
    ObjectStoreFailed,
    PersistenceFailed,
    ValidationFailed,
)
from recruitment.extensions import db
from recruitment.models import Candidate, Interview, Interviewer, Status, StatusEntry, InterviewType
from recruitment.services import interview_registry, ledger
from recruitment.services.storage import StorageObjectNotFound

logger = logging.getLogger(__name__)


def parse_status(value):
    try:
        return Status(value)
    except ValueError:
        allowed = ", ".join(s.value for s in Status)
        raise ValidationFailed(f"Unknown status '{value}'. Choose one of: {allowed}")


def parse_interview_type(value):
    try:
        return InterviewType(value)
    except ValueError:
        allowed = ", ".join(t.value for t in InterviewType)
        raise ValidationFailed(f"Unknown interview type '{value}'. Choose one of: {allowed}")


class LifecycleCoordinator:
    def __init__(
        self,
        object_store=None,
        clock=utcnow,
        max_attempts=3,
        min_notes_length=10,
        transitions=None,
        default_actor="System",
    ):
        self.object_store = object_store
        self.clock = clock
        self.max_attempts = max(1, max_attempts)
        self.min_notes_length = min_notes_length
        self.transitions = transitions
        self.default_actor = default_actor

    # ------------------------------------------------------------------
    # transitions
    # ------------------------------------------------------------------

    def change_status(self, candidate_id, new_status, notes, actor=None):
        """Move a candidate to any status other than Interview.

        Leaving Interview removes the interview the previous entry pointed at.
        Returns the updated candidate.
        """
        status = parse_status(new_status)
        if status == Status.INTERVIEW:
            raise ValidationFailed("Moving a candidate to Interview requires scheduling an interview")
        if not isinstance(notes, str) or len(notes) < self.min_notes_length:
            raise ValidationFailed(f"Notes must be at least {self.min_notes_length} characters long")

        def work():
            candidate = self._load_candidate(candidate_id)
            previous = ledger.latest(candidate.status_history)
            self._check_transition(previous, status)

            ledger.append(candidate, StatusEntry(
                status=status,
                date=self.clock(),
                notes=notes,
                actor=self._actor_label(actor),
            ))
            candidate.last_updated_by = actor

            if previous is not None and previous.status == Status.INTERVIEW and previous.interview_id:
                interview_registry.delete_by_id(previous.interview_id)
                logger.info(f"🗑️ Interview {previous.interview_id} removed, candidate left Interview")
            return candidate

        candidate = self._run_atomic("change status", work)
        logger.info(f"✅ Candidate {candidate_id} moved to {status.value}")
        return candidate

    def schedule_interview(self, candidate_id, interviewer_id, interview_type, date, notes=None, actor=None):
        """Create an interview and move the candidate to Interview.

        Returns ``(candidate, interview)``.
        """
        interview_type = parse_interview_type(interview_type)
        if not interviewer_id:
            raise ValidationFailed("Please select an interviewer")
        if notes is not None and not isinstance(notes, str):
            raise ValidationFailed("Interview notes must be text")
        if not isinstance(date, datetime):
            raise ValidationFailed("Please provide the interview date and time")
        date = to_naive_utc(date)
        if date.date() < self.clock().date():
            raise ValidationFailed("Interviews cannot be scheduled in the past")

        def work():
            candidate = self._load_candidate(candidate_id)
            interviewer = db.session.get(Interviewer, interviewer_id)
            if interviewer is None:
                raise NotFound(f"Interviewer {interviewer_id} not found")

            previous = ledger.latest(candidate.status_history)
            self._check_transition(previous, Status.INTERVIEW)
            replaced_id = ledger.active_interview_id(candidate)

            interview = interview_registry.create(Interview(
                candidate_id=candidate.id,
                candidate_name=candidate.name,
                interviewer_id=interviewer.id,
                interviewer_name=interviewer.name,
                type=interview_type,
                date=date,
                notes=notes,
                actor=actor,
            ))
            if replaced_id:
                # only one active interview per candidate
                interview_registry.delete_by_id(replaced_id)

            ledger.append(candidate, StatusEntry(
                status=Status.INTERVIEW,
                date=self.clock(),
                notes=interview_summary(interview_type, interviewer.name, date, notes),
                interview_id=interview.id,
                actor=self._actor_label(actor),
            ))
            candidate.last_updated_by = actor
            return candidate, interview

        candidate, interview = self._run_atomic("schedule interview", work)
        logger.info(f"✅ Interview {interview.id} scheduled for candidate {candidate_id}")
        return candidate, interview

    def cancel_interview(self, interview_id, actor=None):
        """Delete an interview and put its candidate back into Screening."""

        def work():
            interview = interview_registry.get(interview_id)
            if interview is None:
                raise NotFound(f"Interview {interview_id} not found")
            # history must be appended to the stored candidate, never to a cached copy
            candidate = db.session.get(Candidate, interview.candidate_id)
            if candidate is None:
                raise NotFound("Candidate not found to update the status history")

            interview_date = interview.date
            interview_registry.delete_by_id(interview.id)
            ledger.append(candidate, StatusEntry(
                status=Status.SCREENING,
                date=self.clock(),
                notes=f"Interview of {interview_date:%d/%m/%Y %H:%M} cancelled.",
                actor=self._actor_label(actor),
            ))
            candidate.last_updated_by = actor
            return candidate

        candidate = self._run_atomic("cancel interview", work)
        logger.info(f"✅ Interview {interview_id} cancelled, candidate {candidate.id} back in Screening")
        return candidate

    def delete_candidate(self, candidate_id):
        """Remove a candidate together with its interviews and stored documents.

        Documents are removed from the object store first; any storage error
        other than "not found" aborts before the database is touched.
        """
        candidate = self._load_candidate(candidate_id)
        deleted = set()
        self._delete_documents([d.locator for d in candidate.documents], deleted)

        def work():
            candidate = self._load_candidate(candidate_id)
            # documents attached after the first read
            self._delete_documents([d.locator for d in candidate.documents if d.locator not in deleted], deleted)
            removed = interview_registry.delete_all_for_candidate(candidate.id)
            db.session.delete(candidate)
            return removed

        removed = self._run_atomic("delete candidate", work)
        logger.info(f"✅ Candidate {candidate_id} deleted ({removed} interviews, {len(deleted)} documents)")

    # ------------------------------------------------------------------
    # helpers
    # ------------------------------------------------------------------

    def allowed_targets(self, status):
        """Statuses reachable from ``status`` under the configured transition table."""
        if self.transitions is None or status is None:
            return list(Status)
        allowed = self.transitions.get(Status(status).value)
        if allowed is None:
            return list(Status)
        return [Status(s) for s in allowed]

    def _check_transition(self, previous, target):
        if previous is None:
            return
        if target not in self.allowed_targets(previous.status):
            raise ValidationFailed(f"Transition {previous.status.value} → {target.value} is not allowed")

    def _actor_label(self, actor):
        return actor or self.default_actor

    def _load_candidate(self, candidate_id):
        candidate = db.session.get(Candidate, candidate_id)
        if candidate is None:
            raise NotFound(f"Candidate {candidate_id} not found")
        return candidate

    def _delete_documents(self, locators, deleted):
        if not locators:
            return
        if self.object_store is None:
            raise ObjectStoreFailed("No object store configured")

        def delete_one(locator):
            try:
                self.object_store.delete(locator)
            except StorageObjectNotFound:
                logger.warning(f"⚠️ Document {locator} was already gone, ignoring")
            except (OSError, ValueError) as e:
                logger.error(f"❌ Error deleting document {locator}: {e}")
                raise ObjectStoreFailed(f"Could not delete document {locator}") from e
            return locator

        with ThreadPoolExecutor(max_workers=min(8, len(locators))) as pool:
            for locator in pool.map(delete_one, locators):
                deleted.add(locator)

    def _run_atomic(self, action, work):
        for attempt in range(1, self.max_attempts + 1):
            try:
                result = work()
                db.session.commit()
                return result
            except StaleDataError:
                db.session.rollback()
                logger.warning(
                    f"⚠️ {action}: candidate changed concurrently "
                    f"(attempt {attempt}/{self.max_attempts}), reloading"
                )
            except LifecycleError:
                db.session.rollback()
                raise
            except SQLAlchemyError as e:
                db.session.rollback()
                logger.error(f"❌ Could not {action}: {e}")
                raise PersistenceFailed(f"Could not {action}. Please try again.") from e
            except Exception:
                db.session.rollback()
                raise

        raise PersistenceFailed(f"Could not {action}: the candidate was modified by someone else. Please try again.")


def interview_summary(interview_type, interviewer_name, date, notes=None):
    interview_type = InterviewType(interview_type)
    text = (
        f"Interview ({interview_type.value}) scheduled with {interviewer_name or 'N/A'} "
        f"for {date:%d/%m/%Y} at {date:%H:%M}. {notes or ''}"
    )
    return text.strip()


def get_coordinator():
    config = current_app.config
    return LifecycleCoordinator(
        object_store=current_app.extensions.get("object_store"),
        max_attempts=config.get("HISTORY_WRITE_ATTEMPTS", 3),
        min_notes_length=config.get("MIN_STATUS_NOTES_LENGTH", 10),
        transitions=config.get("STATUS_TRANSITIONS"),
        default_actor=config.get("DEFAULT_ACTOR", "System"),
    )
