"""
Activity service for the HabitTracker application.

This service turns user intents (add a habit, tick it off for today, toggle
a day in the week grid) into store commands. It owns the work the store
deliberately does not do: trimming and validating input, generating ids and
timestamps, and looking up existing completions before toggling.

Classes:
    ActivityService: Intent layer on top of an ActivityStore

Functions:
    create_service: Build a store and service from TrackerSettings
"""

from datetime import date, datetime
from typing import Any, Callable, Dict, List, Optional, Sequence, Union

from ..config import TrackerSettings
from ..models.activity import Activity, ActivityCompletion, Frequency
from ..models.commands import (
    AddActivity,
    CompleteActivity,
    DeleteActivity,
    RemoveCompletion,
)
from ..utils.dates import Clock, DateLike, format_date, start_of_day
from ..utils.event_log import log_event
from ..utils.ids import new_id
from .activity_store import ActivityStore, create_store
from .projections import (
    completion_id_on,
    today_completed_count,
    today_completions_for,
)
from .week_service import build_week_grid


class ActivityService:
    """
    Intent layer for activity management.

    Attributes:
        store: Store the commands are dispatched to
        id_factory: Callable producing new unique ids
        week_starts_on: First weekday of the week grid

    Example:
        >>> service = ActivityService(ActivityStore())
        >>> activity = service.add_activity("Meditation", "10 minutes")
        >>> service.complete_activity(activity.id, notes="felt calm")
        >>> service.is_completed_today(activity.id)
        True
    """

    def __init__(
        self,
        store: ActivityStore,
        id_factory: Optional[Callable[[], str]] = None,
        week_starts_on: int = 0,
    ):
        """
        Initialize the activity service.

        Args:
            store: Store owned by the current session
            id_factory: Optional id generator, defaults to UUID4 ids
            week_starts_on: First weekday of the week grid (0=Monday)
        """
        self.store = store
        self.id_factory = id_factory or new_id
        self.week_starts_on = week_starts_on

    @property
    def clock(self):
        return self.store.clock

    def add_activity(
        self,
        name: str,
        description: str = "",
        target_frequency: Union[Frequency, str] = Frequency.DAILY,
    ) -> Activity:
        """
        Create a new activity and add it to the store.

        Args:
            name: Display name, surrounding whitespace is removed
            description: Optional description
            target_frequency: "daily" or "weekly"

        Returns:
            The created Activity

        Raises:
            pydantic.ValidationError: If the name is blank or the frequency unknown
        """
        try:
            activity = Activity(
                id=self.id_factory(),
                name=name,
                description=description,
                target_frequency=target_frequency,
                created_at=self.clock.now(),
            )
        except ValueError as e:
            self._log("ACTIVITY_REJECTED", error=str(e))
            raise

        self.store.dispatch(AddActivity(payload=activity))
        return activity

    def delete_activity(self, activity_id: str) -> bool:
        """
        Delete an activity together with all of its completions.

        Returns:
            True if the activity existed and was removed
        """
        before = self.store.get_state()
        after = self.store.dispatch(DeleteActivity(payload=activity_id))
        return after is not before

    def complete_activity(
        self,
        activity_id: str,
        notes: Optional[str] = None,
        completed_at: Optional[datetime] = None,
    ) -> ActivityCompletion:
        """
        Record a completion of an activity.

        No check is made for an existing completion on the same day; callers
        that want one completion per day should use ``toggle_completion`` or
        ``is_completed_today`` first.

        Args:
            activity_id: Activity that was performed
            notes: Optional notes, blank notes are dropped
            completed_at: When it was performed, defaults to now

        Returns:
            The recorded ActivityCompletion

        Raises:
            KeyError: If the activity is not in the store
        """
        if not self.store.get_state().has_activity(activity_id):
            raise KeyError(f"Activity '{activity_id}' not found")

        now = self.clock.now()
        completion = ActivityCompletion(
            id=self.id_factory(),
            activity_id=activity_id,
            completed_at=completed_at or now,
            notes=notes,
            created_at=now,
        )
        self.store.dispatch(CompleteActivity(payload=completion))
        return completion

    def remove_completion(self, completion_id: str) -> bool:
        """
        Remove a completion.

        Returns:
            True if the completion existed and was removed
        """
        before = self.store.get_state()
        after = self.store.dispatch(RemoveCompletion(payload=completion_id))
        return after is not before

    def toggle_completion(
        self, activity_id: str, day: DateLike, notes: Optional[str] = None
    ) -> Optional[ActivityCompletion]:
        """
        Flip the completion state of an activity on a given day.

        If a completion exists on that day it is removed and None is
        returned; otherwise a completion dated at the start of ``day`` is
        recorded and returned. ``notes`` only apply when a completion is
        recorded.

        Raises:
            KeyError: If the activity is not in the store
        """
        state = self.store.get_state()
        existing_id = completion_id_on(state.completions, activity_id, day)

        if existing_id is not None:
            self.remove_completion(existing_id)
            return None

        completed_at = day if isinstance(day, datetime) else start_of_day(day)
        return self.complete_activity(
            activity_id, notes=notes, completed_at=completed_at
        )

    def is_completed_today(self, activity_id: str) -> bool:
        return bool(
            today_completions_for(
                self.store.get_state().completions, activity_id, self.clock
            )
        )

    def today_notes(self, activity_id: str) -> Optional[str]:
        """Notes of the first completion of the activity today, if any."""
        completions = today_completions_for(
            self.store.get_state().completions, activity_id, self.clock
        )
        if completions:
            return completions[0].notes
        return None

    def get_dashboard_summary(self) -> Dict[str, Any]:
        """
        Summarise today's progress for the dashboard.

        Returns:
            Dictionary containing:
            - date: today's date label, e.g. "Monday, October 20th, 2025"
            - total_activities: number of activities
            - completed_today: number of completions made today
            - activities: per activity ``id``, ``name``, ``description``,
              ``target_frequency``, ``completed_today`` and ``notes``
        """
        state = self.store.get_state()
        today: date = self.clock.today()

        activities: List[Dict[str, Any]] = []
        for activity in state.activities:
            todays = today_completions_for(state.completions, activity.id, self.clock)
            activities.append(
                {
                    "id": activity.id,
                    "name": activity.name,
                    "description": activity.description,
                    "target_frequency": activity.target_frequency.value,
                    "completed_today": bool(todays),
                    "notes": todays[0].notes if todays else None,
                }
            )

        return {
            "date": format_date(today),
            "total_activities": len(state.activities),
            "completed_today": today_completed_count(state.completions, self.clock),
            "activities": activities,
        }

    def get_week_grid(
        self,
        reference: Optional[DateLike] = None,
        selected_ids: Optional[Sequence[str]] = None,
    ) -> Dict[str, Any]:
        """Week grid for the selected activities, see build_week_grid."""
        return build_week_grid(
            self.store.get_state(),
            reference=reference,
            selected_ids=selected_ids,
            clock=self.clock,
            week_starts_on=self.week_starts_on,
        )

    def _log(self, event_type: str, **data: Any) -> None:
        if self.store.log_events:
            log_event(event_type, **data)


def create_service(
    settings: Optional[TrackerSettings] = None, clock: Optional[Clock] = None
) -> ActivityService:
    """
    Create the store and activity service for a new session.

    Args:
        settings: Session settings, read from the environment when omitted
        clock: Clock for the session, defaults to SystemClock

    Returns:
        ActivityService wrapping a freshly created store
    """
    settings = settings or TrackerSettings.from_env()
    store = create_store(settings, clock=clock)
    return ActivityService(store, week_starts_on=settings.week_starts_on)
