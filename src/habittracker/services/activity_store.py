"""
Activity store for the HabitTracker application.

The store holds the current ActivityState and applies commands to it. Each
command is applied by a pure reducer that returns a brand-new snapshot;
snapshots handed out earlier are never touched again.

Classes:
    ActivityStore: State holder with dispatch, subscriptions and a command log

Functions:
    activity_reducer: Pure state transition for a single command
    initial_activity_state: Seed state with the default activities
    create_store: Build a store from TrackerSettings
"""

from typing import Any, Callable, Iterable, List, Mapping, Optional, Tuple, Union

from ..config import TrackerSettings
from ..models.activity import Activity, ActivityState, Frequency
from ..models.commands import (
    ActivityCommand,
    AddActivity,
    CompleteActivity,
    DeleteActivity,
    RemoveCompletion,
    parse_command,
)
from ..utils.dates import Clock, SystemClock
from ..utils.event_log import log_event

StateListener = Callable[[ActivityState], None]

# (id, name, description) of the activities every new session starts with
DEFAULT_ACTIVITIES = (
    ("1", "Reading", "Read for at least 30 minutes"),
    ("2", "Exercise", "Physical activity or workout"),
    ("3", "Journaling", "Write in personal journal"),
)


def initial_activity_state(
    clock: Optional[Clock] = None, seed_defaults: bool = True
) -> ActivityState:
    """
    Build the state a new session starts with.

    Args:
        clock: Clock used for the ``created_at`` of the seeded activities
        seed_defaults: Whether to include the default activities

    Returns:
        ActivityState with the seeded activities and no completions
    """
    if not seed_defaults:
        return ActivityState()

    created_at = (clock or SystemClock()).now()
    activities = tuple(
        Activity(
            id=activity_id,
            name=name,
            description=description,
            target_frequency=Frequency.DAILY,
            created_at=created_at,
        )
        for activity_id, name, description in DEFAULT_ACTIVITIES
    )
    return ActivityState(activities=activities)


def activity_reducer(state: ActivityState, command: Any) -> ActivityState:
    """
    Apply one command to a state and return the resulting state.

    The reducer is pure and never raises. Anything it cannot apply, an
    unknown command type, an unknown id, a duplicate id, or a completion for
    an activity that is not in the state, returns ``state`` itself.

    Args:
        state: Current snapshot
        command: One of the four command models (anything else is ignored)

    Returns:
        New snapshot, or the same snapshot when nothing changed
    """
    if isinstance(command, AddActivity):
        if state.has_activity(command.payload.id):
            return state
        return state.model_copy(
            update={"activities": state.activities + (command.payload,)}
        )

    elif isinstance(command, DeleteActivity):
        activity_id = command.payload
        if not state.has_activity(activity_id):
            return state
        return state.model_copy(
            update={
                "activities": tuple(
                    a for a in state.activities if a.id != activity_id
                ),
                "completions": tuple(
                    c for c in state.completions if c.activity_id != activity_id
                ),
            }
        )

    elif isinstance(command, CompleteActivity):
        completion = command.payload
        if state.has_completion(completion.id):
            return state
        if not state.has_activity(completion.activity_id):
            return state
        return state.model_copy(
            update={"completions": state.completions + (completion,)}
        )

    elif isinstance(command, RemoveCompletion):
        if not state.has_completion(command.payload):
            return state
        return state.model_copy(
            update={
                "completions": tuple(
                    c for c in state.completions if c.id != command.payload
                )
            }
        )

    else:
        return state


class ActivityStore:
    """
    In-memory holder of the current ActivityState.

    The store is created once per session and passed explicitly to whatever
    needs it. ``dispatch`` is the only way to change its state.

    Attributes:
        clock: Clock shared with the services built on this store
        log_events: Whether dispatches are logged

    Example:
        >>> store = ActivityStore()
        >>> store.dispatch(DeleteActivity(payload="2"))
        >>> [a.name for a in store.get_state().activities]
        ['Reading', 'Journaling']
    """

    def __init__(
        self,
        initial_state: Optional[ActivityState] = None,
        clock: Optional[Clock] = None,
        log_events: bool = True,
    ):
        """
        Initialize the store.

        Args:
            initial_state: Starting snapshot, defaults to the seeded state
            clock: Clock for seeding and for services, defaults to SystemClock
            log_events: Whether to emit structured event logs
        """
        self.clock = clock or SystemClock()
        self.log_events = log_events
        self._state = (
            initial_state
            if initial_state is not None
            else initial_activity_state(self.clock)
        )
        self._history: List[ActivityCommand] = []
        self._listeners: List[StateListener] = []

    def get_state(self) -> ActivityState:
        return self._state

    @property
    def history(self) -> Tuple[ActivityCommand, ...]:
        """Recognised commands dispatched so far, in order."""
        return tuple(self._history)

    def dispatch(
        self, command: Union[ActivityCommand, Mapping[str, Any], Any]
    ) -> ActivityState:
        """
        Apply a command and store the resulting snapshot.

        Mappings are parsed into commands first. Unknown command types leave
        the state unchanged and are only logged.

        Args:
            command: Command model, or mapping with ``type`` and ``payload``

        Returns:
            The snapshot after the command

        Raises:
            pydantic.ValidationError: If a mapping has a known type but a
                malformed payload (raised before the state is touched)
        """
        if isinstance(command, Mapping):
            parsed = parse_command(command)
            if parsed is None:
                self._log("COMMAND_IGNORED", reason="unknown_type",
                          commandType=str(command.get("type")))
                return self._state
            command = parsed

        if not isinstance(
            command, (AddActivity, DeleteActivity, CompleteActivity, RemoveCompletion)
        ):
            self._log("COMMAND_IGNORED", reason="unknown_type",
                      commandType=type(command).__name__)
            return self._state

        self._history.append(command)
        previous = self._state
        new_state = activity_reducer(previous, command)

        if new_state is previous:
            self._log("COMMAND_NOOP", **command.to_log_dict())
            return previous

        self._state = new_state
        self._log(
            "COMMAND_APPLIED",
            activityCount=len(new_state.activities),
            completionCount=len(new_state.completions),
            **command.to_log_dict(),
        )
        self._notify(new_state)
        return new_state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """
        Register a listener called with the new state after each change.

        Returns:
            Function that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, state: ActivityState) -> None:
        for listener in list(self._listeners):
            listener(state)

    def _log(self, event_type: str, **data: Any) -> None:
        if self.log_events:
            log_event(event_type, **data)

    @classmethod
    def replay(
        cls,
        commands: Iterable[Any],
        initial_state: Optional[ActivityState] = None,
        clock: Optional[Clock] = None,
        log_events: bool = False,
    ) -> "ActivityStore":
        """
        Rebuild a store by dispatching a command log in order.

        Args:
            commands: Commands (or command mappings) to apply
            initial_state: Snapshot to start from, defaults to the seeded state
            clock: Clock for the new store
            log_events: Whether the replayed dispatches are logged

        Returns:
            Store holding the state after the last command
        """
        store = cls(initial_state=initial_state, clock=clock, log_events=log_events)
        for command in commands:
            store.dispatch(command)
        return store


def create_store(
    settings: Optional[TrackerSettings] = None, clock: Optional[Clock] = None
) -> ActivityStore:
    """
    Create a store for a new session.

    Args:
        settings: Session settings, read from the environment when omitted
        clock: Clock for the session, defaults to SystemClock

    Returns:
        Configured ActivityStore
    """
    settings = settings or TrackerSettings.from_env()
    clock = clock or SystemClock()
    state = initial_activity_state(clock, seed_defaults=settings.seed_defaults)
    if settings.log_events:
        log_event(
            "STORE_CREATED",
            activityCount=len(state.activities),
            weekStartsOn=settings.week_starts_on,
        )
    return ActivityStore(initial_state=state, clock=clock, log_events=settings.log_events)
