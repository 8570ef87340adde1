"""Link attempt transition errors.

Error constants returned when a LinkAttempt transition is not allowed from
its current state, or when a construction invariant is violated.

Architecture:
    - Domain layer errors (no infrastructure dependencies)
    - Used in Result types (railway-oriented programming)
    - Never raised for rejected transitions (return Failure(error) instead)

Usage:
    result = attempt.begin_initiation()
    match result:
        case Success(value=next_attempt):
            ...
        case Failure(error=LinkAttemptError.CANNOT_START):
            ...
"""


class LinkAttemptError:
    """Link attempt error constants.

    These are NOT exceptions - they are error value constants used in
    railway-oriented programming pattern.

    Error Categories:
        - Transition errors: CANNOT_*
        - Selection errors: SELECTION_LOCKED, CLOSE_REQUIRED, UNKNOWN_PROVIDER
        - Staleness: ATTEMPT_SUPERSEDED
        - Invariant errors (construction): *_REQUIRES_*, *_ONLY_WHEN_*
    """

    # Transition errors
    CANNOT_CLEAR = "Selection can only be cleared when a provider is selected"
    CANNOT_START = "Start requires a selected provider"
    CANNOT_COMPLETE_INITIATION = "Initiation can only resolve while INITIATING"
    CANNOT_OPEN_AUTHORIZATION = "Authorization opens only while AWAITING_AUTHORIZATION"
    CANNOT_COMPLETE = "Completion can only be observed while POLLING"
    CANNOT_TIME_OUT = "Timeout can only occur while POLLING"
    CANNOT_CANCEL = "Only an in-flight attempt can be cancelled"
    CANNOT_CLOSE = "Only a terminal attempt can be closed"

    # Selection errors
    SELECTION_LOCKED = "Provider cannot change while an attempt is in flight"
    CLOSE_REQUIRED = "Close the finished attempt before selecting again"
    UNKNOWN_PROVIDER = "Provider is not part of the current catalog"

    # Staleness
    ATTEMPT_SUPERSEDED = "Response belongs to an attempt that is no longer current"

    # Invariant errors
    PROVIDER_REQUIRED = "Status requires a selected provider"
    PROVIDER_NOT_ALLOWED = "Status must not carry a selected provider"
    URL_ONLY_WHEN_AUTHORIZING = (
        "Authorization URL is set only while AWAITING_AUTHORIZATION or POLLING"
    )
    DEADLINE_ONLY_WHEN_POLLING = "Deadline is set only while POLLING"
    ERROR_ONLY_WHEN_FAILED = "Error message is set only when FAILED"
