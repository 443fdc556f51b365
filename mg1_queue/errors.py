"""Error types for the simulator."""


class ContractViolation(AssertionError):
    """
    Raised when a caller breaks a precondition of the queue state machine.

    This signals a bug in the event-selection logic of the driver, not a
    runtime fault, and is never caught inside the package.
    """
