class InvalidTransitionError(RuntimeError):
    """Raised when a machine is asked to transition out of the wrong state.

    This always points at a scheduling bug, so it is never caught inside the
    simulation itself.
    """

    def __init__(self, machine_id, state, operation):
        self.machine_id = machine_id
        self.state = state
        self.operation = operation
        super().__init__(f"{operation} is not allowed for machine {machine_id} in state '{state}'")
