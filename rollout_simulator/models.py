from dataclasses import dataclass, field
from enum import Enum
from .errors import InvalidTransitionError

class MachineState(str, Enum):
    OLD = "old"
    UPDATING = "updating"
    UPDATED = "updated"
    NEW = "new"

# operation -> (required source state, target state)
TRANSITIONS = {
    "start_updating": (MachineState.OLD, MachineState.UPDATING),
    "finish_updating": (MachineState.UPDATING, MachineState.UPDATED),
    "move_to_production": (MachineState.UPDATED, MachineState.NEW),
}


class Machine:
    """A simulated server moving along old -> updating -> updated -> new"""

    def __init__(self, machine_id, update_delay=2):
        self.machine_id = machine_id
        self.update_delay = update_delay  # Ticks of update work left
        self.state = MachineState.OLD

    def __repr__(self):
        return f"Machine({self.machine_id!r}, state={self.state.value!r}, update_delay={self.update_delay})"

    def _require(self, operation, source):
        if self.state != source:
            raise InvalidTransitionError(self.machine_id, self.state.value, operation)

    def _transition(self, operation):
        source, target = TRANSITIONS[operation]
        self._require(operation, source)
        self.state = target

    def start_updating(self):
        self._transition("start_updating")

    def do_update_work(self):
        """Spend one tick of update work; flips to updated once the countdown runs out"""
        self._require("do_update_work", MachineState.UPDATING)
        self.update_delay -= 1
        if self.update_delay <= 0:
            self._transition("finish_updating")

    def move_to_production(self):
        self._transition("move_to_production")

    @property
    def is_old(self):
        return self.state == MachineState.OLD

    @property
    def is_updating(self):
        return self.state == MachineState.UPDATING

    @property
    def is_updated(self):
        return self.state == MachineState.UPDATED

    @property
    def is_new(self):
        return self.state == MachineState.NEW


@dataclass
class SimulationConfig:
    """Configuration for a simulation run"""
    machine_count: int = 10  # How many machines to roll
    update_delay: int = 2  # Ticks each machine spends updating
    concurrency: int = 2  # Max machines updating at once
    max_ticks: int = None  # Give up after this many ticks (None = run until done)

    def validate(self):
        if self.machine_count < 0:
            raise ValueError("machine_count must be >= 0")
        if self.update_delay < 0:
            raise ValueError("update_delay must be >= 0")
        if self.concurrency < 0:
            raise ValueError("concurrency must be >= 0")
        if self.max_ticks is not None and self.max_ticks <= 0:
            raise ValueError("max_ticks must be > 0")


@dataclass
class TickSummary:
    """What happened during one tick"""
    tick: int
    promoted: int = 0  # Moved from updated to new
    progressed: int = 0  # Were updating when the tick started
    finished: int = 0  # Became updated during this tick
    delta: int = 0  # Concurrency limit minus progressed
    admitted: int = 0  # Moved from old to updating
    updating: int = 0  # Updating after admission
    total: int = 0
    new: int = 0
    completed: bool = False


@dataclass
class SimulationResult:
    """Results from a simulation run"""
    completed: bool
    ticks: int = 0
    aborted_reason: str = None  # Why the run stopped early (if it did)
    history: list = field(default_factory=list)  # TickSummary per tick
    per_machine_history: dict = field(default_factory=dict)  # Per-machine transitions
