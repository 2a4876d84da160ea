from .models import (
    MachineState, Machine, SimulationConfig, TickSummary, SimulationResult
)
from .errors import InvalidTransitionError
from .delays import UpdateDelays
from .environment import Environment
from .simulation import Simulation
from .report import format_tick

__all__ = [
    "MachineState", "Machine", "SimulationConfig",
    "TickSummary", "SimulationResult", "InvalidTransitionError",
    "UpdateDelays", "Environment", "Simulation", "format_tick"
]
