from .models import Machine, MachineState
from .delays import UpdateDelays


class Environment:
    """Where the simulation looks up machines. Holds no scheduling logic."""

    def __init__(self, machines):
        # Membership and order are fixed for the lifetime of the run
        self._machines = tuple(machines)

    @classmethod
    def build(cls, count, delays=None):
        """Create `count` old machines named m0..m{count-1}"""
        delays = delays if delays else UpdateDelays()
        machines = []
        for i in range(count):
            machine_id = f"m{i}"
            machines.append(Machine(machine_id, update_delay=delays.delay_for(machine_id)))
        return cls(machines)

    def all_machines(self):
        return list(self._machines)

    def updated_machines(self):
        return [m for m in self._machines if m.is_updated]

    def updating_machines(self):
        return [m for m in self._machines if m.is_updating]

    def new_machines(self):
        return [m for m in self._machines if m.is_new]

    def pick_old_servers(self, count):
        """First `count` old machines in order. Fewer (or none) may come back."""
        if count <= 0:
            return []
        return [m for m in self._machines if m.is_old][:count]

    def state_counts(self):
        counts = {state: 0 for state in MachineState}
        for machine in self._machines:
            counts[machine.state] += 1
        return counts
