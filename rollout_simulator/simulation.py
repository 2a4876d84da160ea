from .models import TickSummary, SimulationResult
from .report import format_tick
from .logger import get_logger


class Simulation:
    def __init__(self, environment, concurrency=2):
        if concurrency < 0:
            raise ValueError("concurrency must be >= 0")
        self.environment = environment
        self.concurrency = concurrency  # How many machines may be updating at once
        self.tick = 0
        self.per_machine_history = {}
        self.logger = get_logger("simulation")

    def _record(self, machine, event):
        """Track a transition in the per-machine history"""
        if machine.machine_id not in self.per_machine_history:
            self.per_machine_history[machine.machine_id] = []
        self.per_machine_history[machine.machine_id].append({"event": event, "tick": self.tick})
        self.logger.debug(f"Machine {machine.machine_id} {event} at tick {self.tick}")

    def _promote(self):
        """Move every updated machine into production"""
        promoted = self.environment.updated_machines()
        for machine in promoted:
            machine.move_to_production()
            self._record(machine, "promoted")
        return promoted

    def _progress(self):
        """Advance every updating machine by one tick of work"""
        updating = self.environment.updating_machines()
        finished = 0
        for machine in updating:
            machine.do_update_work()
            if machine.is_updated:
                finished += 1
                self._record(machine, "updated")
        return updating, finished

    def _admit(self, delta):
        """Start updating up to `delta` old machines"""
        admitted = self.environment.pick_old_servers(delta)
        for machine in admitted:
            machine.start_updating()
            self._record(machine, "admitted")
        return admitted

    def do_tick(self):
        """One tick: promote, then progress, then admit, then check for completion.

        Promotion runs first so that slots freed by machines that finished on
        the previous tick are usable now. The admission cap is computed from
        the number of machines that were updating before progress ran.
        """
        self.tick += 1
        summary = TickSummary(tick=self.tick)

        summary.promoted = len(self._promote())

        updating, summary.finished = self._progress()
        summary.progressed = len(updating)

        summary.delta = self.concurrency - summary.progressed
        summary.admitted = len(self._admit(max(0, summary.delta)))

        summary.updating = len(self.environment.updating_machines())
        summary.total = len(self.environment.all_machines())
        summary.new = len(self.environment.new_machines())
        summary.completed = summary.total == summary.new
        return summary

    def run(self, max_ticks=None):
        """Run ticks until every machine is new, or until `max_ticks` more ticks have run"""
        if max_ticks is not None and max_ticks <= 0:
            raise ValueError("max_ticks must be > 0")

        self.logger.info(f"Running simulation (concurrency={self.concurrency}, max_ticks={max_ticks})")
        result = SimulationResult(completed=False)

        while True:
            if max_ticks is not None and len(result.history) >= max_ticks:
                result.aborted_reason = "tick limit reached"
                self.logger.error(f"SIMULATION ABORTED: not converged after {len(result.history)} ticks")
                break

            summary = self.do_tick()
            result.history.append(summary)
            for line in format_tick(summary):
                self.logger.info(line)

            if summary.completed:
                result.completed = True
                break

        result.ticks = len(result.history)
        # Later runs keep appending to the live dict
        result.per_machine_history = {k: list(v) for k, v in self.per_machine_history.items()}
        if result.completed:
            self.logger.info(f"Simulation finished after {result.ticks} ticks")
        return result
