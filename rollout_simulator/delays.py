class UpdateDelays:
    def __init__(self, delay_map=None, default=2):
        self.delay_map = delay_map or {}
        self.default = default

    def delay_for(self, machine_id):
        return self.delay_map.get(machine_id, self.default)
