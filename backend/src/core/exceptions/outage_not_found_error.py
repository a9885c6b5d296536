class OutageNotFoundError(Exception):
    def __init__(self, outage_id: int):
        self.outage_id = outage_id
        super().__init__(f"Outage {outage_id} not found")
