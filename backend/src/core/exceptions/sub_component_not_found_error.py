class SubComponentNotFoundError(Exception):
    def __init__(self, component_name: str, sub_component_name: str):
        self.component_name = component_name
        self.sub_component_name = sub_component_name
        super().__init__(f"Sub-component '{sub_component_name}' not found in component '{component_name}'")
