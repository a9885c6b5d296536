class ComponentNotFoundError(Exception):
    def __init__(self, component_name: str):
        self.component_name = component_name
        super().__init__(f"Component '{component_name}' not found")
