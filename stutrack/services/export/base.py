class BaseExportComponent:
    """Base class for a data table component within a report."""
    def render(self, writer, achievements):
        raise NotImplementedError


class BaseExportBoard:
    """Base class for a report composed of components."""
    def __init__(self, title):
        self.title = title
        self.components = []

    def add_component(self, component):
        self.components.append(component)

    def render(self, writer, achievements):
        for component in self.components:
            component.render(writer, achievements)
