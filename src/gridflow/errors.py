class DiagramError(Exception):
    pass


class InputError(DiagramError, ValueError):
    """Diagram input rejected before layout begins."""


class ConfigurationError(DiagramError, ValueError):
    pass


class RoutingError(DiagramError):
    """No route could be found for an edge in either candidate direction."""

    def __init__(self, source: str, target: str) -> None:
        self.source = source
        self.target = target
        super().__init__(f"no path found for edge {source!r} -> {target!r}")
