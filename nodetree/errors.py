"""Error taxonomy shared by the stores, the service and the HTTP layer."""


class NodeTreeError(Exception):
    pass


class NotFoundError(NodeTreeError):
    def __init__(self, node_id: str) -> None:
        self.node_id = node_id
        super().__init__(f"Node not found: {node_id}")


class DuplicateRootError(NodeTreeError):
    def __init__(self, root_id: str | None = None) -> None:
        self.root_id = root_id
        super().__init__("Tree already has a root")


class InvalidArgumentError(NodeTreeError):
    def __init__(self, message: str) -> None:
        super().__init__(message)


class InvalidStructureError(NodeTreeError):
    def __init__(self, node_id: str, message: str) -> None:
        self.node_id = node_id
        super().__init__(message)


class TreeInvariantError(NodeTreeError):
    def __init__(self, violations: list[str]) -> None:
        self.violations = violations
        super().__init__("Tree invariants violated: " + "; ".join(violations))
