from .node_validator import DEFAULT_MAX_DEPTH, validate_node
