"""Robot control building blocks: URDF control-resource parsing, interface handles and joint limits."""

__version__ = "0.1.0"

__all__ = [
    "component_parser",
    "handle",
    "joint_limits",
]