"""Joint limit descriptions and their extraction from URDF joint data."""

from __future__ import annotations

import enum
from dataclasses import dataclass


@dataclass
class JointLimits:
    """Hard limits of a joint, each with a flag telling whether it applies."""

    min_position: float = 0.0
    max_position: float = 0.0
    max_velocity: float = 0.0
    max_acceleration: float = 0.0
    max_jerk: float = 0.0
    max_effort: float = 0.0
    has_position_limits: bool = False
    has_velocity_limits: bool = False
    has_acceleration_limits: bool = False
    has_jerk_limits: bool = False
    has_effort_limits: bool = False
    angle_wraparound: bool = False


@dataclass
class SoftJointLimits:
    """Soft position limits and their gains."""

    min_position: float = 0.0
    max_position: float = 0.0
    k_position: float = 0.0
    k_velocity: float = 0.0


class JointType(enum.Enum):
    """Kinds of joint that a URDF can declare."""

    UNKNOWN = "unknown"
    REVOLUTE = "revolute"
    CONTINUOUS = "continuous"
    PRISMATIC = "prismatic"
    FLOATING = "floating"
    PLANAR = "planar"
    FIXED = "fixed"


@dataclass
class UrdfLimits:
    """The limit element of a URDF joint."""

    lower: float = 0.0
    upper: float = 0.0
    effort: float = 0.0
    velocity: float = 0.0


@dataclass
class UrdfSafety:
    """The safety_controller element of a URDF joint."""

    soft_lower_limit: float = 0.0
    soft_upper_limit: float = 0.0
    k_position: float = 0.0
    k_velocity: float = 0.0


@dataclass
class UrdfJoint:
    """The parts of a URDF joint that limits are read from."""

    type: JointType = JointType.UNKNOWN
    limits: UrdfLimits | None = None
    safety: UrdfSafety | None = None


def get_joint_limits(urdf_joint: UrdfJoint | None, limits: JointLimits) -> bool:
    """Update ``limits`` from URDF joint data.

    Fields the URDF specifies are overwritten; the rest are left unchanged.
    Returns False, touching nothing, if the joint has no limit specification.
    """
    if urdf_joint is None or urdf_joint.limits is None:
        return False
    urdf_limits = urdf_joint.limits

    limits.has_position_limits = urdf_joint.type in (JointType.REVOLUTE, JointType.PRISMATIC)
    if limits.has_position_limits:
        limits.min_position = urdf_limits.lower
        limits.max_position = urdf_limits.upper

    if not limits.has_position_limits and urdf_joint.type is JointType.CONTINUOUS:
        limits.angle_wraparound = True

    limits.has_velocity_limits = True
    limits.max_velocity = urdf_limits.velocity

    limits.has_acceleration_limits = False

    limits.has_effort_limits = True
    limits.max_effort = urdf_limits.effort
    return True


def get_soft_joint_limits(urdf_joint: UrdfJoint | None, soft_limits: SoftJointLimits) -> bool:
    """Update ``soft_limits`` from the joint's safety controller data.

    Returns False, touching nothing, if the joint has no safety specification.
    """
    if urdf_joint is None or urdf_joint.safety is None:
        return False
    safety = urdf_joint.safety
    soft_limits.min_position = safety.soft_lower_limit
    soft_limits.max_position = safety.soft_upper_limit
    soft_limits.k_position = safety.k_position
    soft_limits.k_velocity = safety.k_velocity
    return True