import pytest

from controlkit.joint_limits import (
    JointLimits,
    JointType,
    SoftJointLimits,
    UrdfJoint,
    UrdfLimits,
    UrdfSafety,
    get_joint_limits,
    get_soft_joint_limits,
)


@pytest.fixture
def urdf_joint():
    return UrdfJoint(
        type=JointType.UNKNOWN,
        limits=UrdfLimits(effort=8.0, velocity=2.0, lower=-1.0, upper=1.0),
        safety=UrdfSafety(k_position=20.0, k_velocity=40.0, soft_lower_limit=-0.8, soft_upper_limit=0.8),
    )


def test_defaults_have_no_limits():
    limits = JointLimits()
    assert not limits.has_position_limits
    assert not limits.has_velocity_limits
    assert not limits.has_acceleration_limits
    assert not limits.has_jerk_limits
    assert not limits.has_effort_limits
    assert not limits.angle_wraparound
    assert SoftJointLimits() == SoftJointLimits(0.0, 0.0, 0.0, 0.0)


def test_unset_urdf_joint():
    limits = JointLimits()
    assert get_joint_limits(None, limits) is False
    assert limits == JointLimits()


def test_unset_urdf_limits():
    limits = JointLimits()
    assert get_joint_limits(UrdfJoint(), limits) is False
    assert limits == JointLimits()


def test_continuous_joint(urdf_joint):
    urdf_joint.type = JointType.CONTINUOUS
    limits = JointLimits()
    assert get_joint_limits(urdf_joint, limits) is True

    assert not limits.has_position_limits
    assert limits.angle_wraparound
    assert limits.has_velocity_limits
    assert limits.max_velocity == pytest.approx(urdf_joint.limits.velocity)
    assert not limits.has_acceleration_limits
    assert limits.has_effort_limits
    assert limits.max_effort == pytest.approx(urdf_joint.limits.effort)


@pytest.mark.parametrize("joint_type", [JointType.REVOLUTE, JointType.PRISMATIC])
def test_revolute_and_prismatic_joints(urdf_joint, joint_type):
    urdf_joint.type = joint_type
    limits = JointLimits()
    assert get_joint_limits(urdf_joint, limits) is True

    assert limits.has_position_limits
    assert limits.min_position == pytest.approx(urdf_joint.limits.lower)
    assert limits.max_position == pytest.approx(urdf_joint.limits.upper)
    assert not limits.angle_wraparound
    assert limits.has_velocity_limits
    assert limits.max_velocity == pytest.approx(urdf_joint.limits.velocity)
    assert not limits.has_acceleration_limits
    assert limits.has_effort_limits
    assert limits.max_effort == pytest.approx(urdf_joint.limits.effort)


def test_fields_not_in_urdf_stay_unchanged(urdf_joint):
    urdf_joint.type = JointType.CONTINUOUS
    limits = JointLimits(min_position=-5.0, max_position=5.0, max_jerk=100.0, has_jerk_limits=True)
    assert get_joint_limits(urdf_joint, limits)
    assert limits.min_position == -5.0
    assert limits.max_position == 5.0
    assert limits.has_jerk_limits
    assert limits.max_jerk == 100.0


def test_soft_limits_unset_joint():
    soft_limits = SoftJointLimits()
    assert get_soft_joint_limits(None, soft_limits) is False
    assert get_soft_joint_limits(UrdfJoint(), soft_limits) is False
    assert soft_limits == SoftJointLimits()


def test_soft_limits_valid_joint(urdf_joint):
    soft_limits = SoftJointLimits()
    assert get_soft_joint_limits(urdf_joint, soft_limits) is True
    assert soft_limits.min_position == pytest.approx(urdf_joint.safety.soft_lower_limit)
    assert soft_limits.max_position == pytest.approx(urdf_joint.safety.soft_upper_limit)
    assert soft_limits.k_position == pytest.approx(urdf_joint.safety.k_position)
    assert soft_limits.k_velocity == pytest.approx(urdf_joint.safety.k_velocity)