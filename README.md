# controlkit

Building blocks for robot control software, in plain Python with no
third-party dependencies:

- **`controlkit.component_parser`** reads the `<ros2_control>` blocks of a URDF
  document into `HardwareInfo` records. Each record holds the joints, sensors,
  GPIOs, transmissions and hardware parameters of one block.
- **`controlkit.handle`** provides named state and command interfaces that read
  and write a shared `ValueCell`.
- **`controlkit.joint_limits`** provides `JointLimits` and `SoftJointLimits`
  and fills them from URDF joint descriptions.

## Installation

```
pip install .
```

Run the tests with:

```
pip install .[test]
pytest
```

## Parsing control resources

```python
from controlkit.component_parser import parse_control_resources_from_urdf

urdf = """<?xml version="1.0"?>
<robot name="bot">
  <ros2_control name="Arm" type="system">
    <hardware><plugin>demo/ArmHardware</plugin></hardware>
    <joint name="joint1">
      <command_interface name="position">
        <param name="min">-1</param><param name="max">1</param>
      </command_interface>
      <state_interface name="position"/>
    </joint>
  </ros2_control>
</robot>"""

[arm] = parse_control_resources_from_urdf(urdf)
print(arm.name, arm.type, arm.hardware_class_type)  # Arm system demo/ArmHardware
print(arm.joints[0].command_interfaces[0].min)      # "-1"
```

`parse_control_resources_from_urdf` returns one `HardwareInfo` for each
`<ros2_control>` tag under the `<robot>` root. The records it builds are
dataclasses: `HardwareInfo`, `ComponentInfo`, `InterfaceInfo`,
`TransmissionInfo`, `JointInfo` and `ActuatorInfo`.

- Interfaces on `<gpio>` components may carry `data_type` and `size`
  attributes; elsewhere an interface is a single `"double"`.
- Transmission joints get the command interface names of the joint component
  of the same name. In an `actuator` block, a transmission must have exactly
  one joint, and an actuator named `actuator1` with those interfaces is added.

A malformed document raises `ComponentParserError`. Examples are an empty
string, a root element other than `<robot>`, a missing attribute, an unknown
tag, a `size` that is not a positive integer, or a transmission that names a
joint the block does not declare.

## Handles

```python
from controlkit.handle import CommandInterface, StateInterface, ValueCell

cell = ValueCell(1.5)
state = StateInterface("joint1", "position", cell)
command = CommandInterface("joint1", "position", cell)

command.set_value(2.0)
print(state.full_name, state.get_value())  # joint1/position 2.0
```

A handle is true when it references a cell. Reading or writing a handle
without one raises `HandleError`. A `CommandInterface` that references a cell
cannot be copied with `copy.copy` or `copy.deepcopy`; trying raises
`TypeError`.

## Joint limits

```python
from controlkit.joint_limits import (
    JointLimits, JointType, UrdfJoint, UrdfLimits, get_joint_limits,
)

joint = UrdfJoint(
    type=JointType.REVOLUTE,
    limits=UrdfLimits(lower=-1.0, upper=1.0, velocity=2.0, effort=8.0),
)
limits = JointLimits()
if get_joint_limits(joint, limits):
    print(limits.min_position, limits.max_velocity)  # -1.0 2.0
```

`get_joint_limits` sets position limits for revolute and prismatic joints,
marks continuous joints as wrapping around, and always sets velocity and
effort limits. `get_soft_joint_limits` copies a joint's `UrdfSafety` data into
a `SoftJointLimits`. Both return `False` and change nothing when the joint or
the relevant data is missing.

## What this package does not do

- It reads transmission descriptions but does not map positions, velocities or
  efforts between actuator space and joint space.
- It has no base class or loading mechanism for hardware drivers and no
  control loop; nothing here talks to hardware.
- It has no command-line program.