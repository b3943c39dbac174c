"""Read ros2_control hardware descriptions out of a URDF document."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from collections.abc import Iterator
from dataclasses import dataclass, field

_ROBOT_TAG = "robot"
_ROS2_CONTROL_TAG = "ros2_control"
_HARDWARE_TAG = "hardware"
_CLASS_TYPE_TAG = "plugin"
_PARAM_TAG = "param"
_ACTUATOR_TAG = "actuator"
_JOINT_TAG = "joint"
_SENSOR_TAG = "sensor"
_GPIO_TAG = "gpio"
_TRANSMISSION_TAG = "transmission"
_COMMAND_INTERFACE_TAG = "command_interface"
_STATE_INTERFACE_TAG = "state_interface"
_MIN_TAG = "min"
_MAX_TAG = "max"
_DATA_TYPE_ATTRIBUTE = "data_type"
_SIZE_ATTRIBUTE = "size"
_NAME_ATTRIBUTE = "name"
_TYPE_ATTRIBUTE = "type"
_ROLE_ATTRIBUTE = "role"
_REDUCTION_TAG = "mechanical_reduction"
_OFFSET_TAG = "offset"

_POSITIVE_INT = re.compile(r"[1-9][0-9]*")
_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:inf(?:inity)?|nan|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)",
    re.IGNORECASE,
)


class ComponentParserError(RuntimeError):
    """Raised when a URDF does not hold a valid ros2_control description."""


@dataclass
class InterfaceInfo:
    """A command or state interface declared on a component."""

    name: str = ""
    min: str = ""
    max: str = ""
    data_type: str = "double"
    size: int = 1


@dataclass
class ComponentInfo:
    """A joint, sensor or GPIO declared inside a ros2_control tag."""

    name: str = ""
    type: str = ""
    command_interfaces: list[InterfaceInfo] = field(default_factory=list)
    state_interfaces: list[InterfaceInfo] = field(default_factory=list)
    parameters: dict[str, str] = field(default_factory=dict)


@dataclass
class JointInfo:
    """A joint taking part in a transmission."""

    name: str = ""
    interfaces: list[str] = field(default_factory=list)
    role: str = ""
    mechanical_reduction: float = 1.0
    offset: float = 0.0


@dataclass
class ActuatorInfo:
    """An actuator taking part in a transmission."""

    name: str = ""
    interfaces: list[str] = field(default_factory=list)
    role: str = ""
    offset: float = 0.0


@dataclass
class TransmissionInfo:
    """A transmission linking joints and actuators."""

    name: str = ""
    type: str = ""
    joints: list[JointInfo] = field(default_factory=list)
    actuators: list[ActuatorInfo] = field(default_factory=list)
    parameters: dict[str, str] = field(default_factory=dict)


@dataclass
class HardwareInfo:
    """Everything declared in one ros2_control tag."""

    name: str = ""
    type: str = ""
    hardware_class_type: str = ""
    hardware_parameters: dict[str, str] = field(default_factory=dict)
    joints: list[ComponentInfo] = field(default_factory=list)
    sensors: list[ComponentInfo] = field(default_factory=list)
    gpios: list[ComponentInfo] = field(default_factory=list)
    transmissions: list[TransmissionInfo] = field(default_factory=list)


def _tag(element: ET.Element) -> str:
    """Tag name with any namespace dropped."""
    return element.tag.rpartition("}")[2]


def _children(element: ET.Element, tag: str | None = None) -> Iterator[ET.Element]:
    for child in element:
        if not isinstance(child.tag, str):
            continue
        if tag is None or _tag(child) == tag:
            yield child


def _first_child(element: ET.Element, tag: str) -> ET.Element | None:
    return next(_children(element, tag), None)


def _text(element: ET.Element | None, tag_name: str) -> str:
    text = None if element is None else element.text
    if text is None or not text.strip():
        raise ComponentParserError(f"text not specified in the {tag_name} tag")
    return text


def _attribute(element: ET.Element, attribute: str, tag_name: str) -> str:
    value = element.get(attribute)
    if value is None:
        raise ComponentParserError(f"no attribute {attribute} in {tag_name} tag")
    return value


def _to_float(text: str, tag_name: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ComponentParserError(
            f"could not convert '{text}' in the {tag_name} tag to a number"
        )
    return float(match.group())


def _parameter_value_or(element: ET.Element, name: str, default: float) -> float:
    for child in _children(element):
        if _tag(child) == name:
            return _to_float(_text(child, name), name)
    return default


def _size_attribute(element: ET.Element) -> int:
    value = element.get(_SIZE_ATTRIBUTE)
    if value is None:
        return 1
    if not _POSITIVE_INT.fullmatch(value):
        raise ComponentParserError(
            f'Could not parse size tag in "{_tag(element)}".Got "{value}", '
            "but expected a non-zero positive integer."
        )
    return int(value)


def _parameters(element: ET.Element) -> dict[str, str]:
    parameters: dict[str, str] = {}
    for param in _children(element, _PARAM_TAG):
        name = param.get(_NAME_ATTRIBUTE)
        if name is None:
            raise ComponentParserError("no parameter name attribute set in param tag")
        parameters[name] = _text(param, name)
    return parameters


def _interface(element: ET.Element, complex_types: bool) -> InterfaceInfo:
    interface = InterfaceInfo(name=_attribute(element, _NAME_ATTRIBUTE, _tag(element)))
    params = _parameters(element)
    if _MIN_TAG in params:
        interface.min = params[_MIN_TAG]
    if _MAX_TAG in params:
        interface.max = params[_MAX_TAG]
    if complex_types:
        interface.data_type = element.get(_DATA_TYPE_ATTRIBUTE, "double")
        interface.size = _size_attribute(element)
    return interface


def _component(element: ET.Element, complex_types: bool = False) -> ComponentInfo:
    component = ComponentInfo(type=_tag(element))
    component.name = _attribute(element, _NAME_ATTRIBUTE, component.type)
    component.command_interfaces = [
        _interface(child, complex_types)
        for child in _children(element, _COMMAND_INTERFACE_TAG)
    ]
    component.state_interfaces = [
        _interface(child, complex_types)
        for child in _children(element, _STATE_INTERFACE_TAG)
    ]
    component.parameters = _parameters(element)
    return component


def _transmission_joint(element: ET.Element) -> JointInfo:
    tag = _tag(element)
    return JointInfo(
        name=_attribute(element, _NAME_ATTRIBUTE, tag),
        role=_attribute(element, _ROLE_ATTRIBUTE, tag),
        mechanical_reduction=_parameter_value_or(element, _REDUCTION_TAG, 0.0),
        offset=_parameter_value_or(element, _OFFSET_TAG, 0.0),
    )


def _transmission_actuator(element: ET.Element) -> ActuatorInfo:
    tag = _tag(element)
    return ActuatorInfo(
        name=_attribute(element, _NAME_ATTRIBUTE, tag),
        role=_attribute(element, _ROLE_ATTRIBUTE, tag),
        offset=_parameter_value_or(element, _OFFSET_TAG, 0.0),
    )


def _transmission(element: ET.Element) -> TransmissionInfo:
    return TransmissionInfo(
        name=_attribute(element, _NAME_ATTRIBUTE, _tag(element)),
        type=_text(_first_child(element, _CLASS_TYPE_TAG), _CLASS_TYPE_TAG),
        joints=[_transmission_joint(j) for j in _children(element, _JOINT_TAG)],
        actuators=[_transmission_actuator(a) for a in _children(element, _ACTUATOR_TAG)],
        parameters=_parameters(element),
    )


def _auto_fill_transmission_interfaces(hardware: HardwareInfo) -> None:
    joints_by_name: dict[str, ComponentInfo] = {}
    for joint in hardware.joints:
        joints_by_name.setdefault(joint.name, joint)

    for transmission in hardware.transmissions:
        for joint in transmission.joints:
            component = joints_by_name.get(joint.name)
            if component is None:
                raise ComponentParserError(
                    f"Error while parsing '{hardware.name}'. Transmission "
                    f"'{transmission.name}' declared joint '{joint.name}' is not "
                    f"available in component '{hardware.name}'."
                )
            joint.interfaces.extend(i.name for i in component.command_interfaces)

        if hardware.type == _ACTUATOR_TAG:
            if len(transmission.joints) != 1:
                raise ComponentParserError(
                    f"Error while parsing '{hardware.name}'. There should be exactly "
                    "one joint defined in this component but found "
                    f"{len(transmission.joints)}"
                )
            transmission.actuators.append(
                ActuatorInfo(
                    name="actuator1",
                    interfaces=list(transmission.joints[0].interfaces),
                    role="actuator1",
                    offset=0.0,
                )
            )


def _resource(element: ET.Element) -> HardwareInfo:
    hardware = HardwareInfo(
        name=_attribute(element, _NAME_ATTRIBUTE, _ROS2_CONTROL_TAG),
        type=_attribute(element, _TYPE_ATTRIBUTE, _ROS2_CONTROL_TAG),
    )
    for child in _children(element):
        tag = _tag(child)
        if tag == _HARDWARE_TAG:
            hardware.hardware_class_type = _text(
                _first_child(child, _CLASS_TYPE_TAG), f"hardware {_CLASS_TYPE_TAG}"
            )
            if _first_child(child, _PARAM_TAG) is not None:
                hardware.hardware_parameters = _parameters(child)
        elif tag == _JOINT_TAG:
            hardware.joints.append(_component(child))
        elif tag == _SENSOR_TAG:
            hardware.sensors.append(_component(child))
        elif tag == _GPIO_TAG:
            hardware.gpios.append(_component(child, complex_types=True))
        elif tag == _TRANSMISSION_TAG:
            hardware.transmissions.append(_transmission(child))
        else:
            raise ComponentParserError(f"invalid tag name {tag}")

    _auto_fill_transmission_interfaces(hardware)
    return hardware


def parse_control_resources_from_urdf(urdf: str) -> list[HardwareInfo]:
    """Return one HardwareInfo for each ros2_control tag under the robot root."""
    if not urdf:
        raise ComponentParserError("empty URDF passed to robot")
    try:
        root = ET.fromstring(urdf.lstrip())
    except ET.ParseError as exc:
        raise ComponentParserError("invalid URDF passed in to robot parser") from exc

    if _tag(root) != _ROBOT_TAG:
        raise ComponentParserError("the robot tag is not root element in URDF")

    resources = list(_children(root, _ROS2_CONTROL_TAG))
    if not resources:
        raise ComponentParserError(f"no {_ROS2_CONTROL_TAG} tag")
    return [_resource(resource) for resource in resources]