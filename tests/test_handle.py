import copy

import pytest

from controlkit.handle import (
    CommandInterface,
    HandleError,
    ReadOnlyHandle,
    ReadWriteHandle,
    StateInterface,
    ValueCell,
)


def test_handle_without_cell_is_false_and_cannot_be_read():
    handle = ReadOnlyHandle("joint1", "position")
    assert not handle
    with pytest.raises(HandleError):
        handle.get_value()


def test_read_write_handle_without_cell_cannot_be_written():
    handle = ReadWriteHandle("joint1", "position")
    with pytest.raises(HandleError):
        handle.set_value(1.0)


def test_names_and_full_name():
    handle = StateInterface("joint1", "position", ValueCell())
    assert handle.name == "joint1"
    assert handle.interface_name == "position"
    assert handle.full_name == "joint1/position"
    assert bool(handle) is True


def test_get_value_reads_cell():
    cell = ValueCell(2.5)
    assert StateInterface("j", "velocity", cell).get_value() == 2.5
    cell.value = -3.0
    assert StateInterface("j", "velocity", cell).get_value() == -3.0


def test_set_value_is_seen_by_other_handles_on_same_cell():
    cell = ValueCell()
    command = CommandInterface("joint1", "effort", cell)
    state = StateInterface("joint1", "effort", cell)
    command.set_value(4.25)
    assert state.get_value() == 4.25
    assert cell.value == 4.25


def test_state_interface_copy_shares_value():
    cell = ValueCell(1.5)
    state = StateInterface("joint1", "position", cell)
    duplicate = copy.copy(state)
    cell.value = 7.0
    assert duplicate.get_value() == 7.0
    assert duplicate.full_name == state.full_name


def test_command_interface_cannot_be_copied():
    command = CommandInterface("joint1", "position", ValueCell())
    with pytest.raises(TypeError):
        copy.copy(command)
    with pytest.raises(TypeError):
        copy.deepcopy(command)