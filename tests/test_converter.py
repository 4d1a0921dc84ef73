"""Tests for full conversions, converter state and quick conversions."""

import pytest
from pydantic import ValidationError

from pacecalc.engine import (
    QuickConversion,
    convert,
    handle_input,
    quick_pace_to_speed,
    quick_speed_to_pace,
    record_current_conversion,
    reference_table,
    switch_direction,
    switch_unit,
)
from pacecalc.errors import InvalidInputError
from pacecalc.models import ConversionDirection, ConverterState, SpeedUnit
from pacecalc.stores import ConversionHistory

PACE_TO_SPEED = ConversionDirection.PACE_TO_SPEED
SPEED_TO_PACE = ConversionDirection.SPEED_TO_PACE


@pytest.fixture
def history():
    """In-memory history."""
    return ConversionHistory()


def test_convert_pace_to_speed():
    """Test pace text to speed text."""
    assert convert(PACE_TO_SPEED, "8:00") == "7.50"
    assert convert(PACE_TO_SPEED, "8:30") == "7.06"


def test_convert_speed_to_pace():
    """Test speed text to pace text."""
    assert convert(SPEED_TO_PACE, "10") == "6:00"
    assert convert(SPEED_TO_PACE, "7.5") == "8:00"


def test_convert_invalid_returns_empty():
    """Test that unparsable input gives an empty result."""
    assert convert(PACE_TO_SPEED, "") == ""
    assert convert(PACE_TO_SPEED, "   ") == ""
    assert convert(PACE_TO_SPEED, "0:00") == ""
    assert convert(SPEED_TO_PACE, "0") == ""
    assert convert(SPEED_TO_PACE, "abc") == ""


def test_state_defaults():
    """Test the default converter state and its labels."""
    state = ConverterState()
    assert state.direction is PACE_TO_SPEED
    assert state.unit is SpeedUnit.MPH
    assert state.result == ""
    assert state.placeholder == "mm:ss"
    assert state.input_suffix == "/mi"
    assert state.result_suffix == "MPH"
    assert state.helper_text == "Enter pace per mile to get speed"


def test_state_labels_speed_to_pace_kph():
    """Test labels for kilometer speed entry."""
    state = ConverterState(direction=SPEED_TO_PACE, unit=SpeedUnit.KPH)
    assert state.placeholder == "16.00"
    assert state.input_suffix == "KM/H"
    assert state.result_suffix == "/km"
    assert state.helper_text == "Enter speed in KPH to get pace"


def test_handle_input_sanitizes():
    """Test that typed input is filtered for the direction."""
    state = handle_input(ConverterState(), "8:3a0")
    assert state.input_text == "8:30"
    assert state.result == "7.06"

    speed_state = handle_input(ConverterState(direction=SPEED_TO_PACE), "10.5abc")
    assert speed_state.input_text == "10.5"


def test_state_is_immutable():
    """Test that transitions return new states."""
    state = ConverterState()
    new_state = handle_input(state, "8:00")
    assert state.input_text == ""
    assert new_state is not state
    with pytest.raises(ValidationError):
        state.input_text = "9:00"


def test_switch_unit_rescales_pace(history):
    """Test that 8:00 /mi becomes 4:58 /km and the old conversion is recorded."""
    state = handle_input(ConverterState(), "8:00")
    new_state = switch_unit(state, SpeedUnit.KPH, history)

    assert new_state.unit is SpeedUnit.KPH
    assert new_state.input_text == "4:58"
    assert len(history) == 1
    record = history.records[0]
    assert (record.input, record.input_suffix) == ("8:00", "/mi")
    assert (record.result, record.result_suffix) == ("7.50", "MPH")


def test_switch_unit_rescales_speed():
    """Test that 10 MPH becomes 16.09 KM/H."""
    state = handle_input(ConverterState(direction=SPEED_TO_PACE), "10")
    new_state = switch_unit(state, SpeedUnit.KPH)
    assert new_state.input_text == "16.09"


def test_switch_unit_clears_unparsable_input(history):
    """Test that input which does not parse is dropped on a unit change."""
    state = handle_input(ConverterState(), ".")
    new_state = switch_unit(state, SpeedUnit.KPH, history)
    assert new_state.input_text == ""
    assert len(history) == 0


def test_switch_unit_same_unit_is_noop(history):
    """Test that selecting the current unit changes nothing."""
    state = handle_input(ConverterState(), "8:00")
    assert switch_unit(state, SpeedUnit.MPH, history) is state
    assert len(history) == 0


def test_switch_direction_records_and_clears(history):
    """Test that flipping direction records the conversion and clears input."""
    state = handle_input(ConverterState(), "8:00")
    new_state = switch_direction(state, SPEED_TO_PACE, history)

    assert new_state.direction is SPEED_TO_PACE
    assert new_state.input_text == ""
    assert len(history) == 1


def test_record_current_conversion_skips_empty_result(history):
    """Test that nothing is recorded without a result."""
    record_current_conversion(ConverterState(), history)
    record_current_conversion(handle_input(ConverterState(), "0:00"), history)
    assert len(history) == 0


def test_quick_pace_to_speed_mph():
    """Test the mile pace shortcut."""
    answer = quick_pace_to_speed("8:00", SpeedUnit.MPH)
    assert isinstance(answer, QuickConversion)
    assert answer.value == "7.50"
    assert "per mile" in answer.dialog


def test_quick_pace_to_speed_kph():
    """Test the kilometer pace shortcut is labelled per kilometer."""
    answer = quick_pace_to_speed("8:00", SpeedUnit.KPH)
    assert answer.value == "7.50"
    assert "per kilometer" in answer.dialog
    assert answer.dialog == "A pace of 8:00 per kilometer is 7.50 kph"


def test_quick_speed_to_pace_mph():
    """Test the mph shortcut."""
    answer = quick_speed_to_pace(10, SpeedUnit.MPH)
    assert answer.value == "6:00"
    assert "/mi" in answer.dialog


def test_quick_speed_to_pace_kph():
    """Test the kph shortcut stays in kilometers."""
    answer = quick_speed_to_pace(12, SpeedUnit.KPH)
    assert answer.value == "5:00"
    assert answer.dialog == "12.00 kph is a 5:00 /km pace"


def test_quick_conversions_reject_invalid_input():
    """Test that bad shortcut input raises a ValueError subclass."""
    with pytest.raises(InvalidInputError, match="valid pace"):
        quick_pace_to_speed("abc")
    with pytest.raises(ValueError, match="greater than zero"):
        quick_speed_to_pace(0)
    with pytest.raises(InvalidInputError):
        quick_speed_to_pace(float("nan"))


def test_reference_table_mph():
    """Test the mile reference chart."""
    rows = reference_table(SpeedUnit.MPH)
    assert len(rows) == 15
    assert (rows[0].pace, rows[0].speed) == ("5:00", "12.00")
    assert (rows[6].pace, rows[6].speed) == ("8:00", "7.50")
    assert (rows[-1].pace, rows[-1].speed) == ("12:00", "5.00")
    assert rows[0].pace_suffix == "/mi"
    assert rows[0].speed_suffix == "MPH"


def test_reference_table_kph():
    """Test the kilometer chart shows equivalent km paces and speeds."""
    rows = reference_table(SpeedUnit.KPH)
    assert len(rows) == 15
    assert (rows[0].pace, rows[0].speed) == ("3:06", "19.31")
    assert rows[0].pace_suffix == "/km"
    assert rows[0].speed_suffix == "KM/H"
