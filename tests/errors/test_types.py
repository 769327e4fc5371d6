import pickle

import pytest

from punydecode.errors.types import (
    DecodeError,
    DecodeResult,
    InvalidInputError,
    ItemStatus,
    NoAtSignInEmailError,
    NotBasicError,
    PunycodeOverflowError,
)

_KINDS = [
    (PunycodeOverflowError, "overflow: input needs wider integers to process"),
    (NotBasicError, "illegal input >= 0x80 (not a basic code point)"),
    (InvalidInputError, "invalid input"),
    (NoAtSignInEmailError, "no at sign in the e-mail address"),
]


@pytest.mark.parametrize("cls, message", _KINDS)
def test_decode_errors_carry_message_input_and_position(cls: type, message: str) -> None:
    err = cls("abc", position=2)
    assert str(err) == message
    assert err.input == "abc"
    assert err.position == 2
    assert isinstance(err, DecodeError)
    assert isinstance(err, ValueError)


@pytest.mark.parametrize("cls, message", _KINDS)
def test_decode_errors_survive_pickling(cls: type, message: str) -> None:
    err = pickle.loads(pickle.dumps(cls("UB4", position=3)))
    assert type(err) is cls
    assert err.input == "UB4"
    assert err.position == 3
    assert str(err) == message


def test_decode_error_kinds_are_disjoint() -> None:
    kinds = [cls for cls, _ in _KINDS]
    for a in kinds:
        for b in kinds:
            if a is not b:
                assert not issubclass(a, b)


def test_item_status_values_are_stable() -> None:
    assert [s.value for s in ItemStatus] == ["ok", "failed", "skipped"]


def test_decode_result_to_dict_for_failure() -> None:
    result = DecodeResult(index=4, input="UB4", status=ItemStatus.FAILED, error=InvalidInputError("UB4", position=3))
    assert result.ok is False
    assert result.error_type == "InvalidInputError"
    assert result.to_dict() == {
        "index": 4,
        "input": "UB4",
        "status": "failed",
        "output": None,
        "error_type": "InvalidInputError",
        "error": "invalid input",
        "position": 3,
    }


def test_decode_result_to_dict_for_success() -> None:
    result = DecodeResult(index=0, input="tda", status=ItemStatus.OK, output="ü")
    assert result.ok is True
    assert result.to_dict()["output"] == "ü"
    assert result.to_dict()["error_type"] is None
