import json

import pytest

from tac_assistant.domain.models import ConnectionConfig
from tac_assistant.services.exceptions import DiagnosisAlreadyRecordedError
from tac_assistant.state.models import IterationRequest, SessionState


def test_new_session_defaults():
    state = SessionState()

    assert state.transcript == ""
    assert state.last_question == ""
    assert state.diagnosis_text is None
    assert state.is_first_question is True
    assert state.is_terminal is False


def test_append_transcript_concatenates_in_order():
    state = SessionState()

    state.append_transcript("first")
    state.append_transcript("second")

    assert state.transcript == "firstsecond"


def test_record_diagnosis_marks_terminal():
    state = SessionState()

    state.record_diagnosis(" CRC errors")

    assert state.is_terminal
    assert state.diagnosis_text == " CRC errors"


def test_record_diagnosis_never_overwrites():
    state = SessionState()
    state.record_diagnosis("first")

    with pytest.raises(DiagnosisAlreadyRecordedError):
        state.record_diagnosis("second")

    assert state.diagnosis_text == "first"


def test_request_payload_uses_backend_field_names():
    request = IterationRequest(question="bgp down", metadata="{}", previous_transcript="x")

    assert json.loads(request.to_payload()) == {
        "question": "bgp down",
        "metadata": "{}",
        "previous_data": "x",
    }


def test_connection_config_is_immutable_and_hides_password():
    config = ConnectionConfig(hostname="10.0.0.1", username="admin", password="s3cret")

    with pytest.raises(AttributeError):
        config.hostname = "10.0.0.2"
    assert "s3cret" not in repr(config)
