from chatformat.models import Message, MockSession, Part
from chatformat.payloads import (
    FALLBACK_MIME_TYPE,
    QUESTION,
    build_chat_contents,
    build_request_payload,
    mock_session,
    reference_payload,
)

GENERATION_CONFIG = {"temperature": 0.2, "topK": 40, "topP": 0.95, "maxOutputTokens": 2048}


def test_reference_payload_shape():
    data = reference_payload().to_api()

    assert list(data) == ["systemInstruction", "contents", "generationConfig"]
    assert data["systemInstruction"] == {"parts": [{"text": "システム指示文"}]}
    assert data["contents"] == [
        {
            "role": "user",
            "parts": [
                {"fileData": {"mimeType": "image/jpeg", "fileUri": "files/xyz123"}},
                {"text": "この画像について教えてください"},
            ],
        }
    ]
    assert data["generationConfig"] == GENERATION_CONFIG


def test_reference_payload_is_deterministic():
    assert reference_payload().to_api() == reference_payload().to_api()


def test_empty_history_yields_single_user_message():
    contents = build_chat_contents(mock_session(), QUESTION)

    assert len(contents) == 1
    message = contents[0]
    assert message.role == "user"
    assert [part.is_file_reference for part in message.parts] == [True, False]
    assert message.parts[0].file_data.mime_type == "image/jpeg"
    assert message.parts[0].file_data.file_uri == "files/mock-test-file-123"
    assert message.parts[1].text == QUESTION


def test_missing_mime_type_falls_back_to_pdf():
    session = MockSession(file_uri="files/doc", system_instruction="sys")
    contents = build_chat_contents(session, "q")
    assert contents[0].parts[0].file_data.mime_type == FALLBACK_MIME_TYPE == "application/pdf"


def test_empty_mime_type_falls_back_to_pdf():
    session = MockSession(file_uri="files/doc", original_mime_type="", system_instruction="sys")
    contents = build_chat_contents(session, "q")
    assert contents[0].parts[0].file_data.mime_type == "application/pdf"


def test_non_empty_history_yields_no_messages():
    session = MockSession(
        file_uri="files/doc",
        original_mime_type="image/png",
        system_instruction="sys",
        history=[Message(role="user", parts=[Part(text="earlier")])],
    )
    assert build_chat_contents(session, "q") == []


def test_simulated_payload_uses_session_values():
    data = build_request_payload(mock_session(), QUESTION).to_api()

    assert data["systemInstruction"] == {"parts": [{"text": "テスト用システム指示"}]}
    assert data["contents"][0]["parts"][0] == {
        "fileData": {"mimeType": "image/jpeg", "fileUri": "files/mock-test-file-123"}
    }
    assert data["generationConfig"] == GENERATION_CONFIG
