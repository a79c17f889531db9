from typing import List

from .models import (
    FileData,
    GenerationConfig,
    Message,
    MockSession,
    Part,
    RequestPayload,
    SystemInstruction,
)

FALLBACK_MIME_TYPE = "application/pdf"

QUESTION = "この画像について教えてください"

REFERENCE_SYSTEM_INSTRUCTION = "システム指示文"
REFERENCE_FILE_URI = "files/xyz123"
REFERENCE_MIME_TYPE = "image/jpeg"

MOCK_FILE_URI = "files/mock-test-file-123"
MOCK_MIME_TYPE = "image/jpeg"
MOCK_SYSTEM_INSTRUCTION = "テスト用システム指示"


def _text_instruction(text: str) -> SystemInstruction:
    return SystemInstruction(parts=[Part(text=text)])


def reference_payload() -> RequestPayload:
    return RequestPayload(
        system_instruction=_text_instruction(REFERENCE_SYSTEM_INSTRUCTION),
        contents=[
            Message(
                role="user",
                parts=[
                    Part(file_data=FileData(mime_type=REFERENCE_MIME_TYPE, file_uri=REFERENCE_FILE_URI)),
                    Part(text=QUESTION),
                ],
            )
        ],
        generation_config=GenerationConfig(),
    )


def mock_session() -> MockSession:
    return MockSession(
        file_uri=MOCK_FILE_URI,
        original_mime_type=MOCK_MIME_TYPE,
        system_instruction=MOCK_SYSTEM_INSTRUCTION,
        history=[],
    )


def build_chat_contents(session: MockSession, question: str) -> List[Message]:
    """Build the ``contents`` array for a chat turn.

    A fresh session sends the file reference ahead of the question. Sessions
    that already carry history produce no messages.
    """
    contents: List[Message] = []
    if not session.history:
        file_ref = Part(
            file_data=FileData(
                mime_type=session.original_mime_type or FALLBACK_MIME_TYPE,
                file_uri=session.file_uri,
            )
        )
        contents.append(Message(role="user", parts=[file_ref, Part(text=question)]))
    return contents


def build_request_payload(session: MockSession, question: str) -> RequestPayload:
    return RequestPayload(
        system_instruction=_text_instruction(session.system_instruction),
        contents=build_chat_contents(session, question),
        generation_config=GenerationConfig(),
    )
