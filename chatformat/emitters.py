from rich import print, print_json

from .models import RequestPayload
from .payloads import QUESTION, build_request_payload, mock_session, reference_payload

COMMON_ISSUES = [
    'File URI format: Should be "files/..." not full URL',
    "MIME type: Must match the uploaded file's actual MIME type",
    "File state: File must be ACTIVE before using in chat",
    "Parts order: fileData should come before text in parts array",
    'Role: Must be "user" for user messages, "model" for AI responses',
]

VALIDATION_CHECKLIST = [
    "Check file upload response for correct URI format",
    "Verify file state is ACTIVE before chat",
    "Ensure MIME type matches uploaded file",
    "Validate chat content structure",
    "Check for proper error handling",
]

KEY_IMPROVEMENTS = [
    "Store original MIME type in chat session",
    "Use stored MIME type in file references",
    "Add comprehensive file readiness verification",
    "Enhanced error logging for debugging",
    "Proper file state checking before chat usage",
]


def _print_payload(payload: RequestPayload) -> None:
    print_json(data=payload.to_api(), indent=2, highlight=False, ensure_ascii=False)


def emit_reference() -> RequestPayload:
    payload = reference_payload()

    print("[bold]=== Gemini Chat API Format Validation ===[/bold]\n")
    print("Expected Gemini Chat API Format:")
    _print_payload(payload)

    print("\n[bold]=== Common Issues to Check ===[/bold]")
    for i, issue in enumerate(COMMON_ISSUES, 1):
        print(f"{i}. {issue}")

    print("\n[bold]=== Validation Checklist ===[/bold]")
    for item in VALIDATION_CHECKLIST:
        print(f"✓ {item}")

    return payload


def emit_simulation() -> RequestPayload:
    payload = build_request_payload(mock_session(), QUESTION)

    print("\n[bold]=== Our Implementation Output ===[/bold]")
    _print_payload(payload)

    return payload


def print_improvements() -> None:
    print("\n[bold]=== Key Improvements Made ===[/bold]")
    for i, improvement in enumerate(KEY_IMPROVEMENTS, 1):
        print(f"{i}. {improvement}")
