from hopebridge.core.state import AppState
from hopebridge.domain import DonorPreferences, Screen, StudentStatus, VerificationOutcome, get_student
from hopebridge.presentation.screens import RENDERERS, render_outcome, render_screen


def test_every_screen_has_renderer():
    assert set(RENDERERS) == set(Screen)


def test_header_names_screen():
    assert render_screen(AppState()).splitlines()[0] == "=== welcome ==="


def test_student_dashboard_reflects_status():
    pending = render_screen(AppState(screen=Screen.STUDENT_DASHBOARD))
    assert "Verification Status: Pending" in pending
    assert "Profile Completion:  40%" in pending
    assert "Upload Marks Memo" in pending

    verified = render_screen(
        AppState(screen=Screen.STUDENT_DASHBOARD, student_status=StudentStatus.VERIFIED, docs_uploaded=True)
    )
    assert "Profile Completion:  80%" in verified
    assert "Documents Verified] (disabled)" in verified


def test_donor_dashboard_defaults():
    text = render_screen(AppState(screen=Screen.DONOR_DASHBOARD))
    assert "Rs 2,000/mo" in text
    assert "All Levels" in text
    assert "found 2 students" in text

    text = render_screen(AppState(screen=Screen.DONOR_DASHBOARD, donor_preferences=DonorPreferences(budget=5000)))
    assert "Rs 5,000/mo" in text


def test_student_detail():
    text = render_screen(AppState(screen=Screen.STUDENT_DETAIL, selected_student=get_student("1")))
    assert "Harika Krishna  [VERIFIED]" in text
    assert "Sem 2" in text
    assert "[Support Harika]" in text


def test_student_detail_without_selection_renders_header_only():
    assert render_screen(AppState(screen=Screen.STUDENT_DETAIL)) == "=== student_detail ==="


def test_render_outcome():
    assert render_outcome(None) == ""
    assert render_outcome(VerificationOutcome(True, "ok")) == "Verified by AI: ok"
    assert render_outcome(VerificationOutcome(False, "blurry")) == "Verification Failed: blurry"
