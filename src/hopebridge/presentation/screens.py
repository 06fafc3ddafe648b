"""
Plain-text screen rendering for the CLI.

Each renderer turns an AppState into the lines a terminal user sees.
Styling, icons and charts are not reproduced; marks history is shown as a table.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional

from hopebridge.core.state import AppState
from hopebridge.domain import (
    BACKGROUND_OPTIONS,
    BUDGET_PRESETS,
    GENDER_OPTIONS,
    STUDY_LEVEL_OPTIONS,
    Screen,
    StudentStatus,
    VerificationOutcome,
    list_students,
)

Renderer = Callable[[AppState], List[str]]


def _welcome(state: AppState) -> List[str]:
    return [
        "HopeBridge",
        "No student should stop studying because of money.",
        "",
        "  [1] I am a Student",
        "  [2] I am a Donor",
        "",
        "Connecting Students & Donors with Trust",
    ]


def _student_register(state: AppState) -> List[str]:
    d = state.student_draft
    return [
        "Create Account - Start your journey.",
        f"  Full Name:            {d.name}",
        f"  Phone Number:         {d.phone}",
        f"  Email Address:        {d.email}",
        f"  Class / Course:       {d.course}",
        f"  Annual Family Income: {d.income}",
        f"  State / District:     {d.state} / {d.district}",
    ]


def _student_dashboard(state: AppState) -> List[str]:
    action = "Documents Verified" if state.student_status == StudentStatus.VERIFIED else "Upload Marks Memo"
    return [
        f"Hello, {state.student_draft.name or 'Student'}",
        "Let's verify your profile",
        "",
        f"Verification Status: {state.student_status.value}",
        f"Profile Completion:  {state.profile_completion}%",
        f"  [{action}]" + ("" if state.can_upload_marks else " (disabled)"),
        "",
        "Donor Match: We are reviewing your profile. You will be notified once matched.",
    ]


def _upload_marks(state: AppState) -> List[str]:
    return [
        "Upload Documents",
        "  Tap to upload Marks Memo (JPG, PNG, max 5MB)",
        "  AI checks for fake or tampered certificates.",
    ]


def _donor_register(state: AppState) -> List[str]:
    p = state.donor_preferences
    budgets = "  ".join(
        f"[Rs {amt:,}]" if amt == p.budget else f"Rs {amt:,}" for amt in BUDGET_PRESETS
    )
    return [
        "Donor Preferences - Help us match you.",
        f"  Monthly Budget Support: {budgets}",
        f"  Gender Preference:  {p.gender}   (options: {', '.join(GENDER_OPTIONS)})",
        f"  Family Background:  {p.background}   (options: {', '.join(BACKGROUND_OPTIONS)})",
        f"  Study Level:        {p.study_level}   (options: {', '.join(STUDY_LEVEL_OPTIONS)})",
        f"  Preferred Location: {p.location or '-'}",
    ]


def _donor_dashboard(state: AppState) -> List[str]:
    p = state.donor_preferences
    count = len(list_students())
    return [
        "Welcome, Donor! Ready to make an impact?",
        "",
        f"New Matches Found! Based on your preferences, we found {count} students who urgently need support.",
        "",
        "Your Preferences",
        f"  Budget:  Rs {p.budget_label}/mo",
        f"  Support: {p.study_level_label}",
    ]


def _matched_students(state: AppState) -> List[str]:
    lines = ["Matched Students", ""]
    for s in list_students():
        badge = " [VERIFIED]" if s.is_verified else ""
        lines.extend([
            f"  ({s.id}) {s.name}{badge}",
            f"      {s.course} | {s.percentage}% Score | {s.category}",
            f"      Family Income: Rs {s.income:,}/year",
        ])
    return lines


def _student_detail(state: AppState) -> List[str]:
    s = state.selected_student
    if s is None:
        return []
    lines = [
        f"{s.name}" + ("  [VERIFIED]" if s.is_verified else ""),
        s.course,
        "",
        f'"{s.description or ""}"',
        "",
        f"Annual Income: Rs {s.income:,}",
        "",
        "Academic Performance",
    ]
    for entry in s.marks_history:
        lines.append(f"  {entry.exam:<8} {entry.score:>5}")
    lines.extend([
        "",
        "Verified Documents: " + ", ".join(s.documents),
        "",
        f"  [Support {s.first_name}]",
    ])
    return lines


RENDERERS: Dict[Screen, Renderer] = {
    Screen.WELCOME: _welcome,
    Screen.STUDENT_REGISTER: _student_register,
    Screen.STUDENT_DASHBOARD: _student_dashboard,
    Screen.UPLOAD_MARKS: _upload_marks,
    Screen.DONOR_REGISTER: _donor_register,
    Screen.DONOR_DASHBOARD: _donor_dashboard,
    Screen.MATCHED_STUDENTS: _matched_students,
    Screen.STUDENT_DETAIL: _student_detail,
}


def render_screen(state: AppState) -> str:
    """Render the active screen as text."""
    header = f"=== {state.screen.value} ==="
    return "\n".join([header, *RENDERERS[state.screen](state)])


def render_outcome(outcome: Optional[VerificationOutcome]) -> str:
    if outcome is None:
        return ""
    title = "Verified by AI" if outcome.is_valid else "Verification Failed"
    return f"{title}: {outcome.reason}"
