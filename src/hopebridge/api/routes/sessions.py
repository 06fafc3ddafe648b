"""
Session routes

Each route maps to one controller action and returns the new snapshot.
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, BackgroundTasks, File, HTTPException, Request, UploadFile

from hopebridge.api.schemas import (
    DonorPreferencesRequest,
    NavigateRequest,
    RoleRequest,
    SelectStudentRequest,
    StudentDraftRequest,
)
from hopebridge.api.session_store import SessionEntry, SessionStore
from hopebridge.core.errors import ValidationError
from hopebridge.domain import get_student
from hopebridge.verification import guess_mime_type

router = APIRouter()


def _store(request: Request) -> SessionStore:
    return request.app.state.sessions


def _entry(request: Request, session_id: str) -> SessionEntry:
    entry = _store(request).get(session_id)
    if entry is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return entry


def _snapshot(entry: SessionEntry) -> Dict[str, Any]:
    return {"sessionId": entry.session_id, **entry.controller.state.to_dict()}


@router.post("/sessions", status_code=201)
async def create_session(request: Request):
    """Start a fresh session on the welcome screen"""
    return _snapshot(_store(request).create())


@router.get("/sessions/{session_id}")
async def get_session(session_id: str, request: Request):
    return _snapshot(_entry(request, session_id))


@router.delete("/sessions/{session_id}", status_code=204)
async def delete_session(session_id: str, request: Request):
    if not _store(request).delete(session_id):
        raise HTTPException(status_code=404, detail="Session not found")


@router.get("/sessions/{session_id}/events")
async def get_session_events(session_id: str, request: Request):
    _entry(request, session_id)
    return {"events": list(request.app.state.event_log.stream(session_id))}


@router.post("/sessions/{session_id}/reset")
async def reset_session(session_id: str, request: Request):
    entry = _entry(request, session_id)
    entry.controller.reset()
    return _snapshot(entry)


@router.post("/sessions/{session_id}/role")
async def choose_role(session_id: str, body: RoleRequest, request: Request):
    """Welcome screen: pick a role and open its registration screen"""
    entry = _entry(request, session_id)
    entry.controller.choose_role(body.role)
    return _snapshot(entry)


@router.post("/sessions/{session_id}/navigate")
async def navigate(session_id: str, body: NavigateRequest, request: Request):
    entry = _entry(request, session_id)
    entry.controller.navigate(body.screen)
    return _snapshot(entry)


@router.post("/sessions/{session_id}/student-draft")
async def update_student_draft(session_id: str, body: StudentDraftRequest, request: Request):
    entry = _entry(request, session_id)
    changes = body.changes()
    if body.submit:
        entry.controller.submit_student_registration(**changes)
    elif changes:
        entry.controller.update_student_draft(**changes)
    return _snapshot(entry)


@router.post("/sessions/{session_id}/donor-preferences")
async def update_donor_preferences(session_id: str, body: DonorPreferencesRequest, request: Request):
    entry = _entry(request, session_id)
    changes = body.changes()
    if body.save:
        entry.controller.save_donor_preferences(**changes)
    elif changes:
        entry.controller.update_donor_preferences(**changes)
    return _snapshot(entry)


@router.post("/sessions/{session_id}/select-student")
async def select_student(session_id: str, body: SelectStudentRequest, request: Request):
    """Matched students list: "View Profile" """
    entry = _entry(request, session_id)
    if get_student(body.student_id) is None:
        raise HTTPException(status_code=404, detail="Student not found")
    if body.open_detail:
        entry.controller.open_student(body.student_id)
    else:
        entry.controller.select_student(get_student(body.student_id))
    return _snapshot(entry)


@router.post("/sessions/{session_id}/verify")
async def verify_document(
    session_id: str,
    request: Request,
    background_tasks: BackgroundTasks,
    file: UploadFile = File(...),
):
    """
    Upload Marks screen: verify one document.

    A valid verdict marks the student verified and schedules the
    automatic return to the dashboard after the response is sent.
    """
    entry = _entry(request, session_id)
    if entry.flow.is_loading:
        raise ValidationError(message="Verification already in progress")
    data = await file.read()
    filename = file.filename or ""
    mime_type = file.content_type or guess_mime_type(filename)

    entry.flow.select_file(data, mime_type, filename)
    outcome = await entry.flow.verify(auto_return=False)
    if outcome.is_valid:
        background_tasks.add_task(entry.flow.return_to_dashboard)

    return {
        "outcome": outcome.to_dict(),
        "autoReturnMs": int(entry.flow.auto_return_delay * 1000) if outcome.is_valid else None,
        "session": _snapshot(entry),
    }
