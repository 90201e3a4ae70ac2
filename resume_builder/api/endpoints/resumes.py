# File: resume_builder/api/endpoints/resumes.py
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from typing import Any
import logging

from resume_builder.core.exceptions import NotFoundError, ResumeBuilderError, ValidationError
from resume_builder.db.database import get_db
from resume_builder.schemas.resume import ResumeContent
from resume_builder.services import resume_store

router = APIRouter()
logger = logging.getLogger(__name__)


def _dump(model) -> Any:
    return model.model_dump(by_alias=True, mode="json")


def _failure(status_code: int, message: str, error: ResumeBuilderError) -> JSONResponse:
    body = {"success": False, "message": message, "error": str(error.detail or error.message)}
    if isinstance(error, ValidationError):
        body["fields"] = error.fields
    return JSONResponse(status_code=status_code, content=body)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_resume(
    resume: ResumeContent,
    db: Session = Depends(get_db)
) -> Any:
    """Save a new resume."""
    logger.info("Saving new resume...")
    try:
        saved = resume_store.create_resume(db, resume)
    except ValidationError as e:
        logger.error(f"Error saving resume: {e}")
        db.rollback()
        return _failure(status.HTTP_400_BAD_REQUEST, "Failed to save resume", e)
    except Exception as e:
        logger.error(f"Error saving resume: {str(e)}")
        db.rollback()
        raise

    return {
        "success": True,
        "message": "Resume saved successfully",
        "data": _dump(saved),
    }


@router.get("")
def read_resumes(db: Session = Depends(get_db)) -> Any:
    """Get summaries of all resumes, most recently updated first."""
    logger.info("Loading all resumes...")
    summaries = resume_store.list_resumes(db)
    logger.info(f"Found {len(summaries)} resumes")
    return {
        "success": True,
        "data": [_dump(s) for s in summaries],
    }


@router.get("/{resume_id}")
def read_resume(
    resume_id: str,
    db: Session = Depends(get_db)
) -> Any:
    """Get a specific resume by ID."""
    logger.info(f"Loading resume with ID: {resume_id}")
    try:
        resume = resume_store.get_resume(db, resume_id)
    except NotFoundError as e:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"success": False, "message": e.message},
        )

    return {"success": True, "data": _dump(resume)}


@router.put("/{resume_id}")
def update_resume(
    resume_id: str,
    resume: ResumeContent,
    db: Session = Depends(get_db)
) -> Any:
    """Replace an existing resume and refresh its update time."""
    logger.info(f"Updating resume with ID: {resume_id}")
    try:
        updated = resume_store.update_resume(db, resume_id, resume)
    except NotFoundError as e:
        db.rollback()
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"success": False, "message": e.message},
        )
    except ValidationError as e:
        logger.error(f"Error updating resume: {e}")
        db.rollback()
        return _failure(status.HTTP_400_BAD_REQUEST, "Failed to update resume", e)
    except Exception as e:
        logger.error(f"Error updating resume: {str(e)}")
        db.rollback()
        raise

    return {
        "success": True,
        "message": "Resume updated successfully",
        "data": _dump(updated),
    }
