# File: resume_builder/client/gateway.py
import logging
from typing import Any, Dict, List, Optional, Type

import httpx
from pydantic import BaseModel

from resume_builder.core.config import settings
from resume_builder.core.exceptions import (
    ConnectivityError,
    NotFoundError,
    ResumeBuilderError,
    ValidationError,
)
from resume_builder.schemas.resume import REQUIRED_IDENTITY_FIELDS, ResumeDocument, ResumeSummary

logger = logging.getLogger(__name__)


class ResumeGateway:
    """
    Request/response layer between the client session and the resume API.

    One attempt per call: transport failures become ConnectivityError and
    error responses are mapped onto the shared exception classes with the
    server's message left as is.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or settings.API_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.REQUEST_TIMEOUT
        self.transport = transport

    async def _request(self, method: str, endpoint: str, json: Any = None) -> Dict[str, Any]:
        url = f"{self.base_url}{endpoint}"
        logger.info(f"Making API request: {method} {url}")

        try:
            async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as client:
                response = await client.request(method, url, json=json)
        except httpx.RequestError as e:
            logger.error(f"API request failed: {method} {url}: {e}")
            raise ConnectivityError("Resume server is not reachable", detail=str(e)) from e

        try:
            data = response.json()
        except ValueError:
            data = {}

        if response.is_success:
            return data
        if not isinstance(data, dict):
            data = {}

        message = data.get("message") or f"HTTP error! status: {response.status_code}"
        error = data.get("error")
        logger.error(f"API request failed with status {response.status_code}: {message}")
        if response.status_code == 404:
            raise NotFoundError(message, detail=error)
        if response.status_code in (400, 422):
            raise ValidationError(message, fields=data.get("fields"), detail=error)
        raise ResumeBuilderError(message, detail=error)

    @staticmethod
    def _data(response: Any, model: Type[BaseModel], many: bool = False) -> Any:
        """Unwrap `{success, data}` and validate the payload; anything else is an unexpected reply."""
        if not isinstance(response, dict) or "data" not in response:
            logger.error(f"Response is not a resume envelope: {str(response)[:200]}")
            raise ResumeBuilderError("Unexpected response from resume server")
        data = response["data"]
        try:
            if many:
                if not isinstance(data, list):
                    raise ValueError(f"expected a list, got {type(data).__name__}")
                return [model.model_validate(item) for item in data]
            return model.model_validate(data)
        except ValueError as e:
            logger.error(f"Response data does not match {model.__name__}: {e}")
            raise ResumeBuilderError("Unexpected response from resume server", detail=str(e)) from e

    @staticmethod
    def _body(document: ResumeDocument) -> Dict[str, Any]:
        return document.model_dump(by_alias=True, mode="json", exclude={"id", "created_at", "updated_at"})

    @staticmethod
    def _check_required(document: ResumeDocument) -> None:
        missing = [f for f in REQUIRED_IDENTITY_FIELDS if not getattr(document, f).strip()]
        if missing:
            names = " and ".join(missing)
            raise ValidationError(f"{names.capitalize()} {'is' if len(missing) == 1 else 'are'} required", fields=missing)

    async def create(self, document: ResumeDocument) -> ResumeDocument:
        self._check_required(document)
        response = await self._request("POST", "/resumes", json=self._body(document))
        saved = self._data(response, ResumeDocument)
        logger.info(f"Resume saved successfully with ID: {saved.id}")
        return saved

    async def read(self, resume_id: str) -> ResumeDocument:
        if not resume_id:
            raise ValidationError("Resume ID is required", fields=["id"])
        response = await self._request("GET", f"/resumes/{resume_id}")
        return self._data(response, ResumeDocument)

    async def update(self, resume_id: str, document: ResumeDocument) -> ResumeDocument:
        if not resume_id:
            raise ValidationError("Resume ID is required", fields=["id"])
        self._check_required(document)
        response = await self._request("PUT", f"/resumes/{resume_id}", json=self._body(document))
        logger.info(f"Resume {resume_id} updated successfully")
        return self._data(response, ResumeDocument)

    async def list(self) -> List[ResumeSummary]:
        response = await self._request("GET", "/resumes")
        summaries = self._data(response, ResumeSummary, many=True)
        logger.info(f"Loaded {len(summaries)} resumes")
        return summaries

    async def probe(self) -> bool:
        """True when the health endpoint answers; never raises."""
        try:
            await self._request("GET", "/health")
        except ResumeBuilderError:
            logger.info("Resume server is not available")
            return False
        return True
