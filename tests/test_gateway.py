"""
Gateway against the real application through httpx.ASGITransport,
and against an unreachable server through httpx.MockTransport.
"""

import httpx
import pytest

from resume_builder.client.gateway import ResumeGateway
from resume_builder.core.exceptions import ConnectivityError, NotFoundError, ResumeBuilderError, ValidationError
from resume_builder.schemas.resume import ResumeDocument

from conftest import make_resume


@pytest.mark.asyncio
async def test_create_then_read_round_trip(gateway):
    document = ResumeDocument(**make_resume())
    created = await gateway.create(document)
    assert created.id
    assert created.created_at is not None and created.updated_at is not None

    loaded = await gateway.read(created.id)
    assert loaded.id == created.id
    assert loaded.created_at == created.created_at
    assert loaded.updated_at == created.updated_at
    assert loaded.model_dump(exclude={"id", "created_at", "updated_at"}) == \
        document.model_dump(exclude={"id", "created_at", "updated_at"})


@pytest.mark.asyncio
async def test_create_without_name_fails_before_any_request():
    def fail(request):
        raise AssertionError("no request expected")

    gateway = ResumeGateway(base_url="http://testserver/api", transport=httpx.MockTransport(fail))
    with pytest.raises(ValidationError) as exc_info:
        await gateway.create(ResumeDocument(**make_resume(name="")))
    assert exc_info.value.fields == ["name"]
    assert str(exc_info.value) == "Name is required"


@pytest.mark.asyncio
async def test_server_validation_error_is_surfaced(gateway):
    document = ResumeDocument(**make_resume(education=[{"institution": "", "degree": "", "year": ""}]))
    with pytest.raises(ValidationError) as exc_info:
        await gateway.create(document)
    assert exc_info.value.message == "Failed to save resume"
    assert exc_info.value.fields == ["education.0.institution", "education.0.degree", "education.0.year"]


@pytest.mark.asyncio
async def test_update_unknown_id(gateway):
    with pytest.raises(NotFoundError) as exc_info:
        await gateway.update("nonexistent-id", ResumeDocument(**make_resume()))
    assert exc_info.value.message == "Resume not found"


@pytest.mark.asyncio
async def test_read_unknown_id(gateway):
    with pytest.raises(NotFoundError):
        await gateway.read("nonexistent-id")


@pytest.mark.asyncio
async def test_update_and_list(gateway):
    first = await gateway.create(ResumeDocument(**make_resume(name="A")))
    await gateway.create(ResumeDocument(**make_resume(name="B")))

    updated = await gateway.update(first.id, ResumeDocument(**make_resume(name="A2")))
    assert updated.name == "A2"
    assert updated.updated_at >= first.updated_at

    summaries = await gateway.list()
    assert [s.name for s in summaries] == ["A2", "B"]


@pytest.mark.asyncio
async def test_probe(gateway, offline_gateway):
    assert await gateway.probe() is True
    assert await offline_gateway.probe() is False


@pytest.mark.asyncio
async def test_unreachable_server_is_connectivity_error(offline_gateway):
    with pytest.raises(ConnectivityError):
        await offline_gateway.create(ResumeDocument(**make_resume()))
    with pytest.raises(ConnectivityError):
        await offline_gateway.list()


@pytest.mark.asyncio
async def test_other_server_errors_keep_the_message():
    def broken(request):
        return httpx.Response(500, json={"success": False, "message": "Something went wrong!", "error": "Internal server error"})

    gateway = ResumeGateway(base_url="http://testserver/api", transport=httpx.MockTransport(broken))
    with pytest.raises(ResumeBuilderError) as exc_info:
        await gateway.list()
    assert str(exc_info.value) == "Something went wrong!: Internal server error"
    assert await gateway.probe() is False


@pytest.mark.asyncio
async def test_success_status_without_envelope_is_an_error():
    def proxy_page(request):
        return httpx.Response(200, text="<html>ok</html>")

    gateway = ResumeGateway(base_url="http://testserver/api", transport=httpx.MockTransport(proxy_page))
    with pytest.raises(ResumeBuilderError) as exc_info:
        await gateway.create(ResumeDocument(**make_resume()))
    assert exc_info.value.message == "Unexpected response from resume server"
    with pytest.raises(ResumeBuilderError):
        await gateway.read("abc123")
    with pytest.raises(ResumeBuilderError):
        await gateway.list()


@pytest.mark.asyncio
async def test_malformed_data_is_an_error():
    def malformed(request):
        if request.method == "GET" and request.url.path.endswith("/resumes"):
            return httpx.Response(200, json={"success": True, "data": {"id": "abc123"}})
        return httpx.Response(200, json={"success": True, "data": {"experiences": "x"}})

    gateway = ResumeGateway(base_url="http://testserver/api", transport=httpx.MockTransport(malformed))
    with pytest.raises(ResumeBuilderError) as exc_info:
        await gateway.update("abc123", ResumeDocument(**make_resume()))
    assert exc_info.value.message == "Unexpected response from resume server"
    assert exc_info.value.detail
    with pytest.raises(ResumeBuilderError):
        await gateway.list()
