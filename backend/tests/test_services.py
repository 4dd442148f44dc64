"""
Catalog Backend: Service Error Translation Tests
=================================================

What:  Store failures become the right application exception at the
       service boundary, without touching a database.
How:   The gateway's execute() is patched with AsyncMock.
"""

from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from catalog_api.exceptions import ConflictError, InternalError, NotFoundError
from catalog_api.gateway import Rows, Write
from catalog_api.schemas.banner import BannerPayload
from catalog_api.schemas.user import UserCreate
from catalog_api.services.banner_service import BannerService
from catalog_api.services.skin_service import SkinService
from catalog_api.services.user_service import UserService

EXECUTE = "catalog_api.services.base.execute"


class TestUserServiceErrors:

    def setup_method(self):
        self.service = UserService()
        self.payload = UserCreate(name="Alex", email="alex@example.com", password="pw")

    @pytest.mark.asyncio
    async def test_unique_violation_becomes_conflict(self, mock_connection):
        error = IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed: users.email"))
        with patch(EXECUTE, AsyncMock(side_effect=error)):
            with pytest.raises(ConflictError) as exc_info:
                await self.service.create_user(mock_connection, self.payload)

        assert exc_info.value.message == "The email provided is already in use."

    @pytest.mark.asyncio
    async def test_other_integrity_error_is_internal(self, mock_connection):
        error = IntegrityError("INSERT", {}, Exception("NOT NULL constraint failed: users.name"))
        with patch(EXECUTE, AsyncMock(side_effect=error)):
            with pytest.raises(InternalError):
                await self.service.create_user(mock_connection, self.payload)

    @pytest.mark.asyncio
    async def test_store_outage_is_internal_with_generic_message(self, mock_connection):
        error = OperationalError("SELECT", {}, Exception("server closed the connection"))
        with patch(EXECUTE, AsyncMock(side_effect=error)):
            with pytest.raises(InternalError) as exc_info:
                await self.service.list_users(mock_connection)

        assert "server closed" not in exc_info.value.message
        assert exc_info.value.context["error_type"] == "OperationalError"


class TestNotFound:

    @pytest.mark.asyncio
    async def test_zero_affected_rows_on_update(self, mock_connection):
        payload = BannerPayload(type="hero", title="T", images=["a.png"])
        with patch(EXECUTE, AsyncMock(return_value=Write(affected_rows=0))):
            with pytest.raises(NotFoundError) as exc_info:
                await BannerService().update_banner(mock_connection, 7, payload)

        assert exc_info.value.context["resource_id"] == "7"

    @pytest.mark.asyncio
    async def test_empty_select_on_get(self, mock_connection):
        with patch(EXECUTE, AsyncMock(return_value=Rows(records=[]))):
            with pytest.raises(NotFoundError):
                await SkinService().get_skin(mock_connection, 3)

    @pytest.mark.asyncio
    async def test_delete_with_one_affected_row_succeeds(self, mock_connection):
        mock_execute = AsyncMock(return_value=Write(affected_rows=1))
        with patch(EXECUTE, mock_execute):
            await SkinService().delete_skin(mock_connection, 3)

        mock_execute.assert_awaited_once()


class TestBannerDecoding:

    @pytest.mark.asyncio
    async def test_images_are_decoded_from_json_text(self, mock_connection):
        record = {
            "id": 1,
            "type": "hero",
            "title": "T",
            "description": None,
            "images": '["b.png", "a.png"]',
        }
        with patch(EXECUTE, AsyncMock(return_value=Rows(records=[record]))):
            banners = await BannerService().list_banners(mock_connection)

        assert banners[0].images == ["b.png", "a.png"]
