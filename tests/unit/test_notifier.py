"""Tests for the asset event notifier."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from neo_assets.application.notifier import AssetEventNotifier
from neo_assets.core.events.asset_events import AssetDeleting, AssetUploaded


@pytest.fixture
def deleting_event():
    return AssetDeleting(asset_id="asset-1", is_private=False)


class TestAssetEventNotifier:
    """Test observer registration and fan-out."""

    def test_register_rejects_unknown_event_type(self):
        with pytest.raises(ValueError):
            AssetEventNotifier().register(dict, lambda event: None)

    def test_register_rejects_non_callable(self):
        with pytest.raises(TypeError):
            AssetEventNotifier().register(AssetDeleting, "not callable")

    def test_decorators_register_and_return_handler(self):
        notifier = AssetEventNotifier()

        @notifier.on_uploaded
        def on_upload(event):
            pass

        @notifier.on_deleting
        async def on_delete(event):
            pass

        assert callable(on_upload)
        assert notifier.handler_count(AssetUploaded) == 1
        assert notifier.handler_count(AssetDeleting) == 1

    def test_unregister(self):
        notifier = AssetEventNotifier()
        handler = MagicMock()
        notifier.register(AssetDeleting, handler)

        assert notifier.unregister(AssetDeleting, handler)
        assert not notifier.unregister(AssetDeleting, handler)
        assert notifier.handler_count(AssetDeleting) == 0

    @pytest.mark.asyncio
    async def test_publish_sync_and_async_handlers_in_order(self, deleting_event):
        notifier = AssetEventNotifier()
        calls = []

        async def first(event):
            calls.append("first")

        def second(event):
            calls.append("second")

        notifier.on_deleting(first)
        notifier.on_deleting(second)

        delivered = await notifier.publish(deleting_event)

        assert delivered == 2
        assert calls == ["first", "second"]

    @pytest.mark.asyncio
    async def test_publish_only_to_matching_type(self, deleting_event):
        notifier = AssetEventNotifier()
        upload_handler = AsyncMock()
        notifier.on_uploaded(upload_handler)

        assert await notifier.publish(deleting_event) == 0
        upload_handler.assert_not_called()

    @pytest.mark.asyncio
    async def test_failing_handler_isolated(self, deleting_event):
        notifier = AssetEventNotifier()
        after = AsyncMock()
        notifier.on_deleting(AsyncMock(side_effect=RuntimeError("boom")))
        notifier.on_deleting(after)

        delivered = await notifier.publish(deleting_event)

        assert delivered == 1
        after.assert_awaited_once_with(deleting_event)
