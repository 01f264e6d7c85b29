"""Tests for the create_bridge() composition root."""

from unittest.mock import MagicMock

from external_api.app import HostSurface, get_mount_state
from external_api.bootstrap import create_bridge
from external_api.config import BridgeSettings, set_settings
from external_api.pipeline import ActionPipeline
from external_api.protocols import Action, ActionKind


class TestCreateBridge:
    def test_wires_and_starts_bridge(self, host_dispatch, mount_state, mock_logger):
        context = create_bridge(
            host_dispatch,
            settings=BridgeSettings(_env_file=None),
            mount_state=mount_state,
            logger=mock_logger,
        )

        assert context.bridge.started
        assert context.bridge in context.pipeline.middleware
        assert context.mount_state is mount_state

    def test_end_to_end_dispatch(self, host_dispatch, mounted_state, mock_logger):
        context = create_bridge(
            host_dispatch,
            settings=BridgeSettings(_env_file=None),
            mount_state=mounted_state,
            logger=mock_logger,
        )

        context.pipeline.dispatch(Action.create(ActionKind.CONFERENCE_FAILED, error="fatal"))

        host_dispatch.send.assert_called_once_with(
            "CONFERENCE_FAILED", {"error": "fatal"}, "room1",
        )

    def test_attaches_to_existing_pipeline(self, host_dispatch, mock_logger):
        handler = MagicMock(return_value=None)
        pipeline = ActionPipeline(handler=handler)
        context = create_bridge(
            host_dispatch,
            settings=BridgeSettings(_env_file=None),
            logger=mock_logger,
            pipeline=pipeline,
        )
        assert context.pipeline is pipeline

    def test_defaults_to_process_state(self, host_dispatch, mock_logger):
        set_settings(BridgeSettings(_env_file=None, log_events=True))
        context = create_bridge(host_dispatch, logger=mock_logger)

        assert context.mount_state is get_mount_state()
        assert context.settings.log_events is True

        get_mount_state().mount(HostSurface(scope="room9"))
        context.pipeline.dispatch(Action.create(ActionKind.CONFERENCE_LEFT))
        host_dispatch.send.assert_called_once_with("CONFERENCE_LEFT", {}, "room9")
