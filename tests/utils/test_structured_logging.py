"""Tests for pipeline event logger binding."""

import uuid

from structlog.testing import capture_logs

from truthguard.utils.logging import bind_request, get_structured_logger


class TestBindRequest:
    def test_generates_request_id(self) -> None:
        request_id, _ = bind_request(get_structured_logger("credibility_pipeline"), "analyze")
        assert uuid.UUID(request_id)

    def test_reuses_given_request_id(self) -> None:
        request_id, _ = bind_request(
            get_structured_logger("credibility_pipeline"), "batch", request_id="req-1"
        )
        assert request_id == "req-1"

    def test_events_carry_request_context(self) -> None:
        with capture_logs() as events:
            logger = get_structured_logger("credibility_pipeline", analyzer_id="a-1")
            _, log = bind_request(logger, "source_check", request_id="req-2")
            log.info("source_check_completed", urls=2)

        assert events == [
            {
                "event": "source_check_completed",
                "log_level": "info",
                "component": "credibility_pipeline",
                "analyzer_id": "a-1",
                "request_id": "req-2",
                "operation": "source_check",
                "urls": 2,
            }
        ]
