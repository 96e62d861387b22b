"""Request layer over the credibility analyzers.

Each operation validates its input, runs the analyzers and returns a plain
response envelope:
- analyze: full credibility report for one text
- analyze_content / fact_check / source_check: single-analyzer reports
- batch: credibility summary for up to 10 texts
- health: analyzer status and counters

Validation failures and unexpected errors come back as
``{success: False, error, message, timestamp}``; a failed single-item
request never returns a partial score.

Usage:
    pipeline = CredibilityPipeline()
    report = await pipeline.analyze(text, urls=["https://reuters.com/a"])
"""

import asyncio
import time
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Sequence

from truthguard.analyzers.content_analyzer import ContentAnalyzer
from truthguard.analyzers.facts.fact_verifier import FactVerifier
from truthguard.analyzers.scoring.credibility_scorer import CredibilityScorer, ScoringRun
from truthguard.analyzers.scoring.explanation import generate_score_explanation
from truthguard.analyzers.sources.source_checker import SourceChecker
from truthguard.config.settings import APP_VERSION, settings
from truthguard.pipeline.errors import (
    BATCH_ITEM_FAILURE,
    ErrorCode,
    RequestValidationError,
    error_envelope,
    utc_timestamp,
)
from truthguard.pipeline.url_utils import dedupe_urls, extract_urls
from truthguard.pipeline.validation import validate_batch, validate_text, validate_urls
from truthguard.schemas import (
    Classification,
    FactCheckSummary,
    SourceAssessment,
    SourceReliability,
)
from truthguard.utils.logging import bind_request, get_structured_logger
from truthguard.utils.numeric import round_score


def _elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)


def _confidence_percent(confidence: float) -> int:
    return round_score(confidence * 100)


@dataclass
class BatchStats:
    """Outcome counters for one batch request."""

    total_texts: int = 0
    successful: int = 0
    failed: int = 0
    scores: list[int] = field(default_factory=list)
    distribution: dict[str, int] = field(
        default_factory=lambda: {c.value.lower(): 0 for c in Classification}
    )

    def record(self, score: int, classification: Classification) -> None:
        self.successful += 1
        self.scores.append(score)
        self.distribution[classification.value.lower()] += 1

    def to_dict(self, processing_time_ms: int) -> dict[str, Any]:
        average = sum(self.scores) / len(self.scores) if self.scores else 0
        return {
            "total_texts": self.total_texts,
            "successful_analyses": self.successful,
            "failed_analyses": self.failed,
            "average_credibility_score": round_score(average),
            "classification_distribution": dict(self.distribution),
            "processing_time_ms": processing_time_ms,
        }


class CredibilityPipeline:
    """
    Validates requests, runs the analyzers and shapes response envelopes.

    The scorer owns the three component analyzers; single-analyzer
    operations reuse them so the health report reflects every request.

    Attributes:
        started_at: Monotonic start time used for uptime
    """

    def __init__(
        self,
        scorer: Optional[CredibilityScorer] = None,
        max_concurrency: Optional[int] = None,
    ):
        self._scorer = scorer
        self.max_concurrency = max_concurrency or settings.max_concurrent_checks
        self.started_at = time.monotonic()
        self._logger = get_structured_logger("credibility_pipeline")

    @property
    def scorer(self) -> CredibilityScorer:
        if self._scorer is None:
            self._scorer = CredibilityScorer()
        return self._scorer

    @property
    def content_analyzer(self) -> ContentAnalyzer:
        return self.scorer.content_analyzer

    @property
    def fact_verifier(self) -> FactVerifier:
        return self.scorer.fact_verifier

    @property
    def source_checker(self) -> SourceChecker:
        return self.scorer.source_checker

    # ── Single-text operations ─────────────────────────────────────────

    async def analyze(
        self,
        text: Any,
        urls: Optional[Sequence[str]] = None,
        weights: Optional[Mapping[str, Any]] = None,
    ) -> dict[str, Any]:
        """
        Full credibility report for one text.

        URLs found in the text come first, then provided URLs; duplicates
        are analysed once.
        """
        request_id, log = bind_request(self._logger, "analyze")
        started = time.perf_counter()

        try:
            validate_text(text)
        except RequestValidationError as e:
            log.info("request_rejected", code=e.code.value)
            return e.to_envelope()

        provided = list(urls or [])
        found = extract_urls(text)
        all_urls = dedupe_urls(found, provided)
        log.info("analysis_started", text_length=len(text), urls=len(all_urls))

        try:
            run = await self.scorer.evaluate(text, all_urls, weights)
        except Exception as e:
            log.error("analysis_failed", error=str(e), exc_info=True)
            return error_envelope(ErrorCode.ANALYSIS_FAILED)

        processing_time_ms = _elapsed_ms(started)
        log.info(
            "analysis_complete",
            overall_score=run.score.overall_score,
            classification=run.score.classification.value,
            processing_time_ms=processing_time_ms,
        )
        return {
            "success": True,
            "timestamp": utc_timestamp(),
            "request_id": request_id,
            "analysis": self._analysis_section(run),
            "fact_check": self._fact_check_section(run.facts),
            "content_analysis": run.content.model_dump(mode="json"),
            "source_analysis": {
                "sources_analyzed": len(run.sources),
                **self._source_section(run.source_assessment, run.sources),
            },
            "metadata": {
                "text_length": len(text),
                "urls_found": len(found),
                "urls_provided": len(provided),
                "total_urls_analyzed": len(all_urls),
                "processing_time_ms": processing_time_ms,
            },
        }

    async def analyze_content(self, text: Any) -> dict[str, Any]:
        """Content-only report: tone, clickbait, entities, patterns."""
        _, log = bind_request(self._logger, "analyze_content")
        try:
            validate_text(text)
        except RequestValidationError as e:
            log.info("request_rejected", code=e.code.value)
            return e.to_envelope()

        try:
            analysis = self.content_analyzer.analyze(text)
        except Exception as e:
            log.error("content_analysis_failed", error=str(e), exc_info=True)
            return error_envelope(ErrorCode.CONTENT_ANALYSIS_FAILED)

        return {
            "success": True,
            "timestamp": utc_timestamp(),
            "content_analysis": {
                **analysis.model_dump(mode="json"),
                "text_length": len(text),
                "word_count": len(text.split()),
            },
        }

    async def fact_check(self, text: Any) -> dict[str, Any]:
        """Fact-check-only report, including ``total_claims``."""
        _, log = bind_request(self._logger, "fact_check")
        try:
            validate_text(text)
        except RequestValidationError as e:
            log.info("request_rejected", code=e.code.value)
            return e.to_envelope()

        try:
            summary = await self.fact_verifier.verify(text)
        except Exception as e:
            log.error("fact_check_failed", error=str(e), exc_info=True)
            return error_envelope(ErrorCode.FACT_CHECK_FAILED)

        return {
            "success": True,
            "timestamp": utc_timestamp(),
            "fact_check": self._fact_check_section(summary, include_total=True),
        }

    async def source_check(
        self,
        urls: Optional[Sequence[str]] = None,
        text: Optional[str] = None,
    ) -> dict[str, Any]:
        """Source-only report for provided URLs plus any found in ``text``."""
        _, log = bind_request(self._logger, "source_check")

        urls_to_check = list(urls or [])
        if isinstance(text, str) and text:
            urls_to_check = dedupe_urls(urls_to_check, extract_urls(text))

        try:
            validate_urls(urls_to_check)
        except RequestValidationError as e:
            log.info("request_rejected", code=e.code.value)
            return e.to_envelope()

        try:
            sources = await self.source_checker.check_bulk(urls_to_check)
            assessment = self.source_checker.aggregate(sources)
        except Exception as e:
            log.error("source_check_failed", error=str(e), exc_info=True)
            return error_envelope(ErrorCode.SOURCE_CHECK_FAILED)

        return {
            "success": True,
            "timestamp": utc_timestamp(),
            "source_analysis": {
                "urls_analyzed": len(urls_to_check),
                **self._source_section(assessment, sources),
            },
        }

    # ── Batch ──────────────────────────────────────────────────────────

    async def batch(
        self,
        texts: Any,
        weights: Optional[Mapping[str, Any]] = None,
    ) -> dict[str, Any]:
        """
        Score up to 10 texts, each with the URLs found in it.

        Every entry is validated before any is scored. A text that fails
        during scoring is reported as a failed item; the others continue.
        """
        request_id, log = bind_request(self._logger, "batch")

        try:
            texts = validate_batch(texts)
        except RequestValidationError as e:
            log.info("request_rejected", code=e.code.value)
            return e.to_envelope()

        started = time.perf_counter()
        stats = BatchStats(total_texts=len(texts))
        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def score_with_semaphore(text: str) -> ScoringRun:
            async with semaphore:
                return await self.scorer.evaluate(text, extract_urls(text), weights)

        try:
            outcomes = await asyncio.gather(
                *[score_with_semaphore(text) for text in texts],
                return_exceptions=True,
            )

            results = []
            for index, (text, outcome) in enumerate(zip(texts, outcomes)):
                preview = self._preview(text)
                if isinstance(outcome, Exception):
                    stats.failed += 1
                    log.error(
                        "batch_item_failed",
                        index=index,
                        error=str(outcome),
                        exc_info=outcome,
                    )
                    results.append({
                        "index": index,
                        "success": False,
                        "error": BATCH_ITEM_FAILURE,
                        "text_preview": preview,
                    })
                    continue

                score = outcome.score
                stats.record(score.overall_score, score.classification)
                results.append({
                    "index": index,
                    "success": True,
                    "text_preview": preview,
                    "credibility_score": score.overall_score,
                    "classification": score.classification.value,
                    "confidence_level": _confidence_percent(score.confidence_level),
                    "risk_level": score.risk_assessment.level.value,
                    "urls_found": len(outcome.sources),
                })
        except Exception as e:
            log.error("batch_analysis_failed", error=str(e), exc_info=True)
            return error_envelope(ErrorCode.BATCH_ANALYSIS_FAILED)

        summary = stats.to_dict(_elapsed_ms(started))
        log.info(
            "batch_complete",
            total=stats.total_texts,
            successful=stats.successful,
            failed=stats.failed,
        )
        return {
            "success": True,
            "timestamp": utc_timestamp(),
            "request_id": request_id,
            "batch_summary": summary,
            "detailed_results": results,
        }

    # ── Health ─────────────────────────────────────────────────────────

    def health(self) -> dict[str, Any]:
        """Analyzer status, counters and uptime."""
        analyzers = (
            self.content_analyzer,
            self.fact_verifier,
            self.source_checker,
            self.scorer,
        )
        return {
            "status": "healthy",
            "timestamp": utc_timestamp(),
            "version": APP_VERSION,
            "services": {
                analyzer.name: {
                    "status": "operational",
                    "capabilities": analyzer.get_capabilities(),
                    **analyzer.get_stats(),
                }
                for analyzer in analyzers
            },
            "uptime": round(time.monotonic() - self.started_at, 3),
        }

    # ── Envelope sections ──────────────────────────────────────────────

    @staticmethod
    def _preview(text: str) -> str:
        limit = settings.text_preview_length
        return text[:limit] + ("..." if len(text) > limit else "")

    @staticmethod
    def _analysis_section(run: ScoringRun) -> dict[str, Any]:
        score = run.score
        return {
            "credibility_score": score.overall_score,
            "classification": score.classification.value,
            "confidence_level": _confidence_percent(score.confidence_level),
            "explanation": generate_score_explanation(score),
            "breakdown": score.breakdown.model_dump(mode="json"),
            "risk_assessment": score.risk_assessment.model_dump(mode="json"),
            "detailed_analysis": score.detailed_analysis.model_dump(mode="json"),
        }

    @staticmethod
    def _fact_check_section(
        summary: FactCheckSummary,
        include_total: bool = False,
    ) -> dict[str, Any]:
        section = {
            "overall_credibility": summary.overall_credibility,
            "verified_claims": summary.verified_claims,
            "disputed_claims": summary.disputed_claims,
            "unverified_claims": summary.unverified_claims,
            "false_claims": summary.false_claims,
        }
        if include_total:
            section["total_claims"] = summary.total_claims
        section["detailed_results"] = [
            result.model_dump(mode="json") for result in summary.detailed_results
        ]
        return section

    @staticmethod
    def _source_section(
        assessment: SourceAssessment,
        sources: Sequence[SourceReliability],
    ) -> dict[str, Any]:
        return {
            "average_reliability": assessment.average_score,
            "high_reliability_count": assessment.high_reliability_count,
            "medium_reliability_count": assessment.medium_reliability_count,
            "low_reliability_count": assessment.low_reliability_count,
            "risk_assessment": assessment.risk_assessment.value,
            "detailed_sources": [source.model_dump(mode="json") for source in sources],
        }
