"""Advisory pipeline: postcode -> location -> forecast -> evaluation."""

import logging
import time

from advisor.config.schema import AdvisorConfig
from advisor.errors import GENERIC_ERROR_MESSAGE, AdvisoryError
from advisor.evaluation.evaluator import WINDOW_SIZE, evaluate
from advisor.ingest.forecast_fetcher import ForecastFetcher
from advisor.ingest.geocoder import resolve_location
from advisor.ingest.open_meteo_client import OpenMeteoClient
from advisor.ingest.postcode_client import PostcodeClient
from advisor.models.reporting import AdvisoryOutcome, AdvisoryReport

logger = logging.getLogger(__name__)


class AdvisoryPipeline:
    def __init__(
        self,
        config: AdvisorConfig,
        postcode_client: PostcodeClient | None = None,
        forecast_client: OpenMeteoClient | None = None,
    ):
        self.config = config
        self.postcode_client = postcode_client or PostcodeClient(
            base_url=config.geocoder.base_url,
            user_agent=config.user_agent,
            timeout=config.geocoder.timeout_seconds,
        )
        self.fetcher = ForecastFetcher(
            forecast_client
            or OpenMeteoClient(
                base_url=config.forecast.base_url,
                user_agent=config.user_agent,
                timeout=config.forecast.timeout_seconds,
                forecast_days=config.forecast.forecast_days,
                timezone=config.forecast.timezone,
            )
        )

    def advise(self, postcode: str) -> AdvisoryReport:
        """Run every step in order. The first failing step raises AdvisoryError."""
        location = resolve_location(self.postcode_client, postcode)
        forecast = self.fetcher.fetch(location)
        result = evaluate(forecast.days)
        return AdvisoryReport(
            postcode=location.postcode,
            latitude=location.latitude,
            longitude=location.longitude,
            days_evaluated=min(len(forecast.days), WINDOW_SIZE),
            evaluation=result,
        )

    def run(self, postcode: str) -> AdvisoryOutcome:
        """Produce an outcome holding either a full report or an error message."""
        start_time = time.monotonic()
        try:
            report = self.advise(postcode)
        except AdvisoryError as e:
            logger.warning("Advisory for %r failed: %s", postcode, e)
            return AdvisoryOutcome(
                postcode=postcode,
                error=str(e) or GENERIC_ERROR_MESSAGE,
                duration_seconds=time.monotonic() - start_time,
            )
        except Exception:
            logger.exception("Advisory pipeline failed for %r", postcode)
            return AdvisoryOutcome(
                postcode=postcode,
                error=GENERIC_ERROR_MESSAGE,
                duration_seconds=time.monotonic() - start_time,
            )

        logger.info(
            "Advisory for %s: warm=%d frost=%d recommendation=%s rating=%s",
            report.postcode,
            report.evaluation.days_above_threshold,
            report.evaluation.frost_days,
            report.evaluation.recommendation.value,
            report.evaluation.rating.value,
        )
        return AdvisoryOutcome(
            postcode=postcode,
            report=report,
            duration_seconds=time.monotonic() - start_time,
        )
