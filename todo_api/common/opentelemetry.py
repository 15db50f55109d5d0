import logging
from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.sdk.resources import Resource, SERVICE_NAME, SERVICE_VERSION
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor  # type: ignore

logger = logging.getLogger(__name__)

# Probed by orchestrators every few seconds, not worth a span.
UNTRACED_URLS = "healthcheck"


def setup_opentelemetry(service_name: str, service_version: str, app: FastAPI) -> None:
    logger.info(f"Setting up tracing for service '{service_name}'...")

    tracer_provider = TracerProvider(
        resource=Resource(
            attributes={SERVICE_NAME: service_name, SERVICE_VERSION: service_version}
        )
    )
    tracer_provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter()))
    trace.set_tracer_provider(tracer_provider)

    FastAPIInstrumentor.instrument_app(app, excluded_urls=UNTRACED_URLS)  # type: ignore
    logger.info("FastAPI request tracing enabled.")
