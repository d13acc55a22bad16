import logging
import os
from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

logger = logging.getLogger(__name__)

DEFAULT_SERVICE_NAME = "ticketing_api"

def setup_telemetry(app: FastAPI) -> TracerProvider:
    """
    Sets up OpenTelemetry for the FastAPI application.
    Spans go to an OTLP collector when OTEL_EXPORTER_OTLP_ENDPOINT is set and
    to stdout when OTEL_CONSOLE_EXPORT is true. The health check is not traced.
    """
    service_name = os.getenv("OTEL_SERVICE_NAME")
    if not service_name:
        logger.warning(f"OTEL_SERVICE_NAME environment variable not set. Defaulting to '{DEFAULT_SERVICE_NAME}'.")
        service_name = DEFAULT_SERVICE_NAME

    resource = Resource(attributes={
        SERVICE_NAME: service_name
    })
    provider = TracerProvider(resource=resource)

    otlp_endpoint = os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT")
    if otlp_endpoint:
        provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter(endpoint=otlp_endpoint)))
        logger.info(f"Exporting spans to OTLP collector at {otlp_endpoint}")

    if os.getenv("OTEL_CONSOLE_EXPORT", "false").lower() == "true":
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
        logger.info("Exporting spans to console.")

    trace.set_tracer_provider(provider)
    logger.info(f"Telemetry setup for service: {service_name}")

    # Matched against the full URL; skips only the root health check.
    FastAPIInstrumentor.instrument_app(app, excluded_urls="//[^/]+/$")
    logger.info("FastAPI has been instrumented.")
    return provider
