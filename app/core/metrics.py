from prometheus_fastapi_instrumentator import Instrumentator

def instrument_app(app):
    """
    Instruments the FastAPI application with Prometheus metrics and
    exposes them on /metrics.
    """
    Instrumentator(excluded_handlers=["/metrics"]).instrument(app).expose(app, include_in_schema=False)
