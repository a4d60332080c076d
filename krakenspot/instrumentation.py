from opentelemetry import trace
from opentelemetry.trace import SpanKind, Status, StatusCode, TracerProvider

from . import __version__
from .auth import Authorizer
from .util.context import Context
from .util.request import Request


class InstrumentedAuthorizer(Authorizer):
    """Decorates an :class:`~krakenspot.auth.Authorizer` with OpenTelemetry tracing.

    Each call to :meth:`authorize` is wrapped in an `authorize` span tagged
    with the request path and nonce. The OTP, the body and the headers are
    never traced as they may carry sensitive data.

    Args:
        decorated: The authorizer to decorate. Must not be `None`.
        tracer_provider: The provider used to get a tracer. Defaults to a
            no-op provider.

    Raises:
        TypeError: `decorated` is `None`.

    """

    def __init__(self, decorated: Authorizer, tracer_provider: TracerProvider=None):
        if decorated is None:
            raise TypeError("decorated authorizer cannot be None")

        if tracer_provider is None:
            tracer_provider = trace.NoOpTracerProvider()

        self.decorated = decorated
        self._tracer = tracer_provider.get_tracer(__name__, __version__)

    async def authorize(self, ctx: Context, request: Request) -> Request:
        if request is None:
            raise TypeError("provided request must not be None")

        attributes = {
            "path": request.path,
            "nonce": request.form_value("nonce") or ""
        }

        with self._tracer.start_as_current_span(
            "authorize",
            kind=SpanKind.CLIENT,
            attributes=attributes,
            record_exception=False,
            set_status_on_exception=False
        ) as span:
            try:
                authorized = await self.decorated.authorize(ctx, request)
            except Exception as e:
                span.record_exception(e)
                span.set_status(Status(StatusCode.ERROR, str(e)))
                raise

            span.set_status(Status(StatusCode.OK))

            return authorized

    def __repr__(self) -> str:
        return f"<InstrumentedAuthorizer decorated={self.decorated!r}>"
