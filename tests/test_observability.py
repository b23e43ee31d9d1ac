"""Tests for logging and tracing setup."""

from unittest.mock import patch

from s3_url_handler.core import observability


class TestObservability:
    """Test observability setup."""

    @patch("s3_url_handler.core.observability.trace.set_tracer_provider")
    def test_tracing_disabled_by_default(self, mock_set_provider):
        """Test that no tracer provider is installed unless enabled."""
        with patch.object(observability.settings, "otel_enabled", False):
            observability.setup_tracing()

        mock_set_provider.assert_not_called()

    @patch("s3_url_handler.core.observability.trace.set_tracer_provider")
    def test_tracing_enabled(self, mock_set_provider):
        """Test that enabling tracing installs a named provider."""
        with patch.object(observability.settings, "otel_enabled", True):
            observability.setup_tracing()

        provider = mock_set_provider.call_args.args[0]
        assert provider.resource.attributes["service.name"] == "s3-url-handler"
        provider.shutdown()

    def test_spans_usable_without_provider(self):
        """Test that spans work as no-ops when tracing is off."""
        tracer = observability.get_tracer(__name__)

        with tracer.start_as_current_span("credentials.resolve") as span:
            span.set_attribute("credentials.source", "none")
