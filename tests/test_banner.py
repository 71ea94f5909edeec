"""Tests for prowl.banner — stderr summaries."""

from __future__ import annotations

import io
import sys
from unittest.mock import patch

from prowl._errors import MissingRootError
from prowl.banner import print_error, print_report
from prowl.report.reporter import validate


class TestPrintReport:
    """Tests for the validation summary."""

    def _capture(self, routes, **kwargs: object) -> str:
        """Validate *routes*, call print_report and capture stderr output."""
        result = validate(routes, **kwargs)
        buf = io.StringIO()
        with patch.object(sys, "stderr", buf):
            print_report(result, "/site/routes.yaml", load_ms=12.4)
        return buf.getvalue()

    def test_counts_and_score(self, basic_routes) -> None:
        output = self._capture(basic_routes)
        assert "Prowl" in output
        assert "6.0/10" in output
        assert "5 routes checked" in output
        assert "12ms" in output
        assert "1 orphan, 2 dead-ends, 0 cycles" in output
        assert "/site/routes.yaml" in output

    def test_lists_findings(self, basic_routes) -> None:
        output = self._capture(basic_routes)
        assert "orphans" in output
        assert "/hidden" in output
        assert "/settings" in output

    def test_clean_report(self) -> None:
        output = self._capture(
            [{"path": "/", "exitPoints": ["/a"]}, {"path": "/a"}],
            allowed_terminals=["/a"],
        )
        assert "10.0/10" in output
        assert "way out" in output

    def test_long_listing_elided(self) -> None:
        routes = [{"path": "/"}] + [{"path": f"/lost{i}"} for i in range(8)]
        output = self._capture(routes)
        assert "... and 3 more" in output


class TestPrintError:
    """Tests for fatal error output."""

    def test_error_type_and_message(self) -> None:
        buf = io.StringIO()
        with patch.object(sys, "stderr", buf):
            print_error(MissingRootError("/"), "/site/routes.yaml")
        output = buf.getvalue()
        assert "MISSING_ROOT" in output
        assert "not declared" in output
        assert "/site/routes.yaml" in output
