"""Tests for the Verdict model."""

from bgp_peering_check.models.threshold import ThresholdPair
from bgp_peering_check.models.verdict import PerfSample, Status, Verdict


class TestStatus:
    """Tests for Status enum."""

    def test_exit_codes(self):
        """Test conventional exit codes."""
        assert Status.OK.exit_code == 0
        assert Status.WARNING.exit_code == 1
        assert Status.CRITICAL.exit_code == 2
        assert Status.UNKNOWN.exit_code == 3

    def test_worst(self):
        """Test severity order CRITICAL > WARNING > UNKNOWN > OK."""
        assert Status.worst([Status.OK, Status.UNKNOWN]) == Status.UNKNOWN
        assert Status.worst([Status.UNKNOWN, Status.WARNING]) == Status.WARNING
        assert Status.worst([Status.WARNING, Status.CRITICAL, Status.OK]) == Status.CRITICAL

    def test_worst_empty(self):
        """Test no statuses merge to OK."""
        assert Status.worst([]) == Status.OK


class TestPerfSample:
    """Tests for PerfSample."""

    def test_render_without_thresholds(self):
        """Test rendering with unset ranges."""
        assert PerfSample(label="total", value=3).render() == "'total'=3;;;0;"

    def test_render_with_thresholds(self):
        """Test rendering with both ranges."""
        sample = PerfSample(label="AS65010", value=7, thresholds=ThresholdPair.parse("5:10", "1:"))
        assert sample.render() == "'AS65010'=7;5:10;1:;0;"


class TestVerdict:
    """Tests for Verdict."""

    def test_message_join(self):
        """Test messages are joined with the fixed delimiter."""
        verdict = Verdict(status=Status.WARNING, messages=["a", "b"])
        assert verdict.message == "a; b"
        assert verdict.exit_code == 1

    def test_failure(self):
        """Test failure verdicts default to UNKNOWN."""
        verdict = Verdict.failure("API returned status: error")
        assert verdict.status == Status.UNKNOWN
        assert verdict.messages == ["API returned status: error"]
        assert verdict.perfdata == []

    def test_to_dict(self):
        """Test JSON serialization."""
        verdict = Verdict(
            status=Status.OK,
            messages=["1 via AS65010"],
            perfdata=[PerfSample(label="AS65010", value=1)],
        )
        data = verdict.to_dict()

        assert data["status"] == "OK"
        assert data["exit_code"] == 0
        assert data["message"] == "1 via AS65010"
        assert data["perfdata"] == [
            {"label": "AS65010", "value": 1, "min": 0, "warning": "", "critical": ""}
        ]
