"""Tests for parsing Wiener Linien real-time responses."""

from typing import Any

import pytest

from seestadtbot.adapters.wienerlinien_api.monitor_parser import MonitorParser
from seestadtbot.domain.errors import MonitorFormatError
from seestadtbot.domain.models import Departure


def _monitor_response(*lines: dict[str, Any]) -> dict[str, Any]:
    return {"data": {"monitors": [{"locationStop": {}, "lines": list(lines)}]}}


def _line(name: str, towards: str, *countdowns: Any) -> dict[str, Any]:
    return {
        "name": name,
        "towards": towards,
        "direction": "H",
        "platform": "2",
        "barrierFree": True,
        "departures": {
            "departure": [
                {"departureTime": {"timePlanned": "2024-06-03T10:00:00.000+0200", "countdown": c}}
                for c in countdowns
            ]
        },
    }


class TestParseMonitorLines:
    """Tests for MonitorParser.parse_monitor_lines."""

    def test_lines_of_all_monitors_are_flattened(self) -> None:
        """Given two monitors, when parsing, then their lines are flattened in response order."""
        data = {
            "data": {
                "monitors": [
                    {"lines": [_line("U2", "Karlsplatz", 3, 9)]},
                    {"lines": [_line("84A", "Seestadt", 1), _line("88A", "Hausfeldstraße", 4)]},
                ]
            }
        }

        lines = MonitorParser.parse_monitor_lines(data)

        assert [line.name for line in lines] == ["U2", "84A", "88A"]
        first = lines[0]
        assert first.towards == "Karlsplatz"
        assert first.direction == "H"
        assert first.platform == "2"
        assert first.barrier_free is True
        assert [d.countdown for d in first.departures] == [3, 9]
        assert first.departures[0].time_planned == "2024-06-03T10:00:00.000+0200"

    def test_invalid_countdowns_become_none(self) -> None:
        """Given non-integer countdowns, when parsing, then they are kept as missing."""
        lines = MonitorParser.parse_monitor_lines(
            _monitor_response(_line("U2", "Seestadt", 2.0, 2.5, "3", True, None, -1))
        )

        assert [d.countdown for d in lines[0].departures] == [2, None, None, None, None, -1]

    def test_departure_without_time_is_missing(self) -> None:
        """Given a departure without departureTime, when parsing, then its countdown is missing."""
        line = _line("U2", "Seestadt")
        line["departures"]["departure"] = [{"vehicle": {}}]

        lines = MonitorParser.parse_monitor_lines(_monitor_response(line))

        assert lines[0].departures == (Departure(countdown=None),)

    def test_line_without_departures(self) -> None:
        """Given a line without departures, when parsing, then it has no departures."""
        lines = MonitorParser.parse_monitor_lines(
            _monitor_response({"name": "U2", "towards": "Seestadt"})
        )

        assert lines[0].departures == ()

    @pytest.mark.parametrize(
        "data",
        [
            {},
            {"data": {"monitors": None}},
            {"data": {"monitors": ["not a monitor"]}},
            {"data": {"monitors": [{"lines": "U2"}]}},
            {"data": {"monitors": [{"lines": [{"name": "U2"}]}]}},
            {"data": {"monitors": [{"lines": [{"name": "U2", "towards": "X", "departures": {"departure": {}}}]}]}},
            {"data": "oops"},
            {"data": ["monitors"]},
            {"data": {"monitors": [{"lines": [{"name": "U2", "towards": "X", "departures": [{"departureTime": {}}]}]}]}},
        ],
    )
    def test_malformed_responses_raise(self, data: dict[str, Any]) -> None:
        """Given a malformed response, when parsing, then MonitorFormatError is raised."""
        with pytest.raises(MonitorFormatError):
            MonitorParser.parse_monitor_lines(data)


class TestParseElevatorInfos:
    """Tests for MonitorParser.parse_elevator_infos."""

    def test_status_and_reason_are_kept(self) -> None:
        """Given a traffic info with attributes, when parsing, then status and reason are both kept."""
        data = {
            "data": {
                "trafficInfos": [
                    {
                        "title": "Seestadt",
                        "description": "Aufzug außer Betrieb",
                        "attributes": {"status": "außer Betrieb", "reason": "Reparatur"},
                    }
                ]
            }
        }

        infos = MonitorParser.parse_elevator_infos(data)

        assert len(infos) == 1
        assert infos[0].title == "Seestadt"
        assert infos[0].status == "außer Betrieb"
        assert infos[0].reason == "Reparatur"

    def test_response_without_traffic_infos_has_no_outages(self) -> None:
        """Given no trafficInfos, when parsing, then there are no infos."""
        assert MonitorParser.parse_elevator_infos({"data": {}}) == []

    def test_traffic_infos_must_be_a_list(self) -> None:
        """Given trafficInfos of the wrong type, when parsing, then MonitorFormatError is raised."""
        with pytest.raises(MonitorFormatError):
            MonitorParser.parse_elevator_infos({"data": {"trafficInfos": {"title": "x"}}})


@pytest.mark.parametrize(
    "data",
    [
        {"data": "oops"},
        {"data": {"trafficInfos": [{"title": "Seestadt", "attributes": "außer Betrieb"}]}},
        {"data": {"trafficInfos": [{"title": "Seestadt", "attributes": ["status"]}]}},
    ],
)
def test_malformed_elevator_responses_raise(data: dict[str, Any]) -> None:
    """Given a malformed elevator response, when parsing, then MonitorFormatError is raised."""
    with pytest.raises(MonitorFormatError):
        MonitorParser.parse_elevator_infos(data)
