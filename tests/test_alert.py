import pytest

from sysforge.alert import Alert, AlertKind, AlertThreshold


def test_high_cpu_alert_kind_and_rounding():
    a = Alert.high_cpu(95.4)
    assert a.kind is AlertKind.HIGH_CPU
    assert a.actual == 95
    assert "95" in a.message


def test_high_memory_alert_kind_and_rounding():
    a = Alert.high_memory(88.7)
    assert a.kind is AlertKind.HIGH_MEMORY
    assert a.actual == 89
    assert "88.7" in a.message


def test_high_cpu_message_text():
    assert Alert.high_cpu(95.4).message == "High CPU usage: 95.4%"


def test_high_memory_message_text():
    assert Alert.high_memory(88.7).message == "High memory usage: 88.7%"


@pytest.mark.parametrize("value, expected", [(2.5, 3), (0.5, 1), (99.49, 99), (100.0, 100)])
def test_rounding_half_away_from_zero(value, expected):
    assert Alert.high_cpu(value).actual == expected


def test_negative_percentage_clamps_to_zero():
    assert Alert.high_memory(-3.2).actual == 0


def test_threshold_values():
    t = AlertThreshold(80.0, 90.0)
    assert t.cpu_percent == 80.0
    assert t.memory_percent == 90.0


def test_alerts_compare_by_value():
    assert Alert.high_cpu(90.0) == Alert.high_cpu(90.0)
    assert Alert.high_cpu(90.0) != Alert.high_memory(90.0)


def test_alert_is_immutable():
    a = Alert.high_cpu(90.0)
    with pytest.raises(AttributeError):
        a.actual = 1
    assert a.actual == 90
    assert a.kind is AlertKind.HIGH_CPU