import math

from nocsim.packet import Packet
from nocsim.stats import average_latency, max_latency, total_delivered, total_stalled


def _packets():
    return [
        Packet(id=0, delivered=True, latency=2.0),
        Packet(id=1, delivered=True, latency=4.0, stall=True),
        Packet(id=2, delivered=False, latency=10.0, stall=True),
    ]


def test_average_ignores_undelivered():
    assert average_latency(_packets()) == 3.0


def test_average_without_deliveries_is_nan():
    undelivered = average_latency([Packet(latency=5.0)])
    empty = average_latency([])
    assert str(undelivered) == "nan"
    assert math.isnan(undelivered)
    assert str(empty) == "nan"
    assert math.isnan(empty)


def test_max_latency_ignores_undelivered():
    assert max_latency(_packets()) == 4


def test_max_latency_truncates():
    packets = [Packet(delivered=True, latency=3.7)]
    assert max_latency(packets) == 3


def test_max_latency_empty_is_zero():
    assert max_latency([]) == 0


def test_total_delivered():
    assert total_delivered(_packets()) == 2
    assert total_delivered([]) == 0


def test_total_stalled():
    assert total_stalled(_packets()) == 2
    assert total_stalled([Packet()]) == 0


def test_average_bounded_by_max():
    packets = [Packet(delivered=True, latency=float(n)) for n in range(1, 9)]
    assert average_latency(packets) <= max_latency(packets)
    assert total_delivered(packets) == len(packets)