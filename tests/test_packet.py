import pytest

from nocsim.packet import Packet, calculate_x_steps, calculate_y_steps


def test_packet_defaults_are_empty():
    packet = Packet()
    assert packet.delivered is False
    assert packet.stall is False
    assert packet.latency == 0.0
    assert packet.slot is None
    assert packet.previous_slot is None


def test_x_steps_move_right():
    assert calculate_x_steps(0, 2, 3) == (2, 1)


def test_x_steps_same_column_points_left():
    steps, direction = calculate_x_steps(1, 7, 3)
    assert steps == 0
    assert direction == -1


def test_y_steps_move_down():
    steps, direction = calculate_y_steps(0, 6, 3)
    assert direction == 3
    assert steps == 2


@pytest.mark.parametrize("size", [2, 3, 4, 5])
def test_following_steps_reaches_destination(size):
    total = size * size
    for start in range(total):
        for finish in range(total):
            xsteps, xdir = calculate_x_steps(start, finish, size)
            ysteps, ydir = calculate_y_steps(start, finish, size)
            assert start + xsteps * xdir + ysteps * ydir == finish


@pytest.mark.parametrize("size", [2, 3, 6])
def test_steps_are_symmetric(size):
    total = size * size
    for a in range(total):
        for b in range(total):
            assert calculate_x_steps(a, b, size)[0] == calculate_x_steps(b, a, size)[0]
            assert calculate_y_steps(a, b, size)[0] == calculate_y_steps(b, a, size)[0]


def test_steps_never_exceed_mesh():
    size = 4
    for a in range(size * size):
        for b in range(size * size):
            assert 0 <= calculate_x_steps(a, b, size)[0] < size
            assert 0 <= calculate_y_steps(a, b, size)[0] < size