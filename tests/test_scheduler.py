from pong_arena.scheduler import FrameScheduler


def test_request_runs_on_next_frame_once():
    s = FrameScheduler()
    seen = []
    s.request(lambda token: seen.append(token.epoch), epoch=0)
    assert s.run_frame() == 1
    assert s.run_frame() == 0
    assert seen == [0]


def test_rescheduling_inside_a_frame_defers_to_the_next():
    s = FrameScheduler()
    seen = []

    def tick(token):
        seen.append(s.frame)
        s.request(tick, token.epoch)

    s.request(tick, 0)
    for _ in range(3):
        s.run_frame()
    assert seen == [1, 2, 3]
    assert s.pending() == 1


def test_cancelled_token_never_runs():
    s = FrameScheduler()
    seen = []
    token = s.request(lambda t: seen.append("ran"), 0)
    token.cancel()
    assert not token.active
    assert s.pending() == 0
    assert s.run_frame() == 0
    assert seen == []


def test_cancel_all():
    s = FrameScheduler()
    a = s.request(lambda t: None, 0)
    b = s.request(lambda t: None, 1)
    s.cancel_all()
    assert not a.active and not b.active
    assert s.run_frame() == 0
